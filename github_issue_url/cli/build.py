"""CLI command for building prefilled issue URLs."""

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from ..config import IssueUrlConfig
from ..errors import IssueUrlError
from ..models import Issue
from .options import (
    ASSIGNEE_OPTION,
    BASE_URL_OPTION,
    BODY_FILE_OPTION,
    BODY_OPTION,
    LABELS_OPTION,
    MILESTONE_OPTION,
    OWNER_ARGUMENT,
    PROJECTS_OPTION,
    REPOSITORY_ARGUMENT,
    TEMPLATE_OPTION,
    TITLE_OPTION,
    VERBOSE_OPTION,
)

console = Console(stderr=True)


def _read_body_file(body_file: str) -> str:
    if body_file == "-":
        return sys.stdin.read()
    path = Path(body_file)
    if not path.is_file():
        console.print(f"❌ [red]Error: Body file {path} does not exist[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def build(
    owner: str | None = OWNER_ARGUMENT,
    repository: str | None = REPOSITORY_ARGUMENT,
    title: str | None = TITLE_OPTION,
    body: str | None = BODY_OPTION,
    body_file: str | None = BODY_FILE_OPTION,
    template: str | None = TEMPLATE_OPTION,
    labels: list[str] | None = LABELS_OPTION,
    assignee: str | None = ASSIGNEE_OPTION,
    milestone: str | None = MILESTONE_OPTION,
    projects: str | None = PROJECTS_OPTION,
    base_url: str | None = BASE_URL_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print a prefilled "New Issue" URL for a repository.

    Only the fields given on the command line are added to the URL.

    Examples:
        # Bug report with labels
        github-issue-url build EstebanBorai github-issue-url \\
            --title "Null: The Billion Dollar Mistake" \\
            --template bug_report.md --label bug --label production

        # Body read from a file
        github-issue-url build myorg myrepo --body-file crash.log
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            stream=sys.stderr,
        )

    config = IssueUrlConfig()
    owner = owner or config.owner
    repository = repository or config.repository
    if base_url is None:
        try:
            config.validate()
        except ValueError as e:
            console.print(f"❌ [red]Error: {e}[/red]")
            raise typer.Exit(1)
        base_url = config.base_url

    if body is not None and body_file is not None:
        console.print("❌ [red]Error: --body and --body-file cannot be combined[/red]")
        raise typer.Exit(1)
    if body_file is not None:
        body = _read_body_file(body_file)

    try:
        issue = Issue(
            repository or "",
            owner or "",
            base_url=base_url,
            title=title,
            body=body,
            template=template,
            # Repeated --label values are comma-joined in the given order
            labels=labels or None,
            assignee=assignee,
            milestone=milestone,
            projects=projects,
        )
        url = issue.url()
    except IssueUrlError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"❌ [red]Error: {field}: {error['msg']}[/red]")
        raise typer.Exit(1)

    # Plain echo so long URLs are not wrapped or parsed as markup
    typer.echo(url)
