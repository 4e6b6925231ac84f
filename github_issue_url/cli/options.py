"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

# Repository arguments, falling back to configured defaults
OWNER_ARGUMENT = typer.Argument(
    None,
    help="Repository owner (user or organization) [env: GITHUB_ISSUE_URL_OWNER]",
    show_default=False,
)
REPOSITORY_ARGUMENT = typer.Argument(
    None,
    help="Repository name [env: GITHUB_ISSUE_URL_REPOSITORY]",
    show_default=False,
)

# Prefill options
TITLE_OPTION = typer.Option(None, "--title", "-t", help="Prefilled issue title")
BODY_OPTION = typer.Option(None, "--body", "-b", help="Prefilled issue body")
BODY_FILE_OPTION = typer.Option(
    None, "--body-file", help="Read the issue body from a file ('-' for stdin)"
)
TEMPLATE_OPTION = typer.Option(
    None, "--template", "-T", help="Issue template file name (e.g. bug_report.md)"
)
LABELS_OPTION = typer.Option(
    None, "--label", "-l", help="Issue label (can be used multiple times)"
)
ASSIGNEE_OPTION = typer.Option(
    None, "--assignee", "-a", help="Username of the issue assignee"
)
MILESTONE_OPTION = typer.Option(None, "--milestone", "-m", help="Milestone number")
PROJECTS_OPTION = typer.Option(
    None, "--projects", "-p", help="Project numbers separated by comma"
)

# Behavior options
BASE_URL_OPTION = typer.Option(
    None,
    "--base-url",
    help="GitHub web root, for Enterprise hosts [env: GITHUB_ISSUE_URL_BASE]",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
