"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .build import build

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="github-issue-url",
    help="Build prefilled GitHub issue URLs",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="build", context_settings={"help_option_names": ["-h", "--help"]})(
    build
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from github_issue_url import __version__

    console.print(f"GitHub Issue URL v{__version__}")


if __name__ == "__main__":
    app()
