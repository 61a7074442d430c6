"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .enforce import enforce

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="label-policy",
    help="Audit open GitHub issues against a required label prefix",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="enforce", context_settings={"help_option_names": ["-h", "--help"]})(
    enforce
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from label_policy import __version__

    console.print(f"Label Policy v{__version__}")


if __name__ == "__main__":
    app()
