"""Command-line interface for python-roff.

Provides commands for rendering man pages from YAML/JSON page files.
"""

from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .output import write_updated
from .page_file import load_page

app = typer.Typer(
    name="python-roff",
    help="Render man pages from YAML or JSON page descriptions.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"python-roff version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render man pages from YAML or JSON page descriptions."""
    pass


@app.command()
def render(
    page: Annotated[Path, typer.Argument(help="Path to the YAML/JSON page file")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write to this file instead of stdout")
    ] = None,
    no_apostrophes: Annotated[
        bool,
        typer.Option("--no-apostrophes", help="Leave apostrophes as typed (no Aq preamble)"),
    ] = False,
) -> None:
    """Render a page file to ROFF."""
    try:
        text = load_page(page).render(handle_apostrophes=not no_apostrophes)
        if output is None:
            typer.echo(text, nl=False)
        else:
            write_updated(output, text)
            typer.echo(f"Rendered {page} to {output}", err=True)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def check(
    page: Annotated[Path, typer.Argument(help="Path to the YAML/JSON page file")],
    output: Annotated[Path, typer.Argument(help="Rendered man page to keep up to date")],
) -> None:
    """Re-render a page file and fail if OUTPUT was out of date."""
    try:
        changed = load_page(page).save(output)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if changed:
        typer.echo(f"{output} was out of date and has been regenerated", err=True)
        raise typer.Exit(1)
    typer.echo(f"{output} is up to date")


if __name__ == "__main__":
    app()
