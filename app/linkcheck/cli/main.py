"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from linkcheck import APP_NAME, __version__
from linkcheck.cli.commands import config
from linkcheck.utils.formatting import set_quiet

# Create main Typer app
app = typer.Typer(
    name="linkcheck",
    help="Link checker configuration tool.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"linkcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """linkcheck - Configure which links are checked and how.

    Manage the exclusion patterns, HTTP headers and warning policy
    used when checking the links of a Markdown book.
    """
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(APP_NAME).setLevel(logging.DEBUG if verbose else logging.NOTSET)
    set_quiet(quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
