"""Config management commands.

Provides commands to create, display and try out the link checker config.
Header values are always shown in their literal form; values resolved from
the environment are never printed.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from linkcheck.core.config_file import (
    ConfigError,
    config_exists,
    dumps_config,
    require_config,
    save_config,
)
from linkcheck.core.paths import ensure_config_dir, get_config_path
from linkcheck.models.config import LinkCheckConfig
from linkcheck.models.header import HttpHeader
from linkcheck.models.pattern import LinkPattern
from linkcheck.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Create, show and test the link checker config.",
    invoke_without_command=True,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for config show."""

    TOML = "toml"
    JSON = "json"


ConfigPathOption = Annotated[
    Path | None,
    typer.Option(
        "--path",
        "-p",
        help="Config file (defaults to ~/.config/linkcheck/config.toml).",
    ),
]

TableOption = Annotated[
    str | None,
    typer.Option(
        "--table",
        "-t",
        help="Dotted table holding the options, e.g. 'output.linkcheck' in book.toml.",
    ),
]


@app.command()
def init(
    path: ConfigPathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config."),
    ] = False,
) -> None:
    """Write a config file with all default values."""
    if path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
    target = path or get_config_path()

    if config_exists(target):
        if not force:
            print_error(f"Config already exists: {target}")
            print_info("Use --force to overwrite it.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing config: {target}")

    try:
        saved = save_config(LinkCheckConfig(), target)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def show(
    path: ConfigPathOption = None,
    table: TableOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TOML,
) -> None:
    """Print the effective config, defaults included."""
    config = require_config(path, table=table)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(config.to_toml_dict()))
        return

    console.print(
        dumps_config(config), markup=False, highlight=False, emoji=False, soft_wrap=True, end=""
    )


@app.command()
def check(
    link: Annotated[str, typer.Argument(help="Link to test against the config.")],
    path: ConfigPathOption = None,
    table: TableOption = None,
) -> None:
    """Show whether a link is skipped and which headers it would get."""
    config = require_config(path, table=table)

    if config.should_skip(link):
        console.print(f"[skipped]skip[/] {escape(link)}", highlight=False, soft_wrap=True)
        return

    console.print(f"[checked]check[/] {escape(link)}", highlight=False, soft_wrap=True)

    matching = [
        (pattern, headers)
        for pattern, headers in config.http_headers.items()
        if pattern.matches(link)
    ]
    if not matching:
        print_info("No HTTP headers apply.")
        return

    _print_headers_table(matching)


# === Private helper functions ===


def _print_headers_table(matching: list[tuple[LinkPattern, list[HttpHeader]]]) -> None:
    """Display the headers that apply to a link, literal values only."""
    table = Table(
        title="HTTP Headers",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Pattern", style="muted")
    table.add_column("Name", no_wrap=True)
    table.add_column("Value")

    for pattern, headers in matching:
        for header in headers:
            table.add_row(Text(pattern.source), Text(header.name), Text(header.value))

    console.print(table)
