"""``unrealqt show-config``: Print the stored Qt Creator ids.

Exit Codes:
    0: Configuration printed.
    3: No configuration stored yet.
    20: Stored configuration is invalid.
"""

from __future__ import annotations

import json
import sys

import click

from unrealqt.config.store import ConfigStore
from unrealqt.exceptions import UnrealQtError

EXIT_NOT_CONFIGURED = 3


@click.command("show-config")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def show_config_command(store: ConfigStore, output_format: str) -> None:
    """Show the stored Qt Creator environment and kit ids."""
    from unrealqt.cli.output import print_config, print_error

    try:
        config = store.load()
    except UnrealQtError as exc:
        print_error(exc)
        sys.exit(exc.exit_code)

    if config is None:
        if output_format == "json":
            click.echo(json.dumps({"error": "not configured"}))
        else:
            click.echo("No configuration stored. Run 'unrealqt configure'.")
        sys.exit(EXIT_NOT_CONFIGURED)

    if output_format == "json":
        data = config.as_dict()
        data["path"] = str(store.config_path)
        click.echo(json.dumps(data, indent=2))
    else:
        print_config(config, store.config_path)
    sys.exit(0)
