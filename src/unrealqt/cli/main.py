"""unrealqt CLI: Qt Creator projects for Unreal Engine C++ projects.

Entry point for the ``unrealqt`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    generate: Write .pro/.pri/.pro.user files for an Unreal project.
    configure: Run the Qt Creator id discovery wizard.
    show-config: Print the stored Qt Creator ids.

Usage::

    unrealqt generate "C:/Projects/MyGame"
    unrealqt configure --reset
    unrealqt show-config --format json
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from unrealqt import __version__
from unrealqt.cli.configure_cmd import configure_command
from unrealqt.cli.generate_cmd import generate_command
from unrealqt.cli.show_config_cmd import show_config_command
from unrealqt.config.store import CONFIG_DIR_ENV, ConfigStore


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config-dir", envvar=CONFIG_DIR_ENV, type=click.Path(file_okay=False),
    default=None, help="Directory holding the stored configuration.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log each step.")
@click.pass_context
def cli(ctx: click.Context, config_dir: str | None, verbose: bool) -> None:
    """Unreal Qt Project Generator.

    Turn the Visual Studio project Unreal Engine generates for a C++
    game into a Qt Creator project bound to your Unreal build kit.
    """
    _setup_logging(verbose)
    ctx.obj = ConfigStore(Path(config_dir) if config_dir else None)


# Register all subcommands
cli.add_command(generate_command)
cli.add_command(configure_command)
cli.add_command(show_config_command)
