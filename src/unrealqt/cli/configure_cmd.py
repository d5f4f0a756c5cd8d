"""``unrealqt configure``: Discover the Qt Creator ids with the wizard.

Opens an empty scratch project in Qt Creator, waits for the user to pick
their Unreal kit and close the IDE, then scrapes and stores the ids.

Exit Codes:
    0: Ids discovered and stored.
    10: Qt Creator did not write the settings file.
    11: The settings file could not be read.
    12/13: Environment id not found / not a valid id.
    14/15: Kit configuration id not found / not a valid id.
    16: The configuration could not be written.
    17: Qt Creator could not be started.
    18: The scratch project could not be created.
"""

from __future__ import annotations

import functools
import sys
import tempfile
from pathlib import Path

import click

from unrealqt.config.models import WizardConfig
from unrealqt.config.store import ConfigStore
from unrealqt.exceptions import UnrealQtError
from unrealqt.wizard.launcher import launch_and_wait
from unrealqt.wizard.runner import ConfigWizard


def default_program_dir() -> Path:
    """Directory for the wizard's scratch project."""
    return Path(tempfile.gettempdir()) / "unrealqt"


def run_wizard(
    store: ConfigStore,
    program_dir: Path | None = None,
    qtcreator: str | None = None,
    yes: bool = False,
) -> WizardConfig:
    """Explain the wizard, wait for the user, then run it.

    Raises:
        WizardError: Propagated from ``ConfigWizard.run``.
    """
    from unrealqt.cli.output import console, print_wizard_instructions

    print_wizard_instructions()
    if not yes:
        click.pause("Press any key to launch Qt Creator...")

    launcher = functools.partial(launch_and_wait, executable=qtcreator)
    wizard = ConfigWizard(program_dir or default_program_dir(), store, launcher=launcher)
    console.print("Launching Qt Creator...")
    return wizard.run()


@click.command("configure")
@click.option("--reset", is_flag=True, help="Delete the stored configuration first.")
@click.option(
    "--qtcreator", envvar="UNREALQT_QTCREATOR", default=None,
    help="Qt Creator executable (default: OS file association).",
)
@click.option(
    "--program-dir", type=click.Path(file_okay=False), default=None,
    help="Directory for the scratch project (default: system temp).",
)
@click.option("--yes", "-y", is_flag=True, help="Do not wait for a key press.")
@click.pass_obj
def configure_command(
    store: ConfigStore,
    reset: bool,
    qtcreator: str | None,
    program_dir: str | None,
    yes: bool,
) -> None:
    """Detect the Qt Creator environment id and Unreal kit id.

    Runs the one-time configuration wizard and stores the result in the
    per-user configuration directory.
    """
    from unrealqt.cli.output import print_config, print_error

    if reset and store.clear():
        click.echo(f"Removed {store.config_path}")

    try:
        config = run_wizard(
            store,
            Path(program_dir) if program_dir else None,
            qtcreator=qtcreator,
            yes=yes,
        )
    except UnrealQtError as exc:
        print_error(exc)
        sys.exit(exc.exit_code)

    print_config(config, store.config_path)
    sys.exit(0)
