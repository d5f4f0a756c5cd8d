"""``unrealqt generate [path]``: Write Qt Creator files for an Unreal project.

Validates the project directory, reads the generated vcxproj, and writes
``<Name>.pro``, ``defines.pri``, ``includes.pri`` and ``<Name>.pro.user``
next to the ``.uproject``. The first run shows a disclaimer, and runs the
configuration wizard when no Qt Creator ids are stored yet.

Exit Codes:
    0: Qt project written.
    1: Disclaimer declined.
    10-18: Configuration wizard failed (see ``unrealqt configure``).
    20: Stored configuration is invalid.
    21: Not an Unreal project directory, or the vcxproj is unusable.
    22: Output files could not be written.
"""

from __future__ import annotations

import sys

import click

from unrealqt.config.store import ConfigStore
from unrealqt.exceptions import ProjectError, UnrealQtError
from unrealqt.project.discovery import find_project
from unrealqt.project.generator import QtProjectGenerator
from unrealqt.project.models import UnrealProject
from unrealqt.project.vcxproj import read_vcxproj

EXIT_DECLINED = 1


def _confirm_disclaimer(store: ConfigStore, yes: bool) -> None:
    """Show the first-run disclaimer; exit if it is declined."""
    from unrealqt.cli.output import print_disclaimer

    if store.disclaimer_accepted():
        return
    print_disclaimer()
    if not yes:
        answer = click.prompt(
            'Press "y" to accept the disclaimer and continue, or "n" to decline',
            type=click.Choice(["y", "n"], case_sensitive=False),
            show_choices=False,
        )
        if answer.lower() != "y":
            click.echo("Disclaimer declined.")
            sys.exit(EXIT_DECLINED)
    store.accept_disclaimer()


def _prompt_project() -> UnrealProject:
    """Ask for the project directory until a valid one is entered."""
    while True:
        raw = click.prompt(
            "Path to the directory containing your .uproject file "
            "(drag and drop the folder here)"
        )
        try:
            return find_project(raw)
        except ProjectError as exc:
            click.echo(f"Invalid project directory: {exc}\n")


@click.command("generate")
@click.argument("path", required=False, type=click.Path(file_okay=False))
@click.option(
    "--qtcreator", envvar="UNREALQT_QTCREATOR", default=None,
    help="Qt Creator executable used if the wizard has to run.",
)
@click.option("--yes", "-y", is_flag=True, help="Accept prompts without asking.")
@click.pass_obj
def generate_command(
    store: ConfigStore,
    path: str | None,
    qtcreator: str | None,
    yes: bool,
) -> None:
    """Generate a Qt Creator project from an Unreal Engine project.

    PATH is the directory holding the .uproject file; you are asked for
    it when omitted. Run "Generate Visual Studio project files" on the
    .uproject first so the vcxproj exists.
    """
    from unrealqt.cli.configure_cmd import run_wizard
    from unrealqt.cli.output import print_error, print_generated, print_header

    print_header()
    _confirm_disclaimer(store, yes)

    try:
        project = find_project(path) if path is not None else _prompt_project()
        config = store.load()
        if config is None:
            config = run_wizard(store, qtcreator=qtcreator, yes=yes)
        model = read_vcxproj(project.vcxproj)
        written = QtProjectGenerator(project, model, config).write()
    except UnrealQtError as exc:
        print_error(exc)
        sys.exit(exc.exit_code)

    print_generated(written)
    sys.exit(0)
