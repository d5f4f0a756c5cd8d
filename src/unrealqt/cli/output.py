"""Rich output formatting helpers for the unrealqt CLI.

Errors are printed as a red panel naming the failing step, followed by
the exception message; the exit code comes from the exception class.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from unrealqt import __version__
from unrealqt.config.models import WizardConfig
from unrealqt.exceptions import UnrealQtError

console = Console()

DISCLAIMER_TEXT = (
    "This software is provided free of charge.\n\n"
    "THIS SOFTWARE IS PROVIDED \"AS IS\" AND ANY EXPRESS OR IMPLIED WARRANTIES, "
    "INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND "
    "FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE AUTHORS "
    "BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR "
    "CONSEQUENTIAL DAMAGES ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, "
    "EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.\n\n"
    "This software is UNOFFICIAL and affiliated with neither Epic Games nor the "
    "Qt Project. \"Qt\" is a registered trademark of The Qt Company Ltd. and its "
    "subsidiaries. \"Unreal\" is a registered trademark of Epic Games, Inc."
)

WIZARD_INSTRUCTIONS = (
    "This program needs to detect your Qt Creator environment id and the id "
    "of your Unreal Engine build kit.\n\n"
    "An empty project will now be opened in Qt Creator. All you have to do is:\n\n"
    " 1. Select your Unreal Engine build kit when asked by Qt Creator\n"
    " 2. Hit the 'Configure Project' button\n"
    " 3. Close Qt Creator\n\n"
    "Make sure Qt Creator is not already running."
)


def print_header() -> None:
    """Print the application banner."""
    console.print(
        Panel(
            Text(f"Unreal Qt Project Generator v{__version__}", style="bold", justify="center"),
            expand=False,
        )
    )


def print_disclaimer() -> None:
    console.print(Panel(DISCLAIMER_TEXT, title="Disclaimer"))


def print_wizard_instructions() -> None:
    console.print(Panel(WIZARD_INSTRUCTIONS, title="Configuration Wizard"))


def print_error(error: UnrealQtError) -> None:
    """Print a labelled error for a terminal failure.

    Args:
        error: The failure; its ``step`` names what went wrong.
    """
    label = Text.assemble(
        ("ERROR ", "bold red"),
        (f"[{error.exit_code}] ", "red"),
        (error.step, "bold"),
    )
    console.print(label)
    console.print(f"  {error}", soft_wrap=True, markup=False)


def print_config(config: WizardConfig, path: Path | None = None) -> None:
    """Print the stored Qt Creator ids as a table."""
    table = Table(title="Qt Creator Configuration", show_header=True, header_style="bold")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("Environment id", config.environment_id)
    table.add_row("Kit configuration id", config.toolchain_configuration_id)
    console.print(table)
    if path is not None:
        console.print(f"[dim]Stored in {path}[/dim]", soft_wrap=True)


def print_generated(paths: list[Path]) -> None:
    """Print the list of written Qt project files."""
    console.print("[bold green]Qt project generated[/bold green]")
    for path in paths:
        console.print(f"  {path}", soft_wrap=True, markup=False)
