"""Componentes de UI para CLI (Rich).

Separados de los comandos para no mezclar la lógica con detalles visuales.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from core.domain.models import PublishOutcome, ReleaseResult

_OUTCOME_STYLE: dict[PublishOutcome, str] = {
    PublishOutcome.PUBLISHED: "green",
    PublishOutcome.SKIPPED: "cyan",
    PublishOutcome.PACKED: "yellow",
    PublishOutcome.FAILED: "red",
}


def print_info(console: Console, message: str) -> None:
    console.print(f"[dim]•[/dim] {escape(message)}")


def print_command(console: Console, line: str) -> None:
    console.print(f"[bold]Executing:[/bold] {escape(line)}")


def print_warning(console: Console, message: str) -> None:
    console.print(f"[yellow]⚠ {escape(message)}[/yellow]")


def print_error(console: Console, kind: str, message: str) -> None:
    """Marcador común de errores: `✗ <Tipo>: <mensaje>`."""

    console.print(f"[bold red]✗ {escape(kind)}:[/bold red] {escape(message)}")


def build_result_panel(result: ReleaseResult) -> Panel:
    """Panel resumen de una ejecución (published / packed / skipped / failed)."""

    style = _OUTCOME_STYLE[result.outcome]
    body = Text()
    if result.identity is not None:
        body.append("Package: ", style="bold")
        body.append(f"{result.identity.name}\n")
        body.append("Version: ", style="bold")
        body.append(f"{result.identity.version}\n")
    body.append("Outcome: ", style="bold")
    body.append(result.outcome.label(), style=style)
    if result.failed_stage is not None:
        body.append(f" (during {result.failed_stage.value})", style="dim")
    if result.message:
        body.append(f"\n\n{result.message}")

    title = Text("nupush", style=f"bold {style}")
    return Panel(body, title=title, border_style=style)
