"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import RunSummary
from core.interfaces.scenario import Scenario


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Permite desactivar el banner en modos no interactivos (`--no-banner`).
    """

    title = Text("SOLID Demos", style="bold cyan")
    subtitle = Text("SRP • OCP • LSP • ISP • DIP • Builder", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_scenarios_table(scenarios: Iterable[Scenario]) -> Table:
    """Tabla Rich con los escenarios disponibles."""

    table = Table(title="Scenarios")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Principle", style="white")
    table.add_column("Summary", style="dim")
    for scenario in scenarios:
        table.add_row(scenario.principle.value, scenario.principle.label(), scenario.summary)
    return table


def build_summary_panel(summary: RunSummary) -> Panel:
    """Panel final: qué variantes terminaron con un error didáctico."""

    body = Text()
    for report in summary.reports:
        for variant in report.variants:
            body.append(f"{report.title} {variant.variant.value}: ", style="bold")
            if variant.error:
                body.append(f"{variant.error_type} ({variant.error})\n", style="yellow")
            else:
                body.append(f"{len(variant.lines)} lines\n", style="green")

    return Panel(body, title=Text("Run summary", style="bold yellow"), border_style="yellow")
