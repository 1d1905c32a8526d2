"""Command line interface.

Commands:
- `list`: show the available scenarios.
- `run PRINCIPLE`: run one scenario (both variants by default).
- `all`: run every scenario in teaching order.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from adapters.json_exporter import export_summary_json
from adapters.output import ConsoleSink
from cli.ui_components import build_scenarios_table, build_summary_panel, print_banner
from core.config import LOG_LEVELS, AppSettings
from core.domain.models import RunSummary
from core.domain.principle import Principle, Variant
from core.logging import configure_logging
from core.services.runner import BOTH_VARIANTS, run_all
from scenarios import get_scenario

app = typer.Typer(no_args_is_help=True, help="Paired violation/obeying demos of SOLID and the Builder pattern.")

_console = Console()


class VariantChoice(str, Enum):
    VIOLATION = "violation"
    OBEYING = "obeying"
    BOTH = "both"

    def variants(self) -> tuple[Variant, ...]:
        if self is VariantChoice.BOTH:
            return BOTH_VARIANTS
        return (Variant(self.value),)


@app.callback()
def _main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override SOLID_DEMOS_LOG_LEVEL."),
) -> None:
    settings = AppSettings()
    level = settings.log_level
    if log_level:
        level = log_level.strip().upper()
        if level not in LOG_LEVELS:
            raise typer.BadParameter(f"unknown log level {log_level!r} (choose from: {', '.join(LOG_LEVELS)})")
    configure_logging(level)


def _parse_principle(value: str) -> Principle:
    try:
        return Principle(value.strip().lower())
    except ValueError:
        choices = ", ".join(p.value for p in Principle.ordered())
        raise typer.BadParameter(f"unknown principle {value!r} (choose from: {choices})") from None


def _finish(
    summary: RunSummary,
    *,
    json_path: Path | None,
    pause: bool | None,
    settings: AppSettings,
) -> None:
    if json_path is not None:
        written = export_summary_json(summary=summary, output_path=json_path)
        logger.info("Exported run summary to {}", written)
        _console.print(f"\n[green]Saved JSON report to:[/green] {written}")

    should_pause = settings.pause_on_exit if pause is None else pause
    if should_pause:
        typer.prompt("\nPress Enter to exit...", default="", show_default=False)


@app.command("list")
def list_scenarios() -> None:
    """List the available scenarios."""

    scenarios = [get_scenario(p) for p in Principle.ordered()]
    _console.print(build_scenarios_table(scenarios))


@app.command("run")
def run_one(
    principle: str = typer.Argument(..., help="srp, ocp, lsp, isp, dip or builder."),
    variant: VariantChoice = typer.Option(VariantChoice.BOTH, "--variant", "-v", help="Which half of the demo to run."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write the captured output as JSON."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    pause: Optional[bool] = typer.Option(None, "--pause/--no-pause", help="Wait for Enter before exiting."),
) -> None:
    """Run one scenario."""

    settings = AppSettings()
    scenario = get_scenario(_parse_principle(principle))

    if settings.show_banner and not no_banner:
        print_banner(_console)

    summary = run_all([scenario], ConsoleSink(_console), variants=variant.variants())
    _finish(summary, json_path=json_path, pause=pause, settings=settings)


@app.command("all")
def run_everything(
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write the captured output as JSON."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    summary_panel: bool = typer.Option(False, "--summary", help="Show which variants raised an error."),
    pause: Optional[bool] = typer.Option(None, "--pause/--no-pause", help="Wait for Enter before exiting."),
) -> None:
    """Run every scenario: SRP, OCP, LSP, ISP, DIP, Builder."""

    settings = AppSettings()
    if settings.show_banner and not no_banner:
        print_banner(_console)

    summary = run_all([get_scenario(p) for p in Principle.ordered()], ConsoleSink(_console))
    if summary_panel:
        _console.print()
        _console.print(build_summary_panel(summary))
    _finish(summary, json_path=json_path, pause=pause, settings=settings)


def run() -> None:
    app()
