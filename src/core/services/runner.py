"""Scenario execution.

The runner owns the fixed demo sequence (section header, violating variant,
blank line, obeying variant) so scenario modules only describe the two
variants. Didactic failures (`DemoError`) are printed as `Error: <message>`
and recorded in the report; anything else propagates.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from loguru import logger

from adapters.output import RecordingSink
from core.domain.errors import DemoError
from core.domain.models import RunSummary, ScenarioReport, VariantReport
from core.domain.principle import Variant
from core.interfaces.output import OutputSink
from core.interfaces.scenario import Scenario

BOTH_VARIANTS: tuple[Variant, ...] = (Variant.VIOLATION, Variant.OBEYING)


def section_header(scenario: Scenario, variant: Variant) -> str:
    return f"=== {scenario.title} {variant.heading} Demo ==="


def run_variant(scenario: Scenario, variant: Variant, out: OutputSink | None = None) -> VariantReport:
    """Run one half of a demo, capturing what it printed."""

    recorder = RecordingSink(tee=out)
    error: DemoError | None = None

    logger.debug("Running {} {}", scenario.title, variant.value)
    try:
        scenario.runner_for(variant)(recorder)
    except DemoError as exc:
        logger.info("{} {} raised {}: {}", scenario.title, variant.value, type(exc).__name__, exc)
        error = exc
        recorder.write(f"Error: {exc}")

    return VariantReport(
        principle=scenario.principle,
        variant=variant,
        lines=recorder.lines,
        error=str(error) if error is not None else None,
        error_type=type(error).__name__ if error is not None else None,
    )


def run_scenario(
    scenario: Scenario,
    out: OutputSink | None = None,
    *,
    variants: Sequence[Variant] = BOTH_VARIANTS,
) -> ScenarioReport:
    """Run the requested variants of `scenario` with their section headers."""

    reports: list[VariantReport] = []
    for index, variant in enumerate(variants):
        if out is not None:
            if index:
                out.write()
            out.write(section_header(scenario, variant))
        reports.append(run_variant(scenario, variant, out))

    logger.debug("Finished {} ({} variants)", scenario.title, len(reports))
    return ScenarioReport(
        principle=scenario.principle,
        title=scenario.title,
        summary=scenario.summary,
        variants=reports,
    )


def run_all(
    scenarios: Iterable[Scenario],
    out: OutputSink | None = None,
    *,
    variants: Sequence[Variant] = BOTH_VARIANTS,
) -> RunSummary:
    """Run every scenario in order, separated by a blank line."""

    reports: list[ScenarioReport] = []
    for index, scenario in enumerate(scenarios):
        if out is not None and index:
            out.write()
        reports.append(run_scenario(scenario, out, variants=variants))
    return RunSummary(reports=reports)
