"""Contrato de un escenario de demostración.

Reglas de diseño:
- Cada escenario es independiente: no comparte estado con otros.
- Expone sus dos variantes como funciones que escriben en un `OutputSink`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from core.domain.principle import Principle, Variant
from core.interfaces.output import OutputSink

VariantRunner = Callable[[OutputSink], None]


@dataclass(frozen=True)
class Scenario:
    """Descriptor registrado por cada módulo de `scenarios`."""

    principle: Principle
    summary: str
    run_violation: VariantRunner
    run_obeying: VariantRunner

    @property
    def title(self) -> str:
        return self.principle.heading

    def runner_for(self, variant: Variant) -> VariantRunner:
        if variant is Variant.VIOLATION:
            return self.run_violation
        return self.run_obeying
