"""Escenarios de demostración (pares violación/obediencia).

Por qué un paquete:
- Agrupa un módulo por principio (SRP, OCP, LSP, ISP, DIP, Builder).
- Cada módulo expone un `Scenario` que el runner descubre desde aquí.
"""

from core.domain.principle import Principle
from core.interfaces.scenario import Scenario
from scenarios import builder, dip, isp, lsp, ocp, srp

SCENARIOS: dict[Principle, Scenario] = {
    module.SCENARIO.principle: module.SCENARIO
    for module in (srp, ocp, lsp, isp, dip, builder)
}


def get_scenario(principle: Principle | str) -> Scenario:
    """Return the scenario for `principle` (enum or its string value)."""

    return SCENARIOS[Principle(principle)]


__all__ = [
    "SCENARIOS",
    "get_scenario",
]
