"""Scenario: Single Responsibility Principle.

`ProductManager` announces, persists and reports a product in one class, so a
change to any of the three concerns touches it. `ProductService` keeps the
workflow and delegates persistence and reporting to collaborators.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from core.domain.models import ScenarioReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.interfaces.scenario import Scenario
from core.services.runner import run_scenario

DEMO_PRODUCT = ("Laptop", Decimal("1200.00"))


# Violation


class ProductManager:
    """Does everything itself."""

    def __init__(self, out: OutputSink) -> None:
        self._out = out

    def add_product(self, name: str, price: Decimal) -> None:
        self._out.write(f"Adding product: {name}, Price: {price}")
        self._save_to_database(name, price)
        self._print_report(name, price)

    def _save_to_database(self, name: str, price: Decimal) -> None:
        self._out.write("Saving to database...")

    def _print_report(self, name: str, price: Decimal) -> None:
        self._out.write("Printing report...")


# Obeying


class ProductRepository(Protocol):
    def save(self, name: str, price: Decimal) -> None: ...


class ReportGenerator(Protocol):
    def generate(self, name: str, price: Decimal) -> None: ...


class InMemoryProductRepository:
    """Stands in for a database; keeps saved products for inspection."""

    def __init__(self, out: OutputSink) -> None:
        self._out = out
        self.saved: list[tuple[str, Decimal]] = []

    def save(self, name: str, price: Decimal) -> None:
        self._out.write("Saving to database...")
        self.saved.append((name, price))


class ConsoleReportGenerator:
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    def generate(self, name: str, price: Decimal) -> None:
        self._out.write("Generating report...")


class ProductService:
    """Coordinates the workflow; persistence and reporting live elsewhere."""

    def __init__(self, out: OutputSink, repository: ProductRepository, report_generator: ReportGenerator) -> None:
        self._out = out
        self._repository = repository
        self._report_generator = report_generator

    def add_product(self, name: str, price: Decimal) -> None:
        self._out.write(f"Adding product: {name}, Price: {price}")
        self._repository.save(name, price)
        self._report_generator.generate(name, price)


def run_violation(out: OutputSink) -> None:
    ProductManager(out).add_product(*DEMO_PRODUCT)


def run_obeying(out: OutputSink) -> None:
    service = ProductService(
        out,
        repository=InMemoryProductRepository(out),
        report_generator=ConsoleReportGenerator(out),
    )
    service.add_product(*DEMO_PRODUCT)


SCENARIO = Scenario(
    principle=Principle.SRP,
    summary="A class should have one reason to change.",
    run_violation=run_violation,
    run_obeying=run_obeying,
)


def run(out: OutputSink) -> ScenarioReport:
    return run_scenario(SCENARIO, out)
