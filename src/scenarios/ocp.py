"""Scenario: Open/Closed Principle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from core.domain.errors import DemoError, ShapeNotSupportedError
from core.domain.models import ScenarioReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.interfaces.scenario import Scenario
from core.services.runner import run_scenario


def format_area(name: str, area: float) -> str:
    return f"{name} area: {area:.2f}"


# Violation: every new shape means editing the calculator.


@dataclass
class CircleV:
    radius: float


@dataclass
class SquareV:
    side: float


class ShapeAreaCalculatorV:
    def calculate_area(self, shape: object) -> float:
        if isinstance(shape, CircleV):
            return math.pi * shape.radius * shape.radius
        if isinstance(shape, SquareV):
            return shape.side * shape.side
        raise ShapeNotSupportedError(shape)


# Obeying: shapes know their own area; new ones plug in without edits.


@runtime_checkable
class Shape(Protocol):
    def area(self) -> float: ...


@dataclass
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass
class Square:
    side: float

    def area(self) -> float:
        return self.side * self.side


@dataclass
class Triangle:
    base: float
    height: float

    def area(self) -> float:
        return 0.5 * self.base * self.height


class ShapeAreaCalculator:
    def calculate_area(self, shape: Shape) -> float:
        return shape.area()


def run_violation(out: OutputSink) -> None:
    calc = ShapeAreaCalculatorV()
    out.write(format_area("Circle", calc.calculate_area(CircleV(radius=5))))
    out.write(format_area("Square", calc.calculate_area(SquareV(side=4))))
    try:
        calc.calculate_area(Triangle(base=6, height=3))
    except DemoError as exc:
        out.write(f"Triangle: Error: {exc}")


def run_obeying(out: OutputSink) -> None:
    calc = ShapeAreaCalculator()
    shapes: list[tuple[str, Shape]] = [
        ("Circle", Circle(radius=5)),
        ("Square", Square(side=4)),
        ("Triangle", Triangle(base=6, height=3)),
    ]
    for name, shape in shapes:
        out.write(format_area(name, calc.calculate_area(shape)))


SCENARIO = Scenario(
    principle=Principle.OCP,
    summary="Open for extension, closed for modification.",
    run_violation=run_violation,
    run_obeying=run_obeying,
)


def run(out: OutputSink) -> ScenarioReport:
    return run_scenario(SCENARIO, out)
