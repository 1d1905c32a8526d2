"""Scenario: Builder pattern.

Por qué un builder:
- Un constructor con cinco parámetros posicionales es fácil de invocar mal
  (¿color o modelo primero?).
- El builder nombra cada paso y valida el resultado en `build()`.
"""

from __future__ import annotations

from core.domain.errors import IncompleteBuildError
from core.domain.models import ScenarioReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.interfaces.scenario import Scenario
from core.services.runner import run_scenario


def describe_car(year: int | None, color: str | None, make: str | None, model: str | None, has_sunroof: bool) -> str:
    return f"{year} {color} {make} {model} (Sunroof: {has_sunroof})"


# Violation


class CarV:
    def __init__(self, make: str, model: str, color: str, year: int, has_sunroof: bool) -> None:
        self.make = make
        self.model = model
        self.color = color
        self.year = year
        self.has_sunroof = has_sunroof

    def __str__(self) -> str:
        return describe_car(self.year, self.color, self.make, self.model, self.has_sunroof)


# Obeying


class Car:
    """Only `Car.Builder` is expected to create instances."""

    def __init__(self) -> None:
        self.make: str | None = None
        self.model: str | None = None
        self.color: str | None = None
        self.year: int | None = None
        self.has_sunroof: bool = False

    def __str__(self) -> str:
        return describe_car(self.year, self.color, self.make, self.model, self.has_sunroof)

    class Builder:
        _required = ("make", "model")

        def __init__(self) -> None:
            self._fields: dict[str, object] = {}

        def set_make(self, make: str) -> "Car.Builder":
            self._fields["make"] = make
            return self

        def set_model(self, model: str) -> "Car.Builder":
            self._fields["model"] = model
            return self

        def set_color(self, color: str) -> "Car.Builder":
            self._fields["color"] = color
            return self

        def set_year(self, year: int) -> "Car.Builder":
            self._fields["year"] = year
            return self

        def set_sunroof(self, has_sunroof: bool) -> "Car.Builder":
            self._fields["has_sunroof"] = has_sunroof
            return self

        def build(self) -> "Car":
            """Return a new `Car`; the builder can be reused afterwards."""

            missing = [name for name in self._required if not self._fields.get(name)]
            if missing:
                raise IncompleteBuildError(missing)

            car = Car()
            for name, value in self._fields.items():
                setattr(car, name, value)
            return car


def run_violation(out: OutputSink) -> None:
    car = CarV("Toyota", "Corolla", "Blue", 2024, True)
    out.write(str(car))


def run_obeying(out: OutputSink) -> None:
    car = (
        Car.Builder()
        .set_make("Toyota")
        .set_model("Corolla")
        .set_color("Blue")
        .set_year(2024)
        .set_sunroof(True)
        .build()
    )
    out.write(str(car))


SCENARIO = Scenario(
    principle=Principle.BUILDER,
    summary="Construct complex objects step by step with named setters.",
    run_violation=run_violation,
    run_obeying=run_obeying,
)


def run(out: OutputSink) -> ScenarioReport:
    return run_scenario(SCENARIO, out)
