"""Scenario: Interface Segregation Principle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from core.domain.errors import DemoError, UnsupportedActionError
from core.domain.models import ScenarioReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.interfaces.scenario import Scenario
from core.services.runner import run_scenario


# Violation: one fat interface forces robots to "eat" and "sleep".


class WorkerV(ABC):
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    @abstractmethod
    def work(self) -> None: ...

    @abstractmethod
    def eat(self) -> None: ...

    @abstractmethod
    def sleep(self) -> None: ...


class RobotWorkerV(WorkerV):
    def work(self) -> None:
        self._out.write("Robot is working tirelessly.")

    def eat(self) -> None:
        raise UnsupportedActionError("Robots don't eat!")

    def sleep(self) -> None:
        raise UnsupportedActionError("Robots don't sleep!")


class HumanWorkerV(WorkerV):
    """Fits the fat interface; only robots expose its cost."""

    def work(self) -> None:
        self._out.write("Human is working.")

    def eat(self) -> None:
        self._out.write("Human is eating lunch.")

    def sleep(self) -> None:
        self._out.write("Human is sleeping.")


# Obeying: small role interfaces, implemented only where they make sense.


@runtime_checkable
class Workable(Protocol):
    def work(self) -> None: ...


@runtime_checkable
class Eatable(Protocol):
    def eat(self) -> None: ...


@runtime_checkable
class Sleepable(Protocol):
    def sleep(self) -> None: ...


class RobotWorker:
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    def work(self) -> None:
        self._out.write("Robot is working tirelessly.")


class HumanWorker:
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    def work(self) -> None:
        self._out.write("Human is working.")

    def eat(self) -> None:
        self._out.write("Human is eating lunch.")

    def sleep(self) -> None:
        self._out.write("Human is sleeping.")


def run_violation(out: OutputSink) -> None:
    robot: WorkerV = RobotWorkerV(out)
    robot.work()
    try:
        robot.eat()
    except DemoError as exc:
        out.write(f"Error: {exc}")


def run_obeying(out: OutputSink) -> None:
    robot: Workable = RobotWorker(out)
    robot.work()

    human = HumanWorker(out)
    human.work()
    human.eat()
    human.sleep()


SCENARIO = Scenario(
    principle=Principle.ISP,
    summary="Clients should not depend on methods they do not use.",
    run_violation=run_violation,
    run_obeying=run_obeying,
)


def run(out: OutputSink) -> ScenarioReport:
    return run_scenario(SCENARIO, out)
