"""Scenario: Dependency Inversion Principle.

High-level policy (`NotificationService`) depends on the `MessageSender`
abstraction; the concrete channel is injected by the caller.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.errors import MissingDependencyError
from core.domain.models import ScenarioReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.interfaces.scenario import Scenario
from core.services.runner import run_scenario


# Violation


class EmailSenderV:
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    def send_email(self, message: str) -> None:
        self._out.write(f"[Email] {message}")


class NotificationServiceV:
    """Creates its own low-level sender; only ever sends email."""

    def __init__(self, out: OutputSink) -> None:
        self._email_sender = EmailSenderV(out)

    def notify(self, message: str) -> None:
        self._email_sender.send_email(message)


# Obeying


@runtime_checkable
class MessageSender(Protocol):
    def send(self, message: str) -> None: ...


class EmailSender:
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    def send(self, message: str) -> None:
        self._out.write(f"[Email] {message}")


class SmsSender:
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    def send(self, message: str) -> None:
        self._out.write(f"[SMS] {message}")


class NotificationService:
    def __init__(self, sender: MessageSender | None) -> None:
        if sender is None:
            raise MissingDependencyError("sender")
        self._sender = sender

    def notify(self, message: str) -> None:
        self._sender.send(message)


def run_violation(out: OutputSink) -> None:
    NotificationServiceV(out).notify("System update available!")


def run_obeying(out: OutputSink) -> None:
    email_service = NotificationService(EmailSender(out))
    sms_service = NotificationService(SmsSender(out))

    email_service.notify("System update available via Email!")
    sms_service.notify("System update available via SMS!")


SCENARIO = Scenario(
    principle=Principle.DIP,
    summary="Depend on abstractions, not on concrete implementations.",
    run_violation=run_violation,
    run_obeying=run_obeying,
)


def run(out: OutputSink) -> ScenarioReport:
    return run_scenario(SCENARIO, out)
