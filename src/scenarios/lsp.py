"""Scenario: Liskov Substitution Principle.

A subtype must accept everything its base type accepts. `SmsNotificationV`
strengthens the precondition on `send` (short messages only) and raises where
callers of `NotificationV` expect delivery; `SmsNotification` adapts the
message instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.config import AppSettings
from core.domain.errors import SmsTooLongError
from core.domain.models import ScenarioReport
from core.domain.principle import Principle
from core.interfaces.output import OutputSink
from core.interfaces.scenario import Scenario
from core.services.runner import run_scenario

DEFAULT_SMS_MAX_LENGTH = 20


# Violation


class NotificationV(ABC):
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    @abstractmethod
    def send(self, message: str) -> None: ...


class EmailNotificationV(NotificationV):
    def send(self, message: str) -> None:
        self._out.write(f"[Email] {message}")


class SmsNotificationV(NotificationV):
    def __init__(self, out: OutputSink, max_length: int = DEFAULT_SMS_MAX_LENGTH) -> None:
        super().__init__(out)
        self.max_length = max_length

    def send(self, message: str) -> None:
        if len(message) > self.max_length:
            raise SmsTooLongError(length=len(message), limit=self.max_length)
        self._out.write(f"[SMS] {message}")


# Obeying


class Notification(ABC):
    def __init__(self, out: OutputSink) -> None:
        self._out = out

    @abstractmethod
    def send(self, message: str) -> None: ...


class EmailNotification(Notification):
    def send(self, message: str) -> None:
        self._out.write(f"[Email] {message}")


class SmsNotification(Notification):
    """Truncates long messages so any `Notification` caller keeps working."""

    def __init__(self, out: OutputSink, max_length: int = DEFAULT_SMS_MAX_LENGTH) -> None:
        super().__init__(out)
        self.max_length = max_length

    def send(self, message: str) -> None:
        self._out.write(f"[SMS] {truncate(message, self.max_length)}")


def truncate(message: str, max_length: int) -> str:
    if len(message) > max_length:
        return message[:max_length] + "..."
    return message


def _sms_limit() -> int:
    return AppSettings().sms_max_length


def run_violation(out: OutputSink) -> None:
    notifications: list[NotificationV] = [
        EmailNotificationV(out),
        SmsNotificationV(out, max_length=_sms_limit()),
    ]
    notifications[0].send("Hello via Email")
    notifications[1].send("This message is way too long for SMS and will crash")


def run_obeying(out: OutputSink) -> None:
    email: Notification = EmailNotification(out)
    sms: Notification = SmsNotification(out, max_length=_sms_limit())

    email.send("Hello via Email!")
    sms.send("This message is way too long for SMS but still works safely")


SCENARIO = Scenario(
    principle=Principle.LSP,
    summary="Subtypes must be usable wherever their base type is expected.",
    run_violation=run_violation,
    run_obeying=run_obeying,
)


def run(out: OutputSink) -> ScenarioReport:
    return run_scenario(SCENARIO, out)
