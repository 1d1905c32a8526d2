"""Principles and variants demonstrated by the scenarios.

Centralizing the enums in the domain layer lets the CLI, the runner and the
scenario modules share a single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class Principle(str, Enum):
    """Design principles (and the Builder pattern) covered by a scenario."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"
    BUILDER = "builder"

    @classmethod
    def ordered(cls) -> list["Principle"]:
        """Return principles in teaching order (SOLID first, Builder last)."""

        return [cls.SRP, cls.OCP, cls.LSP, cls.ISP, cls.DIP, cls.BUILDER]

    @property
    def heading(self) -> str:
        """Short title used in section headers (e.g. `LSP`, `Builder`)."""

        return "Builder" if self is Principle.BUILDER else self.value.upper()

    def label(self) -> str:
        """Human readable name of the principle."""

        return _LABELS[self]


_LABELS: dict[Principle, str] = {
    Principle.SRP: "Single Responsibility",
    Principle.OCP: "Open/Closed",
    Principle.LSP: "Liskov Substitution",
    Principle.ISP: "Interface Segregation",
    Principle.DIP: "Dependency Inversion",
    Principle.BUILDER: "Builder Pattern",
}


class Variant(str, Enum):
    """Which half of a paired demo to run."""

    VIOLATION = "violation"
    OBEYING = "obeying"

    @property
    def heading(self) -> str:
        return "Violation" if self is Variant.VIOLATION else "Obeying"
