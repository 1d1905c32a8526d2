"""Errores didácticos de las demos.

Por qué una jerarquía propia:
- Las variantes que violan un principio fallan *a propósito*; el runner captura
  solo `DemoError` y deja propagar cualquier otro fallo real.
"""

from __future__ import annotations


class DemoError(Exception):
    """Base de los errores que una demo puede mostrar como `Error: <msg>`."""


class SmsTooLongError(DemoError):
    """El subtipo SMS rechaza mensajes que el tipo base acepta."""

    def __init__(self, message: str = "SMS too long!", *, length: int | None = None, limit: int | None = None) -> None:
        super().__init__(message)
        self.length = length
        self.limit = limit


class ShapeNotSupportedError(DemoError):
    """La calculadora cerrada a extensión no conoce la figura."""

    def __init__(self, shape: object) -> None:
        super().__init__("Shape not supported")
        self.shape = shape


class UnsupportedActionError(DemoError, NotImplementedError):
    """Una interfaz "gorda" obliga a implementar acciones sin sentido."""


class MissingDependencyError(DemoError, ValueError):
    """Un servicio de alto nivel se construyó sin su abstracción."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is required")
        self.name = name


class IncompleteBuildError(DemoError):
    """El builder no tiene los campos obligatorios para construir."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Cannot build: missing {', '.join(missing)}")
        self.missing = missing
