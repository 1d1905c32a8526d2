"""Contrato de salida de texto.

Por qué Protocol:
- Las demos solo necesitan "escribir una línea"; no deben conocer Rich ni stdout.
- Permite sustituir la consola por un grabador en memoria (tests, JSON).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Destino mínimo de las líneas impresas por una demo."""

    def write(self, line: str = "") -> None:
        """Escribe una línea de texto (sin salto final)."""

        ...
