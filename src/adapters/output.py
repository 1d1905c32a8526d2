"""Implementaciones de `OutputSink`.

Por qué dos adaptadores:
- `ConsoleSink` imprime en la terminal vía Rich (sin interpretar markup, las
  demos imprimen cosas como `[Email]`).
- `RecordingSink` guarda las líneas para tests y exportación JSON, y puede
  reenviarlas a otro sink al mismo tiempo.
"""

from __future__ import annotations

from rich.console import Console

from core.interfaces.output import OutputSink


class ConsoleSink(OutputSink):
    """Escribe cada línea en una `rich.console.Console`."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def write(self, line: str = "") -> None:
        self._console.print(line, markup=False, highlight=False, emoji=False)


class RecordingSink(OutputSink):
    """Acumula líneas en memoria; opcionalmente las reenvía (`tee`)."""

    def __init__(self, tee: OutputSink | None = None) -> None:
        self.lines: list[str] = []
        self._tee = tee

    def write(self, line: str = "") -> None:
        self.lines.append(line)
        if self._tee is not None:
            self._tee.write(line)
