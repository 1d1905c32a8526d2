"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a la consola.
- Facilita la serialización (JSON) de lo que imprimió cada escenario.

Nota:
- Estos modelos describen *qué* ocurrió en una demo, no *cómo* se imprimió.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from core.domain.principle import Principle, Variant


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VariantReport(BaseModel):
    """Resultado de ejecutar una variante (violación u obediencia).

    Por qué existe:
    - Permite verificar la salida de una demo sin capturar stdout.
    - Conserva el error didáctico (si lo hubo) junto a las líneas impresas.
    """

    principle: Principle = Field(
        ...,
        description="Principio demostrado por la variante.",
    )
    variant: Variant = Field(
        ...,
        description="Mitad de la demo ejecutada.",
    )
    lines: list[str] = Field(
        default_factory=list,
        description="Líneas impresas por la variante, en orden.",
    )
    error: str | None = Field(
        default=None,
        description="Mensaje del error didáctico capturado (si aplica).",
    )
    error_type: str | None = Field(
        default=None,
        description="Nombre de la clase del error capturado (si aplica).",
    )

    @property
    def failed(self) -> bool:
        return self.error is not None


class ScenarioReport(BaseModel):
    """Agregado: una demo completa con sus variantes."""

    principle: Principle = Field(
        ...,
        description="Principio demostrado.",
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Título corto (p.ej. 'LSP').",
    )
    summary: str = Field(
        default="",
        max_length=500,
        description="Qué enseña la demo, en una línea.",
    )
    variants: list[VariantReport] = Field(
        default_factory=list,
        description="Variantes ejecutadas, en orden.",
    )

    @property
    def failed(self) -> bool:
        return any(v.failed for v in self.variants)


class RunSummary(BaseModel):
    """Conjunto de reportes de una ejecución de la CLI."""

    reports: list[ScenarioReport] = Field(
        default_factory=list,
        description="Reportes por escenario, en orden de ejecución.",
    )
    generated_at: datetime = Field(
        default_factory=_utcnow,
        description="Momento de generación (UTC).",
    )
