"""Exportación JSON de una ejecución.

Por qué JSON:
- Permite comparar la salida de las demos entre versiones o usarla en clase
  sin copiar texto de la terminal.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import RunSummary


def export_summary_json(*, summary: RunSummary, output_path: Path) -> Path:
    """Exporta `RunSummary` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = summary.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
