"""Exportación JSON del reporte de showcase.

Por qué JSON:
- Interoperabilidad con CI y otras herramientas.
- Permite guardar el resultado sin depender del render de Rich.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ShowcaseReport


def export_report_json(*, report: ShowcaseReport, output_path: Path) -> Path:
    """Exporta `ShowcaseReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
