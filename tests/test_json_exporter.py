"""Tests for the JSON exporter."""

import json

from adapters.json_exporter import export_summary_json
from core.services.runner import run_all
from scenarios import get_scenario


def test_export_is_stable_utf8(tmp_path):
    summary = run_all([get_scenario("ocp")])
    path = export_summary_json(summary=summary, output_path=tmp_path / "nested" / "ocp.json")

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    payload = json.loads(text)
    assert list(payload) == sorted(payload)
    variants = payload["reports"][0]["variants"]
    assert variants[1]["lines"][-1] == "Triangle area: 9.00"
    assert variants[0]["error"] is None
