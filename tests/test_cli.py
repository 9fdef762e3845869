"""
CLI Tests

Runs the causepilot CLI in-process through main(argv).
"""
from __future__ import annotations

import json

import pytest

from causepilot.cli import main


@pytest.fixture
def form_file(tmp_path):
    path = tmp_path / "form.json"
    path.write_text(json.dumps({
        "perilTested": "wind",
        "damageType": "Missing shingles",
        "eventDate": "2024-06-15",
        "roofAge": "12",
        "indicators": {
            "directional_pattern": {"state": "present"},
            "lifted_tabs": "present",
        },
    }), encoding="utf-8")
    return path


class TestEvaluateCommand:

    def test_json_output(self, form_file, capsys) -> None:
        assert main(["evaluate", str(form_file), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["decision"] == "supported"
        assert data["scoring"]["net_score"] == 32

    def test_json_camel_case(self, form_file, capsys) -> None:
        assert main(["evaluate", str(form_file), "--json", "--camel"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["scoring"]["netScore"] == 32

    def test_text_output(self, form_file, capsys) -> None:
        assert main(["evaluate", str(form_file)]) == 0
        out = capsys.readouterr().out
        assert "Decision: SUPPORTED" in out
        assert "Minimum evidence: MET" in out
        assert "Date damage was first noticed not specified" in out

    def test_with_rubric(self, form_file, rubric_path, capsys) -> None:
        assert main(["evaluate", str(form_file), "--rubric", str(rubric_path)]) == 0
        assert "Rubric:   wind-storm-default v1.0" in capsys.readouterr().out

    def test_missing_form(self, tmp_path, capsys) -> None:
        assert main(["evaluate", str(tmp_path / "missing.json")]) == 2
        assert "ERROR" in capsys.readouterr().err

    def test_invalid_state(self, tmp_path, capsys) -> None:
        path = tmp_path / "form.json"
        path.write_text(json.dumps({"indicators": {"lifted_tabs": "maybe"}}), encoding="utf-8")
        assert main(["evaluate", str(path)]) == 2
        assert "CP_INVALID_INDICATOR_STATE" in capsys.readouterr().err

    def test_bad_rubric(self, form_file, tmp_path, capsys) -> None:
        assert main(["evaluate", str(form_file), "--rubric", str(tmp_path / "nope.yaml")]) == 2
        assert "CP_CATALOG_LOAD_ERROR" in capsys.readouterr().err


class TestListCommands:

    def test_indicators(self, capsys) -> None:
        assert main(["indicators"]) == 0
        out = capsys.readouterr().out
        assert "directional_pattern" in out
        assert "Decision threshold: 15" in out

    def test_tactics(self, capsys) -> None:
        assert main(["tactics"]) == 0
        out = capsys.readouterr().out
        assert "INSTALLATION DEFECT" in out
        assert "improper_nailing" in out

    def test_no_command(self, capsys) -> None:
        assert main([]) == 1
