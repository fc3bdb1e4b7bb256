"""flowcraft CLI: validate, recent, templates, export."""
import json

import pytest

from flowcraft.application.controller import create_controller
from flowcraft.cli.main import main


@pytest.fixture
def diagram(tmp_path):
    p = tmp_path / "flow.mmd"
    p.write_text("flowchart TD\nA b-->C", encoding="utf-8")
    return p


def test_validate_prints_warnings(diagram, capsys):
    assert main(["--log-level", "ERROR", "validate", str(diagram)]) == 0
    out = capsys.readouterr().out
    assert "valid, 1 warning(s)" in out
    assert "Node ID 'A b' contains spaces" in out


def test_validate_json(diagram, capsys):
    assert main(["--log-level", "ERROR", "validate", "--json", str(diagram)]) == 0
    reports = json.loads(capsys.readouterr().out)
    assert reports[str(diagram)]["is_valid"] is True


def test_validate_missing_file_exit_code(tmp_path, capsys):
    assert main(["--log-level", "ERROR", "validate", str(tmp_path / "missing.mmd")]) == 1
    assert "Failed to read file" in capsys.readouterr().err


def test_recent_lists_and_clears(tmp_path, capsys):
    create_controller().save("pie", str(tmp_path / "a.mmd"))
    assert main(["--log-level", "ERROR", "recent", "--json"]) == 0
    entries = json.loads(capsys.readouterr().out)
    assert [e["name"] for e in entries] == ["a.mmd"]

    assert main(["--log-level", "ERROR", "recent", "--clear"]) == 0
    capsys.readouterr()
    assert main(["--log-level", "ERROR", "recent"]) == 0
    assert "No recent files." in capsys.readouterr().out


def test_templates(capsys):
    assert main(["--log-level", "ERROR", "templates"]) == 0
    assert "flowchart-basic" in capsys.readouterr().out
    assert main(["--log-level", "ERROR", "templates", "--show", "pie-basic"]) == 0
    assert capsys.readouterr().out.startswith("pie title")
    assert main(["--log-level", "ERROR", "templates", "--show", "nope"]) == 1


def test_export(diagram, tmp_path, capsys):
    out = tmp_path / "out.pdf"
    assert main(["--log-level", "ERROR", "export", str(diagram), "--format", "pdf", "--output", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == diagram.read_text(encoding="utf-8")
    assert "Exported" in capsys.readouterr().out


def test_bad_config_exit_code(tmp_path, capsys):
    bad = tmp_path / "bad.yaml"
    bad.write_text("recent:\n  capacity: -1\n", encoding="utf-8")
    assert main(["--config", str(bad), "templates"]) == 2
