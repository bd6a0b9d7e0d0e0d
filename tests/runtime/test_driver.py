import json
from pathlib import Path

import pytest

from program.Driver import main

FIXTURE = Path(__file__).parent / "fixtures" / "function_closures.json"


def test_driver_runs_fixture(capsys):
    assert main(["Driver.py", str(FIXTURE)]) == 0
    out = capsys.readouterr().out
    assert "Resultado: 21" in out
    assert "Tabla de Símbolos" in out
    assert "nested function bar/1" in out
    assert "[capturada]" in out


def test_driver_reports_static_errors(tmp_path, capsys):
    src = tmp_path / "bad.json"
    src.write_text(json.dumps({"type": "Program", "body": [
        {"type": "ExprStmt", "line": 1, "expr": {"type": "Identifier", "name": "nope", "line": 1}},
    ]}), encoding="utf-8")
    assert main(["Driver.py", str(src)]) == 1
    assert "E_UNDEF" in capsys.readouterr().out


def test_driver_reports_runtime_errors(tmp_path, capsys):
    src = tmp_path / "deep.json"
    src.write_text(json.dumps({"type": "Program", "body": [
        {"type": "FuncDecl", "name": "f", "params": [], "body": [
            {"type": "Return", "value": {"type": "Call", "callee": {"type": "Identifier", "name": "f"}}},
        ]},
        {"type": "ExprStmt", "expr": {"type": "Call", "callee": {"type": "Identifier", "name": "f"}}},
    ]}), encoding="utf-8")
    assert main(["Driver.py", str(src), "--max-depth", "5"]) == 1
    assert "E_DEPTH" in capsys.readouterr().out


def test_driver_usage(capsys):
    assert main(["Driver.py"]) == 2
    assert "Uso" in capsys.readouterr().out


@pytest.mark.parametrize("extra", [["--max-depth"], ["--max-depth", "x"], ["--verbose"]])
def test_driver_bad_options_print_usage(extra, capsys):
    assert main(["Driver.py", str(FIXTURE), *extra]) == 2
    assert "Uso" in capsys.readouterr().out
