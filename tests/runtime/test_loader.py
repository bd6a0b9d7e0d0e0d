from pathlib import Path

import pytest

from program.runtime.errors import MalformedTreeError
from program.runtime.evaluator import evaluate
from program.runtime.loader import load_program, load_program_file
from program.runtime.nodes import Call, FuncDecl, Program

FIXTURE = Path(__file__).parent / "fixtures" / "function_closures.json"


def test_load_fixture_file_and_run():
    prog = load_program_file(str(FIXTURE))
    assert isinstance(prog, Program)
    foo = prog.body[1]
    assert isinstance(foo, FuncDecl) and foo.params == ["a", "b"] and foo.line == 3
    assert isinstance(prog.body[2].expr, Call)
    assert evaluate(prog) == 21


def test_unknown_node_type():
    with pytest.raises(MalformedTreeError):
        load_program({"type": "Program", "body": [{"type": "While", "line": 2}]})


def test_missing_field():
    with pytest.raises(MalformedTreeError) as exc:
        load_program({"type": "Program", "body": [{"type": "VarDecl"}]})
    assert "name" in exc.value.msg


def test_root_must_be_program():
    with pytest.raises(MalformedTreeError):
        load_program({"type": "IntLiteral", "value": 1})


def test_depth_annotation_is_kept():
    prog = load_program({"type": "Program", "body": [
        {"type": "ExprStmt", "expr": {"type": "Identifier", "name": "z", "depth": 0}},
    ]})
    assert prog.body[0].expr.depth == 0
