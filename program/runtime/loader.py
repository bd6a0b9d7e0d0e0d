from __future__ import annotations
import json
from typing import Any, Dict, List

from .errors import MalformedTreeError
from .nodes import (
    Assign, BinaryOp, Call, ExprStmt, FuncDecl, Identifier, If, IntLiteral,
    Node, Program, Return, UnaryOp, VarDecl,
)

# Formato de intercambio con el front end: {"type": "<Nodo>", ...campos}


def _pos(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "line": data.get("line", 0),
        "col": data.get("col", 0),
        "depth": data.get("depth"),
    }


def _node(data: Any) -> Node:
    if not isinstance(data, dict) or "type" not in data:
        raise MalformedTreeError(f"Se esperaba un nodo, se obtuvo: {data!r}")
    kind = data["type"]
    builder = _BUILDERS.get(kind)
    if builder is None:
        raise MalformedTreeError(f"Tipo de nodo desconocido: {kind}", data.get("line", 0), data.get("col", 0))
    try:
        return builder(data)
    except KeyError as exc:
        raise MalformedTreeError(
            f"Falta el campo {exc.args[0]!r} en nodo {kind}", data.get("line", 0), data.get("col", 0)
        ) from None


def _opt(data: Dict[str, Any], key: str):
    value = data.get(key)
    return _node(value) if value is not None else None


def _list(data: Dict[str, Any], key: str) -> List[Node]:
    return [_node(d) for d in data.get(key, [])]


_BUILDERS = {
    "Program": lambda d: Program(_list(d, "body"), **_pos(d)),
    "VarDecl": lambda d: VarDecl(d["name"], _opt(d, "init"), **_pos(d)),
    "FuncDecl": lambda d: FuncDecl(d["name"], list(d.get("params", [])), _list(d, "body"), **_pos(d)),
    "Return": lambda d: Return(_opt(d, "value"), **_pos(d)),
    "If": lambda d: If(_node(d["cond"]), _list(d, "then"), _list(d, "orelse"), **_pos(d)),
    "ExprStmt": lambda d: ExprStmt(_node(d["expr"]), **_pos(d)),
    "Assign": lambda d: Assign(d["name"], _node(d["value"]), **_pos(d)),
    "Call": lambda d: Call(_node(d["callee"]), _list(d, "args"), **_pos(d)),
    "Identifier": lambda d: Identifier(d["name"], **_pos(d)),
    "IntLiteral": lambda d: IntLiteral(int(d["value"]), **_pos(d)),
    "BinaryOp": lambda d: BinaryOp(d["op"], _node(d["left"]), _node(d["right"]), **_pos(d)),
    "UnaryOp": lambda d: UnaryOp(d["op"], _node(d["operand"]), **_pos(d)),
}


def load_program(data: Dict[str, Any]) -> Program:
    node = _node(data)
    if not isinstance(node, Program):
        raise MalformedTreeError(f"La raíz debe ser Program, no {type(node).__name__}")
    return node


def load_program_file(path: str) -> Program:
    with open(path, encoding="utf-8") as fh:
        return load_program(json.load(fh))
