from __future__ import annotations
from typing import Any, Callable, Dict

from .errors import EvaluationError


def _div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _mod(a: int, b: int) -> int:
    return a - b * _div(a, b)


# && y || no están aquí: el evaluador los corta en corto
BIN_OPS: Dict[str, Callable[[Any, Any], Any]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _div,
    "%": _mod,
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
    "<": lambda a, b: a < b,
    "<=": lambda a, b: a <= b,
    ">": lambda a, b: a > b,
    ">=": lambda a, b: a >= b,
}

LOGICAL_OPS = {"&&", "||"}

UN_OPS: Dict[str, Callable[[Any], Any]] = {
    "-": lambda a: -a,
    "!": lambda a: not truthy(a),
}


def truthy(value: Any) -> bool:
    return bool(value)


def apply_binary(op: str, lhs: Any, rhs: Any, line: int = 0, col: int = 0) -> Any:
    fn = BIN_OPS.get(op)
    if fn is None:
        raise EvaluationError(f"Operador desconocido: {op}", line, col)
    try:
        return fn(lhs, rhs)
    except ZeroDivisionError:
        raise EvaluationError("División entre cero", line, col, code="E_DIV") from None
    except TypeError:
        raise EvaluationError(
            f"Operandos inválidos para {op}: {lhs!r}, {rhs!r}", line, col
        ) from None


def apply_unary(op: str, operand: Any, line: int = 0, col: int = 0) -> Any:
    fn = UN_OPS.get(op)
    if fn is None:
        raise EvaluationError(f"Operador desconocido: {op}", line, col)
    try:
        return fn(operand)
    except TypeError:
        raise EvaluationError(f"Operando inválido para {op}: {operand!r}", line, col) from None
