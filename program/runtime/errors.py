from __future__ import annotations


class ClosureRuntimeError(Exception):
    """
    Error en tiempo de ejecución. Aborta la llamada actual y se propaga
    hacia quien la invocó; nunca se reintenta.
    """
    code = "E_RUNTIME"

    def __init__(self, msg: str, line: int = 0, col: int = 0):
        super().__init__(msg)
        self.msg = msg
        self.line = line
        self.col = col

    def __str__(self):
        return f"[{self.line}:{self.col}] {self.code}: {self.msg}"


class UnboundIdentifierError(ClosureRuntimeError):
    code = "E_UNDEF"

    def __init__(self, name: str, line: int = 0, col: int = 0):
        super().__init__(f"Identificador no definido: {name}", line, col)
        self.name = name


class ArityMismatchError(ClosureRuntimeError):
    code = "E_ARITY"

    def __init__(self, name: str, expected: int, got: int, line: int = 0, col: int = 0):
        super().__init__(
            f"{name} espera {expected} argumento(s), recibió {got}", line, col
        )
        self.name = name
        self.expected = expected
        self.got = got


class NotCallableError(ClosureRuntimeError):
    code = "E_CALL"


class RecursionDepthError(ClosureRuntimeError):
    code = "E_DEPTH"


class CapturedMutationError(ClosureRuntimeError):
    code = "E_CAPTURED"


class EvaluationError(ClosureRuntimeError):
    code = "E_OP"

    def __init__(self, msg: str, line: int = 0, col: int = 0, code: str | None = None):
        super().__init__(msg, line, col)
        if code:
            self.code = code


class MalformedTreeError(ClosureRuntimeError):
    code = "E_TREE"
