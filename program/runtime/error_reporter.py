# program/runtime/error_reporter.py

from dataclasses import dataclass
from typing import Optional


@dataclass
class SemanticError:
    line: int
    col: int
    code: str
    msg: str
    name: Optional[str] = None   # identificador involucrado
    depth: Optional[int] = None  # profundidad del ámbito donde se detectó

    def __str__(self):
        where = f"[{self.line}:{self.col}]"
        if self.depth is not None:
            where += f" (profundidad {self.depth})"
        return f"{where} {self.code}: {self.msg}"


class ErrorReporter:
    """
    Recolector de errores de la tabla de ámbitos. Los errores se acumulan
    durante el recorrido estático; los de ejecución se lanzan como
    excepciones (ver errors.py).
    """

    def __init__(self):
        self.errors: list[SemanticError] = []

    def report(self, line: int, col: int, code: str, msg: str,
               name: Optional[str] = None, depth: Optional[int] = None):
        self.errors.append(SemanticError(line, col, code, msg, name, depth))

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def count(self) -> int:
        return len(self.errors)

    def codes(self) -> list[str]:
        """Códigos en orden de aparición."""
        return [e.code for e in self.errors]

    def by_code(self, code: str) -> list[SemanticError]:
        return [e for e in self.errors if e.code == code]

    def unresolved_names(self) -> list[str]:
        """Identificadores que no resolvieron en ninguna cadena léxica."""
        return [e.name for e in self.errors if e.code == "E_UNDEF" and e.name]

    def clear(self):
        self.errors.clear()

    def __iter__(self):
        return iter(self.errors)

    def __str__(self):
        if not self.errors:
            return " Tabla de ámbitos sin errores."
        return "\n".join(str(e) for e in self.errors)
