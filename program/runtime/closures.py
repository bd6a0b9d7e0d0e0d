from __future__ import annotations
from dataclasses import dataclass

from .nodes import FuncDecl
from .records import ActivationRecord, RecordView


@dataclass(frozen=True, eq=False)
class Closure:
    """Valor función: cuerpo + cadena léxica capturada al definirlo."""
    decl: FuncDecl
    parent: RecordView

    @property
    def name(self) -> str:
        return self.decl.name

    @property
    def arity(self) -> int:
        return self.decl.arity

    @property
    def captured(self) -> ActivationRecord:
        return self.parent.record

    def __repr__(self) -> str:
        return f"<closure {self.name}/{self.arity} over {self.captured.label}>"


def make_closure(decl: FuncDecl, record: ActivationRecord) -> Closure:
    # comparte el registro, no lo copia
    return Closure(decl, record.view())
