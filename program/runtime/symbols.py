from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass
class Symbol:
    name: str
    category: str = "unknown"   # variable, param, function
    depth: int = 0              # profundidad léxica del ámbito que lo declara
    line: int = 0               # línea de declaración
    col: int = 0                # columna de declaración


@dataclass
class VarSymbol(Symbol):
    is_initialized: bool = False
    is_captured: bool = False   # leído o escrito desde una función anidada
    def __init__(self, name, depth=0, is_initialized=False, line=0, col=0):
        super().__init__(name, category="variable", depth=depth, line=line, col=col)
        self.is_initialized = is_initialized
        self.is_captured = False


@dataclass
class ParamSymbol(Symbol):
    index: int = 0
    is_captured: bool = False
    def __init__(self, name, index, depth=0, line=0, col=0):
        super().__init__(name, category="param", depth=depth, line=line, col=col)
        self.index = index
        self.is_captured = False


@dataclass
class FuncSymbol(Symbol):
    params: Tuple[ParamSymbol, ...] = field(default_factory=tuple)
    nested: Dict[str, 'FuncSymbol'] = field(default_factory=dict)
    def __init__(self, name, params=(), depth=0, line=0, col=0):
        super().__init__(name, category="function", depth=depth, line=line, col=col)
        self.params = tuple(params)
        self.nested = {}

    @property
    def arity(self) -> int:
        return len(self.params)
