from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Iterable
from .symbols import Symbol

@dataclass
class Scope:
    """Ámbito estático: mapa nombre->símbolo, referencia al padre y profundidad léxica."""
    kind: str  # 'global' | 'function'
    parent: Optional['Scope'] = None
    symbols: Dict[str, Symbol] = field(default_factory=dict)
    depth: int = 0

    def define(self, sym: Symbol) -> bool:
        """
        Registra 'sym' en este scope. Redeclarar en el mismo scope está
        permitido: reemplaza al anterior. Retorna False si ya existía.
        """
        is_new = sym.name not in self.symbols
        self.symbols[sym.name] = sym
        return is_new

    def resolve(self, name: str) -> Optional[Symbol]:
        """
        Busca el símbolo por 'name' en este scope y, si no está, recorre la cadena de padres.
        """
        s: Optional[Scope] = self
        while s is not None:
            if name in s.symbols:
                return s.symbols[name]
            s = s.parent
        return None

    # Utilidades
    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def items(self) -> Iterable[tuple[str, Symbol]]:
        return self.symbols.items()


class GlobalScope(Scope):
    def __init__(self) -> None:
        super().__init__('global', None, depth=0)


class FunctionScope(Scope):
    def __init__(self, parent: Scope, name: str | None = None) -> None:
        super().__init__('function', parent, depth=parent.depth + 1)
        self.func_name = name


# Pila de scopes

class ScopeStack:
    """
    Pila de scopes usada por ScopeTableBuilder.
    Los scopes de función quedan registrados en 'all' aunque se saquen de la pila.
    """
    def __init__(self, root: Optional[Scope] = None):
        self.stack: list[Scope] = [root] if root else []
        self.all: list[Scope] = list(self.stack)

    @property
    def current(self) -> Scope:
        if not self.stack:
            raise RuntimeError("ScopeStack vacío: asegúrate de push(global) antes de usarlo.")
        return self.stack[-1]

    @property
    def root(self) -> Scope:
        if not self.stack:
            raise RuntimeError("ScopeStack vacío.")
        return self.stack[0]

    def push_function(self, name: str | None = None) -> FunctionScope:
        fs = FunctionScope(self.current, name)
        self.stack.append(fs)
        self.all.append(fs)
        return fs

    def pop(self) -> Scope:
        if not self.stack:
            raise RuntimeError("Pop en ScopeStack vacío.")
        return self.stack.pop()

    def depth(self) -> int:
        return len(self.stack)

    def inside(self, kind: str) -> bool:
        for s in reversed(self.stack):
            if s.kind == kind:
                return True
        return False
