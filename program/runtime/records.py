from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


@dataclass(eq=False)
class Binding:
    """Ligadura nombre->valor. Se modifica en sitio, nunca cambia de registro."""
    name: str
    value: Any
    owner: 'ActivationRecord'

    def __repr__(self) -> str:
        return f"Binding({self.name}={self.value!r} @ {self.owner.label})"


@dataclass(frozen=True, eq=False)
class RecordView:
    """
    Vista de un registro tal como estaba al capturarla: el registro es el
    mismo objeto compartido, pero solo son visibles las ligaduras declaradas
    antes de 'mark'.
    """
    record: 'ActivationRecord'
    mark: int

    def lookup(self, name: str) -> Optional[Binding]:
        return self.record.lookup_local(name, limit=self.mark)

    @property
    def parent(self) -> Optional['RecordView']:
        return self.record.parent


@dataclass(eq=False)
class ActivationRecord:
    """
    Registro de activación de una llamada: ligaduras locales en orden de
    declaración y el enlace al padre léxico (una vista, o None en el global).
    """
    parent: Optional[RecordView] = None
    label: str = "<global>"
    bindings: List[Binding] = field(default_factory=list)
    # nombre -> posiciones en 'bindings', de la más antigua a la más reciente
    _slots: Dict[str, List[int]] = field(default_factory=dict, repr=False)

    @classmethod
    def create(cls, parent: Optional[RecordView] = None, label: str = "<global>") -> 'ActivationRecord':
        return cls(parent=parent, label=label)

    def declare(self, name: str, value: Any) -> Binding:
        """
        Inserta SIEMPRE una ligadura nueva. Si el nombre ya existía en este
        registro queda sombreado para búsquedas nuevas, pero las vistas
        capturadas antes siguen viendo la ligadura anterior.
        """
        binding = Binding(name, value, self)
        self._slots.setdefault(name, []).append(len(self.bindings))
        self.bindings.append(binding)
        return binding

    def lookup_local(self, name: str, limit: Optional[int] = None) -> Optional[Binding]:
        slots = self._slots.get(name)
        if not slots:
            return None
        if limit is None:
            return self.bindings[slots[-1]]
        for pos in reversed(slots):
            if pos < limit:
                return self.bindings[pos]
        return None

    def view(self) -> RecordView:
        return RecordView(self, len(self.bindings))

    def chain(self) -> Iterator['ActivationRecord']:
        """Recorre la cadena léxica desde este registro hasta el global."""
        rec: Optional[ActivationRecord] = self
        while rec is not None:
            yield rec
            rec = rec.parent.record if rec.parent is not None else None

    @property
    def is_global(self) -> bool:
        return self.parent is None

    # Utilidades
    def __contains__(self, name: str) -> bool:
        return name in self._slots

    def __len__(self) -> int:
        return len(self.bindings)

    def names(self) -> List[str]:
        return [b.name for b in self.bindings]
