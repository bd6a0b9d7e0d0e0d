from __future__ import annotations
from typing import Optional, Tuple

from .errors import UnboundIdentifierError
from .records import ActivationRecord, Binding


class Resolver:
    """
    Busca la ligadura de un identificador recorriendo la cadena LÉXICA
    (la capturada por la clausura), nunca la cadena de llamadas.
    """

    def __init__(self, global_record: ActivationRecord):
        self.global_record = global_record

    def lookup(self, name: str, record: ActivationRecord) -> Tuple[Optional[Binding], Optional[int]]:
        """
        Devuelve (ligadura, saltos). saltos = 0 si es local, n si está n
        registros arriba, None si vino del respaldo global.
        """
        binding = record.lookup_local(name)
        if binding is not None:
            return binding, 0
        hops = 1
        view = record.parent
        while view is not None:
            binding = view.lookup(name)
            if binding is not None:
                return binding, hops
            view = view.parent
            hops += 1
        # respaldo: tabla global viva (referencias hacia adelante entre globales)
        return self.global_record.lookup_local(name), None

    def resolve(self, name: str, record: ActivationRecord, line: int = 0, col: int = 0) -> Binding:
        binding, _ = self.lookup(name, record)
        if binding is None:
            raise UnboundIdentifierError(name, line, col)
        return binding

    def distance(self, name: str, record: ActivationRecord) -> Optional[int]:
        binding, hops = self.lookup(name, record)
        if binding is None:
            raise UnboundIdentifierError(name)
        return hops
