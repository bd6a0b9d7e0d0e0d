from .scopes import Scope, ScopeStack
from .symbols import FuncSymbol


def print_scope(scope: Scope, indent=0):
    pad = "  " * indent
    label = getattr(scope, "func_name", None) or scope.kind
    print(f"{pad}Scope ({label}, profundidad {scope.depth})")

    for name, sym in scope.items():
        row = f"{pad}- {sym.category:<8} {sym.name:<12} depth {sym.depth}"
        row += f" (line {sym.line}, col {sym.col})"
        if getattr(sym, "is_captured", False):
            row += " [capturada]"
        print(row)

        if isinstance(sym, FuncSymbol):
            for p in sym.params:
                print(f"{pad}    param {p.name} (index {p.index})" + (" [capturada]" if p.is_captured else ""))
            for nname, nsym in sym.nested.items():
                print(f"{pad}    nested function {nname}/{nsym.arity}")


def print_symbol_table(stack: ScopeStack):
    if not stack.all:
        print(" No hay scopes registrados en la tabla de símbolos.")
        return
    print("\nTabla de Símbolos")
    print("====================")
    for scope in stack.all:
        print_scope(scope, scope.depth)
