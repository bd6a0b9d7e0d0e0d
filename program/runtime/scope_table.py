from __future__ import annotations
import logging
from typing import List, Tuple

from antlr4.tree.Tree import ParseTreeVisitor

from .error_reporter import ErrorReporter
from .nodes import Assign, Call, FuncDecl, Identifier, Program, Return, VarDecl
from .scopes import GlobalScope, ScopeStack
from .symbols import FuncSymbol, ParamSymbol, Symbol, VarSymbol

logger = logging.getLogger(__name__)


class ScopeTableBuilder(ParseTreeVisitor):
    """
    Construye la tabla de ámbitos una sola vez por programa, en orden textual.
    Anota en cada declaración e identificador la profundidad léxica del
    ámbito que declara el nombre y reporta los errores que se detectan sin
    ejecutar nada.
    """

    def __init__(self, reporter: ErrorReporter, global_scope: GlobalScope | None = None):
        super().__init__()
        self.scopes = ScopeStack(global_scope or GlobalScope())
        self.reporter = reporter
        self._functions: List[FuncSymbol] = []
        # nombres no vistos aún; el global se consulta al terminar
        self._pending: List[Tuple[Identifier | Assign, int]] = []

    def define_symbol(self, sym: Symbol):
        if not self.scopes.current.define(sym):
            logger.debug("%s redeclarado en scope %s (profundidad %d)",
                         sym.name, self.scopes.current.kind, self.scopes.current.depth)

    def resolve_symbol(self, node: Identifier | Assign):
        sym = self.scopes.current.resolve(node.name)
        if sym is None:
            self._pending.append((node, self.scopes.current.depth))
        elif isinstance(sym, (VarSymbol, ParamSymbol)) and 0 < sym.depth < self.scopes.current.depth:
            # local de una función envolvente: lo captura una clausura
            sym.is_captured = True
        return sym

    def visitProgram(self, node: Program):
        for stmt in node.body:
            self.visit(stmt)
        self._check_pending()
        return self.scopes

    def _check_pending(self):
        root = self.scopes.root
        for ref, use_depth in self._pending:
            sym = root.symbols.get(ref.name)
            if sym is None:
                self.reporter.report(ref.line, ref.col, "E_UNDEF", f"Símbolo no definido: {ref.name}",
                                     name=ref.name, depth=use_depth)
            else:
                ref.depth = sym.depth
        self._pending.clear()

    def visitVarDecl(self, node: VarDecl):
        if node.init is not None:
            self.visit(node.init)
        scope = self.scopes.current
        node.depth = scope.depth
        self.define_symbol(VarSymbol(
            node.name, depth=scope.depth,
            is_initialized=node.init is not None,
            line=node.line, col=node.col,
        ))
        return None

    def visitFuncDecl(self, node: FuncDecl):
        depth = self.scopes.current.depth
        params = [
            ParamSymbol(pname, i, depth=depth + 1, line=node.line, col=node.col)
            for i, pname in enumerate(node.params)
        ]
        func_sym = FuncSymbol(node.name, params=params, depth=depth,
                              line=node.line, col=node.col)
        node.depth = depth
        self.define_symbol(func_sym)
        if self._functions:
            self._functions[-1].nested[node.name] = func_sym

        self.scopes.push_function(node.name)
        self._functions.append(func_sym)
        for psym in params:
            self.define_symbol(psym)
        for stmt in node.body:
            self.visit(stmt)
        self._functions.pop()
        self.scopes.pop()
        return None

    def visitReturn(self, node: Return):
        if not self.scopes.inside("function"):
            self.reporter.report(node.line, node.col, "E_RETURN", "return fuera de función",
                                 depth=self.scopes.current.depth)
        if node.value is not None:
            self.visit(node.value)
        return None

    def visitAssign(self, node: Assign):
        self.visit(node.value)
        sym = self.resolve_symbol(node)
        if sym is not None:
            node.depth = sym.depth
        return None

    def visitIdentifier(self, node: Identifier):
        sym = self.resolve_symbol(node)
        if sym is not None:
            node.depth = sym.depth
        return sym

    def visitCall(self, node: Call):
        sym = self.visit(node.callee)
        for arg in node.args:
            self.visit(arg)
        if isinstance(sym, FuncSymbol) and sym.arity != len(node.args):
            self.reporter.report(node.line, node.col, "E_ARITY",
                                 f"Número incorrecto de argumentos en {sym.name}: "
                                 f"se esperaban {sym.arity}, se pasaron {len(node.args)}",
                                 name=sym.name, depth=self.scopes.current.depth)
        return None


def build_scope_table(program: Program, reporter: ErrorReporter | None = None) -> Tuple[ScopeStack, ErrorReporter]:
    reporter = reporter or ErrorReporter()
    builder = ScopeTableBuilder(reporter)
    builder.visit(program)
    return builder.scopes, reporter
