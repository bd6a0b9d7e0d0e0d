from __future__ import annotations
import logging
import sys
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from antlr4.tree.Tree import ParseTreeVisitor

from .closures import Closure, make_closure
from .errors import (
    ArityMismatchError, CapturedMutationError, EvaluationError,
    NotCallableError, RecursionDepthError,
)
from .nodes import (
    Assign, BinaryOp, Call, ExprStmt, FuncDecl, Identifier, If, IntLiteral,
    Node, Program, Return, UnaryOp, VarDecl,
)
from .operators import LOGICAL_OPS, apply_binary, apply_unary, truthy
from .records import ActivationRecord
from .resolver import Resolver

logger = logging.getLogger(__name__)

# marcos de Python que consume, en promedio, una llamada del lenguaje
FRAMES_PER_CALL = 40
# tope para no agotar la pila de C
MAX_RECURSION_LIMIT = 6000


class ReturnSignal(Exception):
    def __init__(self, value):
        self.value = value


@dataclass
class EvaluatorOptions:
    max_depth: int = 64
    trace: bool = False
    track_closures: bool = False


class Evaluator(ParseTreeVisitor):
    """
    Evaluador por recorrido del árbol. Cada llamada crea un registro nuevo
    cuyo padre es la cadena capturada por la clausura invocada; cada
    declaración de función anidada construye una clausura nueva sobre el
    registro en ejecución.
    """

    def __init__(self, options: EvaluatorOptions | None = None,
                 global_record: ActivationRecord | None = None):
        super().__init__()
        self.options = options or EvaluatorOptions()
        self.global_record = global_record or ActivationRecord.create()
        self.resolver = Resolver(self.global_record)
        self.current: ActivationRecord = self.global_record
        # registros de las llamadas activas; el global siempre está al fondo
        self.call_stack: List[ActivationRecord] = [self.global_record]
        self.closure_count = 0
        self.record_count = 0
        self.closures: List[Closure] = []
        self.records: List[ActivationRecord] = []
        self._log = logger.info if self.options.trace else logger.debug
        self._ensure_recursion_limit()

    def _ensure_recursion_limit(self):
        needed = min(self.options.max_depth * FRAMES_PER_CALL + 200, MAX_RECURSION_LIMIT)
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)

    # Entrada pública

    def run(self, program: Program) -> Any:
        return self.visit(program)

    def call(self, callee: Any, args: Sequence[Any], site: Node | None = None) -> Any:
        line, col = (site.line, site.col) if site is not None else (0, 0)

        if isinstance(callee, Closure):
            decl, parent = callee.decl, callee.parent
        elif isinstance(callee, FuncDecl):
            # referencia ordinaria sin captura: el padre es el registro del llamador
            decl, parent = callee, self.current.view()
        else:
            raise NotCallableError(f"{callee!r} no es una función", line, col)

        if len(args) != decl.arity:
            raise ArityMismatchError(decl.name, decl.arity, len(args), line, col)
        if self.depth >= self.options.max_depth:
            raise RecursionDepthError(
                f"Profundidad máxima de llamadas ({self.options.max_depth}) excedida en {decl.name}",
                line, col,
            )

        # Entrada
        record = ActivationRecord.create(parent, label=f"{decl.name}#{self.record_count}")
        self.record_count += 1
        if self.options.track_closures:
            self.records.append(record)
        for pname, value in zip(decl.params, args):
            record.declare(pname, value)

        self._log("enter %s%s depth=%d", decl.name, tuple(args), self.depth + 1)
        caller = self.current
        self.current = record
        self.call_stack.append(record)
        try:
            # Cuerpo
            result = self.execute_block(decl.body)
        except ReturnSignal as ret:
            result = ret.value
        except RecursionError:
            # la pila de Python se agotó antes que max_depth
            raise RecursionDepthError(
                f"Pila agotada a profundidad {self.depth} en {decl.name}", line, col
            ) from None
        finally:
            self.call_stack.pop()
            self.current = caller
        # Retorno
        self._log("exit %s -> %r", decl.name, result)
        return result

    @property
    def depth(self) -> int:
        return len(self.call_stack) - 1

    def execute_block(self, stmts: Sequence[Node]) -> Any:
        """Ejecuta en orden; el valor es el de la última expresión."""
        result = None
        for stmt in stmts:
            value = self.visit(stmt)
            result = value if isinstance(stmt, (ExprStmt, If)) else None
        return result

    # Sentencias

    def visitProgram(self, node: Program):
        result = None
        try:
            for stmt in node.body:
                value = self.visit(stmt)
                if isinstance(stmt, ExprStmt):
                    result = value
        except ReturnSignal:
            raise EvaluationError("return fuera de función", code="E_RETURN") from None
        return result

    def visitVarDecl(self, node: VarDecl):
        value = self.visit(node.init) if node.init is not None else None
        self.current.declare(node.name, value)
        return None

    def visitFuncDecl(self, node: FuncDecl):
        # el nombre se liga antes de capturar para permitir recursión
        binding = self.current.declare(node.name, None)
        closure = make_closure(node, self.current)
        binding.value = closure
        self.closure_count += 1
        if self.options.track_closures:
            self.closures.append(closure)
        self._log("closure %s over %s", node.name, self.current.label)
        return None

    def visitReturn(self, node: Return):
        value = self.visit(node.value) if node.value is not None else None
        raise ReturnSignal(value)

    def visitIf(self, node: If):
        if truthy(self.visit(node.cond)):
            return self.execute_block(node.then)
        return self.execute_block(node.orelse)

    def visitExprStmt(self, node: ExprStmt):
        return self.visit(node.expr)

    def visitAssign(self, node: Assign):
        binding = self.resolver.resolve(node.name, self.current, node.line, node.col)
        if not any(binding.owner is rec for rec in self.call_stack):
            raise CapturedMutationError(
                f"{node.name} pertenece a {binding.owner.label}, que ya no está activo",
                node.line, node.col,
            )
        binding.value = self.visit(node.value)
        return None

    # Expresiones

    def visitCall(self, node: Call):
        callee = self.visit(node.callee)
        args = [self.visit(a) for a in node.args]
        return self.call(callee, args, node)

    def visitIdentifier(self, node: Identifier):
        return self.resolver.resolve(node.name, self.current, node.line, node.col).value

    def visitIntLiteral(self, node: IntLiteral):
        return node.value

    def visitBinaryOp(self, node: BinaryOp):
        if node.op in LOGICAL_OPS:
            lhs = truthy(self.visit(node.left))
            if node.op == "&&" and not lhs:
                return False
            if node.op == "||" and lhs:
                return True
            return truthy(self.visit(node.right))
        lhs = self.visit(node.left)
        rhs = self.visit(node.right)
        return apply_binary(node.op, lhs, rhs, node.line, node.col)

    def visitUnaryOp(self, node: UnaryOp):
        return apply_unary(node.op, self.visit(node.operand), node.line, node.col)


def evaluate(program: Program, options: Optional[EvaluatorOptions] = None) -> Any:
    return Evaluator(options).run(program)
