from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(eq=False)
class Node:
    """
    Nodo del AST ya analizado por el front end externo.
    Implementa el protocolo de árbol de ANTLR (accept/getChildCount/getChild)
    para que los recorridos hereden de ParseTreeVisitor.
    """
    line: int = field(default=0, kw_only=True)
    col: int = field(default=0, kw_only=True)
    depth: Optional[int] = field(default=None, kw_only=True)  # profundidad léxica estática

    def children(self) -> List[Node]:
        return []

    def getChildCount(self) -> int:
        return len(self.children())

    def getChild(self, i: int) -> Node:
        return self.children()[i]

    def accept(self, visitor):
        method = getattr(visitor, "visit" + type(self).__name__, None)
        if method is None:
            return visitor.visitChildren(self)
        return method(self)


# Sentencias

@dataclass(eq=False)
class Program(Node):
    body: List[Node] = field(default_factory=list)

    def children(self):
        return list(self.body)


@dataclass(eq=False)
class VarDecl(Node):
    name: str = ""
    init: Optional[Node] = None

    def children(self):
        return [self.init] if self.init is not None else []


@dataclass(eq=False)
class FuncDecl(Node):
    name: str = ""
    params: List[str] = field(default_factory=list)
    body: List[Node] = field(default_factory=list)

    @property
    def arity(self) -> int:
        return len(self.params)

    def children(self):
        return list(self.body)


@dataclass(eq=False)
class Return(Node):
    value: Optional[Node] = None

    def children(self):
        return [self.value] if self.value is not None else []


@dataclass(eq=False)
class If(Node):
    cond: Optional[Node] = None
    then: List[Node] = field(default_factory=list)
    orelse: List[Node] = field(default_factory=list)

    def children(self):
        return [self.cond, *self.then, *self.orelse]


@dataclass(eq=False)
class ExprStmt(Node):
    expr: Optional[Node] = None

    def children(self):
        return [self.expr]


@dataclass(eq=False)
class Assign(Node):
    name: str = ""
    value: Optional[Node] = None

    def children(self):
        return [self.value]


# Expresiones

@dataclass(eq=False)
class Call(Node):
    callee: Optional[Identifier] = None
    args: List[Node] = field(default_factory=list)

    def children(self):
        return [self.callee, *self.args]


@dataclass(eq=False)
class Identifier(Node):
    name: str = ""


@dataclass(eq=False)
class IntLiteral(Node):
    value: int = 0


@dataclass(eq=False)
class BinaryOp(Node):
    op: str = "+"
    left: Optional[Node] = None
    right: Optional[Node] = None

    def children(self):
        return [self.left, self.right]


@dataclass(eq=False)
class UnaryOp(Node):
    op: str = "-"
    operand: Optional[Node] = None

    def children(self):
        return [self.operand]
