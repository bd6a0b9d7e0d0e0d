from program.runtime.error_reporter import ErrorReporter
from program.runtime.evaluator import Evaluator, EvaluatorOptions
from program.runtime.nodes import (
    BinaryOp, Call, ExprStmt, FuncDecl, Identifier, If, IntLiteral, Program,
    Return, VarDecl,
)
from program.runtime.scope_table import ScopeTableBuilder


def ident(name, line=0):
    return Identifier(name, line=line)


def num(value):
    return IntLiteral(value)


def add(lhs, rhs):
    return BinaryOp("+", lhs, rhs)


def call(name, *args, line=0):
    return Call(ident(name, line), list(args), line=line)


def foo_decl():
    """
    int foo(int a, int b) = {
        if(a == 0 || b == 0) return 0;
        int x = a + b;
        int bar(int c) = { return z + x + c; };
        int z = 5;
        int temp = foo(a - 1, b - 1);
        bar(x) + temp + z
    };
    """
    return FuncDecl("foo", ["a", "b"], [
        If(
            BinaryOp("||",
                     BinaryOp("==", ident("a"), num(0)),
                     BinaryOp("==", ident("b"), num(0))),
            [Return(num(0), line=4)],
            line=4,
        ),
        VarDecl("x", add(ident("a"), ident("b")), line=5),
        FuncDecl("bar", ["c"], [
            Return(add(add(ident("z", 8), ident("x", 8)), ident("c", 8)), line=8),
        ], line=7),
        VarDecl("z", num(5), line=10),
        VarDecl("temp", call("foo",
                             BinaryOp("-", ident("a"), num(1)),
                             BinaryOp("-", ident("b"), num(1)), line=11), line=11),
        ExprStmt(add(add(call("bar", ident("x"), line=12), ident("temp")), ident("z", 12)), line=12),
    ], line=3)


def closure_fixture(a=1, b=2):
    """z = 10 global, foo como arriba, y la llamada de nivel superior foo(a, b)."""
    return Program([
        VarDecl("z", num(10), line=1),
        foo_decl(),
        ExprStmt(call("foo", num(a), num(b), line=15), line=15),
    ])


def run_source(program, **opts):
    """Evalúa un Program y devuelve (resultado, evaluator)."""
    evaluator = Evaluator(EvaluatorOptions(**opts))
    return evaluator.run(program), evaluator


def build_table(program):
    reporter = ErrorReporter()
    builder = ScopeTableBuilder(reporter)
    builder.visit(program)
    return reporter, builder
