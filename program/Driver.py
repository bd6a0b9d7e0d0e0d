import logging
import sys

from program.runtime.error_reporter import ErrorReporter
from program.runtime.errors import ClosureRuntimeError
from program.runtime.evaluator import Evaluator, EvaluatorOptions
from program.runtime.loader import load_program_file
from program.runtime.scope_table import ScopeTableBuilder
from program.runtime.table import print_symbol_table


def parse_options(argv):
    options = EvaluatorOptions()
    args = list(argv[2:])
    while args:
        flag = args.pop(0)
        if flag == "--trace":
            options.trace = True
        elif flag == "--max-depth" and args:
            options.max_depth = int(args.pop(0))
        elif flag == "--max-depth":
            raise ValueError("--max-depth requiere un número")
        else:
            raise ValueError(f"Opción desconocida: {flag}")
    return options


USAGE = "Uso: python -m program.Driver <programa.json> [--trace] [--max-depth N]"


def main(argv):
    if len(argv) < 2:
        print(USAGE)
        return 2

    try:
        options = parse_options(argv)
    except ValueError as e:
        print(f"{e}\n{USAGE}")
        return 2
    logging.basicConfig(
        level=logging.INFO if options.trace else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        program = load_program_file(argv[1])
    except ClosureRuntimeError as e:
        print(f"\nÁrbol inválido: {e}")
        return 1

    reporter = ErrorReporter()
    builder = ScopeTableBuilder(reporter)
    builder.visit(program)

    if reporter.has_errors():
        print("\nErrores encontrados en la tabla de ámbitos:")
        for e in reporter:
            print("   ", e)
        print_symbol_table(builder.scopes)
        return 1

    try:
        result = Evaluator(options).run(program)
    except ClosureRuntimeError as e:
        print(f"\nError en ejecución: {e}")
        return 1

    print(f"\nResultado: {result}")
    print_symbol_table(builder.scopes)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
