import argparse
import json
import logging
import sys

from matrix_simple import logger
from matrix_simple import matrix

main_logger = logger.get_logger("matrix_simple.main")


class InvalidOperationException(Exception):
    pass


def string_to_int(value):
    try:
        return int(value)
    except ValueError:
        raise InvalidOperationException("Expected an integer, got: %s" % value)


def parse_operation(operation):
    """Splits `name:arg:arg` into the name and its integer arguments."""
    parts = operation.split(":")
    name, args = parts[0], [string_to_int(p) for p in parts[1:]]
    expected = {
        "transpose": (0, 0),
        "reverse": (0, 1),
        "rotate": (0, 2),
        "row": (1, 1),
        "column": (1, 1),
        "size": (0, 0),
    }
    if name not in expected:
        raise InvalidOperationException("Unknown operation: %s" % operation)
    low, high = expected[name]
    if not (low <= len(args) <= high):
        raise InvalidOperationException(
            "Expected %s to %s arguments for %s, got: %s" % (low, high, name, operation))
    return name, args


def apply_operations(m, operations):
    """Applies `operations` left to right.

    Returns the resulting Matrix, or the row, column or size when the
    pipeline ends with one of those.
    """
    result = m
    for i, operation in enumerate(operations):
        name, args = parse_operation(operation)
        if not isinstance(result, matrix.Matrix):
            raise InvalidOperationException(
                "Nothing to apply %s to, %s must be last" % (operation, operations[i - 1]))
        main_logger.debug("Applying %s%s", name, tuple(args))
        if name == "transpose":
            result = result.transpose()
        elif name == "reverse":
            result = result.reverse(*args)
        elif name == "rotate":
            result = result.rotate(*args)
        elif name == "row":
            result = list(result.get_row(*args))
        elif name == "column":
            result = result.get_column(*args)
        elif name == "size":
            result = dict(result.size()._asdict())
    return result


def load_matrix(f):
    try:
        rows = json.load(f)
    except ValueError as e:
        raise InvalidOperationException("Invalid JSON input: %s" % e)
    if not isinstance(rows, list):
        raise InvalidOperationException(
            "Expected a JSON array of arrays, got: %s" % type(rows).__name__)
    return matrix.Matrix(rows)


def format_result(result, tablefmt=None, as_json=False):
    if as_json:
        if isinstance(result, matrix.Matrix):
            result = result.to_array()
        return json.dumps(result)
    if isinstance(result, matrix.Matrix):
        return result.to_table(tablefmt)
    if isinstance(result, dict):
        return "%(rows)s %(columns)s" % result
    return " ".join(str(v) for v in result)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Simple matrix operations')
    parser.add_argument('-f', '--file', type=argparse.FileType('r'), default=sys.stdin,
            help='JSON file holding a list of rows (default: stdin)')
    parser.add_argument('-t', '--tablefmt', default=None,
            help='tabulate table format')
    parser.add_argument('--json', action='store_true',
            help='print the result as JSON')
    parser.add_argument('-v', '--verbose', action='store_true',
            help='log at debug level')
    parser.add_argument('operations', nargs='+', metavar='OPERATION',
            help='transpose, reverse[:D], rotate[:D[:C]], row:N, column:N, size')
    args = parser.parse_args(argv)

    if args.verbose:
        logger.set_level(logging.DEBUG)

    try:
        with args.file as f:
            m = load_matrix(f)
        result = apply_operations(m, args.operations)
    except (InvalidOperationException, matrix.InvalidMatrixException,
            matrix.MatrixIndexException, ValueError) as e:
        main_logger.error(e)
        return 1
    print(format_result(result, args.tablefmt, args.json))
    return 0


if __name__ == '__main__':
    sys.exit(main())
