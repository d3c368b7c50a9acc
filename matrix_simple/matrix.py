import collections.abc

import tabulate

from matrix_simple import config
from matrix_simple import logger

matrix_logger = logger.get_logger("matrix_simple.matrix")


class InvalidMatrixException(Exception):
    pass


class EmptyMatrixException(InvalidMatrixException):
    pass


class MatrixIndexException(IndexError):
    pass


Size = collections.namedtuple("Size", ["rows", "columns"])


class Matrix(object):
    """A dense two-dimensional grid of arbitrary values.

    Wrapping an existing list of rows (`Matrix(rows)`, `Matrix.from_rows`)
    copies the outer list only: the row lists themselves are shared with the
    caller. Every transform (`transpose`, `reverse`, `rotate`) and `copy` /
    `to_array` copy each row, so their results never share a row with the
    source.
    """

    def __init__(self, rows=None):
        if rows is None:
            rows = []
        if not self._is_sequence(rows) or \
                not all(self._is_sequence(row) for row in rows):
            raise InvalidMatrixException(
                "Expected a sequence of rows, got: %r" % (rows,))
        self.rows = list(rows)

    @classmethod
    def from_rows(cls, rows):
        return cls(rows)

    @classmethod
    def create(cls, rows, columns=None, value=0):
        """Returns a new `rows` x `columns` matrix with every element set to `value`.

        `columns` defaults to `rows`. Every cell holds the same `value` object,
        so a mutable value is shared by all cells.

        Also callable on an instance, in which case the instance is ignored:
        `Matrix.create(3, 3, 2).create(2, 5, 4)` is a 2x5 matrix of 4s.
        """
        if columns is None:
            columns = rows
        matrix_logger.debug("Creating %sx%s matrix of %r", rows, columns, value)
        return cls([[value for _ in range(columns)] for _ in range(rows)])

    filled = create

    @property
    def num_rows(self):
        return self.size().rows

    @property
    def num_cols(self):
        return self.size().columns

    def size(self):
        """Returns `Size(rows, columns)`.

        Raises `EmptyMatrixException` when there are no rows and
        `InvalidMatrixException` when the rows differ in length.
        """
        if not self.rows:
            raise EmptyMatrixException("Matrix has no rows")
        row_sizes = {len(row) for row in self.rows}
        if len(row_sizes) > 1:
            raise InvalidMatrixException("Multiple row sizes found: %s" % row_sizes)
        return Size(len(self.rows), len(self.rows[0]))

    def get_row(self, index):
        """Returns the row at `index` itself, not a copy."""
        self._check_row(index)
        return self.rows[index]

    def get_column(self, index):
        self._check_col(index)
        return [row[index] for row in self.rows]

    def get(self, row, col):
        self._check_row(row)
        self._check_col(col)
        return self.rows[row][col]

    def set(self, row, col, value):
        self._check_row(row)
        self._check_col(col)
        if not isinstance(self.rows[row], collections.abc.MutableSequence):
            raise InvalidMatrixException(
                "Row %s is read-only: %s" % (row, type(self.rows[row]).__name__))
        self.rows[row][col] = value
        return self

    def loop(self, callback):
        """Calls `callback(row_index, column_index, value)` for every element.

        Elements are visited in row-major order. Returns the matrix.
        """
        if not callable(callback):
            raise TypeError("callback must be callable, got: %r" % (callback,))
        for row_index, row in enumerate(self.rows):
            for column_index, value in enumerate(row):
                callback(row_index, column_index, value)
        return self

    def transpose(self):
        rows, columns = self.size()
        matrix_logger.debug("Transposing %sx%s matrix", rows, columns)
        source = self._copy_rows()
        new_rows = [[None] * rows for _ in range(columns)]
        for i in range(columns):
            for j in range(rows):
                new_rows[i][j] = source[j][i]
        return self.__class__(new_rows)

    def reverse(self, direction=1):
        """Flips each row when `direction > 0`, the row order otherwise."""
        new_rows = self._copy_rows()
        if direction > 0:
            for row in new_rows:
                row.reverse()
        else:
            new_rows.reverse()
        return self.__class__(new_rows)

    def rotate(self, direction=1, cycle=1):
        """Rotates by 90 degrees `cycle` times.

        Clockwise when `direction > 0`, counter-clockwise otherwise.
        """
        if isinstance(cycle, bool) or not isinstance(cycle, int) or cycle < 0:
            raise ValueError("Expected a non-negative integer cycle, got: %r" % (cycle,))
        matrix_logger.debug("Rotating matrix, direction: %s, cycle: %s", direction, cycle)
        matrix = self.copy()
        for _ in range(cycle):
            matrix = matrix.transpose().reverse(direction)
        return matrix

    def to_array(self):
        return self._copy_rows()

    def copy(self):
        return self.__class__(self._copy_rows())

    def to_table(self, tablefmt=None):
        if tablefmt is None:
            tablefmt = config.TABLE_FORMAT
        return tabulate.tabulate(self.rows, tablefmt=tablefmt)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self.rows) != len(other.rows):
            return False
        for i in range(len(self.rows)):
            if list(self.rows[i]) != list(other.rows[i]):
                return False
        return True

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, [list(row) for row in self.rows])

    def __str__(self):
        return self.to_table()

    def _copy_rows(self):
        return [list(row) for row in self.rows]

    def _check_row(self, row):
        if not self._is_index(row) or not 0 <= row < len(self.rows):
            raise MatrixIndexException(
                "Row index %r out of range for %s rows" % (row, len(self.rows)))

    def _check_col(self, col):
        columns = self.size().columns
        if not self._is_index(col) or not 0 <= col < columns:
            raise MatrixIndexException(
                "Column index %r out of range for %s columns" % (col, columns))

    @staticmethod
    def _is_index(value):
        return isinstance(value, int) and not isinstance(value, bool)

    @staticmethod
    def _is_sequence(value):
        return isinstance(value, collections.abc.Sequence) and \
            not isinstance(value, (str, bytes))
