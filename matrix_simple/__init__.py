from matrix_simple.matrix import EmptyMatrixException
from matrix_simple.matrix import InvalidMatrixException
from matrix_simple.matrix import Matrix
from matrix_simple.matrix import MatrixIndexException
from matrix_simple.matrix import Size

__version__ = "0.1.0"
