"""
Determinants over mixed scalar / vector entries.

The cross product of n-1 vectors in n dimensions is the determinant of the
matrix whose first row holds the unit vectors and whose remaining rows hold
the operands, expanded along the first row.
"""

import numpy as np
from typing import List, Sequence, Union

from ..exceptions import DimensionMismatchError
from .scalar import Scalar
from .vector import Vector

Value = Union[Scalar, Vector]


def units(dimension: int) -> List[Vector]:
    """The standard basis of the given dimension"""
    return [Vector(row) for row in np.eye(dimension)]


def determinant(matrix: Sequence[Value]) -> Value:
    """
    Determinant of a square matrix given as a flat, row-major sequence.

    Args:
        matrix: n*n entries, each a Scalar or a Vector

    Returns:
        A Scalar, or a Vector when the first row holds vectors
    """
    size = int(round(np.sqrt(len(matrix))))
    if size == 0 or size * size != len(matrix):
        raise ValueError(f"Matrix with {len(matrix)} entries is not square")

    if size == 1:
        return matrix[0]

    result = None
    for column in range(size):
        minor = [
            entry for index, entry in enumerate(matrix)
            if index >= size and index % size != column
        ]
        term = determinant(minor) * matrix[column]
        if result is None:
            result = term
        elif column % 2 == 0:
            result = result + term
        else:
            result = result - term
    return result


def cross(vectors: Sequence[Vector]) -> Value:
    """Generalized cross product of n-1 vectors of dimension n"""
    dimension = len(vectors) + 1
    for vector in vectors:
        if vector.dimension != dimension:
            raise DimensionMismatchError(
                f"Cross product of {len(vectors)} vectors needs {dimension}-dimensional operands",
                details={'expected': dimension, 'actual': vector.dimension}
            )

    matrix: List[Value] = list(units(dimension))
    matrix.extend(Scalar(component) for vector in vectors for component in vector)
    return determinant(matrix)
