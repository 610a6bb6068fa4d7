"""Matrix multiplication by Strassen's seven-product scheme."""

from __future__ import annotations

from typing import Sequence

Matrix = list[list[int]]


def _add(a: Matrix, b: Matrix) -> Matrix:
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _sub(a: Matrix, b: Matrix) -> Matrix:
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _quadrants(m: Matrix) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    half = len(m) // 2
    top, bottom = m[:half], m[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _join(c11: Matrix, c12: Matrix, c21: Matrix, c22: Matrix) -> Matrix:
    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def _square(matrix: Sequence[Sequence[int]]) -> Matrix:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if size == 0 or any(len(row) != size for row in rows):
        raise ValueError("matrix must be square and non-empty")
    if size & (size - 1):
        raise ValueError("matrix size must be a power of two")
    return rows


def strassen_2x2(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two 2x2 matrices with seven multiplications."""
    (a11, a12), (a21, a22) = a
    (b11, b12), (b21, b22) = b
    p = (a11 + a22) * (b11 + b22)
    q = (a21 + a22) * b11
    r = a11 * (b12 - b22)
    s = a22 * (b21 - b11)
    t = (a11 + a12) * b22
    u = (a21 - a11) * (b11 + b12)
    v = (a12 - a22) * (b21 + b22)
    return [[p + s - t + v, r + t], [q + s, p - q + r + u]]


def strassen(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two square matrices whose size is a power of two."""
    left = _square(a)
    right = _square(b)
    if len(left) != len(right):
        raise ValueError("matrices must have the same size")
    size = len(left)
    if size == 1:
        return [[left[0][0] * right[0][0]]]
    if size == 2:
        return strassen_2x2(left, right)

    a11, a12, a21, a22 = _quadrants(left)
    b11, b12, b21, b22 = _quadrants(right)
    p1 = strassen(_add(a11, a22), _add(b11, b22))
    p2 = strassen(_add(a21, a22), b11)
    p3 = strassen(a11, _sub(b12, b22))
    p4 = strassen(a22, _sub(b21, b11))
    p5 = strassen(_add(a11, a12), b22)
    p6 = strassen(_sub(a21, a11), _add(b11, b12))
    p7 = strassen(_sub(a12, a22), _add(b21, b22))

    c11 = _add(_sub(_add(p1, p4), p5), p7)
    c12 = _add(p3, p5)
    c21 = _add(p2, p4)
    c22 = _add(_sub(_add(p1, p3), p2), p6)
    return _join(c11, c12, c21, c22)


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with each entry zero-padded to two digits."""
    return "\n".join(" ".join(f"{value:02d}" for value in row) for row in matrix)