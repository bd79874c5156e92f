"""Gaussian elimination and back substitution on augmented matrices."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_TOLERANCE = np.float32(1e-5)


class ZeroPivotError(ArithmeticError):
    """Raised when a diagonal pivot is zero at the start of an elimination step."""

    def __init__(self, row: int) -> None:
        super().__init__("pivot is zero")
        self.row = row


def _as_augmented(mat) -> np.ndarray:
    m = np.array(mat, dtype=np.float32)
    if m.ndim != 2 or m.shape[1] != m.shape[0] + 1:
        raise ValueError("expected an n x (n+1) augmented matrix")
    return m


def gaussian_elimination(mat) -> np.ndarray:
    """Reduce an augmented matrix to upper-triangular form.

    The pivot row is rescaled for every row it eliminates, and entries whose
    magnitude falls below 1e-5 are set to zero after each row operation.
    Returns a new float32 array; the input is left untouched.
    """
    m = _as_augmented(mat)
    n = m.shape[0]
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(n - 1):
            if m[i, i] == 0:
                raise ZeroPivotError(i)
            for j in range(i + 1, n):
                m[i] *= -m[j, i] / m[i, i]
                m[j] += m[i]
                m[np.abs(m) < _TOLERANCE] = 0
    return m


def back_substitution(mat) -> np.ndarray:
    """Solve an upper-triangular augmented system, returning the unknowns."""
    m = _as_augmented(mat)
    n = m.shape[0]
    x = np.zeros(n, dtype=np.float32)
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(n):
            row = n - i - 1
            q = m[row, :n][::-1] @ x if i else np.float32(0)
            x[i] = (m[row, n] - q) / m[row, row]
    return x[::-1].copy()


def solve(a, b) -> np.ndarray:
    """Solve ``a @ x = b`` by elimination followed by back substitution."""
    a = np.asarray(a, dtype=np.float32)
    b = np.asarray(b, dtype=np.float32).reshape(-1)
    if a.ndim != 2 or a.shape[0] != a.shape[1] or b.shape[0] != a.shape[0]:
        raise ValueError("expected a square matrix and a matching right-hand side")
    return back_substitution(gaussian_elimination(np.column_stack([a, b])))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve a fixed 4x4 example system and print each stage."""
    a = np.array(
        [[3, 5, 7, 9],
         [2, 8, 4, 6],
         [1, 3, 9, 2],
         [4, 6, 8, 5]],
        dtype=np.float32,
    )
    b = np.array([10, 20, 30, 40], dtype=np.float32)
    augment = np.column_stack([a, b])
    print(augment)
    try:
        reduced = gaussian_elimination(augment)
    except ZeroPivotError as exc:
        print(exc)
        return 1
    print(reduced)
    print(back_substitution(reduced))
    return 0