"""Symmetric banded matrices backed by LAPACK."""

from __future__ import annotations

import numpy as np
from numpy.linalg import LinAlgError
from scipy.linalg import cho_solve_banded, cholesky_banded, get_lapack_funcs


class SymmetricBandedMatrix:
    """
    Symmetric n x n matrix stored in upper banded form.

    Only the main diagonal and ``u`` superdiagonals are stored, using the
    LAPACK convention ``ab[u + i - j, j] == a[i, j]`` for ``i <= j``. Each
    symmetric pair shares one storage cell, so writing ``(i, j)`` also
    writes ``(j, i)``.

    Parameters
    ----------
    n : int
        Matrix dimension.
    u : int
        Number of stored superdiagonals (1 for tridiagonal).
    """

    def __init__(self, n: int, u: int = 1):
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if u < 0:
            raise ValueError(f"u must be non-negative, got {u}")
        self._n = int(n)
        self._u = int(u)
        self._ab = np.zeros((self._u + 1, self._n), dtype=np.float64)
        self._factored = False

    @property
    def dim(self) -> int:
        return self._n

    @property
    def bandwidth(self) -> int:
        return self._u

    @property
    def factored(self) -> bool:
        return self._factored

    def _check_mutable(self):
        if self._factored:
            raise RuntimeError("Matrix has been factored; entries are no longer accessible.")

    def _cell(self, i: int, j: int):
        if not (0 <= i < self._n and 0 <= j < self._n):
            raise IndexError(f"Index ({i}, {j}) out of range for {self._n}x{self._n} matrix")
        if i > j:
            i, j = j, i
        offset = j - i
        if offset > self._u:
            return None
        return self._u - offset, j

    def band(self, k: int) -> np.ndarray:
        """Writable view of diagonal ``k`` (0 = main), length ``n - k``."""
        self._check_mutable()
        if not 0 <= k <= self._u:
            raise IndexError(f"Band {k} not stored (bandwidth={self._u})")
        return self._ab[self._u - k, k:]

    def get(self, i: int, j: int) -> float:
        self._check_mutable()
        cell = self._cell(i, j)
        if cell is None:
            return 0.0
        return float(self._ab[cell])

    def set(self, i: int, j: int, value: float) -> float:
        """Set entry ``(i, j)`` and its mirror; return the previous value."""
        self._check_mutable()
        cell = self._cell(i, j)
        if cell is None:
            if value != 0:
                raise IndexError(
                    f"Entry ({i}, {j}) lies outside the stored band (bandwidth={self._u})"
                )
            return 0.0
        previous = float(self._ab[cell])
        self._ab[cell] = value
        return previous

    def factor(self) -> None:
        """
        Factor in place; raises LinAlgError if not positive definite.

        Tridiagonal matrices use the square-root free L D L^T routine
        (``?pttrf``), so small integer systems solve exactly. Wider bands use
        banded Cholesky.
        """
        self._check_mutable()
        if self._n and self._u == 1:
            pttrf, = get_lapack_funcs(("pttrf",), (self._ab,))
            d, e, info = pttrf(self._ab[1], self._ab[0, 1:])
            if info > 0:
                raise LinAlgError(f"{info}th leading minor not positive definite")
            if info < 0:
                raise ValueError(f"illegal value in {-info}th argument of internal pttrf")
            self._ab[1] = d
            self._ab[0, 1:] = e
        elif self._n:
            self._ab = cholesky_banded(
                self._ab, overwrite_ab=True, lower=False, check_finite=False
            )
        self._factored = True

    def solve(self, rhs: np.ndarray) -> np.ndarray:
        """Overwrite ``rhs`` with the solution of ``A x = rhs`` and return it."""
        if not self._factored:
            raise RuntimeError("Call factor() before solve().")
        if rhs.shape != (self._n,):
            raise ValueError(f"rhs has shape {rhs.shape}, expected ({self._n},)")
        if not self._n:
            return rhs
        if self._u == 1:
            pttrs, = get_lapack_funcs(("pttrs",), (self._ab, rhs))
            x, info = pttrs(self._ab[1], self._ab[0, 1:], rhs)
            if info < 0:
                raise ValueError(f"illegal value in {-info}th argument of internal pttrs")
            rhs[:] = np.reshape(x, rhs.shape)
        else:
            rhs[:] = cho_solve_banded((self._ab, False), rhs, check_finite=False)
        return rhs

    def to_dense(self) -> np.ndarray:
        """Dense copy of the (unfactored) matrix."""
        self._check_mutable()
        dense = np.zeros((self._n, self._n), dtype=np.float64)
        for k in range(self._u + 1):
            diag = self._ab[self._u - k, k:]
            idx = np.arange(self._n - k)
            dense[idx, idx + k] = diag
            dense[idx + k, idx] = diag
        return dense

    def __repr__(self) -> str:
        state = "factored" if self._factored else "assembled"
        return f"SymmetricBandedMatrix(n={self._n}, u={self._u}, {state})"
