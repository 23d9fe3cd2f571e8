"""Per-axis gap filling via a pinned discrete Laplacian.

Each unknown value is constrained to be the average of its neighbours and
each known value is pinned by an identity row. Between two pins this yields
the evenly spaced (linear) interpolant; a run of unknowns touching either end
of the sequence is filled flat from the nearest pin.
"""

from __future__ import annotations

import warnings
from typing import Optional, Tuple

import numpy as np

from gapfill._fields import FieldSelector, field as make_field
from gapfill._preprocess import check_fallback, to_axis_vector
from gapfill.linalg import SymmetricBandedMatrix


def build_system(values: np.ndarray) -> Tuple[SymmetricBandedMatrix, np.ndarray, int]:
    """
    Assemble the tridiagonal system for one axis.

    Parameters
    ----------
    values : ndarray of shape (n,)
        Axis vector; NaN marks a missing value.

    Returns
    -------
    matrix : SymmetricBandedMatrix
        Second-difference stencil with known rows replaced by identity rows.
    rhs : ndarray of shape (n,)
        Right-hand side, already adjusted for the eliminated couplings.
    n_known : int
        Number of pinned rows.
    """
    values = np.asarray(values, dtype=np.float64)
    n = len(values)
    matrix = SymmetricBandedMatrix(n, 1)
    rhs = np.zeros(n, dtype=np.float64)
    if n == 0:
        return matrix, rhs, 0

    matrix.band(0).fill(2.0)
    matrix.band(1).fill(-1.0)
    matrix.set(0, 0, 1.0)
    matrix.set(n - 1, n - 1, 1.0)

    known = np.flatnonzero(~np.isnan(values))
    for i in known:
        value = values[i]
        rhs[i] = value
        matrix.set(i, i, 1.0)
        # Zero the coupling on both sides of the diagonal and move it to the
        # neighbour's rhs so the matrix stays symmetric.
        if i > 0:
            coef = matrix.set(i, i - 1, 0.0)
            if coef:
                rhs[i - 1] -= coef * value
        if i + 1 < n:
            coef = matrix.set(i, i + 1, 0.0)
            if coef:
                rhs[i + 1] -= coef * value

    return matrix, rhs, len(known)


def fill_axis(
    values,
    fallback: float,
    *,
    warn: bool = False,
    name: Optional[str] = None,
) -> np.ndarray:
    """
    Return a copy of ``values`` with every NaN resolved.

    Known entries are copied through unchanged. If no entry is known the
    system has no unique solution and every entry becomes ``fallback``.
    """
    values = np.asarray(values, dtype=np.float64)
    out = values.copy()
    missing = np.isnan(values)
    if not missing.any():
        return out

    if missing.all():
        if warn:
            label = f"'{name}'" if name is not None else "axis"
            warnings.warn(
                f"No known values for {label} ({len(values)} points); filling with {fallback}.",
                RuntimeWarning,
                stacklevel=2,
            )
        out.fill(fallback)
        return out

    matrix, rhs, _ = build_system(values)
    matrix.factor()
    matrix.solve(rhs)
    out[missing] = rhs[missing]
    return out


def solve_axis(points, field: FieldSelector, fallback: float, *, warn: bool = False) -> None:
    """
    Fill the missing values of one field across ``points``, in place.

    Parameters
    ----------
    points : sequence of records
        Ordered records; neighbours in the sequence are neighbours on the path.
    field : str, int, hashable or FieldAccessor
        Which field to fill (see ``gapfill._fields.field``).
    fallback : float
        Value used when no record has a known value for this field.
    warn : bool
        Emit a RuntimeWarning when ``fallback`` is used.
    """
    fallback = check_fallback(fallback, "fallback")
    accessor = make_field(field)
    records = list(points)
    if not records:
        return

    values = to_axis_vector([accessor.get(record) for record in records])
    filled = fill_axis(values, fallback, warn=warn, name=accessor.name)

    for i in np.flatnonzero(np.isnan(values)):
        accessor.set(records[i], float(filled[i]))
