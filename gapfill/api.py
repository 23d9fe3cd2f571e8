"""User-facing API for filling missing point coordinates."""

from __future__ import annotations

from typing import Hashable, Sequence

import numpy as np
import pandas as pd

from gapfill._fields import FieldSelector
from gapfill._preprocess import check_columns, check_fallback, to_axis_vector
from gapfill.solver import fill_axis, solve_axis


def impute(points, x, y, x0: float, y0: float, *, warn: bool = False) -> None:
    """
    Fill missing (NaN) x/y coordinates of ``points`` in place.

    Each axis is solved independently: gaps between two known values are
    filled with evenly spaced values, runs at either end are filled flat from
    the nearest known value, and an axis with no known values at all is
    filled with its fallback.

    Parameters
    ----------
    points : sequence of records, ndarray or DataFrame
        Points to update in place. Records may be dicts, lists or objects.
        For an ndarray, ``x`` and ``y`` are column indices; for a DataFrame
        they are column labels.
    x, y : str, int, hashable or FieldAccessor
        The x- and y-coordinate fields.
    x0, y0 : float
        The "central" values used when an axis has no known values.
    warn : bool
        Emit a RuntimeWarning when a fallback is used.

    Examples
    --------
    >>> points = [
    ...     {"x": 0.5, "y": 1.0},
    ...     {"x": 2.0, "y": float("nan")},
    ...     {"x": float("nan"), "y": 2.0},
    ...     {"x": 3.0, "y": 3.0},
    ... ]
    >>> impute(points, "x", "y", 0, 0)
    >>> points[1]["y"], points[2]["x"]
    (1.5, 2.5)
    """
    if isinstance(points, pd.DataFrame):
        impute_frame(points, x, y, x0, y0, warn=warn)
    elif isinstance(points, np.ndarray):
        filled = impute_array(points, x0, y0, columns=(x, y), copy=False, warn=warn)
        if filled is not points:
            # non-float input was cast to a new array
            points[:, [x, y]] = filled[:, [x, y]]
    else:
        impute_records(points, x, y, x0, y0, warn=warn)


def impute_records(
    points,
    x: FieldSelector,
    y: FieldSelector,
    x0: float,
    y0: float,
    *,
    warn: bool = False,
) -> None:
    """Fill missing fields of a sequence of records in place."""
    x0 = check_fallback(x0, "x0")
    y0 = check_fallback(y0, "y0")
    records = list(points)
    solve_axis(records, x, x0, warn=warn)
    solve_axis(records, y, y0, warn=warn)


def impute_array(
    X: np.ndarray,
    x0: float,
    y0: float,
    *,
    columns: Sequence[int] = (0, 1),
    copy: bool = True,
    warn: bool = False,
) -> np.ndarray:
    """
    Fill missing values in two columns of a 2D array.

    Parameters
    ----------
    X : ndarray of shape (n, m)
        Point array, m >= 2.
    x0, y0 : float
        Fallbacks for the x and y columns.
    columns : pair of int
        Column indices holding x and y.
    copy : bool
        If True, operate on a copy. If False, modify in place when possible.
        Non-floating inputs are always cast to float64, which allocates.

    Returns
    -------
    X_filled : ndarray of shape (n, m)
    """
    x0 = check_fallback(x0, "x0")
    y0 = check_fallback(y0, "y0")
    X = np.asarray(X)
    x_col, y_col = check_columns(X, columns)

    if not np.issubdtype(X.dtype, np.floating):
        X = X.astype(np.float64, copy=True)
    elif copy:
        X = X.copy()

    for col, fallback in ((x_col, x0), (y_col, y0)):
        values = X[:, col].astype(np.float64)
        missing = np.isnan(values)
        if missing.any():
            filled = fill_axis(values, fallback, warn=warn, name=f"column {col}")
            X[missing, col] = filled[missing]
    return X


def impute_frame(
    df: pd.DataFrame,
    x: Hashable,
    y: Hashable,
    x0: float,
    y0: float,
    *,
    warn: bool = False,
) -> None:
    """Fill missing values of columns ``x`` and ``y`` of ``df`` in place."""
    x0 = check_fallback(x0, "x0")
    y0 = check_fallback(y0, "y0")
    for col, fallback in ((x, x0), (y, y0)):
        values = to_axis_vector(df[col])
        missing = np.isnan(values)
        if not missing.any():
            continue
        filled = fill_axis(values, fallback, warn=warn, name=str(col))[missing]
        dtype = df[col].dtype
        if not pd.api.types.is_float_dtype(dtype):
            # integer/object columns cannot hold the interpolated values
            if isinstance(dtype, pd.api.extensions.ExtensionDtype):
                df[col] = df[col].astype("Float64")
            else:
                df[col] = df[col].astype(np.float64)
        elif isinstance(dtype, np.dtype):
            filled = filled.astype(dtype, copy=False)
        df.loc[missing, col] = filled
