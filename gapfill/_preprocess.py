"""Input conversion and validation."""

from __future__ import annotations

import math
from numbers import Real
from typing import Sequence, Tuple

import numpy as np
import pandas as pd


def check_fallback(value, name: str) -> float:
    """Fallbacks must be finite real scalars."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a finite real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def to_axis_vector(data) -> np.ndarray:
    """Convert a column/list of scalars to a fresh float64 vector, NA -> NaN."""
    if isinstance(data, (pd.Series, pd.Index)):
        try:
            return data.to_numpy(dtype=np.float64, na_value=np.nan, copy=True)
        except TypeError:
            arr = data.to_numpy()
            if arr.dtype == object:
                arr = np.where(pd.isna(arr), np.nan, arr)
            return arr.astype(np.float64)
    return np.array(data, dtype=np.float64)


def check_columns(X: np.ndarray, columns: Sequence[int]) -> Tuple[int, int]:
    if X.ndim != 2:
        raise ValueError(f"impute_array expects 2D array, got ndim={X.ndim}")
    if len(columns) != 2:
        raise ValueError(f"columns must name exactly two columns, got {list(columns)}")
    m = X.shape[1]
    resolved = []
    for col in columns:
        col = int(col)
        if not -m <= col < m:
            raise ValueError(f"Column index {col} out of range for array with {m} columns")
        resolved.append(col % m)
    return resolved[0], resolved[1]
