"""Banded linear-algebra primitives."""

from gapfill.linalg.banded import SymmetricBandedMatrix

__all__ = ["SymmetricBandedMatrix"]
