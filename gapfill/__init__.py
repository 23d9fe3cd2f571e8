__version__ = "0.1.0"

from gapfill._fields import FieldAccessor, attr_field, field, item_field
from gapfill.api import impute, impute_array, impute_frame, impute_records
from gapfill.linalg import SymmetricBandedMatrix
from gapfill.solver import build_system, fill_axis, solve_axis

__all__ = [
    "__version__",
    "impute",
    "impute_records",
    "impute_array",
    "impute_frame",
    "solve_axis",
    "fill_axis",
    "build_system",
    "FieldAccessor",
    "field",
    "item_field",
    "attr_field",
    "SymmetricBandedMatrix",
]
