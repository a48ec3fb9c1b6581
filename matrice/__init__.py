from .arrays import from_array, from_frame, orbit_frame, to_array, to_frame
from .errors import DimensionMismatch, IndexOutOfBounds
from .matrix import Matrix, orbit

__all__ = [
    "DimensionMismatch",
    "IndexOutOfBounds",
    "Matrix",
    "from_array",
    "from_frame",
    "orbit",
    "orbit_frame",
    "to_array",
    "to_frame",
]
