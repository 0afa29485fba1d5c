"""Off-axis camera projection."""

from .utils import (
    ensure_vec3,
    ensure_4x4_matrix,
    to_column_major,
    matrix_is_finite,
)
from .projection import (
    build_frustum_projection_matrix,
    build_perspective_projection_matrix,
)
from .offaxis import (
    FrustumExtents,
    OffaxisProjectionCalculator,
    compute_frustum_extents,
    compute_offaxis_projection,
)

__all__ = [
    "ensure_vec3",
    "ensure_4x4_matrix",
    "to_column_major",
    "matrix_is_finite",
    "build_frustum_projection_matrix",
    "build_perspective_projection_matrix",
    "FrustumExtents",
    "OffaxisProjectionCalculator",
    "compute_frustum_extents",
    "compute_offaxis_projection",
]
