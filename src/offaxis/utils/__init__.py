"""Common utilities for off-axis projection."""

from .conversion import to_torch_tensor
from .errors import (
    OffaxisError,
    MissingDependencyError,
    DegenerateGeometryError,
)
from .validation import (
    validate_references,
    validate_finite,
    validate_frustum_extents,
    check_corners_coplanar,
)
from .projection_2d import (
    world_to_view_unrotated,
    project_points_to_ndc,
    project_points_to_screen,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
)

__all__ = [
    # Conversion
    "to_torch_tensor",
    
    # Errors
    "OffaxisError",
    "MissingDependencyError",
    "DegenerateGeometryError",
    
    # Validation
    "validate_references",
    "validate_finite",
    "validate_frustum_extents",
    "check_corners_coplanar",
    
    # Projection
    "world_to_view_unrotated",
    "project_points_to_ndc",
    "project_points_to_screen",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
]
