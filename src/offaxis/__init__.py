"""
offaxis - Off-axis projection for LED-wall and rear-projection rigs

Computes an asymmetric perspective projection so an image rendered onto a
fixed planar screen looks correct from a tracked physical viewpoint.

Components:
    - Camera: Frustum extents, projection matrices, the calculator
    - Core: Scene transforms, render camera, per-frame component, config
    - Utils: Validation, errors, point projection, conversion, debug

Example:
    >>> from offaxis import OffaxisProjectionCalculator
    >>> 
    >>> calc = OffaxisProjectionCalculator()
    >>> proj, near = calc.compute(
    ...     viewpoint=[0, 0, 0],
    ...     screen_bottom_left=[-1, -1, 5],
    ...     screen_top_right=[1, 1, 5],
    ...     far_clip=100.0,
    ... )
"""

__version__ = "1.0.0"

# Camera
from .camera import (
    FrustumExtents,
    OffaxisProjectionCalculator,
    compute_frustum_extents,
    compute_offaxis_projection,
    build_frustum_projection_matrix,
    build_perspective_projection_matrix,
    matrix_is_finite,
)

# Core
from .core import (
    Transform,
    RenderCamera,
    OffaxisProjection,
    OffaxisConfig,
    load_config,
    make_offaxis_matrices_from_yaml,
    linear_viewpoint_path,
)

# Utils
from .utils import (
    OffaxisError,
    MissingDependencyError,
    DegenerateGeometryError,
    project_points_to_ndc,
    project_points_to_screen,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",
    
    # Camera
    "FrustumExtents",
    "OffaxisProjectionCalculator",
    "compute_frustum_extents",
    "compute_offaxis_projection",
    "build_frustum_projection_matrix",
    "build_perspective_projection_matrix",
    "matrix_is_finite",
    
    # Core
    "Transform",
    "RenderCamera",
    "OffaxisProjection",
    "OffaxisConfig",
    "load_config",
    "make_offaxis_matrices_from_yaml",
    "linear_viewpoint_path",
    
    # Utils
    "OffaxisError",
    "MissingDependencyError",
    "DegenerateGeometryError",
    "project_points_to_ndc",
    "project_points_to_screen",
    "debug_print",
    "is_debug_enabled",
]
