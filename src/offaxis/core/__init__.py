"""Scene binding, lifecycle, and configuration."""

from .scene import Transform, RenderCamera
from .component import OffaxisProjection
from .config import OffaxisConfig, load_config, make_offaxis_matrices_from_yaml
from .tracking import linear_viewpoint_path

__all__ = [
    "Transform",
    "RenderCamera",
    "OffaxisProjection",
    "OffaxisConfig",
    "load_config",
    "make_offaxis_matrices_from_yaml",
    "linear_viewpoint_path",
]
