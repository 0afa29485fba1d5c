"""Off-axis projection configuration."""

from __future__ import annotations
from typing import Dict, Any, Tuple
from dataclasses import dataclass
from pathlib import Path
import numpy as np
from omegaconf import OmegaConf, DictConfig

from .scene import Transform, RenderCamera, DEFAULT_FAR_CLIP
from .component import OffaxisProjection
from ..camera.offaxis import OffaxisProjectionCalculator
from ..camera.utils import to_column_major
from ..utils.debug import debug_print


DEFAULT_VIEWPOINT = np.array([0.0, 0.0, 0.0])
DEFAULT_SCREEN_BOTTOM_LEFT = np.array([-1.0, -1.0, 5.0])
DEFAULT_SCREEN_TOP_RIGHT = np.array([1.0, 1.0, 5.0])

SUPPORTED_DTYPES = ("float32", "float64")


@dataclass
class OffaxisConfig:
    """
    Off-axis rig configuration.
    
    Attributes:
        viewpoint: Camera (eye) position in world space
        screen_bottom_left: Bottom-left screen corner in world space
        screen_top_right: Top-right screen corner in world space
        far_clip: Far clipping distance
        strict: Reject degenerate screen geometry
        skip_missing: Skip updates on missing references instead of raising
        dtype: Projection matrix dtype ('float32' or 'float64')
    """
    viewpoint: np.ndarray = None
    screen_bottom_left: np.ndarray = None
    screen_top_right: np.ndarray = None
    far_clip: float = DEFAULT_FAR_CLIP
    strict: bool = True
    skip_missing: bool = False
    dtype: str = 'float32'
    
    def __post_init__(self):
        """Set defaults for optional fields."""
        if self.viewpoint is None:
            self.viewpoint = DEFAULT_VIEWPOINT.copy()
        if self.screen_bottom_left is None:
            self.screen_bottom_left = DEFAULT_SCREEN_BOTTOM_LEFT.copy()
        if self.screen_top_right is None:
            self.screen_top_right = DEFAULT_SCREEN_TOP_RIGHT.copy()
        if self.dtype not in SUPPORTED_DTYPES:
            raise ValueError(f"dtype must be one of {SUPPORTED_DTYPES}, got {self.dtype!r}")
    
    @classmethod
    def from_dict(cls, cfg) -> 'OffaxisConfig':
        """
        Create OffaxisConfig from a nested mapping.
        
        Expected layout (all sections optional)::
        
            screen:     {bottom_left: [x, y, z], top_right: [x, y, z]}
            camera:     {position: [x, y, z], far_clip: float}
            projection: {strict: bool, skip_missing: bool, dtype: str}
        """
        if isinstance(cfg, DictConfig):
            cfg = OmegaConf.to_container(cfg, resolve=True)
        
        screen = cfg.get('screen') or {}
        camera = cfg.get('camera') or {}
        projection = cfg.get('projection') or {}
        
        return cls(
            viewpoint=np.asarray(camera.get('position', DEFAULT_VIEWPOINT), dtype=np.float64),
            screen_bottom_left=np.asarray(screen.get('bottom_left', DEFAULT_SCREEN_BOTTOM_LEFT), dtype=np.float64),
            screen_top_right=np.asarray(screen.get('top_right', DEFAULT_SCREEN_TOP_RIGHT), dtype=np.float64),
            far_clip=float(camera.get('far_clip', DEFAULT_FAR_CLIP)),
            strict=bool(projection.get('strict', True)),
            skip_missing=bool(projection.get('skip_missing', False)),
            dtype=str(projection.get('dtype', 'float32')),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the nested mapping read by ``from_dict``."""
        return {
            'screen': {
                'bottom_left': np.asarray(self.screen_bottom_left).tolist(),
                'top_right': np.asarray(self.screen_top_right).tolist(),
            },
            'camera': {
                'position': np.asarray(self.viewpoint).tolist(),
                'far_clip': self.far_clip,
            },
            'projection': {
                'strict': self.strict,
                'skip_missing': self.skip_missing,
                'dtype': self.dtype,
            },
        }
    
    def build_calculator(self) -> OffaxisProjectionCalculator:
        """Calculator with this config's strictness and dtype."""
        return OffaxisProjectionCalculator(strict=self.strict, dtype=np.dtype(self.dtype))
    
    def build_component(self) -> OffaxisProjection:
        """Build a scene (camera + two screen markers) and a configured component."""
        camera = RenderCamera(
            transform=Transform(self.viewpoint, name="camera"),
            far_clip_plane=self.far_clip,
        )
        component = OffaxisProjection(
            screen_bottom_left=Transform(self.screen_bottom_left, name="screen_bottom_left"),
            screen_top_right=Transform(self.screen_top_right, name="screen_top_right"),
            camera=camera,
            strict=self.strict,
            skip_missing=self.skip_missing,
            dtype=np.dtype(self.dtype),
        )
        component.configure()
        return component


def load_config(config_path: str) -> DictConfig:
    """
    Load YAML configuration.
    
    Args:
        config_path: Path to YAML config file
    
    Returns:
        OmegaConf configuration object
    
    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the 'screen' section is missing
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    config = OmegaConf.load(config_path)
    
    if "screen" not in config:
        raise ValueError("Missing required config section: screen")
    
    debug_print(f"[Config] Loaded configuration from: {config_path}")
    return config


def make_offaxis_matrices_from_yaml(
    cfg
) -> Tuple[float, float, np.ndarray, np.ndarray]:
    """
    Build the off-axis projection straight from a configuration mapping.
    
    Args:
        cfg: Mapping or DictConfig in the layout read by
            ``OffaxisConfig.from_dict``
    
    Returns:
        Tuple of:
            - near (float): Derived near clip distance
            - far (float): Far clip distance
            - proj_matrix (4x4): Projection matrix (row-major)
            - proj_matrix_transposed (4x4): Column-major copy, same dtype
    
    Example:
        >>> cfg = {
        ...     "screen": {"bottom_left": [-1, -1, 5], "top_right": [1, 1, 5]},
        ...     "camera": {"position": [0, 0, 0], "far_clip": 100.0},
        ... }
        >>> near, far, proj, proj_T = make_offaxis_matrices_from_yaml(cfg)
    """
    config = OffaxisConfig.from_dict(cfg)
    
    proj, extents = config.build_calculator().compute_frustum(
        config.viewpoint,
        config.screen_bottom_left,
        config.screen_top_right,
        config.far_clip,
    )
    
    return extents.near, extents.far, proj, to_column_major(proj)
