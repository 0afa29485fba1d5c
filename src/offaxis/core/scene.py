"""Scene-side collaborators: transforms that feed positions and the camera
that consumes the projection."""

from __future__ import annotations
from typing import Optional
import numpy as np

from ..camera.utils import ensure_vec3, to_column_major
from ..utils.conversion import to_torch_tensor

DEFAULT_FAR_CLIP = 1000.0
DEFAULT_NEAR_CLIP = 0.3


class Transform:
    """
    World-space position owned and updated by the scene.
    
    Only the position is modelled; rotation is unsupported for off-axis
    screens and their viewers.
    """
    
    def __init__(self, position=(0.0, 0.0, 0.0), name: Optional[str] = None):
        self.name = name
        self.position = ensure_vec3(position, name or "position")
    
    def translate(self, offset) -> "Transform":
        """Move by ``offset`` in world space (in place)."""
        self.position = self.position + ensure_vec3(offset, "offset")
        return self
    
    def __repr__(self) -> str:
        label = f"{self.name!r}, " if self.name else ""
        return f"Transform({label}{self.position.tolist()})"


class RenderCamera:
    """
    Render target that receives a projection override each frame.
    
    Args:
        transform: Camera transform; its position is the viewpoint
        far_clip_plane: Far clipping distance
        near_clip_plane: Initial near clipping distance (overwritten by the
            off-axis component)
    """
    
    def __init__(
        self,
        transform: Optional[Transform] = None,
        far_clip_plane: float = DEFAULT_FAR_CLIP,
        near_clip_plane: float = DEFAULT_NEAR_CLIP
    ):
        self.transform = transform if transform is not None else Transform(name="camera")
        self.far_clip_plane = float(far_clip_plane)
        self.near_clip_plane = float(near_clip_plane)
        self.projection_matrix = np.eye(4, dtype=np.float32)
    
    @property
    def position(self) -> np.ndarray:
        return self.transform.position
    
    def set_projection(self, projection_matrix: np.ndarray, near_clip_plane: float):
        """Apply a projection override and its near clip distance."""
        M = np.asarray(projection_matrix)
        if M.shape != (4, 4):
            raise ValueError(f"projection_matrix must be 4x4, got shape {M.shape}")
        self.projection_matrix = M.copy()
        self.near_clip_plane = float(near_clip_plane)
    
    def reset_projection_matrix(self):
        self.projection_matrix = np.eye(4, dtype=np.float32)
    
    def column_major_projection(self) -> np.ndarray:
        """Projection transposed for column-major uploads (glUniformMatrix4fv)."""
        return to_column_major(self.projection_matrix)
    
    def projection_tensor(self, device: str = "cpu"):
        """Projection as a float32 torch tensor, for GPU rasterizers."""
        return to_torch_tensor(self.projection_matrix, device=device)
