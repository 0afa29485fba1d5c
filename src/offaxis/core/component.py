"""Off-axis projection component bound to scene transforms and a camera."""

from __future__ import annotations
from typing import Optional
import numpy as np

from .scene import Transform, RenderCamera
from ..camera.offaxis import OffaxisProjectionCalculator, FrustumExtents
from ..utils.errors import MissingDependencyError
from ..utils.validation import validate_references
from ..utils.debug import debug_print


class OffaxisProjection:
    """
    Keeps a camera's projection locked to a physical screen.
    
    The two screen markers and the camera are assigned up front. Call
    ``configure()`` once, then ``update()`` every frame from the render loop.
    
    Args:
        screen_bottom_left: Transform marking the screen's bottom-left corner
        screen_top_right: Transform marking the screen's top-right corner
        camera: Camera whose projection and near clip plane get overridden
        strict: Reject degenerate screen geometry
        skip_missing: Log missing references and skip updates instead of
            raising MissingDependencyError
        dtype: Projection matrix dtype
    
    Notes:
        - DO NOT rotate the camera or the screen; only positions are read
    """
    
    def __init__(
        self,
        screen_bottom_left: Optional[Transform] = None,
        screen_top_right: Optional[Transform] = None,
        camera: Optional[RenderCamera] = None,
        strict: bool = True,
        skip_missing: bool = False,
        dtype=np.float32
    ):
        self.screen_bottom_left = screen_bottom_left
        self.screen_top_right = screen_top_right
        self.camera = camera
        self.skip_missing = bool(skip_missing)
        self.calculator = OffaxisProjectionCalculator(strict=strict, dtype=dtype)
        self._configured = False
    
    def _references(self):
        return {
            "camera": self.camera,
            "screen_bottom_left": self.screen_bottom_left,
            "screen_top_right": self.screen_top_right,
        }
    
    @property
    def is_configured(self) -> bool:
        return self._configured
    
    def configure(self) -> bool:
        """
        Check that every reference is assigned.
        
        Returns:
            True if the component is ready to update
        
        Raises:
            MissingDependencyError: If a reference is missing and
                ``skip_missing`` is False
        """
        try:
            validate_references(self._references())
        except MissingDependencyError as e:
            self._configured = False
            debug_print(str(e))
            if self.skip_missing:
                print(f"[Warning] {e}")
                return False
            raise
        
        self._configured = True
        debug_print("[OffaxisProjection] configured")
        return True
    
    def update(self) -> Optional[FrustumExtents]:
        """
        Recompute the projection for the current positions and apply it.
        
        Returns:
            The FrustumExtents applied to the camera, or None if the update
            was skipped because references are missing
        
        Raises:
            MissingDependencyError: If not configured, or a reference was
                cleared since configure() (fail-fast policy)
            DegenerateGeometryError: If the screen geometry is degenerate
                and the calculator is strict
        """
        if self.skip_missing:
            if any(ref is None for ref in self._references().values()):
                return None
        else:
            if not self._configured:
                raise MissingDependencyError(
                    [name for name, ref in self._references().items() if ref is None],
                    "[OffaxisProjection] update() called before a successful configure()"
                )
            # references may be cleared between frames
            validate_references(self._references())
        
        proj, extents = self.calculator.compute_frustum(
            self.camera.position,
            self.screen_bottom_left.position,
            self.screen_top_right.position,
            self.camera.far_clip_plane,
        )
        
        self.camera.set_projection(proj, extents.near)
        return extents
