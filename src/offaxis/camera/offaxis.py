"""Off-axis projection from a viewpoint and two screen corners."""

from __future__ import annotations
from dataclasses import dataclass, astuple
from typing import Tuple
import numpy as np

from .utils import ensure_vec3
from .projection import build_frustum_projection_matrix
from ..utils.validation import (
    validate_frustum_extents,
    check_corners_coplanar,
)
from ..utils.debug import debug_print, debug_matrix_info


@dataclass(frozen=True)
class FrustumExtents:
    """
    The six scalars that fully determine a frustum projection.
    
    Attributes:
        left, right: Horizontal screen extents relative to the viewpoint
        bottom, top: Vertical screen extents relative to the viewpoint
        near: Perpendicular distance from the viewpoint to the screen
        far: Far clipping distance
    """
    left: float
    right: float
    bottom: float
    top: float
    near: float
    far: float
    
    @property
    def is_symmetric(self) -> bool:
        """True if the screen is centered on the view axis."""
        return self.left == -self.right and self.bottom == -self.top
    
    def as_tuple(self) -> Tuple[float, ...]:
        """(left, right, bottom, top, near, far)"""
        return astuple(self)


def compute_frustum_extents(
    viewpoint,
    screen_bottom_left,
    screen_top_right,
    far_clip: float
) -> FrustumExtents:
    """
    Measure the screen corners relative to the viewpoint.
    
    The screen's distance from the viewpoint becomes the near plane, so near
    is derived from where the screen physically sits and never supplied.
    
    Args:
        viewpoint: (3,) eye position in world space
        screen_bottom_left: (3,) bottom-left screen corner
        screen_top_right: (3,) top-right screen corner
        far_clip: Far clipping distance
    
    Returns:
        FrustumExtents
    
    Notes:
        - Camera and screen must not be rotated; only positions are read
    """
    eye = ensure_vec3(viewpoint, "viewpoint")
    bl = ensure_vec3(screen_bottom_left, "screen_bottom_left")
    tr = ensure_vec3(screen_top_right, "screen_top_right")
    
    check_corners_coplanar(bl, tr)
    
    delta_bl = bl - eye
    delta_tr = tr - eye
    
    return FrustumExtents(
        left=float(delta_bl[0]),
        right=float(delta_tr[0]),
        bottom=float(delta_bl[1]),
        top=float(delta_tr[1]),
        near=float(delta_bl[2]),
        far=float(far_clip),
    )


class OffaxisProjectionCalculator:
    """
    Computes the asymmetric projection for a fixed screen seen from a
    moving viewpoint.
    
    Pure: nothing is cached between calls and inputs are never mutated, so
    calling ``compute`` once per frame is all a render loop needs.
    
    Args:
        strict: Reject degenerate geometry with DegenerateGeometryError.
            When False, zero extents flow through as Inf/NaN entries.
        dtype: Output matrix dtype
    
    Example:
        >>> calc = OffaxisProjectionCalculator()
        >>> proj, near = calc.compute([0, 0, 0], [-1, -1, 5], [1, 1, 5], 100.0)
        >>> near
        5.0
    """
    
    def __init__(self, strict: bool = True, dtype=np.float32):
        self.strict = bool(strict)
        self.dtype = np.dtype(dtype)
    
    def compute_extents(
        self,
        viewpoint,
        screen_bottom_left,
        screen_top_right,
        far_clip: float
    ) -> FrustumExtents:
        """Extents only; validated when ``strict``."""
        extents = compute_frustum_extents(
            viewpoint, screen_bottom_left, screen_top_right, far_clip
        )
        if self.strict:
            validate_frustum_extents(*extents.as_tuple())
        return extents
    
    def compute_frustum(
        self,
        viewpoint,
        screen_bottom_left,
        screen_top_right,
        far_clip: float
    ) -> Tuple[np.ndarray, FrustumExtents]:
        """
        Compute the projection matrix together with its extents.
        
        Returns:
            proj: (4, 4) projection matrix (row-major)
            extents: FrustumExtents used to build it
        
        Raises:
            DegenerateGeometryError: In strict mode, for zero-width or
                zero-height screens, a screen at or behind the viewpoint,
                or far <= near
        """
        extents = self.compute_extents(
            viewpoint, screen_bottom_left, screen_top_right, far_clip
        )
        
        proj = build_frustum_projection_matrix(
            extents.left,
            extents.right,
            extents.bottom,
            extents.top,
            extents.near,
            extents.far,
            dtype=self.dtype,
        )
        
        debug_print(
            f"[Offaxis] l={extents.left:.4f} r={extents.right:.4f} "
            f"b={extents.bottom:.4f} t={extents.top:.4f} "
            f"n={extents.near:.4f} f={extents.far:.4f}"
        )
        debug_matrix_info("Offaxis", proj)
        
        return proj, extents
    
    def compute(
        self,
        viewpoint,
        screen_bottom_left,
        screen_top_right,
        far_clip: float
    ) -> Tuple[np.ndarray, float]:
        """
        Compute the projection matrix and the derived near clip distance.
        
        Args:
            viewpoint: (3,) eye position in world space
            screen_bottom_left: (3,) bottom-left screen corner
            screen_top_right: (3,) top-right screen corner
            far_clip: Far clipping distance
        
        Returns:
            proj: (4, 4) projection matrix (row-major)
            near: Near clip distance (bottom-left corner's z offset)
        """
        proj, extents = self.compute_frustum(
            viewpoint, screen_bottom_left, screen_top_right, far_clip
        )
        return proj, extents.near


def compute_offaxis_projection(
    viewpoint,
    screen_bottom_left,
    screen_top_right,
    far_clip: float,
    strict: bool = True
) -> Tuple[np.ndarray, float]:
    """Function form of ``OffaxisProjectionCalculator.compute``."""
    calc = OffaxisProjectionCalculator(strict=strict)
    return calc.compute(viewpoint, screen_bottom_left, screen_top_right, far_clip)
