"""Projection matrix construction."""

from __future__ import annotations
import numpy as np


def build_frustum_projection_matrix(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
    dtype=np.float32
) -> np.ndarray:
    """
    Build OpenGL-style perspective projection matrix from frustum extents.
    
    Same matrix as glFrustum: left/right/bottom/top are the extents of the
    near plane measured from the view axis, and near/far are positive
    distances along the viewing direction (view space looks down -Z).
    
    Args:
        left, right: Horizontal extents at the near plane
        bottom, top: Vertical extents at the near plane
        near, far: Near and far clipping distances
        dtype: Output dtype
    
    Returns:
        4x4 projection matrix (row-major)
    
    Notes:
        - m02/m12 are the off-axis skew terms; both are zero for a
          symmetric frustum
        - No validation happens here: zero extents produce Inf/NaN entries
        - Depth encoding: z_ndc = -1 at near, +1 at far
    """
    l, r = np.float64(left), np.float64(right)
    b, t = np.float64(bottom), np.float64(top)
    n, f = np.float64(near), np.float64(far)
    
    P = np.zeros((4, 4), dtype=np.float64)
    
    with np.errstate(divide="ignore", invalid="ignore"):
        # Scale
        P[0, 0] = 2.0 * n / (r - l)
        P[1, 1] = 2.0 * n / (t - b)
        
        # Off-axis skew
        P[0, 2] = (r + l) / (r - l)
        P[1, 2] = (t + b) / (t - b)
        
        # Depth
        P[2, 2] = -(f + n) / (f - n)
        P[2, 3] = -2.0 * f * n / (f - n)
    
    # Perspective division: clip.w = -z_view
    P[3, 2] = -1.0
    P[3, 3] = 0.0
    
    return P.astype(dtype)


def build_perspective_projection_matrix(
    fovy_degrees: float,
    aspect: float,
    near: float,
    far: float,
    dtype=np.float32
) -> np.ndarray:
    """
    Build a symmetric (on-axis) perspective matrix, as gluPerspective does.
    
    Args:
        fovy_degrees: Vertical field of view in degrees
        aspect: Width / height
        near, far: Clipping distances
        dtype: Output dtype
    
    Returns:
        4x4 projection matrix (row-major)
    """
    top = near * np.tan(np.radians(fovy_degrees) / 2.0)
    right = top * aspect
    return build_frustum_projection_matrix(-right, right, -top, top, near, far, dtype=dtype)
