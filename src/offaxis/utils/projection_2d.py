"""Point projection through an off-axis frustum."""

from __future__ import annotations
from typing import Tuple
import numpy as np


def world_to_view_unrotated(points: np.ndarray, viewpoint: np.ndarray) -> np.ndarray:
    """
    Map world-space points into view space for an unrotated camera.
    
    The camera looks down world +Z while view space follows the OpenGL
    convention (looking down -Z), so only a translation and a z flip apply.
    
    Args:
        points: (N, 3) or (3,) world-space positions
        viewpoint: (3,) camera position
    
    Returns:
        View-space positions with the same shape as ``points``
    """
    pts = np.asarray(points, dtype=np.float64)
    view = pts - np.asarray(viewpoint, dtype=np.float64)
    view[..., 2] = -view[..., 2]
    return view


def project_points_to_ndc(
    points: np.ndarray,
    viewpoint: np.ndarray,
    proj_matrix: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project world-space points to normalized device coordinates.
    
    Args:
        points: (N, 3) world-space positions
        viewpoint: (3,) camera position
        proj_matrix: (4, 4) projection matrix (row-major)
    
    Returns:
        ndc: (N, 3) NDC positions (NaN where invalid)
        valid: (N,) boolean mask, True for finite points in front of the camera
    """
    view = world_to_view_unrotated(np.atleast_2d(points), viewpoint)
    N = view.shape[0]
    
    view_h = np.concatenate([view, np.ones((N, 1))], axis=1)
    clip = view_h @ np.asarray(proj_matrix, dtype=np.float64).T
    
    w = clip[:, 3]
    valid = np.isfinite(clip).all(axis=1) & (w > 0)
    
    ndc = np.full((N, 3), np.nan, dtype=np.float64)
    ndc[valid] = clip[valid, :3] / w[valid, None]
    
    return ndc, valid


def project_points_to_screen(
    points: np.ndarray,
    viewpoint: np.ndarray,
    proj_matrix: np.ndarray,
    width: int,
    height: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project world-space points to pixel coordinates.
    
    Returns:
        uv: (N, 2) screen coordinates, v pointing down
        valid: (N,) boolean mask for valid projections
    
    Notes:
        - Invalid points set to (-1e6, -1e6)
    """
    ndc, valid = project_points_to_ndc(points, viewpoint, proj_matrix)
    
    u = (ndc[:, 0] * 0.5 + 0.5) * float(width)
    v = (-ndc[:, 1] * 0.5 + 0.5) * float(height)
    
    uv = np.stack([u, v], axis=1)
    uv[~valid] = np.array([-1e6, -1e6])
    
    return uv, valid
