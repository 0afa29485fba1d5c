"""Viewpoint motion across frames."""

from __future__ import annotations
from typing import Iterator
import numpy as np

from ..camera.utils import ensure_vec3


def linear_viewpoint_path(start, end, frames: int) -> Iterator[np.ndarray]:
    """
    Yield ``frames`` evenly spaced viewpoints from ``start`` to ``end``.
    
    Both endpoints are included; a single frame yields ``start`` only.
    
    Raises:
        ValueError: If frames < 1
    """
    frames = int(frames)
    if frames < 1:
        raise ValueError(f"frames must be >= 1, got {frames}")
    
    p0 = ensure_vec3(start, "start")
    p1 = ensure_vec3(end, "end")
    
    if frames == 1:
        yield p0.copy()
        return
    
    for t in np.linspace(0.0, 1.0, frames):
        yield p0 + (p1 - p0) * t
