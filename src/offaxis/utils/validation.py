"""Input validation utilities."""

from __future__ import annotations
from typing import Iterable, Mapping
import numpy as np

from .errors import DegenerateGeometryError, MissingDependencyError
from .debug import debug_print

# Tolerance for the "both corners on one plane" check
CORNER_PLANE_TOLERANCE = 1e-5


def validate_references(references: Mapping[str, object]) -> None:
    """
    Check that every named reference is assigned.
    
    Args:
        references: Mapping of field name -> referenced object (or None)
    
    Raises:
        MissingDependencyError: If any reference is None
    """
    missing = [name for name, ref in references.items() if ref is None]
    if missing:
        raise MissingDependencyError(missing)


def validate_finite(name: str, values: Iterable[float]) -> None:
    """Raise DegenerateGeometryError if any value is NaN or Inf."""
    arr = np.asarray(list(values), dtype=np.float64)
    if not np.isfinite(arr).all():
        raise DegenerateGeometryError(f"{name} contains NaN or Inf: {arr.tolist()}")


def validate_frustum_extents(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float
) -> None:
    """
    Validate the six frustum scalars.
    
    Raises:
        DegenerateGeometryError: On zero or inverted screen extents, a screen
            at or behind the viewpoint, or a far plane not beyond the near plane
    """
    validate_finite("frustum extents", (left, right, bottom, top, near, far))
    
    if right <= left:
        raise DegenerateGeometryError(
            f"Screen has no width: right ({right}) must be greater than left ({left})"
        )
    if top <= bottom:
        raise DegenerateGeometryError(
            f"Screen has no height: top ({top}) must be greater than bottom ({bottom})"
        )
    if near <= 0:
        raise DegenerateGeometryError(
            f"Screen must lie in front of the viewpoint, got near={near}"
        )
    if far <= near:
        raise DegenerateGeometryError(
            f"far ({far}) must be greater than near ({near})"
        )


def check_corners_coplanar(bottom_left: np.ndarray, top_right: np.ndarray) -> bool:
    """
    Report whether both screen corners share the same z.
    
    Rotated screens are unsupported, so a mismatch only produces a diagnostic.
    """
    dz = abs(float(top_right[2]) - float(bottom_left[2]))
    if dz > CORNER_PLANE_TOLERANCE:
        debug_print(
            f"[Offaxis] screen corners differ in z by {dz:.6f}; "
            f"rotated screens are not supported, using bottom-left z as near plane"
        )
        return False
    return True
