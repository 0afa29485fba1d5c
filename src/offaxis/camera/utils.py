"""Camera matrix utilities."""

from __future__ import annotations
import numpy as np


def ensure_vec3(v, name: str = "position") -> np.ndarray:
    """
    Convert input to a (3,) float64 numpy array.
    
    Args:
        v: Position-like input (sequence of 3 numbers, array, or object
            with a ``position`` attribute)
        name: Name used in error messages
    
    Returns:
        (3,) float64 numpy array
    
    Raises:
        ValueError: If input cannot be read as a 3D position
    """
    if hasattr(v, "position"):
        v = v.position
    
    arr = np.asarray(v, dtype=np.float64)
    
    if arr.shape != (3,):
        raise ValueError(f"{name} must be a 3D position, got shape {arr.shape}")
    
    return arr


def ensure_4x4_matrix(m, dtype=np.float32) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.
    
    Args:
        m: Input matrix (4x4 array or flat list of 16 floats)
        dtype: Target dtype
    
    Returns:
        4x4 numpy array of ``dtype``
    
    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.asarray(m, dtype=dtype)
    
    if M.shape == (16,):
        M = M.reshape(4, 4)
    
    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )
    
    return M


def to_column_major(m: np.ndarray) -> np.ndarray:
    """
    Return a contiguous transposed copy for column-major (GL) uploads.
    
    The input dtype is kept.
    """
    M = np.asarray(m)
    return np.ascontiguousarray(ensure_4x4_matrix(M, dtype=M.dtype).T)


def matrix_is_finite(m: np.ndarray) -> bool:
    """True if every matrix entry is finite."""
    return bool(np.isfinite(m).all())
