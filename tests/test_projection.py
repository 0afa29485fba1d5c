"""Tests for the generic frustum projection builder."""

from __future__ import annotations

import numpy as np
import pytest

from offaxis.camera import (
    build_frustum_projection_matrix,
    build_perspective_projection_matrix,
    matrix_is_finite,
)


def test_frustum_entries_match_glfrustum() -> None:
    l, r, b, t, n, f = -1.0, 3.0, -2.0, 1.0, 2.0, 20.0
    P = build_frustum_projection_matrix(l, r, b, t, n, f, dtype=np.float64)

    expected = np.array([
        [2 * n / (r - l), 0.0, (r + l) / (r - l), 0.0],
        [0.0, 2 * n / (t - b), (t + b) / (t - b), 0.0],
        [0.0, 0.0, -(f + n) / (f - n), -2 * f * n / (f - n)],
        [0.0, 0.0, -1.0, 0.0],
    ])
    np.testing.assert_allclose(P, expected)


def test_symmetric_frustum_equals_perspective() -> None:
    """A centered frustum is the ordinary on-axis perspective matrix."""
    near, far = 5.0, 100.0
    fovy = 2.0 * np.degrees(np.arctan(1.0 / near))

    frustum = build_frustum_projection_matrix(-1.0, 1.0, -1.0, 1.0, near, far)
    perspective = build_perspective_projection_matrix(fovy, 1.0, near, far)

    np.testing.assert_allclose(frustum, perspective, rtol=1e-6, atol=1e-6)
    assert frustum[0, 2] == 0.0
    assert frustum[1, 2] == 0.0


def test_default_dtype_is_float32() -> None:
    P = build_frustum_projection_matrix(-1, 1, -1, 1, 1, 10)
    assert P.dtype == np.float32
    assert P.shape == (4, 4)


def test_zero_width_is_not_validated_here() -> None:
    P = build_frustum_projection_matrix(1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
    assert not np.isfinite(P[0, 0])
    assert not np.isfinite(P[0, 2])
    assert not matrix_is_finite(P)


@pytest.mark.parametrize("fovy", [30.0, 60.0, 90.0])
def test_perspective_scale_terms(fovy: float) -> None:
    P = build_perspective_projection_matrix(fovy, 16.0 / 9.0, 0.1, 100.0, dtype=np.float64)
    f = 1.0 / np.tan(np.radians(fovy) / 2.0)
    assert P[1, 1] == pytest.approx(f)
    assert P[0, 0] == pytest.approx(f / (16.0 / 9.0))
