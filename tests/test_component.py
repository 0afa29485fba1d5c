"""Tests for the OffaxisProjection component and scene collaborators."""

from __future__ import annotations

import numpy as np
import pytest

from offaxis.core import OffaxisProjection, RenderCamera, Transform
from offaxis.camera import OffaxisProjectionCalculator
from offaxis.utils import DegenerateGeometryError, MissingDependencyError


def make_rig(eye=(0.0, 0.0, 0.0), far=100.0, **kwargs) -> OffaxisProjection:
    camera = RenderCamera(Transform(eye, name="camera"), far_clip_plane=far)
    return OffaxisProjection(
        screen_bottom_left=Transform([-1, -1, 5], name="screen_bottom_left"),
        screen_top_right=Transform([1, 1, 5], name="screen_top_right"),
        camera=camera,
        **kwargs,
    )


def test_update_applies_projection_and_near_clip() -> None:
    rig = make_rig()
    assert rig.configure()

    extents = rig.update()

    expected, near = OffaxisProjectionCalculator().compute(
        [0, 0, 0], [-1, -1, 5], [1, 1, 5], 100.0
    )
    assert extents.near == near == 5.0
    assert rig.camera.near_clip_plane == 5.0
    np.testing.assert_array_equal(rig.camera.projection_matrix, expected)


def test_update_follows_camera_every_frame() -> None:
    rig = make_rig()
    rig.configure()
    rig.update()
    assert rig.camera.projection_matrix[0, 2] == 0.0

    rig.camera.transform.translate([1.0, 0.0, 1.0])
    extents = rig.update()

    assert extents.near == 4.0
    assert rig.camera.near_clip_plane == 4.0
    assert rig.camera.projection_matrix[0, 2] == pytest.approx(-1.0)


def test_update_reads_far_from_camera() -> None:
    rig = make_rig(far=50.0)
    rig.configure()

    extents = rig.update()

    assert extents.far == 50.0
    assert rig.camera.projection_matrix[2, 2] == pytest.approx(-55.0 / 45.0, rel=1e-6)


def test_moving_screen_corner_resizes_frustum() -> None:
    rig = make_rig()
    rig.configure()

    rig.screen_top_right.translate([1.0, 0.0, 0.0])
    extents = rig.update()

    assert extents.right == 2.0
    assert rig.camera.projection_matrix[0, 0] == pytest.approx(10.0 / 3.0)


@pytest.mark.parametrize("field", ["camera", "screen_bottom_left", "screen_top_right"])
def test_configure_fails_fast_on_missing_reference(field: str) -> None:
    rig = make_rig()
    setattr(rig, field, None)

    with pytest.raises(MissingDependencyError) as excinfo:
        rig.configure()

    assert excinfo.value.missing == (field,)
    assert field in str(excinfo.value)
    assert not rig.is_configured


def test_update_before_configure_raises() -> None:
    rig = make_rig()
    with pytest.raises(MissingDependencyError, match="configure"):
        rig.update()


@pytest.mark.parametrize("field", ["camera", "screen_bottom_left", "screen_top_right"])
def test_update_rejects_reference_cleared_after_configure(field: str) -> None:
    """Every frame re-checks references, not only configure()."""
    rig = make_rig()
    assert rig.configure()
    rig.update()

    setattr(rig, field, None)

    with pytest.raises(MissingDependencyError) as excinfo:
        rig.update()
    assert excinfo.value.missing == (field,)


def test_configure_after_assigning_reference() -> None:
    rig = make_rig()
    marker = rig.screen_top_right
    rig.screen_top_right = None
    with pytest.raises(MissingDependencyError):
        rig.configure()

    rig.screen_top_right = marker
    assert rig.configure()
    assert rig.update() is not None


def test_skip_missing_logs_and_skips(capsys) -> None:
    rig = make_rig(skip_missing=True)
    camera = rig.camera
    rig.screen_bottom_left = None

    assert rig.configure() is False
    assert "screen_bottom_left" in capsys.readouterr().out

    assert rig.update() is None
    np.testing.assert_array_equal(camera.projection_matrix, np.eye(4))
    assert camera.near_clip_plane == 0.3


def test_degenerate_screen_raises_in_strict_mode() -> None:
    rig = make_rig()
    rig.screen_top_right.position = np.array([-1.0, 1.0, 5.0])
    rig.configure()

    with pytest.raises(DegenerateGeometryError):
        rig.update()


def test_degenerate_screen_flows_through_when_permissive() -> None:
    rig = make_rig(strict=False)
    rig.screen_top_right.position = np.array([-1.0, 1.0, 5.0])
    rig.configure()

    rig.update()

    assert not np.isfinite(rig.camera.projection_matrix[0, 0])


class TestRenderCamera:
    def test_defaults(self) -> None:
        camera = RenderCamera()
        np.testing.assert_array_equal(camera.position, [0.0, 0.0, 0.0])
        np.testing.assert_array_equal(camera.projection_matrix, np.eye(4))
        assert camera.far_clip_plane == 1000.0

    def test_set_projection_rejects_bad_shape(self) -> None:
        with pytest.raises(ValueError):
            RenderCamera().set_projection(np.eye(3), 1.0)

    def test_reset_projection_matrix(self) -> None:
        rig = make_rig()
        rig.configure()
        rig.update()

        rig.camera.reset_projection_matrix()

        np.testing.assert_array_equal(rig.camera.projection_matrix, np.eye(4))

    def test_column_major_projection(self) -> None:
        rig = make_rig()
        rig.configure()
        rig.update()

        cm = rig.camera.column_major_projection()

        assert cm.flags["C_CONTIGUOUS"]
        np.testing.assert_array_equal(cm, rig.camera.projection_matrix.T)
        assert cm[2, 3] == -1.0

    def test_projection_tensor(self) -> None:
        torch = pytest.importorskip("torch")
        rig = make_rig()
        rig.configure()
        rig.update()

        tensor = rig.camera.projection_tensor()

        assert tensor.dtype == torch.float32
        np.testing.assert_array_equal(tensor.numpy(), rig.camera.projection_matrix)


def test_transform_rejects_non_3d_position() -> None:
    with pytest.raises(ValueError, match="3D position"):
        Transform([1.0, 2.0])
