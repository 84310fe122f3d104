import numpy as np
import pytest

from config import HAND_DISTANCE
from particles.camera import PerspectiveCamera
from particles.mapper import screen_to_ndc, screen_to_world, unproject


@pytest.fixture
def camera():
    return PerspectiveCamera(aspect=16 / 9)


def test_ndc_corners():
    assert screen_to_ndc(0.0, 0.0) == (-1.0, 1.0)
    assert screen_to_ndc(1.0, 1.0) == (1.0, -1.0)
    assert screen_to_ndc(0.5, 0.5) == (0.0, 0.0)


def test_ndc_range_and_monotonic():
    xs = np.linspace(0.0, 1.0, 11)
    ndc = [screen_to_ndc(v, v) for v in xs]
    ndc_x = [p[0] for p in ndc]
    ndc_y = [p[1] for p in ndc]

    assert min(ndc_x) >= -1.0 and max(ndc_x) <= 1.0
    assert min(ndc_y) >= -1.0 and max(ndc_y) <= 1.0
    assert all(a < b for a, b in zip(ndc_x, ndc_x[1:]))
    # screen y down -> ndc y up
    assert all(a > b for a, b in zip(ndc_y, ndc_y[1:]))


@pytest.mark.parametrize("x,y", [(0.0, 0.0), (0.5, 0.5), (1.0, 0.25), (0.1, 0.9)])
def test_world_point_is_fixed_distance_from_camera(camera, x, y):
    p = screen_to_world(x, y, camera)
    assert np.linalg.norm(p - camera.position) == pytest.approx(HAND_DISTANCE)


def test_center_maps_onto_view_axis(camera):
    p = screen_to_world(0.5, 0.5, camera)
    np.testing.assert_allclose(p, [0.0, 0.0, 2.0], atol=1e-9)


def test_top_left_maps_up_and_left(camera):
    p = screen_to_world(0.0, 0.0, camera)
    assert p[0] < 0 and p[1] > 0


def test_world_point_reprojects_to_same_ndc(camera):
    p = screen_to_world(0.25, 0.75, camera)
    ndc, depth = camera.project(p)
    np.testing.assert_allclose(ndc[0, :2], [-0.5, -0.5], atol=1e-9)
    assert depth[0] > 0


def test_unproject_mid_depth_lies_in_front_of_camera(camera):
    p = unproject((0.0, 0.0, 0.5), camera)
    assert p[2] < camera.position[2]


def test_custom_distance(camera):
    p = screen_to_world(0.3, 0.6, camera, distance=1.5)
    assert np.linalg.norm(p - camera.position) == pytest.approx(1.5)
