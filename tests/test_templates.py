import numpy as np
import pytest

from config import (
    HEART_COLOR, FLOWER_COLOR, SPHERE_COLOR,
    FLOWER_SCALE, FLOWER_DEPTH, SPHERE_RADIUS, SPHERE_SHELL,
)
from particles.buffers import ParticleBuffers
from particles.templates import (
    SPHERE, HEART, FLOWER, TEMPLATE_ORDER,
    generate_template, next_template,
)

N = 2000


@pytest.fixture
def buffers():
    return ParticleBuffers.allocate(N)


def expected_colors(color):
    return np.tile(np.array(color, dtype=np.float32), (N, 1))


def test_cycle_order():
    assert next_template(SPHERE) == HEART
    assert next_template(HEART) == FLOWER
    assert next_template(FLOWER) == SPHERE
    assert TEMPLATE_ORDER[0] == SPHERE


def test_heart_shape_and_color(buffers):
    generate_template(HEART, buffers)
    x, z = buffers.positions[:, 0], buffers.positions[:, 2]

    assert np.all(np.abs(x) <= 16 / 18 + 1e-6)
    assert np.all(np.abs(z) <= 0.2 + 1e-6)
    np.testing.assert_array_equal(buffers.colors, expected_colors(HEART_COLOR))


def test_heart_is_shifted_down(buffers):
    generate_template(HEART, buffers)
    # curve y spans roughly [-17/18, 12/18] before the -1.5 offset
    assert buffers.positions[:, 1].max() < 0.0


def test_flower_extent_and_color(buffers):
    generate_template(FLOWER, buffers)
    r = np.hypot(buffers.positions[:, 0], buffers.positions[:, 1])
    max_petal = FLOWER_SCALE * 0.5 + 0.5

    assert np.all(r <= FLOWER_SCALE * max_petal * 0.8 + 1e-5)
    assert np.all(buffers.positions[:, 2] >= -FLOWER_DEPTH)
    assert np.all(buffers.positions[:, 2] <= FLOWER_DEPTH)
    np.testing.assert_array_equal(buffers.colors, expected_colors(FLOWER_COLOR))


def test_sphere_shell(buffers):
    generate_template(SPHERE, buffers)
    r = np.linalg.norm(buffers.positions, axis=1)

    assert np.all(r >= SPHERE_RADIUS * (1 - SPHERE_SHELL) - 1e-5)
    assert np.all(r <= SPHERE_RADIUS + 1e-5)
    np.testing.assert_array_equal(buffers.colors, expected_colors(SPHERE_COLOR))


def test_regeneration_overwrites_previous_colors(buffers):
    generate_template(HEART, buffers)
    buffers.colors[:] = 0.0
    generate_template(HEART, buffers)
    np.testing.assert_array_equal(buffers.colors, expected_colors(HEART_COLOR))


def test_unseeded_regeneration_differs(buffers):
    generate_template(FLOWER, buffers)
    first = buffers.positions.copy()
    generate_template(FLOWER, buffers)
    assert not np.array_equal(first, buffers.positions)


def test_seeded_generation_is_reproducible():
    a, b = ParticleBuffers.allocate(100), ParticleBuffers.allocate(100)
    generate_template(HEART, a, np.random.default_rng(7))
    generate_template(HEART, b, np.random.default_rng(7))
    np.testing.assert_array_equal(a.positions, b.positions)


def test_generation_rebinds_buffers(buffers):
    buffers.positions_dirty = buffers.colors_dirty = False
    before = buffers.generation

    generate_template(SPHERE, buffers)

    assert buffers.positions_dirty and buffers.colors_dirty
    assert buffers.generation == before + 1
    assert buffers.positions.shape == (N, 3)


def test_unknown_template(buffers):
    with pytest.raises(ValueError):
        generate_template("cube", buffers)


def test_heart_follows_parametric_curve():
    buffers = ParticleBuffers.allocate(500)
    generate_template(HEART, buffers, np.random.default_rng(11))

    replay = np.random.default_rng(11)
    t = replay.uniform(0.0, 2 * np.pi, 500)
    u = replay.uniform(0.0, 2.0, 500)
    expected = np.stack([
        16 * np.sin(t) ** 3 / 18,
        (13 * np.cos(t) - 5 * np.cos(2 * t) - 2 * np.cos(3 * t) - np.cos(4 * t)) / 18 - 1.5,
        u * np.cos(5 * t) * 0.1,
    ], axis=-1)

    np.testing.assert_allclose(buffers.positions, expected, atol=1e-6)


def test_flower_follows_six_petal_rosette():
    buffers = ParticleBuffers.allocate(500)
    generate_template(FLOWER, buffers, np.random.default_rng(5))

    replay = np.random.default_rng(5)
    theta = replay.uniform(0.0, 2 * np.pi, 500)
    base = replay.random(500)
    z = replay.uniform(-0.25, 0.25, 500)
    r = 2.0 * base * (2.0 * np.cos(3 * theta) * 0.5 + 0.5) * 0.8
    expected = np.stack([r * np.cos(theta), r * np.sin(theta), z], axis=-1)

    np.testing.assert_allclose(buffers.positions, expected, atol=1e-6)
