# particles/templates.py
"""
Parametric particle-cloud templates.

Every generator overwrites all positions and colors in place. Each particle
is drawn independently, so regenerating a template gives a new cloud.
"""
import numpy as np

from config import (
    SPHERE_RADIUS, SPHERE_SHELL, SPHERE_COLOR,
    HEART_SCALE, HEART_Y_OFFSET, HEART_COLOR,
    FLOWER_SCALE, FLOWER_PETALS, FLOWER_DEPTH, FLOWER_COLOR,
)
from logger import get_logger

logger = get_logger("Templates")

SPHERE = "sphere"
HEART = "heart"
FLOWER = "flower"

TEMPLATE_ORDER = (SPHERE, HEART, FLOWER)


def next_template(name: str) -> str:
    i = TEMPLATE_ORDER.index(name)
    return TEMPLATE_ORDER[(i + 1) % len(TEMPLATE_ORDER)]


def generate_sphere(positions, colors, rng):
    n = len(positions)
    v = rng.normal(size=(n, 3))
    norm = np.linalg.norm(v, axis=1, keepdims=True)
    norm[norm == 0] = 1.0
    radius = SPHERE_RADIUS * rng.uniform(1.0 - SPHERE_SHELL, 1.0, size=(n, 1))

    positions[:] = v / norm * radius
    colors[:] = SPHERE_COLOR


def generate_heart(positions, colors, rng, scale=HEART_SCALE):
    n = len(positions)
    t = rng.uniform(0.0, 2 * np.pi, n)
    u = rng.uniform(0.0, 2.0, n)  # 厚度参数

    positions[:, 0] = scale * 16 * np.sin(t) ** 3 / 18
    positions[:, 1] = scale * (13 * np.cos(t) - 5 * np.cos(2 * t)
                               - 2 * np.cos(3 * t) - np.cos(4 * t)) / 18 + HEART_Y_OFFSET
    positions[:, 2] = scale * u * np.cos(5 * t) * 0.1
    colors[:] = HEART_COLOR


def generate_flower(positions, colors, rng, scale=FLOWER_SCALE, petals=FLOWER_PETALS):
    n = len(positions)
    theta = rng.uniform(0.0, 2 * np.pi, n)
    r_base = scale * rng.random(n)

    # rosette: r = a*cos(k*theta)
    r_petal = scale * np.cos(petals * theta / 2) * 0.5 + 0.5
    r = r_base * r_petal * 0.8

    positions[:, 0] = r * np.cos(theta)
    positions[:, 1] = r * np.sin(theta)
    positions[:, 2] = rng.uniform(-FLOWER_DEPTH, FLOWER_DEPTH, n)
    colors[:] = FLOWER_COLOR


GENERATORS = {
    SPHERE: generate_sphere,
    HEART: generate_heart,
    FLOWER: generate_flower,
}


def generate_template(name: str, buffers, rng=None):
    """Fill `buffers` with template `name` and flag both arrays for re-upload."""
    try:
        generator = GENERATORS[name]
    except KeyError:
        raise ValueError(f"unknown template: {name!r}") from None

    if rng is None:
        rng = np.random.default_rng()

    logger.info(f"Generating {name} particles ({buffers.count})")
    generator(buffers.positions, buffers.colors, rng)
    buffers.rebind()
