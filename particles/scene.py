# particles/scene.py
from dataclasses import dataclass, field

import numpy as np

from config import (
    PARTICLE_COUNT, INITIAL_TEMPLATE, HAND_SENTINEL,
    PROXIMITY_RADIUS, COLOR_LERP_RATE, BASE_SIZE, SIZE_GAIN,
    FIST_SIZE, FIST_COLOR,
)
from gesture.types import NONE, FIST
from logger import get_logger
from particles.buffers import ParticleBuffers
from particles.templates import generate_template, next_template

logger = get_logger("Scene")


@dataclass
class SceneState:
    """Everything the frame loop reads and writes; owned by the render thread."""
    buffers: ParticleBuffers
    template: str = INITIAL_TEMPLATE
    gesture: str = NONE
    hand_position: np.ndarray = field(
        default_factory=lambda: np.array(HAND_SENTINEL, dtype=np.float64))

    @classmethod
    def create(cls, count: int = PARTICLE_COUNT, template: str = INITIAL_TEMPLATE,
               rng=None) -> "SceneState":
        buffers = ParticleBuffers.allocate(count)
        generate_template(template, buffers, rng)
        return cls(buffers=buffers, template=template)


def switch_template(scene: SceneState, rng=None) -> str:
    scene.template = next_template(scene.template)
    generate_template(scene.template, scene.buffers, rng)
    logger.info(f"Template -> {scene.template}")
    return scene.template


def planar_distance(positions, hand_position) -> np.ndarray:
    """x/y distance only; z is ignored."""
    d = positions[:, :2] - np.asarray(hand_position, dtype=np.float32)[:2]
    return np.hypot(d[:, 0], d[:, 1])


def proximity(distance, radius: float = PROXIMITY_RADIUS):
    """1 at the hand, 0 at `radius` and beyond, linear in between."""
    return np.maximum(0.0, 1.0 - np.asarray(distance) / radius)


def update_particles(scene: SceneState):
    """
    Per-frame hand effect.

    fist: every particle turns FIST_COLOR and size jumps to FIST_SIZE.
    otherwise: colors ease toward white by proximity * COLOR_LERP_RATE each
    frame, starting from the stored color, so a hand held close keeps
    whitening the particles over time.
    """
    buffers = scene.buffers
    if buffers.count == 0:
        return

    if scene.gesture == FIST:
        buffers.size = FIST_SIZE
        buffers.colors[:] = FIST_COLOR
    else:
        prox = proximity(planar_distance(buffers.positions, scene.hand_position))
        t = (prox * COLOR_LERP_RATE).astype(np.float32)[:, None]
        buffers.colors += (1.0 - buffers.colors) * t
        # size is one material value; the last particle written wins
        buffers.size = BASE_SIZE + float(prox[-1]) * SIZE_GAIN

    buffers.mark_dirty()
