# particles/mapper.py
from typing import Tuple

import numpy as np

from config import HAND_DISTANCE, UNPROJECT_DEPTH


def screen_to_ndc(x: float, y: float) -> Tuple[float, float]:
    """
    归一化屏幕坐标 (0..1) -> NDC (-1..1)。
    屏幕 y 向下增长，NDC y 向上，所以取反。
    """
    return 2.0 * x - 1.0, -(2.0 * y - 1.0)


def unproject(ndc_point, camera) -> np.ndarray:
    """NDC point -> world space through inv(projection @ view)."""
    inv = np.linalg.inv(camera.projection_matrix @ camera.view_matrix)
    homo = inv @ np.array([ndc_point[0], ndc_point[1], ndc_point[2], 1.0])
    return homo[:3] / homo[3]


def screen_to_world(x: float, y: float, camera, distance: float = HAND_DISTANCE) -> np.ndarray:
    """
    Map a normalized screen point onto the camera ray through it and return
    the point `distance` units from the camera along that ray.
    """
    ndc_x, ndc_y = screen_to_ndc(x, y)
    on_ray = unproject((ndc_x, ndc_y, UNPROJECT_DEPTH), camera)

    direction = on_ray - camera.position
    direction /= np.linalg.norm(direction)
    return camera.position + direction * distance
