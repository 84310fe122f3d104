# particles/camera.py
"""
Right-handed perspective camera (OpenGL conventions: looks down -Z,
clip-space z in [-1, 1]).
"""
import numpy as np

from config import CAMERA_FOV, CAMERA_NEAR, CAMERA_FAR, CAMERA_POSITION, CAMERA_TARGET


def perspective(fov_deg: float, aspect: float, near: float, far: float) -> np.ndarray:
    f = 1.0 / np.tan(np.radians(fov_deg) / 2.0)
    return np.array([
        [f / aspect, 0.0, 0.0, 0.0],
        [0.0, f, 0.0, 0.0],
        [0.0, 0.0, (far + near) / (near - far), 2.0 * far * near / (near - far)],
        [0.0, 0.0, -1.0, 0.0],
    ], dtype=np.float64)


def look_at(eye, target, up=(0.0, 1.0, 0.0)) -> np.ndarray:
    """World -> view matrix for a camera at `eye` looking at `target`."""
    eye = np.asarray(eye, dtype=np.float64)
    z = eye - np.asarray(target, dtype=np.float64)
    z /= np.linalg.norm(z)
    x = np.cross(np.asarray(up, dtype=np.float64), z)
    x /= np.linalg.norm(x)
    y = np.cross(z, x)

    view = np.eye(4)
    view[0, :3], view[1, :3], view[2, :3] = x, y, z
    view[:3, 3] = -view[:3, :3] @ eye
    return view


class PerspectiveCamera:
    def __init__(self, aspect: float, fov: float = CAMERA_FOV,
                 near: float = CAMERA_NEAR, far: float = CAMERA_FAR,
                 position=CAMERA_POSITION, target=CAMERA_TARGET):
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.position = np.asarray(position, dtype=np.float64)
        self.target = np.asarray(target, dtype=np.float64)

        self.projection_matrix = perspective(fov, aspect, near, far)
        self.view_matrix = look_at(self.position, self.target)

    @property
    def view_projection(self) -> np.ndarray:
        return self.projection_matrix @ self.view_matrix

    def project(self, points):
        """
        World points (N,3) -> (ndc (N,3), depth (N,)).
        depth is the distance along the viewing axis; <= 0 means behind the camera.
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        homo = np.hstack([pts, np.ones((len(pts), 1))])
        clip = homo @ self.view_projection.T
        w = clip[:, 3]
        safe_w = np.where(np.abs(w) < 1e-9, 1e-9, w)
        return clip[:, :3] / safe_w[:, None], w

    def to_screen(self, points, width: int, height: int):
        """
        World points -> (pixel xy (N,2) float, visible mask (N,), depth (N,)).
        Pixel y grows downward.
        """
        ndc, depth = self.project(points)
        sx = (ndc[:, 0] + 1.0) * 0.5 * width
        sy = (1.0 - ndc[:, 1]) * 0.5 * height
        visible = (depth > self.near) & (depth < self.far)
        return np.stack([sx, sy], axis=-1), visible, depth

    def pixel_size(self, world_size: float, depth, height: int):
        """Perspective-attenuated size in pixels for a world-space point size."""
        depth = np.maximum(np.asarray(depth, dtype=np.float64), self.near)
        return world_size * self.projection_matrix[1, 1] * 0.5 * height / depth
