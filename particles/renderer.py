# particles/renderer.py
import numpy as np
import pygame

from particles.camera import PerspectiveCamera


class ParticleRenderer:
    """
    Draws the point cloud.

    Positions only change when a template is regenerated, so the projected
    screen points are cached per `buffers.generation`; the positions dirty
    flag is acknowledged every frame without reprojecting. Colors are
    re-uploaded whenever their dirty flag is set.
    """

    def __init__(self, camera: PerspectiveCamera, width: int, height: int):
        self.camera = camera
        self.width = width
        self.height = height
        self._generation = None
        self._screen = np.zeros((0, 2), dtype=np.int32)
        self._visible = np.zeros(0, dtype=bool)
        self._depth = np.zeros(0)
        self._rgb = np.zeros((0, 3), dtype=np.uint8)
        self._order = np.zeros(0, dtype=np.int64)

    def upload(self, buffers) -> bool:
        """Returns True when the projection cache was rebuilt."""
        reprojected = False
        if buffers.generation != self._generation:
            screen, self._visible, self._depth = self.camera.to_screen(
                buffers.positions, self.width, self.height)
            self._screen = screen.astype(np.int32)
            # far to near
            self._order = np.argsort(-self._depth)
            self._generation = buffers.generation
            reprojected = True
        buffers.positions_dirty = False

        if buffers.colors_dirty:
            self._rgb = (np.clip(buffers.colors, 0.0, 1.0) * 255).astype(np.uint8)
            buffers.colors_dirty = False
        return reprojected

    def draw(self, surface, buffers):
        self.upload(buffers)
        radii = np.maximum(1, self.camera.pixel_size(buffers.size, self._depth, self.height) * 0.5)
        radii = radii.astype(np.int32)
        for i in self._order:
            if not self._visible[i]:
                continue
            x, y = self._screen[i]
            pygame.draw.circle(surface, self._rgb[i].tolist(), (int(x), int(y)), int(radii[i]))

    def draw_hand(self, surface, hand_position):
        pts, visible, _ = self.camera.to_screen([hand_position], self.width, self.height)
        if visible[0]:
            x, y = pts[0]
            pygame.draw.circle(surface, (255, 255, 255), (int(x), int(y)), 14, 2)
