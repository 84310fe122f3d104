# particles/buffers.py
from dataclasses import dataclass

import numpy as np

from config import BASE_SIZE


@dataclass
class ParticleBuffers:
    """
    Position/color arrays shared with the renderer.

    Both are float32 (count, 3), C-contiguous, so `.ravel()` is the flat
    3*count layout. The row count is fixed for the buffers' lifetime.
    """
    positions: np.ndarray
    colors: np.ndarray
    size: float = BASE_SIZE
    positions_dirty: bool = True
    colors_dirty: bool = True
    generation: int = 0

    @classmethod
    def allocate(cls, count: int) -> "ParticleBuffers":
        return cls(
            positions=np.zeros((count, 3), dtype=np.float32),
            colors=np.zeros((count, 3), dtype=np.float32),
        )

    @property
    def count(self) -> int:
        return len(self.positions)

    def mark_dirty(self):
        self.positions_dirty = True
        self.colors_dirty = True

    def rebind(self):
        """Contents were regenerated wholesale; renderer must re-upload both."""
        self.generation += 1
        self.mark_dirty()
