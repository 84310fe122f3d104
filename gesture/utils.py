# gesture/utils.py
from dataclasses import dataclass

import numpy as np

from gesture.types import NONE


@dataclass
class GestureEdge:
    """Fires once when the gesture enters `target`; holding it does not re-fire."""
    target: str
    previous: str = NONE
    current: str = NONE

    def update(self, gesture: str) -> bool:
        """返回 True：本帧刚进入 target（边沿触发）"""
        self.previous = self.current
        self.current = gesture
        return self.current == self.target and self.previous != self.target


def lm_xy(lm, w, h):
    return np.array([lm.x * w, lm.y * h], dtype=np.float32)
