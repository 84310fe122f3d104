# gesture/types.py
from dataclasses import dataclass

from config import HAND_SENTINEL

NONE = "none"
OPEN = "open"
POINTING = "pointing"
FIST = "fist"


@dataclass
class GestureState:
    gesture: str = NONE
    hand_position: tuple = HAND_SENTINEL
    switch_template: bool = False  # 一次性事件：渲染线程读取后清零
    label: str = "INIT"
    hand_seen: bool = False
    cam_info: str = ""
