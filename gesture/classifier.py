# gesture/classifier.py
"""
Coarse gesture heuristics on normalized landmark y-coordinates.

Screen-space y grows downward, so "above" means a smaller y. The checks are
2D only; a hand held sideways can be misread.
"""
from config import (
    NUM_LANDMARKS,
    WRIST, THUMB_TIP,
    INDEX_FINGER_MCP, INDEX_FINGER_TIP,
    MIDDLE_FINGER_MCP, MIDDLE_FINGER_TIP,
    THUMB_UP_WRIST_RATIO,
)
from gesture.types import NONE, OPEN, POINTING, FIST


def index_finger_up(landmarks) -> bool:
    return landmarks[INDEX_FINGER_TIP].y < landmarks[INDEX_FINGER_MCP].y


def thumb_up(landmarks) -> bool:
    return landmarks[THUMB_TIP].y < landmarks[WRIST].y * THUMB_UP_WRIST_RATIO


def middle_finger_folded(landmarks) -> bool:
    # tip below its base
    return landmarks[MIDDLE_FINGER_TIP].y > landmarks[MIDDLE_FINGER_MCP].y


def detect_gesture(landmarks) -> str:
    """
    Priority: pointing > fist > open.

    pointing: index tip above its base and thumb not raised.
    fist: index not up and middle finger folded.
    """
    if landmarks is None or len(landmarks) < NUM_LANDMARKS:
        return NONE

    index_up = index_finger_up(landmarks)
    if index_up and not thumb_up(landmarks):
        return POINTING
    if not index_up and middle_finger_folded(landmarks):
        return FIST
    return OPEN
