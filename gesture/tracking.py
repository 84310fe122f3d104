# gesture/tracking.py
import threading

from config import HAND_SENTINEL, INDEX_FINGER_TIP
from gesture.classifier import detect_gesture
from gesture.types import GestureState, NONE, OPEN, POINTING, FIST
from gesture.utils import GestureEdge
from logger import get_logger
from particles.mapper import screen_to_world

logger = get_logger("HandTracking")

LABELS = {
    NONE: "NO_HAND",
    OPEN: "OPEN",
    POINTING: "POINTING -> SWITCH",
    FIST: "FIST -> BLAST",
}


class HandTracking:
    """
    Per-detection callback: landmark sets in, shared GestureState out.

    Writes are last-write-wins; only `switch_template` is accumulated until
    the render loop consumes it.
    """

    def __init__(self, state: GestureState, camera, lock: threading.Lock = None):
        self.state = state
        self.camera = camera
        self.lock = lock or threading.Lock()
        self.pointing_edge = GestureEdge(POINTING)

    def on_results(self, landmark_sets):
        if landmark_sets:
            landmarks = landmark_sets[0]
            gesture = detect_gesture(landmarks)
        else:
            landmarks = None
            gesture = NONE

        if gesture == NONE:
            position = HAND_SENTINEL
        else:
            tip = landmarks[INDEX_FINGER_TIP]
            position = tuple(float(v) for v in screen_to_world(tip.x, tip.y, self.camera))

        switch = self.pointing_edge.update(gesture)
        if gesture != self.pointing_edge.previous:
            if switch:
                logger.info("Gesture detected: POINTING (switch template)")
            elif gesture == FIST:
                logger.info("Gesture detected: FIST (color blast)")
            else:
                logger.debug(f"Gesture: {gesture}")

        with self.lock:
            self.state.gesture = gesture
            self.state.hand_position = position
            self.state.hand_seen = gesture != NONE
            self.state.label = LABELS.get(gesture, gesture.upper())
            if switch:
                self.state.switch_template = True

        return gesture
