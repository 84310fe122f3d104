# gesture/detector.py
import mediapipe as mp

from config import (
    MP_MAX_NUM_HANDS, MP_MODEL_COMPLEXITY,
    MP_MIN_DETECTION_CONFIDENCE, MP_MIN_TRACKING_CONFIDENCE,
)
from logger import get_logger

logger = get_logger("HandDetector")


class HandDetector:
    """
    MediaPipe Hands behind one call: RGB frame in, list of landmark sets out
    (empty when no hand). Uses `mp.solutions.hands` where the installed
    MediaPipe still ships it, otherwise the Tasks API HandLandmarker.
    """

    def __init__(self):
        self._hands = None
        self._landmarker = None
        self._timestamp_ms = 0

        if hasattr(mp, "solutions") and hasattr(mp.solutions, "hands"):
            self._hands = mp.solutions.hands.Hands(
                static_image_mode=False,
                max_num_hands=MP_MAX_NUM_HANDS,
                model_complexity=MP_MODEL_COMPLEXITY,
                min_detection_confidence=MP_MIN_DETECTION_CONFIDENCE,
                min_tracking_confidence=MP_MIN_TRACKING_CONFIDENCE,
            )
            logger.info("Using Solutions API (mp.solutions.hands)")
        else:
            from mediapipe.tasks import python as mp_python
            from mediapipe.tasks.python import vision as mp_vision
            from gesture.model import ensure_hand_landmarker_model

            options = mp_vision.HandLandmarkerOptions(
                base_options=mp_python.BaseOptions(model_asset_path=ensure_hand_landmarker_model()),
                running_mode=mp_vision.RunningMode.VIDEO,
                num_hands=MP_MAX_NUM_HANDS,
                min_hand_detection_confidence=MP_MIN_DETECTION_CONFIDENCE,
                min_hand_presence_confidence=MP_MIN_DETECTION_CONFIDENCE,
                min_tracking_confidence=MP_MIN_TRACKING_CONFIDENCE,
            )
            self._landmarker = mp_vision.HandLandmarker.create_from_options(options)
            logger.info("Using Tasks API (HandLandmarker, VIDEO mode)")

    def process(self, rgb, timestamp_ms: int = None):
        if self._hands is not None:
            result = self._hands.process(rgb)
            if not result.multi_hand_landmarks:
                return []
            return [h.landmark for h in result.multi_hand_landmarks]

        # VIDEO mode needs strictly increasing timestamps
        if timestamp_ms is None or timestamp_ms <= self._timestamp_ms:
            timestamp_ms = self._timestamp_ms + 1
        self._timestamp_ms = timestamp_ms

        image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)
        result = self._landmarker.detect_for_video(image, timestamp_ms)
        return list(result.hand_landmarks or [])

    def close(self):
        if self._hands is not None:
            self._hands.close()
            self._hands = None
        if self._landmarker is not None:
            self._landmarker.close()
            self._landmarker = None
