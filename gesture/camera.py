# gesture/camera.py
from typing import Optional, Tuple
import cv2

from config import CAM_INDEX_CANDIDATES, CAP_BACKENDS, CAM_W, CAM_H
from logger import get_logger

logger = get_logger("Camera")


def try_open_camera() -> Tuple[Optional[cv2.VideoCapture], str]:
    """
    依次尝试不同 index 与 backend，返回 cap 与描述信息
    """
    for idx in CAM_INDEX_CANDIDATES:
        for name in CAP_BACKENDS:
            backend = getattr(cv2, f"CAP_{name}", None)
            if backend is None:
                cap = cv2.VideoCapture(idx)
            else:
                cap = cv2.VideoCapture(idx, backend)

            if cap is not None and cap.isOpened():
                cap.set(cv2.CAP_PROP_FRAME_WIDTH, CAM_W)
                cap.set(cv2.CAP_PROP_FRAME_HEIGHT, CAM_H)
                return cap, f"CAM idx={idx}, backend={name}"

            logger.debug(f"idx={idx} backend={name} not available")
            if cap is not None:
                cap.release()

    return None, "CAMERA_OPEN_FAILED"
