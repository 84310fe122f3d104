# gesture/worker.py
import time
import threading
import cv2

from config import MIRROR, SHOW_CAMERA, INDEX_FINGER_TIP
from gesture.types import GestureState
from gesture.camera import try_open_camera
from gesture.detector import HandDetector
from gesture.tracking import HandTracking
from gesture.utils import lm_xy
from logger import get_logger

logger = get_logger("GestureWorker")

PREVIEW_WINDOW = "Camera (press Q to close this window)"


class GestureWorker(threading.Thread):
    """Capture + hand detection on its own thread; results land in `state` under `lock`."""

    def __init__(self, state: GestureState, camera):
        super().__init__(daemon=True)
        self.state = state
        self._stop_event = threading.Event()
        self.lock = threading.Lock()

        self.tracking = HandTracking(state, camera, self.lock)
        self.show_camera = SHOW_CAMERA

    def stop(self):
        self._stop_event.set()

    def _set_failure(self, label: str):
        with self.lock:
            self.state.label = label
            self.state.hand_seen = False

    def run(self):
        cap = None
        detector = None
        try:
            cap, cam_info = try_open_camera()
            with self.lock:
                self.state.cam_info = cam_info

            if cap is None:
                self._set_failure("CAMERA_OPEN_FAILED")
                logger.error("CAMERA_OPEN_FAILED. Close apps using camera or try other index.")
                return

            logger.info(f"Opened: {cam_info}")
            detector = HandDetector()
            t0 = time.time()

            while not self._stop_event.is_set():
                ok, frame = cap.read()
                if not ok:
                    self._set_failure("CAMERA_READ_FAILED")
                    time.sleep(0.01)
                    continue

                if MIRROR:
                    frame = cv2.flip(frame, 1)

                rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
                landmark_sets = detector.process(rgb, int((time.time() - t0) * 1000))
                gesture = self.tracking.on_results(landmark_sets)

                if self.show_camera:
                    self._show_preview(frame, landmark_sets, cam_info, gesture)

        except Exception:
            self._set_failure("WORKER_EXCEPTION")
            logger.exception("Exception in capture loop")

        finally:
            if detector is not None:
                detector.close()
            if cap is not None:
                cap.release()
                try:
                    cv2.destroyAllWindows()
                except Exception as e:
                    logger.debug(f"destroyAllWindows: {e}")

    def _show_preview(self, frame, landmark_sets, cam_info, gesture):
        h, w = frame.shape[:2]
        if landmark_sets:
            landmarks = landmark_sets[0]
            for lm in landmarks:
                x, y = lm_xy(lm, w, h)
                cv2.circle(frame, (int(x), int(y)), 4, (0, 255, 0), -1)
            x, y = lm_xy(landmarks[INDEX_FINGER_TIP], w, h)
            cv2.circle(frame, (int(x), int(y)), 10, (0, 255, 255), 2)

        cv2.putText(frame, f"{cam_info}", (10, 24), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (0, 255, 0), 2)
        cv2.putText(frame, gesture.upper(), (10, 52), cv2.FONT_HERSHEY_SIMPLEX, 0.9, (0, 255, 0), 2)
        cv2.imshow(PREVIEW_WINDOW, frame)
        k = cv2.waitKey(1) & 0xFF
        if k in (ord('q'), ord('Q')):
            cv2.destroyWindow(PREVIEW_WINDOW)
            self.show_camera = False
