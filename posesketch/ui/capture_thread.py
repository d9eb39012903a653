"""
Camera capture and detection thread, separated from the frame loop
"""
import logging
import threading
import time

import cv2

from ..core.config import CAMERA_WIDTH, CAMERA_HEIGHT, CAMERA_FPS
from ..core.keypoints import DetectionDecodeError
from ..core.utils import find_camera, setup_camera

logger = logging.getLogger(__name__)


class CaptureThread:
    """Reads camera frames, runs the detector and publishes detections"""

    def __init__(self, detector, channel, flip_video=True):
        self.detector = detector
        self.channel = channel
        self.flip_video = flip_video

        self.cap = None
        self.running = False
        self.thread = None

        self.current_frame = None
        self.frame_lock = threading.Lock()

    def start(self, camera_index=None, width=CAMERA_WIDTH, height=CAMERA_HEIGHT, fps=CAMERA_FPS):
        """Open the camera and start the worker; False if no camera"""
        if self.running:
            return False

        self.cap = find_camera(camera_index=camera_index)
        if self.cap is None:
            return False
        setup_camera(self.cap, width, height, fps)

        self.running = True
        self.thread = threading.Thread(target=self._capture_loop, daemon=True)
        self.thread.start()
        return True

    def stop(self):
        self.running = False
        if self.thread:
            self.thread.join(timeout=2.0)
        if self.cap:
            self.cap.release()
            self.cap = None

    def get_latest_frame(self):
        """Latest captured frame (thread-safe)"""
        with self.frame_lock:
            return self.current_frame

    def process(self, frame):
        """Mirror if needed, detect, and publish one frame's detections"""
        if self.flip_video:
            frame = cv2.flip(frame, 1)

        with self.frame_lock:
            self.current_frame = frame

        try:
            detections = self.detector.process_frame(frame)
        except DetectionDecodeError as e:
            logger.warning("Dropping malformed detections: %s", e)
            detections = []
        self.channel.publish(detections)
        return detections

    def _capture_loop(self):
        while self.running:
            ret, frame = self.cap.read()
            if not ret:
                time.sleep(0.01)
                continue

            try:
                self.process(frame)
            except Exception:
                logger.exception("Error in capture loop")
                self.channel.publish([])
                time.sleep(0.1)

    def is_running(self):
        return self.running and self.cap is not None and self.cap.isOpened()
