"""
Utility functions for camera access and frame timing
"""
import logging
import platform
import time

import cv2

logger = logging.getLogger(__name__)


def find_camera(max_attempts=5, camera_index=None):
    """
    Find and open an available camera with OS-specific backends

    Args:
        max_attempts: Maximum number of camera indices to try
        camera_index: Only try this index when given

    Returns:
        cv2.VideoCapture object or None if no camera found
    """
    os_name = platform.system()

    if os_name == 'Darwin':
        backends = [cv2.CAP_AVFOUNDATION]
    elif os_name == 'Windows':
        backends = [cv2.CAP_DSHOW, cv2.CAP_ANY]
    else:
        backends = [cv2.CAP_V4L2, cv2.CAP_ANY]

    indices = [camera_index] if camera_index is not None else range(max_attempts)
    for index in indices:
        for backend in backends:
            test_cap = cv2.VideoCapture(index, backend)
            if not test_cap.isOpened():
                test_cap.release()
                continue

            ret, _ = test_cap.read()
            if ret:
                logger.debug("Opened camera %d with backend %d", index, backend)
                return test_cap
            test_cap.release()

    return None


def setup_camera(cap, width=640, height=480, fps=30):
    """Configure capture size and frame rate"""
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    cap.set(cv2.CAP_PROP_FPS, fps)


class FPSCounter:
    """Calculate and smooth FPS over time"""

    def __init__(self, smoothing=0.9, clock=time.time):
        self.fps = 0
        self.clock = clock
        self.prev_time = clock()
        self.smoothing = smoothing

    def update(self):
        curr_time = self.clock()
        if curr_time - self.prev_time > 0:
            instant_fps = 1 / (curr_time - self.prev_time)
            self.fps = self.fps * self.smoothing + instant_fps * (1 - self.smoothing)
        self.prev_time = curr_time
        return self.fps

    def get_fps(self):
        return int(self.fps)
