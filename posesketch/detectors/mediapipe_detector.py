"""
MediaPipe-based body pose and hand detection
"""
import logging

import cv2

from .base import PoseDetectorBase
from .landmarks import landmarks_to_detection
from ..core.config import (
    MAX_HANDS, MP_MODEL_COMPLEXITY,
    MP_MIN_DETECTION_CONFIDENCE, MP_MIN_TRACKING_CONFIDENCE,
)
from ..core.keypoints import HAND_KEYPOINT_NAMES, MOVENET_KEYPOINT_NAMES

logger = logging.getLogger(__name__)

# MediaPipe Pose landmark index for each MoveNet keypoint, in MoveNet order
POSE_TO_MOVENET = [0, 2, 5, 7, 8, 11, 12, 13, 14, 15, 16, 23, 24, 25, 26, 27, 28]


def _import_mediapipe():
    try:
        import mediapipe as mp
    except ImportError as e:
        raise RuntimeError("MediaPipe is not installed. Install it with: pip install mediapipe") from e
    return mp


def _to_rgb(frame):
    # Marking the array read-only lets MediaPipe skip a copy
    rgb_frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
    rgb_frame.flags.writeable = False
    return rgb_frame


class MediaPipePoseDetector(PoseDetectorBase):
    """Single-person body pose mapped onto the 17 MoveNet keypoints"""

    def __init__(self, model_complexity=MP_MODEL_COMPLEXITY):
        mp = _import_mediapipe()
        self.pose = mp.solutions.pose.Pose(
            static_image_mode=False,
            model_complexity=model_complexity,
            enable_segmentation=False,
            smooth_landmarks=True,
            min_detection_confidence=MP_MIN_DETECTION_CONFIDENCE,
            min_tracking_confidence=MP_MIN_TRACKING_CONFIDENCE,
        )

    def process_frame(self, frame):
        h, w = frame.shape[:2]
        results = self.pose.process(_to_rgb(frame))
        if not results or not results.pose_landmarks:
            return []

        detection = landmarks_to_detection(
            results.pose_landmarks.landmark, w, h,
            MOVENET_KEYPOINT_NAMES, index_map=POSE_TO_MOVENET,
        )
        return [detection]

    def cleanup(self):
        """Release MediaPipe resources"""
        try:
            self.pose.close()
        except (RuntimeError, ValueError) as e:
            logger.debug("Ignoring error while closing pose model: %s", e)


class MediaPipeHandDetector(PoseDetectorBase):
    """Up to max_hands hands, 21 keypoints each"""

    def __init__(self, max_hands=MAX_HANDS, model_complexity=MP_MODEL_COMPLEXITY):
        mp = _import_mediapipe()
        self.max_hands = max_hands
        self.hands = mp.solutions.hands.Hands(
            static_image_mode=False,
            model_complexity=model_complexity,
            min_detection_confidence=MP_MIN_DETECTION_CONFIDENCE,
            min_tracking_confidence=MP_MIN_TRACKING_CONFIDENCE,
            max_num_hands=max_hands,
        )

    def process_frame(self, frame):
        h, w = frame.shape[:2]
        results = self.hands.process(_to_rgb(frame))
        if not results or not results.multi_hand_landmarks:
            return []

        handedness = results.multi_handedness or []
        detections = []
        for i, hand_landmarks in enumerate(results.multi_hand_landmarks):
            score = handedness[i].classification[0].score if i < len(handedness) else 1.0
            # Hand landmarks carry no per-point score, the hand score stands in
            detections.append(landmarks_to_detection(
                hand_landmarks.landmark, w, h, HAND_KEYPOINT_NAMES,
                confidence=float(score), use_visibility=False,
            ))
        return detections

    def cleanup(self):
        """Release MediaPipe resources"""
        try:
            self.hands.close()
        except (RuntimeError, ValueError) as e:
            logger.debug("Ignoring error while closing hands model: %s", e)
