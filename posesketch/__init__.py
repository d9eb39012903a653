"""Pose sketches - webcam keypoint overlays and gesture counters"""
from .core.keypoints import (
    Keypoint, Box, Detection, DetectionDecodeError,
    get_keypoint, is_visible, decode_detections,
)
from .core.geometry import Point, distance, angle, centroid
from .core.threshold import ThresholdCounter, ThresholdState
from .core.context import SketchContext

__version__ = "1.0.0"
