"""Keypoint detector implementations"""
from .base import PoseDetectorBase
from .landmarks import landmarks_to_detection
from .mediapipe_detector import MediaPipePoseDetector, MediaPipeHandDetector

__all__ = ['PoseDetectorBase', 'landmarks_to_detection',
           'MediaPipePoseDetector', 'MediaPipeHandDetector']
