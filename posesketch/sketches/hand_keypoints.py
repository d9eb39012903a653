"""
Hand keypoints - draw every landmark of up to four hands
"""
import cv2

from .base import Sketch
from ..core import config


class HandKeypointsSketch(Sketch):
    title = "Hand Keypoints"

    def __init__(self, max_hands=config.MAX_HANDS):
        self.max_hands = max_hands

    def create_detector(self, ctx):
        from ..detectors import MediaPipeHandDetector
        return MediaPipeHandDetector(max_hands=self.max_hands)

    def update(self, ctx):
        return len(ctx.detections)

    def render(self, frame, ctx):
        for hand in ctx.detections:
            for keypoint in hand.keypoints:
                cv2.circle(frame, (int(keypoint.x), int(keypoint.y)), 5, config.COLOR_POINT, -1)
        return frame
