"""
Per-sketch state owned by the frame loop
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from . import config
from .geometry import Point
from .keypoints import Detection
from .threshold import ThresholdCounter


@dataclass
class SketchContext:
    """Everything a sketch reads or changes between frames."""
    detections: List[Detection] = field(default_factory=list)
    threshold: ThresholdCounter = field(default_factory=ThresholdCounter)
    show_video: bool = config.SHOW_VIDEO
    flip_video: bool = config.FLIP_VIDEO
    show_all_points: bool = False
    confidence_threshold: float = config.CONFIDENCE_THRESHOLD
    threshold_index: int = config.THRESHOLD_INDEX
    tracking_index: int = config.TRACKING_INDEX
    body_point_index: int = config.BODY_POINT_INDEX
    point_count: int = config.BODY_KEYPOINT_COUNT
    reference_point: Tuple[float, float] = config.REFERENCE_POINT
    width: int = config.CAMERA_WIDTH
    height: int = config.CAMERA_HEIGHT

    @classmethod
    def from_config(cls, settings):
        """Build a context from a dict returned by load_sketch_config."""
        return cls(
            show_video=settings['show_video'],
            flip_video=settings['flip_video'],
            confidence_threshold=settings['confidence_threshold'],
            threshold_index=settings['threshold_index'],
            tracking_index=settings['tracking_index'],
            body_point_index=settings['body_point_index'],
            reference_point=tuple(settings['reference_point']),
            width=settings['camera_width'],
            height=settings['camera_height'],
        )

    @property
    def reference(self):
        return Point(*self.reference_point)

    def receive(self, channel):
        """Swap in the newest detections; keep the previous ones if none arrived."""
        latest = channel.latest()
        if latest is not None:
            self.detections = latest
            return True
        return False

    def toggle_video(self):
        self.show_video = not self.show_video

    def toggle_all_points(self):
        self.show_all_points = not self.show_all_points

    def select_next_point(self):
        self.body_point_index = (self.body_point_index + 1) % self.point_count

    def select_previous_point(self):
        self.body_point_index = (self.body_point_index - 1 + self.point_count) % self.point_count

    def move_reference_point(self, x, y):
        self.reference_point = (x, y)
