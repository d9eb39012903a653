"""
Single point to fixed point - distance and angle from a reference point

Left/right arrows pick the body point, a click moves the reference point and
'a' toggles all points with bounding boxes and the centroid.
"""
from collections import namedtuple

import cv2

from .base import Sketch
from ..core import config
from ..core.geometry import angle, distance
from ..core.keypoints import MOVENET_KEYPOINT_NAMES, get_keypoint, is_visible
from ..ui import overlay

Measurement = namedtuple('Measurement', ['point', 'distance', 'angle'])


class FixedPointSketch(Sketch):
    title = "Point to Fixed Point"

    def __init__(self):
        self.measurement = None

    def create_detector(self, ctx):
        from ..detectors import MediaPipePoseDetector
        return MediaPipePoseDetector()

    def update(self, ctx):
        """Measure the selected body point from the reference point, or None"""
        point = get_keypoint(ctx.detections, ctx.body_point_index)
        if not is_visible(point, ctx.confidence_threshold):
            self.measurement = None
        else:
            self.measurement = Measurement(
                point, distance(ctx.reference, point), angle(ctx.reference, point))
        return self.measurement

    def render(self, frame, ctx):
        if ctx.show_all_points:
            overlay.show_all_points(frame, ctx.detections, ctx.confidence_threshold)
            overlay.show_centroid(frame, ctx.detections)

        overlay.draw_reference_point(frame, ctx.reference)

        if self.measurement is not None:
            overlay.show_point(frame, self.measurement.point, config.COLOR_POINT)
            overlay.draw_measurement(frame, ctx.reference, self.measurement.point)
            overlay.draw_angle(frame, ctx.reference, self.measurement.point)

        name = MOVENET_KEYPOINT_NAMES[ctx.body_point_index % len(MOVENET_KEYPOINT_NAMES)]
        overlay.draw_status_lines(frame, [f"Point {ctx.body_point_index}: {name}"])
        return frame

    def on_key(self, key, ctx):
        if key == 'left':
            ctx.select_previous_point()
        elif key == 'right':
            ctx.select_next_point()
        elif key == 'a':
            ctx.toggle_all_points()
        else:
            return False
        return True

    def on_mouse(self, event, x, y, ctx):
        if event != cv2.EVENT_LBUTTONDOWN:
            return False
        ctx.move_reference_point(x, y)
        return True

