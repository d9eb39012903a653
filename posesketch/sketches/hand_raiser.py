"""
Hand raiser - count how often a tracked body point rises above another

Defaults track the right wrist against the nose. The band above the threshold
point is shaded and a dashed line marks its height.
"""
from .base import Sketch
from ..core import config
from ..core.keypoints import get_keypoint, is_visible
from ..ui import overlay


class HandRaiserSketch(Sketch):
    title = "Hand Raiser"

    def create_detector(self, ctx):
        from ..detectors import MediaPipePoseDetector
        return MediaPipePoseDetector()

    def points(self, ctx):
        threshold_point = get_keypoint(ctx.detections, ctx.threshold_index)
        tracking_point = get_keypoint(ctx.detections, ctx.tracking_index)
        return threshold_point, tracking_point

    def update(self, ctx):
        """Advance the crossing counter; True when a new crossing happened"""
        threshold_point, tracking_point = self.points(ctx)
        crossed = ctx.threshold.update(threshold_point, tracking_point, ctx.confidence_threshold)
        if crossed:
            print("Threshold crossed!")
        return crossed

    def status_lines(self, ctx):
        threshold_point, tracking_point = self.points(ctx)
        if threshold_point is None or tracking_point is None:
            return [f"Threshold Crosses: {ctx.threshold.count}"]
        position = "ABOVE" if tracking_point.y < threshold_point.y else "BELOW"
        return [
            f"Threshold Crosses: {ctx.threshold.count}",
            f"Threshold Y: {threshold_point.y:.2f}",
            f"Tracking Y: {tracking_point.y:.2f}",
            f"Position: {position} threshold",
        ]

    def render(self, frame, ctx):
        threshold_point, tracking_point = self.points(ctx)
        if not (is_visible(threshold_point, ctx.confidence_threshold)
                and is_visible(tracking_point, ctx.confidence_threshold)):
            return frame

        overlay.draw_threshold_area(frame, threshold_point)
        overlay.draw_threshold_line(frame, threshold_point)
        overlay.show_point(frame, threshold_point, config.COLOR_THRESHOLD)
        overlay.show_point(frame, tracking_point, config.COLOR_TRACKING)
        overlay.draw_status_lines(frame, self.status_lines(ctx))
        return frame
