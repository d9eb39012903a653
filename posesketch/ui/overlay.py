"""
OpenCV overlays for keypoints, measurements and threshold lines
"""
import cv2

from ..core import config
from ..core.geometry import angle, detections_centroid, distance, midpoint
from ..core.keypoints import visible_keypoints

FONT = cv2.FONT_HERSHEY_SIMPLEX


def _pt(point):
    return int(round(point.x)), int(round(point.y))


def put_centered_text(frame, text, center, scale, color, thickness=1):
    (text_w, text_h), _ = cv2.getTextSize(text, FONT, scale, thickness)
    x, y = center
    cv2.putText(frame, text, (int(x - text_w / 2), int(y + text_h / 2)),
                FONT, scale, color, thickness, cv2.LINE_AA)


def show_point(frame, point, color, radius=config.POINT_RADIUS):
    """
    Draw one keypoint: filled circle, its index, and a name/coordinate label

    Args:
        frame: BGR image to draw on
        point: Keypoint (or any object with x and y)
        color: Circle color (B, G, R)
        radius: Circle radius in pixels
    """
    if point is None:
        return frame

    center = _pt(point)
    cv2.circle(frame, center, radius, color, -1)

    index = getattr(point, 'index', None)
    if index is not None:
        put_centered_text(frame, str(index), center, 0.35, (255, 255, 255))

    label_y = center[1] + radius + 10
    name = getattr(point, 'name', None)
    if name:
        put_centered_text(frame, name, (center[0], label_y), 0.3, config.COLOR_LABEL)
        label_y += 12
    put_centered_text(frame, f"({round(point.x)}, {round(point.y)})",
                      (center[0], label_y), 0.3, config.COLOR_LABEL)
    return frame


def show_all_points(frame, detections, confidence_threshold, color=config.COLOR_POINT):
    """Draw every detection's box with size labels and all confident points"""
    for i, detection in enumerate(detections):
        box = detection.box
        if box is not None:
            top_left = (int(box.x_min), int(box.y_min))
            bottom_right = (int(box.x_max), int(box.y_max))
            cv2.rectangle(frame, top_left, bottom_right, color, 2)

            center_x = box.x_min + box.width / 2
            put_centered_text(frame, f"Width: {round(box.width)}px",
                              (center_x, box.y_min - 10), 0.4, color)
            cv2.putText(frame, f"Height: {round(box.height)}px",
                        (int(box.x_min) + 5, int(box.y_min + box.height / 2)),
                        FONT, 0.4, color, 1, cv2.LINE_AA)
            put_centered_text(frame, f"Person {i}", (center_x, box.y_min + 20), 0.4, color)

        for point in visible_keypoints(detection, confidence_threshold):
            show_point(frame, point, color)
    return frame


def show_centroid(frame, detections):
    c = detections_centroid(detections)
    center = _pt(c)
    cv2.circle(frame, center, 8, config.COLOR_CENTROID, -1)
    put_centered_text(frame, "C", center, 0.35, (255, 255, 255))
    put_centered_text(frame, f"Centroid: ({round(c.x)}, {round(c.y)})",
                      (center[0], center[1] + 18), 0.3, config.COLOR_LABEL)
    return frame


def draw_threshold_area(frame, threshold_point, color=config.COLOR_THRESHOLD,
                        alpha=config.THRESHOLD_AREA_ALPHA):
    """Shade the band above the threshold point"""
    if threshold_point is None:
        return frame
    y = max(0, min(frame.shape[0], int(threshold_point.y)))
    if y == 0:
        return frame
    overlay = frame.copy()
    cv2.rectangle(overlay, (0, 0), (frame.shape[1], y), color, -1)
    cv2.addWeighted(overlay, alpha, frame, 1 - alpha, 0, frame)
    return frame


def draw_threshold_line(frame, threshold_point, color=config.COLOR_THRESHOLD, dash=5, gap=5):
    """Dashed horizontal line at the threshold height"""
    if threshold_point is None:
        return frame
    y = int(threshold_point.y)
    width = frame.shape[1]
    for x in range(0, width, dash + gap):
        cv2.line(frame, (x, y), (min(x + dash, width), y), color, 2)
    return frame


def draw_measurement(frame, a, b, color=config.COLOR_MEASURE):
    """Line between two points with the rounded pixel distance at its middle"""
    d = distance(a, b)
    if d is None:
        return None
    cv2.line(frame, _pt(a), _pt(b), color, 1, cv2.LINE_AA)
    mid = midpoint(a, b)
    cv2.putText(frame, f"{round(d)}px", _pt(mid), FONT, 0.45, color, 1, cv2.LINE_AA)
    return d


def draw_angle(frame, base, end, color=config.COLOR_MEASURE, radius=config.ARC_RADIUS):
    """Arc from 0 degrees to the measured angle, a 0-degree tick and the label"""
    a = angle(base, end)
    if a is None:
        return None
    center = _pt(base)
    cv2.ellipse(frame, center, (radius, radius), 0, 0, a, color, 1, cv2.LINE_AA)
    overlay = frame.copy()
    cv2.line(overlay, center, (center[0] + radius, center[1]), color, 1, cv2.LINE_AA)
    cv2.addWeighted(overlay, 0.5, frame, 0.5, 0, frame)
    cv2.putText(frame, f"{round(a)} deg", (center[0] + radius + 5, center[1]),
                FONT, 0.45, color, 1, cv2.LINE_AA)
    return a


def draw_reference_point(frame, point, color=config.COLOR_MEASURE):
    cv2.circle(frame, _pt(point), 5, color, -1)
    return frame


def draw_status_lines(frame, lines, origin=(10, 30), color=config.COLOR_TEXT, line_height=20):
    x, y = origin
    for line in lines:
        cv2.putText(frame, line, (x, y), FONT, 0.55, color, 1, cv2.LINE_AA)
        y += line_height
    return frame
