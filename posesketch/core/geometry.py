"""
Elementary keypoint geometry: distance, angle, centroid
"""
import math
from collections import namedtuple

Point = namedtuple('Point', ['x', 'y'])


def distance(a, b):
    """
    Euclidean distance between two points in pixels

    Args:
        a, b: Objects with x and y attributes (Keypoint, Point)

    Returns:
        float, or None if either point is missing
    """
    if a is None or b is None:
        return None
    return math.hypot(b.x - a.x, b.y - a.y)


def angle(base, end):
    """
    Angle of the vector base -> end from the horizontal, in degrees [0, 360)

    Screen y grows downward, so 90 points down. A zero-length vector gives 0.
    """
    if base is None or end is None:
        return None
    degrees = math.degrees(math.atan2(end.y - base.y, end.x - base.x))
    if degrees < 0:
        degrees += 360
    # -0.0 and tiny negatives can round to exactly 360
    return degrees if degrees < 360 else 0.0


def midpoint(a, b):
    if a is None or b is None:
        return None
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def centroid(box):
    """Center of a bounding box, or (0, 0) when there is no box."""
    if box is None:
        return Point(0, 0)
    return Point((box.x_min + box.x_max) / 2, (box.y_min + box.y_max) / 2)


def detections_centroid(detections):
    """Centroid of the first detection that carries a bounding box."""
    boxes = [d.box for d in detections or [] if d.box is not None]
    return centroid(boxes[0] if boxes else None)
