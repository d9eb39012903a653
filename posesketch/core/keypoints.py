"""
Keypoint data model and safe lookup

Detections arrive from a pose or hand model once per inference. The list can be
empty and any keypoint can be occluded, so every accessor here returns None
instead of raising.
"""
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import List, Optional, Sequence


class DetectionDecodeError(ValueError):
    """Raised when external model output cannot be turned into a Detection."""


@dataclass(frozen=True)
class Keypoint:
    """A single 2D landmark in pixel space."""
    x: float
    y: float
    confidence: float
    index: int
    name: Optional[str] = None


@dataclass(frozen=True)
class Box:
    """Axis-aligned bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min


@dataclass
class Detection:
    """One tracked subject (person or hand) in one frame."""
    keypoints: List[Keypoint] = field(default_factory=list)
    box: Optional[Box] = None
    confidence: float = 0.0


class KeypointIndex:
    """MoveNet (COCO 17) body keypoint indices."""

    NOSE = 0
    LEFT_EYE = 1
    RIGHT_EYE = 2
    LEFT_EAR = 3
    RIGHT_EAR = 4
    LEFT_SHOULDER = 5
    RIGHT_SHOULDER = 6
    LEFT_ELBOW = 7
    RIGHT_ELBOW = 8
    LEFT_WRIST = 9
    RIGHT_WRIST = 10
    LEFT_HIP = 11
    RIGHT_HIP = 12
    LEFT_KNEE = 13
    RIGHT_KNEE = 14
    LEFT_ANKLE = 15
    RIGHT_ANKLE = 16


MOVENET_KEYPOINT_NAMES = [
    "nose",
    "left_eye",
    "right_eye",
    "left_ear",
    "right_ear",
    "left_shoulder",
    "right_shoulder",
    "left_elbow",
    "right_elbow",
    "left_wrist",
    "right_wrist",
    "left_hip",
    "right_hip",
    "left_knee",
    "right_knee",
    "left_ankle",
    "right_ankle",
]


class HandLandmarkIndex:
    """Hand landmark indices, 21 per hand."""

    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_FINGER_MCP = 5
    INDEX_FINGER_PIP = 6
    INDEX_FINGER_DIP = 7
    INDEX_FINGER_TIP = 8
    MIDDLE_FINGER_MCP = 9
    MIDDLE_FINGER_PIP = 10
    MIDDLE_FINGER_DIP = 11
    MIDDLE_FINGER_TIP = 12
    RING_FINGER_MCP = 13
    RING_FINGER_PIP = 14
    RING_FINGER_DIP = 15
    RING_FINGER_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20


HAND_KEYPOINT_NAMES = [
    "wrist",
    "thumb_cmc",
    "thumb_mcp",
    "thumb_ip",
    "thumb_tip",
    "index_finger_mcp",
    "index_finger_pip",
    "index_finger_dip",
    "index_finger_tip",
    "middle_finger_mcp",
    "middle_finger_pip",
    "middle_finger_dip",
    "middle_finger_tip",
    "ring_finger_mcp",
    "ring_finger_pip",
    "ring_finger_dip",
    "ring_finger_tip",
    "pinky_finger_mcp",
    "pinky_finger_pip",
    "pinky_finger_dip",
    "pinky_finger_tip",
]


def get_keypoint(detections: Optional[Sequence[Detection]], point_index: int,
                 subject_index: int = 0) -> Optional[Keypoint]:
    """
    Safely get a keypoint for one detected subject

    Args:
        detections: Latest detections (may be empty or None)
        point_index: Schema position of the keypoint
        subject_index: Which detected person/hand to read

    Returns:
        Keypoint, or None when the subject or point does not exist
    """
    if not detections:
        return None
    if subject_index < 0 or subject_index >= len(detections):
        return None

    keypoints = detections[subject_index].keypoints
    if not keypoints or point_index < 0 or point_index >= len(keypoints):
        return None
    return keypoints[point_index]


def is_visible(point: Optional[Keypoint], confidence_threshold: float) -> bool:
    return point is not None and point.confidence > confidence_threshold


def visible_keypoints(detection: Detection, confidence_threshold: float) -> List[Keypoint]:
    """All keypoints of one detection scoring above the threshold."""
    return [kp for kp in detection.keypoints if is_visible(kp, confidence_threshold)]


def box_from_keypoints(keypoints: Sequence[Keypoint]) -> Optional[Box]:
    if not keypoints:
        return None
    xs = [kp.x for kp in keypoints]
    ys = [kp.y for kp in keypoints]
    return Box(min(xs), min(ys), max(xs), max(ys))


def _number(raw, key):
    value = raw.get(key)
    if not isinstance(value, Real) or isinstance(value, bool):
        raise DetectionDecodeError(f"{key!r} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise DetectionDecodeError(f"{key!r} must be finite, got {value!r}")
    return float(value)


def decode_keypoint(raw, index: int, fallback_confidence: Optional[float] = None) -> Keypoint:
    """
    Build a validated Keypoint from a model's raw point record

    Accepts ``confidence`` or ``score`` for the point score. When neither is
    present the subject-level ``fallback_confidence`` is used.
    """
    if not hasattr(raw, 'get'):
        raise DetectionDecodeError(f"keypoint {index} is not a mapping: {raw!r}")

    x = _number(raw, 'x')
    y = _number(raw, 'y')

    if 'confidence' in raw:
        confidence = _number(raw, 'confidence')
    elif 'score' in raw:
        confidence = _number(raw, 'score')
    elif fallback_confidence is not None:
        confidence = float(fallback_confidence)
    else:
        raise DetectionDecodeError(f"keypoint {index} has no confidence")

    if not 0.0 <= confidence <= 1.0:
        raise DetectionDecodeError(f"keypoint {index} confidence {confidence} outside [0, 1]")

    name = raw.get('name')
    if name is not None and not isinstance(name, str):
        raise DetectionDecodeError(f"keypoint {index} name must be a string")

    return Keypoint(x=x, y=y, confidence=confidence, index=index, name=name)


def _decode_box(raw):
    if raw is None:
        return None
    if not hasattr(raw, 'get'):
        raise DetectionDecodeError(f"box is not a mapping: {raw!r}")
    if 'xMin' in raw:
        keys = ('xMin', 'yMin', 'xMax', 'yMax')
    else:
        keys = ('x_min', 'y_min', 'x_max', 'y_max')
    return Box(*(_number(raw, k) for k in keys))


def decode_detection(raw) -> Detection:
    """Decode one subject: ``keypoints`` list, optional ``box`` and ``confidence``."""
    if not hasattr(raw, 'get'):
        raise DetectionDecodeError(f"detection is not a mapping: {raw!r}")

    confidence = raw.get('confidence')
    if confidence is not None:
        confidence = _number(raw, 'confidence')

    keypoints = [
        decode_keypoint(point, i, fallback_confidence=confidence)
        for i, point in enumerate(raw.get('keypoints') or [])
    ]
    return Detection(
        keypoints=keypoints,
        box=_decode_box(raw.get('box')),
        confidence=confidence if confidence is not None else 0.0,
    )


def decode_detections(raw_list) -> List[Detection]:
    if not raw_list:
        return []
    return [decode_detection(raw) for raw in raw_list]
