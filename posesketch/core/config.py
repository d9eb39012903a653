"""
Configuration constants for the pose sketches
"""
import json
import math
from pathlib import Path

# Camera settings
CAMERA_WIDTH = 640
CAMERA_HEIGHT = 480
CAMERA_FPS = 30
FLIP_VIDEO = True  # Mirror the webcam so it behaves like a mirror
SHOW_VIDEO = True

# Keypoint settings
# Points at or below this score are treated as not visible
CONFIDENCE_THRESHOLD = 0.2
BODY_KEYPOINT_COUNT = 17
HAND_KEYPOINT_COUNT = 21

# Hand raiser defaults
THRESHOLD_INDEX = 0   # nose
TRACKING_INDEX = 10   # right wrist

# Fixed point defaults
BODY_POINT_INDEX = 2  # right eye
REFERENCE_POINT = (CAMERA_WIDTH // 2, CAMERA_HEIGHT // 2)

# Hand keypoints defaults
MAX_HANDS = 4

# MediaPipe settings
MP_MODEL_COMPLEXITY = 0  # 0=Lite (fastest), 1=Full (most accurate)
MP_MIN_DETECTION_CONFIDENCE = 0.5
MP_MIN_TRACKING_CONFIDENCE = 0.5

# Overlay colors (B, G, R)
COLOR_THRESHOLD = (0, 0, 255)
COLOR_TRACKING = (0, 255, 0)
COLOR_POINT = (0, 255, 0)
COLOR_MEASURE = (0, 165, 255)
COLOR_CENTROID = (0, 0, 255)
COLOR_LABEL = (0, 255, 255)
COLOR_TEXT = (0, 0, 0)
THRESHOLD_AREA_ALPHA = 70 / 255
POINT_RADIUS = 10
ARC_RADIUS = 30

# Snapshot export
SNAPSHOT_PREFIX = "pose_"
SNAPSHOT_EXTENSION = ".png"

# File paths
CONFIG_FILE = Path(__file__).parent.parent.parent / 'sketch_config.json'

DEFAULTS = {
    'camera_width': CAMERA_WIDTH,
    'camera_height': CAMERA_HEIGHT,
    'camera_fps': CAMERA_FPS,
    'flip_video': FLIP_VIDEO,
    'show_video': SHOW_VIDEO,
    'confidence_threshold': CONFIDENCE_THRESHOLD,
    'threshold_index': THRESHOLD_INDEX,
    'tracking_index': TRACKING_INDEX,
    'body_point_index': BODY_POINT_INDEX,
    'reference_point': REFERENCE_POINT,
    'max_hands': MAX_HANDS,
}

# Sizes and counts that must be at least 1
POSITIVE_KEYS = ('camera_width', 'camera_height', 'camera_fps', 'max_hands')


def _validate(key, value):
    default = DEFAULTS[key]
    if key == 'confidence_threshold':
        return isinstance(value, (int, float)) and not isinstance(value, bool) and 0 <= value <= 1
    if key == 'reference_point':
        return (isinstance(value, (list, tuple)) and len(value) == 2
                and all(isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
                        for v in value))
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        minimum = 1 if key in POSITIVE_KEYS else 0
        return isinstance(value, int) and not isinstance(value, bool) and value >= minimum
    return True


def load_sketch_config(path=None):
    """
    Load sketch settings from a JSON file, falling back to defaults

    Args:
        path: JSON file to read (defaults to sketch_config.json at the repo root)

    Returns:
        dict with every key of DEFAULTS
    """
    config = dict(DEFAULTS)
    config_path = Path(path) if path is not None else CONFIG_FILE
    if not config_path.exists():
        return config

    try:
        with open(config_path, 'r') as f:
            overrides = json.load(f)
    except (OSError, ValueError) as e:
        print(f"⚠️  Failed to load sketch config: {e}")
        return config

    if not isinstance(overrides, dict):
        print(f"⚠️  Ignoring sketch config {config_path.name}: expected a JSON object")
        return config

    for key, value in overrides.items():
        if key not in DEFAULTS:
            continue
        if not _validate(key, value):
            print(f"⚠️  Invalid value for {key}: {value!r}, using {DEFAULTS[key]!r}")
            continue
        config[key] = tuple(value) if key == 'reference_point' else value

    return config
