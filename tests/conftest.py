import pytest

from posesketch.core.keypoints import Box, Detection, Keypoint


def make_detection(points, confidence=0.9, box=None):
    """Detection from a list of (x, y) or (x, y, confidence) tuples."""
    keypoints = []
    for i, p in enumerate(points):
        score = p[2] if len(p) > 2 else confidence
        keypoints.append(Keypoint(x=float(p[0]), y=float(p[1]), confidence=score, index=i))
    return Detection(keypoints=keypoints, box=box, confidence=confidence)


def make_pose(overrides=None, confidence=0.9, count=17, box=None):
    """17-point pose with every point at (100, 100) unless overridden by index."""
    points = [(100.0, 100.0, confidence) for _ in range(count)]
    for index, value in (overrides or {}).items():
        points[index] = value if len(value) > 2 else (value[0], value[1], confidence)
    return make_detection(points, confidence=confidence, box=box)


@pytest.fixture
def detection_factory():
    return make_detection


@pytest.fixture
def pose_factory():
    return make_pose


@pytest.fixture
def box():
    return Box(10.0, 20.0, 110.0, 220.0)
