"""
Threshold-crossing edge detector

Counts how many times a tracked point rises above a reference point's height.
Only the BELOW -> ABOVE edge is counted, so holding a hand up counts once.
"""
from enum import Enum

from .keypoints import is_visible


class ThresholdState(Enum):
    BELOW = "below"
    ABOVE = "above"


class ThresholdCounter:
    """Two-state machine with a monotonic crossing counter"""

    def __init__(self):
        self.state = ThresholdState.BELOW
        self.count = 0

    @property
    def is_above(self):
        return self.state is ThresholdState.ABOVE

    def step(self, is_above):
        """
        Apply one frame's observation

        Args:
            is_above: Whether the tracked point is above the threshold this frame

        Returns:
            True if this frame completed a new crossing
        """
        if not is_above:
            self.state = ThresholdState.BELOW
            return False

        if self.state is ThresholdState.BELOW:
            self.state = ThresholdState.ABOVE
            self.count += 1
            return True
        return False

    def update(self, threshold_point, tracked_point, confidence_threshold):
        """
        Evaluate one frame from keypoints

        Frames where either point is missing or not confident leave the state
        untouched. Smaller y is higher on screen.
        """
        if not (is_visible(threshold_point, confidence_threshold)
                and is_visible(tracked_point, confidence_threshold)):
            return False
        return self.step(tracked_point.y < threshold_point.y)

    def reset(self):
        self.state = ThresholdState.BELOW
        self.count = 0
