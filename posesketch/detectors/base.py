"""
Base class for keypoint detectors
"""
from abc import ABC, abstractmethod


class PoseDetectorBase(ABC):

    @abstractmethod
    def process_frame(self, frame):
        """
        Run the model on one frame

        Args:
            frame: BGR image from camera

        Returns:
            list of Detection in pixel coordinates of the frame, possibly empty
        """
        pass

    @abstractmethod
    def cleanup(self):
        pass
