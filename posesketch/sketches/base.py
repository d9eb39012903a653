"""
Base class for sketches
"""
from abc import ABC, abstractmethod


class Sketch(ABC):
    """
    One interactive program driven by the frame loop

    update() holds the per-frame logic and touches only the context, so it can
    run without a camera. render() draws on the frame that will be shown.
    """

    title = "Sketch"

    @abstractmethod
    def create_detector(self, ctx):
        pass

    @abstractmethod
    def update(self, ctx):
        pass

    @abstractmethod
    def render(self, frame, ctx):
        pass

    def on_key(self, key, ctx):
        """Handle a named key the frame loop did not consume; True if handled"""
        return False

    def on_mouse(self, event, x, y, ctx):
        return False
