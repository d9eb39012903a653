"""Interactive sketches"""
from .base import Sketch
from .hand_raiser import HandRaiserSketch
from .fixed_point import FixedPointSketch
from .hand_keypoints import HandKeypointsSketch
from .runner import run_sketch

SKETCHES = {
    'hand-raiser': HandRaiserSketch,
    'fixed-point': FixedPointSketch,
    'hands': HandKeypointsSketch,
}

__all__ = ['Sketch', 'HandRaiserSketch', 'FixedPointSketch',
           'HandKeypointsSketch', 'run_sketch', 'SKETCHES']
