"""Tests for distance, angle and centroid helpers."""

import math

import pytest

from posesketch.core.geometry import (
    Point,
    angle,
    centroid,
    detections_centroid,
    distance,
    midpoint,
)
from posesketch.core.keypoints import Box

SAMPLE_POINTS = [
    Point(0, 0), Point(3, 4), Point(-7.5, 2), Point(640, 480),
    Point(320, 240), Point(1e-9, -1e-9), Point(-100, -100),
]


class TestDistance:
    def test_pythagorean(self):
        assert distance(Point(0, 0), Point(3, 4)) == 5

    def test_same_point_is_zero(self):
        for p in SAMPLE_POINTS:
            assert distance(p, p) == 0

    def test_symmetric(self):
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                assert distance(a, b) == distance(b, a)

    def test_absent_input(self):
        assert distance(None, Point(1, 1)) is None
        assert distance(Point(1, 1), None) is None

    def test_accepts_keypoints(self, detection_factory):
        det = detection_factory([(0, 0), (6, 8)])
        assert distance(det.keypoints[0], det.keypoints[1]) == 10


class TestAngle:
    @pytest.mark.parametrize("end, expected", [
        (Point(10, 0), 0),
        (Point(0, 10), 90),     # screen y points down
        (Point(-10, 0), 180),
        (Point(0, -10), 270),
        (Point(10, 10), 45),
        (Point(10, -10), 315),
    ])
    def test_cardinal_directions(self, end, expected):
        assert angle(Point(0, 0), end) == pytest.approx(expected)

    def test_zero_vector_is_zero(self):
        for p in SAMPLE_POINTS:
            assert angle(p, p) == 0

    def test_range(self):
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                result = angle(a, b)
                assert 0 <= result < 360

    def test_tiny_negative_stays_below_360(self):
        result = angle(Point(0, 0), Point(1, -1e-20))
        assert 0 <= result < 360

    def test_relative_to_base(self):
        assert angle(Point(320, 240), Point(320, 140)) == pytest.approx(270)

    def test_absent_input(self):
        assert angle(None, Point(0, 0)) is None
        assert angle(Point(0, 0), None) is None

    def test_matches_atan2(self):
        a, b = Point(2, 3), Point(-4, -9)
        expected = math.degrees(math.atan2(b.y - a.y, b.x - a.x)) + 360
        assert angle(a, b) == pytest.approx(expected)


class TestCentroid:
    def test_box_center(self, box):
        assert centroid(box) == Point(60, 120)

    def test_many_boxes(self):
        for x0, y0, x1, y1 in [(0, 0, 0, 0), (1, 2, 3, 4), (-10, -10, 10, 10), (0.5, 0.5, 2, 7)]:
            assert centroid(Box(x0, y0, x1, y1)) == ((x0 + x1) / 2, (y0 + y1) / 2)

    def test_no_box_is_origin(self):
        assert centroid(None) == (0, 0)

    def test_detections_centroid_uses_first_boxed(self, detection_factory, box):
        without_box = detection_factory([(0, 0)])
        with_box = detection_factory([(0, 0)], box=box)
        assert detections_centroid([without_box, with_box]) == Point(60, 120)

    def test_detections_centroid_empty(self):
        assert detections_centroid([]) == (0, 0)
        assert detections_centroid(None) == (0, 0)


class TestMidpoint:
    def test_midpoint(self):
        assert midpoint(Point(0, 0), Point(10, 20)) == Point(5, 10)

    def test_absent(self):
        assert midpoint(None, Point(0, 0)) is None
