"""Tests for camera discovery and frame timing helpers."""

import cv2
import pytest

from posesketch.core import utils
from posesketch.core.utils import FPSCounter, find_camera, setup_camera


class FakeCapture:
    """Stands in for cv2.VideoCapture; only index 2 has a working camera."""

    opened = []

    def __init__(self, index, backend):
        self.index = index
        self.backend = backend
        self.released = False
        self.props = {}
        FakeCapture.opened.append(self)

    def isOpened(self):
        return self.index == 2

    def read(self):
        return self.index == 2, None

    def release(self):
        self.released = True

    def set(self, prop, value):
        self.props[prop] = value


@pytest.fixture
def fake_capture(monkeypatch):
    FakeCapture.opened = []
    monkeypatch.setattr(utils.platform, "system", lambda: "Linux")
    monkeypatch.setattr(utils.cv2, "VideoCapture", FakeCapture)
    return FakeCapture


class TestFindCamera:
    def test_scans_until_a_camera_reads(self, fake_capture):
        cap = find_camera(max_attempts=5)
        assert cap.index == 2
        assert not cap.released
        assert all(c.released for c in fake_capture.opened if c is not cap)

    def test_explicit_index_only(self, fake_capture):
        assert find_camera(camera_index=1) is None
        assert {c.index for c in fake_capture.opened} == {1}

    def test_no_camera(self, fake_capture):
        assert find_camera(max_attempts=2) is None
        assert all(c.released for c in fake_capture.opened)

    def test_setup_camera(self):
        cap = FakeCapture(0, None)
        setup_camera(cap, width=320, height=240, fps=15)
        assert cap.props == {
            cv2.CAP_PROP_FRAME_WIDTH: 320,
            cv2.CAP_PROP_FRAME_HEIGHT: 240,
            cv2.CAP_PROP_FPS: 15,
        }


class TestFPSCounter:
    def make_counter(self, times, smoothing=0.5):
        ticks = iter(times)
        return FPSCounter(smoothing=smoothing, clock=lambda: next(ticks))

    def test_smooths_instant_rate(self):
        counter = self.make_counter([0.0, 0.25, 0.5])
        assert counter.update() == pytest.approx(2.0)
        assert counter.update() == pytest.approx(3.0)
        assert counter.get_fps() == 3

    def test_same_timestamp_keeps_rate(self):
        counter = self.make_counter([0.0, 0.25, 0.25])
        counter.update()
        assert counter.update() == pytest.approx(2.0)

    def test_starts_at_zero(self):
        assert self.make_counter([1.0]).get_fps() == 0
