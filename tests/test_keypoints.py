"""Tests for keypoint lookup, visibility and boundary decoding."""

import pytest

from posesketch.core.keypoints import (
    Box,
    DetectionDecodeError,
    KeypointIndex,
    MOVENET_KEYPOINT_NAMES,
    HAND_KEYPOINT_NAMES,
    HandLandmarkIndex,
    box_from_keypoints,
    decode_detection,
    decode_detections,
    decode_keypoint,
    get_keypoint,
    is_visible,
    visible_keypoints,
)


class TestGetKeypoint:
    def test_empty_detections_returns_none(self):
        for index in (0, 5, 16):
            assert get_keypoint([], index) is None

    def test_none_detections_returns_none(self):
        assert get_keypoint(None, 0) is None

    def test_returns_point_for_first_subject(self, pose_factory):
        pose = pose_factory({KeypointIndex.RIGHT_WRIST: (320, 200)})
        kp = get_keypoint([pose], KeypointIndex.RIGHT_WRIST)
        assert kp.x == 320
        assert kp.y == 200
        assert kp.index == KeypointIndex.RIGHT_WRIST

    def test_selects_subject(self, pose_factory):
        first = pose_factory({0: (1, 1)})
        second = pose_factory({0: (2, 2)})
        assert get_keypoint([first, second], 0, subject_index=1).x == 2

    def test_out_of_range_subject_returns_none(self, pose_factory):
        assert get_keypoint([pose_factory()], 0, subject_index=1) is None
        assert get_keypoint([pose_factory()], 0, subject_index=-1) is None

    def test_out_of_range_point_returns_none(self, pose_factory):
        assert get_keypoint([pose_factory()], 17) is None
        assert get_keypoint([pose_factory()], -1) is None

    def test_detection_without_keypoints(self, detection_factory):
        assert get_keypoint([detection_factory([])], 0) is None


class TestVisibility:
    def test_confidence_must_exceed_threshold(self, detection_factory):
        det = detection_factory([(0, 0, 0.2), (0, 0, 0.21)])
        assert not is_visible(det.keypoints[0], 0.2)
        assert is_visible(det.keypoints[1], 0.2)

    def test_absent_point_is_not_visible(self):
        assert not is_visible(None, 0.0)

    def test_visible_keypoints_filters(self, detection_factory):
        det = detection_factory([(0, 0, 0.9), (1, 1, 0.1), (2, 2, 0.5)])
        assert [kp.index for kp in visible_keypoints(det, 0.2)] == [0, 2]


class TestSchemas:
    def test_movenet_names_match_indices(self):
        assert len(MOVENET_KEYPOINT_NAMES) == 17
        assert MOVENET_KEYPOINT_NAMES[KeypointIndex.NOSE] == "nose"
        assert MOVENET_KEYPOINT_NAMES[KeypointIndex.RIGHT_WRIST] == "right_wrist"

    def test_hand_names_match_indices(self):
        assert len(HAND_KEYPOINT_NAMES) == 21
        assert HAND_KEYPOINT_NAMES[HandLandmarkIndex.THUMB_TIP] == "thumb_tip"
        assert HAND_KEYPOINT_NAMES[HandLandmarkIndex.PINKY_TIP] == "pinky_finger_tip"


class TestBox:
    def test_width_height(self, box):
        assert box.width == 100
        assert box.height == 200

    def test_box_from_keypoints(self, detection_factory):
        det = detection_factory([(5, 40), (15, 10), (10, 20)])
        assert box_from_keypoints(det.keypoints) == Box(5, 10, 15, 40)

    def test_box_from_no_keypoints(self):
        assert box_from_keypoints([]) is None


class TestDecode:
    def test_decode_keypoint(self):
        kp = decode_keypoint({"x": 1, "y": 2.5, "confidence": 0.7, "name": "nose"}, 0)
        assert (kp.x, kp.y, kp.confidence, kp.index, kp.name) == (1.0, 2.5, 0.7, 0, "nose")

    def test_score_alias(self):
        assert decode_keypoint({"x": 0, "y": 0, "score": 0.4}, 3).confidence == 0.4

    def test_fallback_confidence(self):
        assert decode_keypoint({"x": 0, "y": 0}, 0, fallback_confidence=0.8).confidence == 0.8

    def test_missing_confidence_raises(self):
        with pytest.raises(DetectionDecodeError):
            decode_keypoint({"x": 0, "y": 0}, 0)

    @pytest.mark.parametrize("raw", [
        {"x": "1", "y": 0, "confidence": 0.5},
        {"y": 0, "confidence": 0.5},
        {"x": 0, "y": None, "confidence": 0.5},
        {"x": 0, "y": 0, "confidence": 1.5},
        {"x": 0, "y": 0, "confidence": True},
        {"x": 0, "y": 0, "confidence": 0.5, "name": 3},
        {"x": float('nan'), "y": 0, "confidence": 0.5},
        {"x": 0, "y": float('inf'), "confidence": 0.5},
        {"x": 0, "y": 0, "confidence": float('nan')},
        [0, 0, 0.5],
    ])
    def test_malformed_keypoint_raises(self, raw):
        with pytest.raises(DetectionDecodeError):
            decode_keypoint(raw, 0)

    def test_decode_error_is_value_error(self):
        assert issubclass(DetectionDecodeError, ValueError)

    def test_decode_detection_with_camel_case_box(self):
        det = decode_detection({
            "keypoints": [{"x": 1, "y": 2, "confidence": 0.9}],
            "box": {"xMin": 0, "yMin": 1, "xMax": 10, "yMax": 20},
            "confidence": 0.6,
        })
        assert det.box == Box(0, 1, 10, 20)
        assert det.confidence == 0.6
        assert det.keypoints[0].index == 0

    def test_non_finite_box_raises(self):
        with pytest.raises(DetectionDecodeError):
            decode_detection({
                "keypoints": [{"x": 1, "y": 2, "confidence": 0.9}],
                "box": {"x_min": 0, "y_min": float('-inf'), "x_max": 10, "y_max": 20},
            })

    def test_hand_style_detection_uses_subject_confidence(self):
        det = decode_detection({
            "keypoints": [{"x": 1, "y": 2, "name": "wrist"}],
            "confidence": 0.95,
        })
        assert det.keypoints[0].confidence == 0.95
        assert det.box is None

    def test_decode_detections_none(self):
        assert decode_detections(None) == []
        assert decode_detections([]) == []
