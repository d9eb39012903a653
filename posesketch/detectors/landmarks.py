"""
Conversion from MediaPipe landmark lists to Detection records
"""
from ..core.keypoints import Detection, DetectionDecodeError, box_from_keypoints, decode_keypoint


def landmarks_to_detection(landmarks, width, height, names, index_map=None,
                           confidence=None, use_visibility=True):
    """
    Convert normalized landmarks into a pixel-space Detection

    Args:
        landmarks: Sequence of objects with normalized x, y and optional visibility
        width, height: Frame size in pixels
        names: Keypoint names of the target schema, in order
        index_map: Optional list mapping each schema position to a landmark index
        confidence: Subject-level score, used as the keypoint score when
            use_visibility is False
        use_visibility: Take each keypoint score from the landmark visibility

    Returns:
        Detection whose box encloses its keypoints
    """
    if index_map is None:
        index_map = list(range(len(names)))

    keypoints = []
    for position, (name, source) in enumerate(zip(names, index_map)):
        if source >= len(landmarks):
            raise DetectionDecodeError(
                f"landmark {source} missing, model returned {len(landmarks)}")
        lm = landmarks[source]
        raw = {'x': lm.x * width, 'y': lm.y * height, 'name': name}
        if use_visibility:
            visibility = float(getattr(lm, 'visibility', 0.0) or 0.0)
            raw['confidence'] = min(1.0, max(0.0, visibility))
        keypoints.append(decode_keypoint(raw, position, fallback_confidence=confidence))

    return Detection(
        keypoints=keypoints,
        box=box_from_keypoints(keypoints),
        confidence=confidence if confidence is not None else _mean_confidence(keypoints),
    )


def _mean_confidence(keypoints):
    if not keypoints:
        return 0.0
    return sum(kp.confidence for kp in keypoints) / len(keypoints)
