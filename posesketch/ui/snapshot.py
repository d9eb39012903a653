"""
Saving the current frame as an image file
"""
from datetime import datetime
from pathlib import Path

import cv2
from PIL import Image

from ..core.config import SNAPSHOT_EXTENSION, SNAPSHOT_PREFIX


def snapshot_filename(now=None, prefix=SNAPSHOT_PREFIX):
    """pose_YYYYMMDD_HHMMSS.png for the given (or current) time"""
    now = now or datetime.now()
    return f"{prefix}{now.strftime('%Y%m%d_%H%M%S')}{SNAPSHOT_EXTENSION}"


def save_snapshot(frame, directory=".", now=None):
    """
    Write a BGR frame to disk as PNG

    Args:
        frame: BGR image (numpy array) as drawn on screen
        directory: Output folder, created if missing
        now: Timestamp used for the file name

    Returns:
        Path of the written file
    """
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / snapshot_filename(now)

    img = Image.fromarray(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
    img.save(path)
    return path
