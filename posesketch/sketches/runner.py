"""
Frame loop shared by all sketches
"""
import cv2
import numpy as np

from ..core.channel import DetectionChannel
from ..core.utils import FPSCounter
from ..ui.capture_thread import CaptureThread
from ..ui.snapshot import save_snapshot

# waitKeyEx codes differ per window backend (GTK, Win32, Cocoa)
LEFT_ARROW_KEYS = {65361, 2424832, 63234}
RIGHT_ARROW_KEYS = {65363, 2555904, 63235}
ESC = 27


def key_name(key):
    """Translate a waitKeyEx code into a name sketches understand"""
    if key == -1:
        return None
    if key in LEFT_ARROW_KEYS:
        return 'left'
    if key in RIGHT_ARROW_KEYS:
        return 'right'
    char = key & 0xFF
    if char == ESC:
        return 'quit'
    if char == ord(' '):
        return 'space'
    return chr(char).lower()


def handle_key(name, sketch, ctx, frame, output_dir):
    """
    Apply one key press

    Returns:
        False when the loop should stop
    """
    if name is None:
        return True
    if name in ('quit', 'q'):
        return False
    if name == 'space':
        ctx.toggle_video()
    elif name == 's':
        path = save_snapshot(frame, output_dir)
        print(f"Saved snapshot {path}")
    else:
        sketch.on_key(name, ctx)
    return True


def blank_canvas(ctx, frame=None):
    if frame is not None:
        h, w = frame.shape[:2]
    else:
        h, w = ctx.height, ctx.width
    return np.full((h, w, 3), 255, dtype=np.uint8)


def compose_frame(sketch, ctx, frame):
    """Video (or a white canvas) with the sketch's overlays on top"""
    if ctx.show_video and frame is not None:
        canvas = frame.copy()
    else:
        canvas = blank_canvas(ctx, frame)
    return sketch.render(canvas, ctx)


def run_sketch(sketch, ctx, camera_index=None, output_dir="."):
    """
    Run a sketch until the user quits

    Returns:
        Process exit status
    """
    channel = DetectionChannel()
    detector = sketch.create_detector(ctx)
    capture = CaptureThread(detector, channel, flip_video=ctx.flip_video)

    if not capture.start(camera_index, ctx.width, ctx.height):
        print("Could not open camera")
        detector.cleanup()
        return 1

    cv2.namedWindow(sketch.title)
    cv2.setMouseCallback(sketch.title,
                         lambda event, x, y, flags, param: sketch.on_mouse(event, x, y, ctx))
    fps_counter = FPSCounter()

    print("=" * 70)
    print(sketch.title.upper())
    print("SPACE: toggle video | S: save snapshot | Q/ESC: quit")
    print("=" * 70)

    try:
        while True:
            ctx.receive(channel)
            sketch.update(ctx)

            frame = compose_frame(sketch, ctx, capture.get_latest_frame())
            fps_counter.update()
            cv2.putText(frame, f"FPS: {fps_counter.get_fps()}", (frame.shape[1] - 90, 20),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.5, (0, 0, 255), 1)
            cv2.imshow(sketch.title, frame)

            if not handle_key(key_name(cv2.waitKeyEx(1)), sketch, ctx, frame, output_dir):
                break
    finally:
        capture.stop()
        detector.cleanup()
        cv2.destroyAllWindows()
    return 0
