"""
Command line entry point - pick a sketch and run it on the webcam
"""
import argparse
import logging
import sys

from .core.config import HAND_KEYPOINT_COUNT, load_sketch_config
from .core.context import SketchContext
from .sketches import SKETCHES, HandKeypointsSketch, run_sketch


def build_parser():
    parser = argparse.ArgumentParser(
        prog='posesketch',
        description='Webcam keypoint sketches: threshold counter, distance/angle, hand keypoints')
    parser.add_argument('sketch', nargs='?', default='hand-raiser', choices=sorted(SKETCHES),
                        help='Sketch to run (default: hand-raiser)')
    parser.add_argument('--camera', type=int, default=None,
                        help='Camera index (default: first camera that opens)')
    parser.add_argument('--no-flip', action='store_true', help='Do not mirror the video')
    parser.add_argument('--config', default=None, help='Path to a sketch_config.json')
    parser.add_argument('--output-dir', default='.', help='Folder for saved snapshots')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    return parser


def build_sketch(name, settings):
    """Instantiate a sketch and its context from loaded settings"""
    ctx = SketchContext.from_config(settings)
    if name == 'hands':
        sketch = HandKeypointsSketch(max_hands=settings['max_hands'])
        ctx.point_count = HAND_KEYPOINT_COUNT
    else:
        sketch = SKETCHES[name]()
    return sketch, ctx


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    settings = load_sketch_config(args.config)
    if args.no_flip:
        settings['flip_video'] = False

    sketch, ctx = build_sketch(args.sketch, settings)
    return run_sketch(sketch, ctx, camera_index=args.camera, output_dir=args.output_dir)


if __name__ == '__main__':
    sys.exit(main())
