"""
Pose Sketches - Main Entry Point
Launch one of the webcam sketches: python main.py [hand-raiser|fixed-point|hands]
"""
import sys

from posesketch.cli import main

if __name__ == "__main__":
    sys.exit(main())
