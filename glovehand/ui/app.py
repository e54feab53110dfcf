"""
Glove tracker application
Captures frames, runs the glove detector and shows the annotated result
"""
import argparse
import logging
import sys

import cv2

from ..core.config import CALIBRATION_FILE, IMG_SCALE
from ..core.utils import open_camera
from ..detectors.glove import GloveDetector, ConfigurationError, load_hsv_ranges
from ..detectors.glove.visualization import FrameRateMeter, draw_label

WINDOW_NAME = 'Glove Tracker'
ESC_KEY = 27


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Track and name the fingers of a coloured glove")
    parser.add_argument('--hsv', default=CALIBRATION_FILE,
                        help=f"HSV calibration file (default: {CALIBRATION_FILE})")
    parser.add_argument('--camera', type=int, default=None,
                        help="Camera index (default: first camera that delivers frames)")
    parser.add_argument('--scale', type=int, default=IMG_SCALE,
                        help=f"Working image shrink factor (default: {IMG_SCALE})")
    parser.add_argument('--debug', action='store_true', help="Show debug overlay and mask preview")
    parser.add_argument('--verbose', '-v', action='store_true', help="Log per-frame diagnostics")
    return parser.parse_args(argv)


def run(detector, cap):
    """Main capture loop, returns when ESC or q is pressed or the camera stops"""
    fps_meter = FrameRateMeter()

    while True:
        ret, frame = cap.read()
        if not ret:
            print("Camera stopped delivering frames")
            break

        frame = cv2.flip(frame, 1)  # Mirror horizontally
        fps = fps_meter.tick()

        result = detector.process_frame(frame, fps=fps)
        annotated = result['annotated_frame']

        if not detector.show_debug_overlay:
            draw_label(annotated, f"FPS: {fps}", (10, annotated.shape[0] - 15))

        cv2.imshow(WINDOW_NAME, annotated)
        key = cv2.waitKey(1) & 0xFF
        if key in (ESC_KEY, ord('q')):
            break


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        hsv_lower, hsv_upper = load_hsv_ranges(args.hsv)
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    cap = open_camera(args.camera)
    if cap is None:
        print("❌ Error: Cannot open camera")
        sys.exit(1)

    detector = GloveDetector(hsv_lower, hsv_upper, scale=args.scale, show_debug=args.debug)
    print("Show the gloved left hand to the camera - ESC or q to quit")

    try:
        run(detector, cap)
    finally:
        cap.release()
        cv2.destroyAllWindows()
        detector.cleanup()


if __name__ == "__main__":
    main()
