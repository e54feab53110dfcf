"""
Main glove detector
Segments the glove, analyzes the hand contour and annotates the frame
"""
import logging

import cv2
import numpy as np

from ...core.config import IMG_SCALE
from .config_loader import default_hsv_ranges
from .glove_segmentation import threshold_glove
from .hand_analyzer import HandAnalyzer
from .visualization import WHITE, draw_hand_state, draw_debug_overlay

logger = logging.getLogger(__name__)


class GloveDetector:
    """
    HSV glove detector with finger naming

    process_frame() returns a dict with keys:
        - detected: whether this frame produced a hand contour
        - hand_center, hand_x, hand_y: COG normalized to 0-1
        - finger_count: number of finger tips
        - fingers: list of (name, (x, y)), unnamed tips as "unknown"
        - axis_angle: hand axis angle in degrees
        - annotated_frame: copy of the frame with the hand drawn on it
    """

    def __init__(self, hsv_lower=None, hsv_upper=None, scale=IMG_SCALE,
                 backend=None, show_debug=False, **analyzer_options):
        default_lower, default_upper = default_hsv_ranges()
        self.hsv_lower = default_lower if hsv_lower is None else np.asarray(hsv_lower, dtype=np.uint8)
        self.hsv_upper = default_upper if hsv_upper is None else np.asarray(hsv_upper, dtype=np.uint8)
        self.scale = scale
        self.show_debug_overlay = show_debug

        self.analyzer = HandAnalyzer(backend=backend, **analyzer_options)
        self.last_mask = None

    def process_frame(self, frame, fps=None):
        """Segment, analyze and annotate one BGR frame"""
        mask = threshold_glove(frame, self.hsv_lower, self.hsv_upper, self.scale)
        self.last_mask = mask

        detected = self.analyzer.process_mask(mask, self.scale)
        state = self.analyzer.snapshot()

        annotated = frame.copy()
        annotated = draw_hand_state(annotated, state)
        if self.show_debug_overlay:
            annotated = draw_debug_overlay(annotated, state, fps, detected=detected)
            annotated = _draw_mask_preview(annotated, mask)

        h, w = frame.shape[:2]
        hand_x, hand_y = state.normalized_cog(w, h)

        return {
            'detected': detected,
            'hand_center': (hand_x, hand_y),
            'hand_x': hand_x,
            'hand_y': hand_y,
            'finger_count': state.finger_count,
            'fingers': [(name.value, pt) for name, pt in state.named_pairs()],
            'axis_angle': state.axis_angle,
            'annotated_frame': annotated
        }

    def update_calibration(self, hsv_lower, hsv_upper):
        """Update glove colour bounds"""
        self.hsv_lower = np.asarray(hsv_lower, dtype=np.uint8)
        self.hsv_upper = np.asarray(hsv_upper, dtype=np.uint8)
        self.analyzer.reset()
        logger.info("HSV range updated: %s - %s", self.hsv_lower, self.hsv_upper)

    def cleanup(self):
        """Cleanup resources"""
        self.analyzer.reset()
        self.last_mask = None


def _draw_mask_preview(frame, mask):
    """Show the glove mask in the top-right corner"""
    h, w = frame.shape[:2]
    preview_size = (160, 120)
    if w < preview_size[0] + 20 or h < preview_size[1] + 20:
        return frame

    mask_resized = cv2.resize(mask, preview_size)
    mask_colored = cv2.cvtColor(mask_resized, cv2.COLOR_GRAY2BGR)

    x_offset = w - preview_size[0] - 10
    y_offset = 10
    frame[y_offset:y_offset + preview_size[1],
          x_offset:x_offset + preview_size[0]] = mask_colored
    cv2.putText(frame, "Glove Mask", (x_offset, y_offset + preview_size[1] + 15),
               cv2.FONT_HERSHEY_SIMPLEX, 0.5, WHITE, 1)
    return frame
