"""
Drawing of the analyzed hand, the debug overlay and the frame-rate readout
"""
import time

import cv2

from .finger_naming import FingerName

# BGR
RED = (0, 0, 255)
GREEN = (0, 255, 0)
YELLOW = (0, 255, 255)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def draw_hand_state(frame, state):
    """
    Draw the finger tips and COG of a HandState

    Unnamed tips get a red circle labelled with their index, named tips a
    green circle labelled with the finger name and a yellow line from the COG.

    Args:
        frame: BGR frame in original-frame coordinates
        state: HandState to draw

    Returns:
        Modified frame
    """
    if not state.finger_tips:
        return frame

    font = cv2.FONT_HERSHEY_SIMPLEX
    cog = state.cog

    for i, (name, pt) in enumerate(state.named_pairs()):
        if name is FingerName.UNKNOWN or cog is None:
            cv2.circle(frame, pt, 8, RED, 2, cv2.LINE_AA)
            cv2.putText(frame, str(i), (pt[0], pt[1] - 10), font, 0.6, RED, 2)
        else:
            cv2.line(frame, cog, pt, YELLOW, 4, cv2.LINE_AA)
            cv2.circle(frame, pt, 8, GREEN, 2, cv2.LINE_AA)
            cv2.putText(frame, name.value, (pt[0], pt[1] - 10), font, 0.6, GREEN, 2)

    if cog is not None:
        cv2.circle(frame, cog, 8, GREEN, -1, cv2.LINE_AA)

    return frame


def draw_debug_overlay(frame, state, fps=None, detected=True):
    """
    Draw a translucent status panel

    Args:
        frame: Frame to draw on
        state: Current HandState
        fps: Optional frames per second to display
        detected: Whether this frame produced a contour

    Returns:
        Modified frame
    """
    overlay = frame.copy()
    cv2.rectangle(overlay, (5, 5), (300, 130), BLACK, -1)
    cv2.addWeighted(overlay, 0.6, frame, 0.4, 0, frame)

    status_text = "Status: TRACKING" if detected else "Status: NO GLOVE (holding)"
    status_color = GREEN if detected else RED
    cv2.putText(frame, status_text, (10, 25),
               cv2.FONT_HERSHEY_SIMPLEX, 0.6, status_color, 2)

    cv2.putText(frame, f"Fingers: {state.finger_count}", (10, 50),
               cv2.FONT_HERSHEY_SIMPLEX, 0.6, WHITE, 2)
    cv2.putText(frame, f"Axis angle: {state.axis_angle}", (10, 75),
               cv2.FONT_HERSHEY_SIMPLEX, 0.6, WHITE, 2)
    cv2.putText(frame, f"COG: {state.cog}", (10, 100),
               cv2.FONT_HERSHEY_SIMPLEX, 0.6, WHITE, 2)

    if fps is not None:
        cv2.putText(frame, f"FPS: {fps}", (10, 125),
                   cv2.FONT_HERSHEY_SIMPLEX, 0.5, YELLOW, 1)

    return frame


def draw_label(frame, text, origin, colour=WHITE, font_scale=0.6, padding=5):
    """Text on a solid black box, readable over any glove colour"""
    font = cv2.FONT_HERSHEY_SIMPLEX
    (text_w, text_h), _ = cv2.getTextSize(text, font, font_scale, 2)
    x, y = origin
    cv2.rectangle(frame, (x - padding, y - text_h - padding),
                  (x + text_w + padding, y + padding), BLACK, -1)
    cv2.putText(frame, text, (x, y), font, font_scale, colour, 2)
    return frame


class FrameRateMeter:
    """Exponentially smoothed frames per second"""

    def __init__(self, smoothing=0.9, clock=time.perf_counter):
        self.smoothing = smoothing
        self.clock = clock
        self.fps = 0.0
        self._last = clock()

    def tick(self):
        """Record a frame and return the smoothed rate, rounded down"""
        now = self.clock()
        elapsed = now - self._last
        self._last = now
        if elapsed > 0:
            self.fps = self.fps * self.smoothing + (1 - self.smoothing) / elapsed
        return int(self.fps)
