"""
Per-frame hand analysis
Runs moments -> axis resolution -> defects -> tip filter -> naming on one
contour, and keeps the result as the next frame's "previous" state.
"""
import logging

from ...core.config import (
    IMG_SCALE, SMALLEST_AREA, APPROX_EPSILON, MAX_POINTS,
    MIN_FINGER_DEPTH, MAX_FINGER_ANGLE,
    MIN_THUMB, MAX_THUMB, MIN_INDEX, MAX_INDEX
)
from .detector_state import HandState
from .finger_detection import find_finger_tips
from .finger_naming import FingerName, name_fingers
from .moments import extract_contour_info, resolve_axis_angle
from .vision_backend import OpenCVBackend

logger = logging.getLogger(__name__)


class HandAnalyzer:
    """
    Finds the COG, axis angle and named finger tips of a gloved left hand

    Calls must be serialised: each update reads the state written by the
    previous one. Before the first successful update the analyzer is idle.
    """

    def __init__(self, backend=None, min_area=SMALLEST_AREA, epsilon=APPROX_EPSILON,
                 max_points=MAX_POINTS, min_finger_depth=MIN_FINGER_DEPTH,
                 max_finger_angle=MAX_FINGER_ANGLE,
                 thumb_range=(MIN_THUMB, MAX_THUMB), index_range=(MIN_INDEX, MAX_INDEX)):
        self.backend = backend if backend is not None else OpenCVBackend()
        self.min_area = min_area
        self.epsilon = epsilon
        self.max_points = max_points
        self.min_finger_depth = min_finger_depth
        self.max_finger_angle = max_finger_angle
        self.thumb_range = thumb_range
        self.index_range = index_range

        self._state = HandState()
        self._tracking = False

    @property
    def state(self):
        return self._state

    @property
    def is_tracking(self):
        return self._tracking

    def snapshot(self):
        """Copy of the current state, safe to hand to a renderer"""
        return self._state.copy()

    def reset(self):
        self._state = HandState()
        self._tracking = False

    def process_mask(self, mask, scale=IMG_SCALE):
        """
        Find the hand contour in a binary mask and analyze it

        Returns:
            True if a contour was found and the state updated
        """
        contour = self.backend.find_largest_contour(mask, self.min_area)
        return self.update(contour, scale)

    def update(self, contour, scale=IMG_SCALE):
        """
        Analyze one hand contour

        Args:
            contour: Hand contour in working-image coordinates, or None when
                segmentation found nothing big enough
            scale: Working-to-original scale factor

        Returns:
            True if the state was updated, False if the frame was skipped
        """
        if contour is None:
            logger.debug("No contour, keeping previous hand state")
            return False

        prev = self._state

        moments = self.backend.compute_moments(contour)
        cog, tilt = extract_contour_info(moments, scale)
        if cog is None:
            cog = prev.cog
        axis_angle = resolve_axis_angle(tilt, prev.finger_tips, prev.cog)

        finger_tips = find_finger_tips(
            contour, self.backend, scale,
            epsilon=self.epsilon,
            max_points=self.max_points,
            min_depth=self.min_finger_depth,
            max_angle=self.max_finger_angle,
        )

        if cog is None:
            # No COG seen yet, nothing to measure angles from
            named_fingers = [FingerName.UNKNOWN] * len(finger_tips)
        else:
            named_fingers = name_fingers(
                finger_tips, cog, axis_angle,
                thumb_range=self.thumb_range, index_range=self.index_range,
            )

        self._state = HandState(cog, axis_angle, finger_tips, named_fingers)
        self._tracking = True
        return True
