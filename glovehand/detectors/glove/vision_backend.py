"""
Vision primitives consumed by the hand analyzer

The analyzer only needs five operations from an image-processing library.
They sit behind VisionBackend so the finger logic can be driven by synthetic
geometry in tests, while OpenCVBackend supplies the real thing.
"""
import logging
from abc import ABC, abstractmethod
from collections import namedtuple

import cv2
import numpy as np

logger = logging.getLogger(__name__)

# One concavity between the hull and the contour, in working-image coordinates.
# tip is the defect's start point, fold its deepest point.
ConvexityDefect = namedtuple('ConvexityDefect', ['tip', 'fold', 'depth'])

# cv2.convexityDefects reports depths as 8.8 fixed point
_FIXPT_DEPTH_SCALE = 256.0


class VisionBackend(ABC):

    @abstractmethod
    def find_largest_contour(self, mask, min_area):
        """Return the biggest contour in a binary mask, or None if none exceeds min_area"""

    @abstractmethod
    def compute_moments(self, contour):
        """
        Return a dict with spatial moments 'm00', 'm10', 'm01' and
        central moments 'mu11', 'mu20', 'mu02'
        """

    @abstractmethod
    def simplify_contour(self, contour, epsilon):
        """Reduce the number of points in a closed contour"""

    @abstractmethod
    def convex_hull(self, contour):
        """Return the counter-clockwise convex hull of the contour"""

    @abstractmethod
    def convexity_defects(self, contour, hull):
        """Return a list of ConvexityDefect for the contour/hull pair"""


class OpenCVBackend(VisionBackend):
    """VisionBackend implemented with cv2"""

    def find_largest_contour(self, mask, min_area):
        """
        Find the contour with the largest rotated bounding box

        Args:
            mask: Binary uint8 mask
            min_area: Box area the winner must exceed

        Returns:
            Contour array or None
        """
        contours, _ = cv2.findContours(mask, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)

        best_contour = None
        max_area = min_area
        for contour in contours:
            if len(contour) == 0:
                continue
            (_, _), (width, height), _ = cv2.minAreaRect(contour)
            area = width * height
            if area > max_area:
                max_area = area
                best_contour = contour

        return best_contour

    def compute_moments(self, contour):
        return cv2.moments(contour)

    def simplify_contour(self, contour, epsilon):
        return cv2.approxPolyDP(contour, epsilon, True)

    def convex_hull(self, contour):
        # Indices, not points: convexityDefects needs them
        return cv2.convexHull(contour, clockwise=False, returnPoints=False)

    def convexity_defects(self, contour, hull):
        """
        Convert cv2.convexityDefects rows into ConvexityDefect tuples

        Args:
            contour: Simplified contour
            hull: Hull indices from convex_hull()

        Returns:
            list of ConvexityDefect, empty when OpenCV finds none
        """
        if hull is None or len(hull) < 3:
            return []

        try:
            defects = cv2.convexityDefects(contour, hull)
        except cv2.error as e:
            # Self-intersecting contours give non-monotonous hull indices
            logger.debug("convexityDefects failed: %s", e)
            return []

        if defects is None:
            return []

        points = contour.reshape(-1, 2)
        result = []
        for start, _end, far, depth in defects.reshape(-1, 4):
            tip = tuple(int(v) for v in points[start])
            fold = tuple(int(v) for v in points[far])
            result.append(ConvexityDefect(tip, fold, float(depth) / _FIXPT_DEPTH_SCALE))
        return result


def as_contour(points):
    """Build an OpenCV-style (N, 1, 2) int32 contour from a list of (x, y) points"""
    return np.array(points, dtype=np.int32).reshape(-1, 1, 2)
