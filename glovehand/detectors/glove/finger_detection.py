"""
Finger tip detection from convexity defects
Defects between the hand contour and its convex hull are copied into a
bounded buffer, then narrowed down to the tips that look like fingers:
- the defect must be deep enough to be a gap between fingers
- the tip must form a narrow angle with its neighbouring folds
"""
import logging
import math

from ...core.config import MAX_POINTS, MIN_FINGER_DEPTH, MAX_FINGER_ANGLE
from .vision_backend import ConvexityDefect

logger = logging.getLogger(__name__)


def extract_defects(defects, scale=1, max_points=MAX_POINTS):
    """
    Copy defects into original-frame coordinates, keeping at most max_points

    Args:
        defects: Sequence of ConvexityDefect in working-image coordinates
        scale: Working-to-original scale factor
        max_points: Buffer capacity, extra defects are dropped

    Returns:
        list of ConvexityDefect in original-frame coordinates
    """
    defects = list(defects)
    if len(defects) > max_points:
        logger.info("Only processing %d defect points (got %d)", max_points, len(defects))
        defects = defects[:max_points]

    return [
        ConvexityDefect(
            tip=_scale_point(d.tip, scale),
            fold=_scale_point(d.fold, scale),
            depth=d.depth * scale,
        )
        for d in defects
    ]


def _scale_point(pt, scale):
    return (int(round(pt[0] * scale)), int(round(pt[1] * scale)))


def angle_between(tip, next_pt, prev_pt):
    """
    Angle (integer degrees) at the tip between two neighbouring fold points

    Not normalised: the difference of the two bearings can exceed 180.
    """
    return abs(int(round(math.degrees(
        math.atan2(next_pt[0] - tip[0], next_pt[1] - tip[1]) -
        math.atan2(prev_pt[0] - tip[0], prev_pt[1] - tip[1])))))


def reduce_tips(defects, min_depth=MIN_FINGER_DEPTH, max_angle=MAX_FINGER_ANGLE):
    """
    Keep the defect tips that are probably finger tips

    The defect list is treated as circular: the first defect's predecessor
    is the last one. Surviving tips keep the hull traversal order.

    Args:
        defects: list of ConvexityDefect (original-frame coordinates)
        min_depth: Shallower defects are rejected
        max_angle: Tips whose fold angle is this wide or wider are rejected

    Returns:
        list of (x, y) finger tips
    """
    num_points = len(defects)
    finger_tips = []

    for i, defect in enumerate(defects):
        if defect.depth < min_depth:
            continue

        prev_idx = (i - 1 + num_points) % num_points
        next_idx = (i + 1) % num_points
        angle = angle_between(defect.tip, defects[next_idx].fold, defects[prev_idx].fold)
        if angle >= max_angle:
            continue

        finger_tips.append(defect.tip)

    logger.debug("No. of finger tips: %d", len(finger_tips))
    return finger_tips


def find_finger_tips(contour, backend, scale=1, epsilon=3, max_points=MAX_POINTS,
                     min_depth=MIN_FINGER_DEPTH, max_angle=MAX_FINGER_ANGLE):
    """
    Full tip detection for one contour: simplify, hull, defects, filter

    Args:
        contour: Hand contour in working-image coordinates
        backend: VisionBackend supplying the geometric primitives
        scale: Working-to-original scale factor
        epsilon: Contour simplification tolerance

    Returns:
        list of (x, y) finger tips in original-frame coordinates
    """
    approx = backend.simplify_contour(contour, epsilon)
    hull = backend.convex_hull(approx)
    raw_defects = backend.convexity_defects(approx, hull)

    defects = extract_defects(raw_defects, scale, max_points)
    return reduce_tips(defects, min_depth, max_angle)
