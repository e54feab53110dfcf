"""
Finger labelling for a left hand
The thumb and index finger are found from their angle to the COG, then the
remaining tips are named by walking the tip list and following the order
THUMB -> INDEX -> MIDDLE -> RING -> PINKY -> THUMB.
"""
import logging
import math
from enum import Enum

from ...core.config import MIN_THUMB, MAX_THUMB, MIN_INDEX, MAX_INDEX

logger = logging.getLogger(__name__)


class FingerName(Enum):
    THUMB = 'thumb'
    INDEX = 'index'
    MIDDLE = 'middle'
    RING = 'ring'
    PINKY = 'pinky'
    UNKNOWN = 'unknown'

    def next(self):
        """Following finger in the cycle, UNKNOWN stays UNKNOWN"""
        if self is FingerName.UNKNOWN:
            return self
        idx = _CYCLE.index(self)
        return _CYCLE[(idx + 1) % len(_CYCLE)]

    def prev(self):
        """Preceding finger in the cycle, UNKNOWN stays UNKNOWN"""
        if self is FingerName.UNKNOWN:
            return self
        idx = _CYCLE.index(self)
        return _CYCLE[(idx - 1) % len(_CYCLE)]


_CYCLE = (FingerName.THUMB, FingerName.INDEX, FingerName.MIDDLE,
          FingerName.RING, FingerName.PINKY)


def angle_to_cog(tip, cog, axis_angle):
    """
    Angle (integer degrees) of a tip around the COG, relative to the hand

    The hand's own rotation is added so that 90 means straight up the hand.
    """
    y_offset = cog[1] - tip[1]    # positive up the screen
    x_offset = tip[0] - cog[0]
    angle_tip = int(round(math.degrees(math.atan2(y_offset, x_offset))))
    return angle_tip + (90 - axis_angle)


def label_thumb_index(finger_tips, names, cog, axis_angle,
                      thumb_range=(MIN_THUMB, MAX_THUMB),
                      index_range=(MIN_INDEX, MAX_INDEX)):
    """
    Label at most one thumb and one index finger in place

    The hull is traversed counter-clockwise and the thumb of a left hand
    tends to land near the end of it, so the tips are scanned backwards.
    The first tip inside each (min, max] range claims the name.

    Args:
        finger_tips: list of (x, y) tips
        names: list of FingerName, same length, updated in place
        cog: (x, y) centre of gravity
        axis_angle: Hand axis angle in degrees
    """
    found_thumb = False
    found_index = False

    for i in range(len(finger_tips) - 1, -1, -1):
        angle = angle_to_cog(finger_tips[i], cog, axis_angle)

        if not found_thumb and thumb_range[0] < angle <= thumb_range[1]:
            names[i] = FingerName.THUMB
            found_thumb = True

        if not found_index and index_range[0] < angle <= index_range[1]:
            names[i] = FingerName.INDEX
            found_index = True


def label_unknowns(names):
    """
    Fill in UNKNOWN names around the first named finger, in place

    Names are propagated backwards with FingerName.prev() and forwards with
    FingerName.next(). A name already used elsewhere is never duplicated,
    that tip stays UNKNOWN.
    """
    anchor = next((i for i, name in enumerate(names) if name is not FingerName.UNKNOWN), None)
    if anchor is None:    # nothing to go on
        return

    name = names[anchor]
    _label_prev(names, anchor, name)
    _label_fwd(names, anchor, name)


def _label_prev(names, i, name):
    i -= 1
    while i >= 0 and name is not FingerName.UNKNOWN:
        if names[i] is FingerName.UNKNOWN:
            name = name.prev()
            if name not in names:
                names[i] = name
        else:
            name = names[i]
        i -= 1


def _label_fwd(names, i, name):
    i += 1
    while i < len(names) and name is not FingerName.UNKNOWN:
        if names[i] is FingerName.UNKNOWN:
            name = name.next()
            if name not in names:
                names[i] = name
        else:
            name = names[i]
        i += 1


def name_fingers(finger_tips, cog, axis_angle, **ranges):
    """
    Name every finger tip

    Args:
        finger_tips: list of (x, y) tips in hull order
        cog: (x, y) centre of gravity
        axis_angle: Hand axis angle in degrees
        **ranges: Optional thumb_range / index_range overrides

    Returns:
        list of FingerName, one per tip
    """
    names = [FingerName.UNKNOWN] * len(finger_tips)
    if not finger_tips:
        return names

    label_thumb_index(finger_tips, names, cog, axis_angle, **ranges)
    logger.debug("named fingers: %s", names)
    label_unknowns(names)
    logger.debug("revised named fingers: %s", names)
    return names
