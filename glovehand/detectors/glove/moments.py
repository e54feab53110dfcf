"""
Contour geometry from image moments
Centre of gravity from the spatial moments, principal axis tilt from the
second-order central moments
"""
import logging
import math

logger = logging.getLogger(__name__)


def calculate_cog(m00, m10, m01, scale=1):
    """
    Centre of gravity in original-frame coordinates

    Args:
        m00, m10, m01: Spatial moments of the contour (working image)
        scale: Working-to-original scale factor

    Returns:
        (x, y) integer tuple, or None when the contour has no area
    """
    if m00 == 0:
        return None
    cx, cy = round(m10 / m00), round(m01 / m00)
    return (int(round(cx * scale)), int(round(cy * scale)))


def calculate_tilt(m11, m20, m02):
    """
    Integer angle (degrees) of the contour's major axis to the horizontal,
    with the positive y-axis pointing down the screen

    Follows Table 1 of "Simple Image Analysis By Moments" (J. Kilian, 2001).
    Negative tilts are turned into counter-clockwise angles by adding 180.

    Args:
        m11, m20, m02: Central moments mu11, mu20, mu02

    Returns:
        int angle
    """
    diff = m20 - m02
    if diff == 0:
        if m11 == 0:
            return 0
        elif m11 > 0:
            return 45
        else:
            return -45

    theta = 0.5 * math.atan2(2 * m11, diff)

    if diff > 0 and m11 == 0:
        return 0
    elif diff < 0 and m11 == 0:
        return -90
    elif diff > 0 and m11 > 0:    # 0 to 45
        return _round_degrees(theta)
    elif diff > 0 and m11 < 0:    # -45 to 0
        return 180 + _round_degrees(theta)
    elif diff < 0 and m11 > 0:    # 45 to 90
        return _round_degrees(theta)
    elif diff < 0 and m11 < 0:    # -90 to -45
        return 180 + _round_degrees(theta)

    # Only reachable with NaN moments
    logger.error("Error in moments for tilt angle: m11=%r m20=%r m02=%r", m11, m20, m02)
    raise AssertionError("no tilt quadrant matches m11=%r diff=%r" % (m11, diff))


def _round_degrees(radians):
    return int(round(math.degrees(radians)))


def extract_contour_info(moments, scale=1):
    """
    COG and raw tilt of a contour

    Args:
        moments: dict with 'm00', 'm10', 'm01', 'mu11', 'mu20', 'mu02'
        scale: Working-to-original scale factor

    Returns:
        (cog, tilt) where cog is None for a degenerate (zero-area) contour
    """
    cog = calculate_cog(moments['m00'], moments['m10'], moments['m01'], scale)
    if cog is None:
        logger.debug("Zero-area contour, COG unchanged")

    tilt = calculate_tilt(moments['mu11'], moments['mu20'], moments['mu02'])
    return cog, tilt


def resolve_axis_angle(tilt, prev_tips, prev_cog):
    """
    Turn a raw tilt into the hand's axis angle, with y running up the screen

    Moments alone cannot tell a hand pointing up from one pointing down, so
    the previous frame's finger tips decide: when they sat below the previous
    COG the axis is flipped by 180 degrees. The tips are one frame old.

    Args:
        tilt: Raw tilt from calculate_tilt()
        prev_tips: Finger tips of the previous frame (may be empty)
        prev_cog: COG of the previous frame, or None before the first frame

    Returns:
        int axis angle in degrees
    """
    if prev_tips and prev_cog is not None:
        avg_y = sum(y for _, y in prev_tips) // len(prev_tips)
        if avg_y > prev_cog[1]:    # fingers below COG
            tilt += 180
    return 180 - tilt
