"""
Configuration loading for the glove detector
"""
import logging
from pathlib import Path

import numpy as np

from ...core.config import HSV_LOWER_DEFAULT, HSV_UPPER_DEFAULT

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Calibration data is missing or malformed"""


def load_hsv_ranges(path):
    """
    Read the glove's HSV range from a calibration file

    The file has three lines, hue, saturation and brightness, each
    "<label> <lower> <upper>", e.g.::

        hue: 90 130
        sat: 80 255
        bri: 40 255

    Args:
        path: Calibration file path

    Returns:
        (hsv_lower, hsv_upper) uint8 arrays

    Raises:
        ConfigurationError: file cannot be read or parsed
    """
    path = Path(path)
    try:
        lines = path.read_text().splitlines()
    except OSError as e:
        raise ConfigurationError(f"Could not read HSV ranges from {path}: {e}") from e

    lines = [line for line in lines if line.strip()]
    if len(lines) < 3:
        raise ConfigurationError(f"Could not read HSV ranges from {path}: expected 3 lines, got {len(lines)}")

    lower, upper = [], []
    for line_no, line in enumerate(lines[:3], start=1):
        toks = line.split()
        if len(toks) < 3:
            raise ConfigurationError(f"Could not read HSV ranges from {path}: line {line_no} needs a label and two values")
        try:
            lower.append(int(toks[1]))
            upper.append(int(toks[2]))
        except ValueError as e:
            raise ConfigurationError(f"Could not read HSV ranges from {path}: line {line_no}: {e}") from e

    logger.info("Read HSV ranges from %s", path)
    return np.array(lower, dtype=np.uint8), np.array(upper, dtype=np.uint8)


def default_hsv_ranges():
    """HSV bounds from config.py"""
    return (np.array(HSV_LOWER_DEFAULT, dtype=np.uint8),
            np.array(HSV_UPPER_DEFAULT, dtype=np.uint8))
