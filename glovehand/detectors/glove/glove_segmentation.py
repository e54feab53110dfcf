"""
Glove segmentation by HSV thresholding
"""
import cv2
import numpy as np


def threshold_glove(frame, hsv_lower, hsv_upper, scale=2):
    """
    Binary mask of the glove in a shrunken copy of the frame

    Args:
        frame: Input BGR frame
        hsv_lower: Lower HSV bound
        hsv_upper: Upper HSV bound
        scale: Shrink factor, the mask is 1/scale of the frame in each direction

    Returns:
        uint8 mask, 255 where the glove colour matches
    """
    h, w = frame.shape[:2]
    small = cv2.resize(frame, (w // scale, h // scale), interpolation=cv2.INTER_LINEAR)

    hsv = cv2.cvtColor(small, cv2.COLOR_BGR2HSV)
    mask = cv2.inRange(hsv, np.asarray(hsv_lower, dtype=np.uint8),
                       np.asarray(hsv_upper, dtype=np.uint8))

    return clean_mask(mask)


def clean_mask(mask, kernel_size=3):
    """
    Open the mask (erode then dilate) to remove specks while keeping size

    Args:
        mask: Binary mask
        kernel_size: Size of the square structuring element

    Returns:
        Cleaned mask
    """
    kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (kernel_size, kernel_size))
    return cv2.morphologyEx(mask, cv2.MORPH_OPEN, kernel, iterations=1)
