"""
Camera helpers for the glove tracker
"""
import logging
import platform

import cv2

from .config import CAMERA_WIDTH, CAMERA_HEIGHT, CAMERA_FPS

logger = logging.getLogger(__name__)


def capture_backends(os_name=None):
    """OpenCV capture APIs to try, most reliable first for the platform"""
    os_name = os_name or platform.system()
    if os_name == 'Darwin':
        return [cv2.CAP_AVFOUNDATION]
    if os_name == 'Windows':
        return [cv2.CAP_DSHOW, cv2.CAP_ANY]
    return [cv2.CAP_V4L2, cv2.CAP_ANY]


def open_camera(index=None, max_attempts=5, width=CAMERA_WIDTH,
                height=CAMERA_HEIGHT, fps=CAMERA_FPS):
    """
    Open the glove camera and configure its capture size

    A camera only counts once it hands back a frame: some drivers open
    indices that never deliver anything.

    Args:
        index: Camera index to use exclusively, or None to probe 0..max_attempts-1
        max_attempts: Number of indices probed when index is None
        width, height, fps: Requested capture settings

    Returns:
        configured cv2.VideoCapture, or None if no camera delivers frames
    """
    indices = [index] if index is not None else range(max_attempts)

    for camera_index in indices:
        for api in capture_backends():
            cap = cv2.VideoCapture(camera_index, api)
            if cap.isOpened() and cap.read()[0]:
                cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
                cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
                cap.set(cv2.CAP_PROP_FPS, fps)
                logger.info("Using camera %d (api %d)", camera_index, api)
                return cap
            cap.release()

    logger.debug("No camera delivered frames for indices %s", list(indices))
    return None
