"""
Configuration constants for the glove hand tracker
"""

# Camera settings
CAMERA_WIDTH = 640
CAMERA_HEIGHT = 480
CAMERA_FPS = 30

# Processing settings
# Frames are shrunk by IMG_SCALE before segmentation, and every point found
# in the working image is multiplied back by it
IMG_SCALE = 2

# Contour selection
# SMALLEST_AREA: minimum area of the contour's rotated bounding box, measured
# in the scaled-down working image. Smaller blobs are treated as noise.
SMALLEST_AREA = 600.0

# Contour simplification (cv2.approxPolyDP epsilon, in working-image pixels)
APPROX_EPSILON = 3

# Convexity defects
# MAX_POINTS: at most this many defects are examined per frame
MAX_POINTS = 20
# Shallower defects are not gaps between fingers
MIN_FINGER_DEPTH = 20
# Wider angles (degrees) between a tip and its neighbouring folds are not fingers
MAX_FINGER_ANGLE = 60

# Angle ranges (degrees, hand-relative, 90 = straight up) of the thumb and
# index finger of a left hand, measured from the COG
MIN_THUMB = 120
MAX_THUMB = 200
MIN_INDEX = 60
MAX_INDEX = 120

# Default HSV glove range, used when no calibration file is supplied
# (OpenCV hue runs 0-179)
HSV_LOWER_DEFAULT = [90, 80, 40]
HSV_UPPER_DEFAULT = [130, 255, 255]

# File paths
CALIBRATION_FILE = "gloveHSV.txt"
