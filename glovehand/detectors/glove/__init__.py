"""
Glove-based hand analysis
Moments, convexity defects and finger naming, one module per step
"""
from .glove_detector import GloveDetector
from .hand_analyzer import HandAnalyzer
from .detector_state import HandState
from .finger_naming import FingerName
from .config_loader import ConfigurationError, load_hsv_ranges
from .vision_backend import VisionBackend, OpenCVBackend, ConvexityDefect

__all__ = ['GloveDetector', 'HandAnalyzer', 'HandState', 'FingerName',
           'ConfigurationError', 'load_hsv_ranges',
           'VisionBackend', 'OpenCVBackend', 'ConvexityDefect']
