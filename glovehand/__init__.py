"""Glove hand tracker - Core package"""
from .detectors import GloveDetector, HandAnalyzer, HandState, FingerName
from .detectors.glove import ConfigurationError, load_hsv_ranges
from .core.config import *

__version__ = "1.0.0"
