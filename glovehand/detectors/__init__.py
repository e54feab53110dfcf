"""Hand detector implementations"""
from .glove import GloveDetector, HandAnalyzer, HandState, FingerName

__all__ = ['GloveDetector', 'HandAnalyzer', 'HandState', 'FingerName']
