"""
SlideCraft - AI-powered slide deck generation
"""

__version__ = "0.1.0"
