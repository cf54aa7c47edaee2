"""
Array Tools: text utilities for decoding tokens, converting lines to string
arrays, merging and diffing arrays, and extracting URL parameters.
"""

__version__ = '1.0.0'
