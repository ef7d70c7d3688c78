"""
Shannon - block entropy scanner

Measures Shannon entropy per block of a file, draws it as a terminal bar
chart and reports where high entropy (packed, compressed, encrypted)
regions begin and end.
"""

from .analyzer import EntropyAnalyzer

__version__ = '1.0.0'
__author__ = 'Shannon Team'

__all__ = ['EntropyAnalyzer']
