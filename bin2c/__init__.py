"""
bin2c: convert files into C const unsigned char arrays
"""

__version__ = '1.0.0'
