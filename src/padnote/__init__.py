"""
Pad - minimal shareable notes

Visit the root URL to get a fresh pad with a short salted identifier,
then read or overwrite it at /<identifier>.

Version: 1.0.0
"""

__version__ = "1.0.0"
