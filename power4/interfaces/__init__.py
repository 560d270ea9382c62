"""
power4.interfaces - User interfaces for Power4

This package contains the text interface used to set up and play a match.
"""

# Don't import anything here to avoid circular imports
__all__ = []
