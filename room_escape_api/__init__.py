"""
Top-level package for the Room Escape API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
