"""Adapters - implementations of application ports."""

from .contours import OpenCVContourSource

__all__ = ['OpenCVContourSource']
