"""Contour adapters - implementations of ContourSource port."""

from .opencv_adapter import OpenCVContourSource

__all__ = ['OpenCVContourSource']
