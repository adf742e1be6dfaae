"""Configuration and constants for the ER diagram recognizer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageProcessingConfig:
    """Configuration for image loading, contour extraction and rendering."""
    # Binarization before contour extraction
    threshold_value: int = 150
    threshold_max_value: int = 255

    # Rendering
    label_padding: int = 20  # Pixels between a shape and its labelled box
    label_offset: int = 3  # Pixels between the box and its label baseline
    box_thickness: int = 1
    contour_thickness: int = 2
    contour_color: tuple[int, int, int] = (120, 0, 120)  # BGR, unclassified outlines


IMAGE_CONFIG = ImageProcessingConfig()


# File handling - Based on OpenCV imread/imwrite support
# See: https://docs.opencv.org/3.4/d4/da8/group__imgcodecs.html
SUPPORTED_IMAGE_EXTENSIONS: tuple[str, ...] = (
    # JPEG formats
    '.jpg', '.jpeg', '.jpe', '.jp2',
    # PNG
    '.png',
    # BMP
    '.bmp', '.dib',
    # TIFF
    '.tiff', '.tif',
    # WebP
    '.webp',
    # Portable formats
    '.pbm', '.pgm', '.ppm', '.pxm', '.pnm',
)

# Output file prefixes
BOXES_PREFIX = "boxes_"
CONTOURS_PREFIX = "contours_"


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
