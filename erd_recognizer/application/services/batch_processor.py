"""Batch recognizer for processing multiple diagram images."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from ...config import BOXES_PREFIX, CONTOURS_PREFIX, SUPPORTED_IMAGE_EXTENSIONS
from ...core.rendering import draw_color_coded_contours, draw_shape_boxes, save_image
from ...domain.entities.report import RecognitionReport
from ..ports.contour_source import ContourSet
from ..ports.event_publisher import RecognitionEvent
from .recognition import RecognitionService

logger = logging.getLogger(__name__)


class RenderStyle(str, Enum):
    """Annotated image output styles."""
    NONE = "none"
    BOXES = "boxes"
    CONTOURS = "contours"
    BOTH = "both"


@dataclass
class BatchItem:
    """Outcome for one file."""
    path: Path
    report: RecognitionReport | None = None
    error: str | None = None
    outputs: list[Path] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.report is not None and self.error is None


@dataclass
class BatchResult:
    """Outcome of a batch run over several diagram images."""
    total: int
    successful: int
    failed: int
    processing_time_ms: float
    items: list[BatchItem]

    @property
    def success_rate(self) -> float:
        """Fraction of files recognized without error."""
        if self.total == 0:
            return 0.0
        return self.successful / self.total


class BatchRecognizer:
    """Recognize multiple images in batch."""

    def __init__(self, service: RecognitionService, source_loader: Callable[[Path], object] | None = None):
        """
        Args:
            service: Recognition service used for every file
            source_loader: Loads the image array drawn on by box rendering;
                required for RenderStyle.BOXES and BOTH
        """
        self._service = service
        self._load_image = source_loader

    def process_files(
        self,
        files: list[Path],
        output_dir: Path | None = None,
        style: RenderStyle = RenderStyle.NONE,
        progress_callback: Callable[[int, int, str], None] | None = None
    ) -> BatchResult:
        """Recognize each file in turn.

        A file that fails is logged and recorded; the batch continues.

        Args:
            files: Diagram images, processed in the given order
            output_dir: Directory for annotated images (None to skip)
            style: Which annotated images to write
            progress_callback: Called as (index, total, message) before each file

        Returns:
            One BatchItem per file plus totals
        """
        start_time = time.time()

        items: list[BatchItem] = []
        successful = 0
        failed = 0

        render = output_dir is not None and style is not RenderStyle.NONE
        if render:
            output_dir.mkdir(parents=True, exist_ok=True)

        for i, file_path in enumerate(files, 1):
            if progress_callback:
                progress_callback(i, len(files), f"Processing {file_path.name}")

            item = BatchItem(path=file_path)
            try:
                contour_set = self._service.extract(file_path)
                item.report = self._service.recognize_set(contour_set)
                if render:
                    item.outputs = self._render(file_path, contour_set, item.report, output_dir, style)
                successful += 1
            except Exception as e:
                logger.exception(f"Error processing {file_path.name}")
                item.error = str(e)
                failed += 1
            items.append(item)

        elapsed = (time.time() - start_time) * 1000
        logger.info(f"Batch complete: {successful}/{len(files)} succeeded")

        return BatchResult(
            total=len(files),
            successful=successful,
            failed=failed,
            processing_time_ms=elapsed,
            items=items
        )

    def process_directory(
        self,
        input_dir: Path,
        extensions: tuple[str, ...] = SUPPORTED_IMAGE_EXTENSIONS,
        **kwargs
    ) -> BatchResult:
        """Recognize every supported image directly inside ``input_dir``.

        Args:
            input_dir: Folder of diagram images (not searched recursively)
            extensions: Lower-case suffixes to accept
            **kwargs: Passed through to process_files

        Returns:
            Batch result for the files found, in name order
        """
        files = [
            f for f in input_dir.iterdir()
            if f.is_file() and f.suffix.lower() in extensions
        ]
        files.sort()

        return self.process_files(files, **kwargs)

    def subscribe_to_events(self, callback: Callable[[RecognitionEvent], None]) -> None:
        """Subscribe to recognition events."""
        self._service.subscribe_to_events(callback)

    def _render(
        self,
        file_path: Path,
        contour_set: ContourSet,
        report: RecognitionReport,
        output_dir: Path,
        style: RenderStyle
    ) -> list[Path]:
        outputs = []
        if style in (RenderStyle.BOXES, RenderStyle.BOTH):
            if self._load_image is None:
                raise ValueError("Rendering boxes requires an image loader")
            image = self._load_image(file_path)
            annotated = draw_shape_boxes(image, report.result)
            outputs.append(save_image(annotated, output_dir / f"{BOXES_PREFIX}{file_path.name}"))
        if style in (RenderStyle.CONTOURS, RenderStyle.BOTH):
            canvas = draw_color_coded_contours(
                contour_set.image_size, report.result, contour_set.contours
            )
            outputs.append(save_image(canvas, output_dir / f"{CONTOURS_PREFIX}{file_path.name}"))
        return outputs
