"""Recognition service - orchestrates the classification pipeline."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from ...core.shape_classifier import ShapeClassifier
from ...domain.entities.classification import ClassificationResult
from ...domain.entities.report import RecognitionReport
from ...domain.entities.shape import Shape
from ...domain.services.border_filter import filter_border_contours
from ...domain.services.outlier_filter import remove_oversized_attributes
from ...domain.services.weak_resolver import resolve_all
from ...domain.value_objects.category import Category
from ...domain.value_objects.config import ClassifierConfig
from ...domain.value_objects.geometry import Contour, ImageSize
from ...exceptions import InvalidContourError
from ..ports.contour_source import ContourSet, ContourSource
from ..ports.event_publisher import (
    STAGE_COMPLETE,
    STAGE_EXTRACT,
    EventCallback,
    EventPublisher,
    RecognitionEvent,
    SimpleEventPublisher,
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineContext:
    """Context passed through pipeline steps."""
    contours: list[Contour]
    image_size: ImageSize
    config: ClassifierConfig
    shapes: list[Shape] = field(default_factory=list)
    invalid_skipped: int = 0
    border_rejected: int = 0
    outliers_removed: int = 0


class PipelineStep:
    """Base class for pipeline steps."""

    def __init__(self, name: str):
        self.name = name

    def execute(self, ctx: PipelineContext) -> PipelineContext:
        """Execute this step and return updated context."""
        raise NotImplementedError


class ValidateContoursStep(PipelineStep):
    """Step 1: Skip degenerate contours without aborting the run."""

    def __init__(self):
        super().__init__("validate_contours")

    def execute(self, ctx: PipelineContext) -> PipelineContext:
        valid = []
        for contour in ctx.contours:
            try:
                contour.require_polygon()
            except InvalidContourError as e:
                logger.warning(f"Skipping contour: {e}")
                ctx.invalid_skipped += 1
                continue
            valid.append(contour)
        ctx.contours = valid
        return ctx


class FilterBorderStep(PipelineStep):
    """Step 2: Remove contours touching the image edge."""

    def __init__(self):
        super().__init__("filter_border")

    def execute(self, ctx: PipelineContext) -> PipelineContext:
        interior, rejected = filter_border_contours(ctx.contours, ctx.image_size)
        ctx.contours = interior
        ctx.border_rejected += len(rejected)
        logger.info(f"Border filter: {len(interior)} interior, {len(rejected)} rejected")
        return ctx


class ClassifyShapesStep(PipelineStep):
    """Step 3: Classify interior contours by vertex count."""

    def __init__(self, classifier: ShapeClassifier):
        super().__init__("classify_shapes")
        self._classifier = classifier

    def execute(self, ctx: PipelineContext) -> PipelineContext:
        ctx.shapes = self._classifier.classify_all(ctx.contours)
        logger.info(f"Classified {len(ctx.shapes)} of {len(ctx.contours)} contours")
        return ctx


class RemoveOutliersStep(PipelineStep):
    """Step 4: Drop oversized attributes (page frames)."""

    def __init__(self):
        super().__init__("remove_outliers")

    def execute(self, ctx: PipelineContext) -> PipelineContext:
        ctx.shapes, removed = remove_oversized_attributes(
            ctx.shapes, ctx.config.max_attribute_area
        )
        ctx.outliers_removed += len(removed)
        if removed:
            logger.info(f"Removed {len(removed)} oversized attribute(s)")
        return ctx


class ResolveWeakTypesStep(PipelineStep):
    """Step 5: Promote containers to weak types, drop nested shapes."""

    def __init__(self):
        super().__init__("resolve_weak_types")

    def execute(self, ctx: PipelineContext) -> PipelineContext:
        categories = [Category.ENTITY, Category.RELATIONSHIP]
        if ctx.config.resolve_weak_attributes:
            categories.append(Category.ATTRIBUTE)
        ctx.shapes = resolve_all(ctx.shapes, categories)
        return ctx


class DiagramRecognizer:
    """Classify the contours of one diagram into ER symbol categories."""

    def __init__(self, config: ClassifierConfig | None = None):
        self._config = config or ClassifierConfig()
        self._classifier = ShapeClassifier(self._config)
        self._pipeline = self._build_pipeline()

    @property
    def config(self) -> ClassifierConfig:
        return self._config

    @property
    def steps(self) -> list[PipelineStep]:
        return list(self._pipeline)

    def _build_pipeline(self) -> list[PipelineStep]:
        """Build processing pipeline."""
        return [
            ValidateContoursStep(),
            FilterBorderStep(),
            ClassifyShapesStep(self._classifier),
            RemoveOutliersStep(),
            ResolveWeakTypesStep(),
        ]

    def run(
        self,
        contours: Iterable[Contour],
        image_size: ImageSize,
        source_path: Path | None = None,
        on_step: Callable[[PipelineStep], None] | None = None
    ) -> RecognitionReport:
        """Run the full pipeline.

        Args:
            contours: Contours in extraction order
            image_size: Size of the source image
            source_path: Image the contours came from (for the report)
            on_step: Optional callback invoked before each step

        Returns:
            Report with the classification result and stage counters
        """
        start_time = time.time()
        contours = list(contours)
        ctx = PipelineContext(
            contours=contours,
            image_size=image_size,
            config=self._config,
        )

        for step in self._pipeline:
            if on_step:
                on_step(step)
            ctx = step.execute(ctx)

        result = ClassificationResult.from_shapes(ctx.shapes)
        elapsed = (time.time() - start_time) * 1000

        return RecognitionReport(
            result=result,
            image_size=image_size,
            source_path=source_path,
            contours_in=len(contours),
            border_rejected=ctx.border_rejected,
            invalid_skipped=ctx.invalid_skipped,
            outliers_removed=ctx.outliers_removed,
            processing_time_ms=elapsed,
        )

    def recognize(
        self,
        contours: Iterable[Contour],
        image_size: ImageSize
    ) -> ClassificationResult:
        """Classify contours and return only the category collections."""
        return self.run(contours, image_size).result

    def recognize_set(self, contour_set: ContourSet) -> RecognitionReport:
        """Classify an extracted contour set."""
        return self.run(
            contour_set.contours,
            contour_set.image_size,
            source_path=contour_set.source_path,
        )


class RecognitionService:
    """Service for recognizing ER diagram images end to end."""

    def __init__(
        self,
        source: ContourSource,
        recognizer: DiagramRecognizer | None = None,
        events: EventPublisher | None = None
    ):
        self._source = source
        self._recognizer = recognizer or DiagramRecognizer()
        self._events = events or SimpleEventPublisher()

    @property
    def recognizer(self) -> DiagramRecognizer:
        return self._recognizer

    def extract(self, image_path: Path | str) -> ContourSet:
        """Extract contours through the configured source."""
        image_path = Path(image_path)
        self._events.publish(RecognitionEvent(
            stage=STAGE_EXTRACT,
            message=f"Extracting contours with {self._source.name}",
            image_path=image_path
        ))
        return self._source.extract(image_path)

    def recognize_set(self, contour_set: ContourSet) -> RecognitionReport:
        """Run the pipeline on an extracted contour set, publishing events."""
        steps = self._recognizer.steps

        def announce(step: PipelineStep) -> None:
            self._events.publish(RecognitionEvent(
                stage=step.name,
                message=f"Executing {step.name}",
                progress=steps.index(step) / len(steps),
                image_path=contour_set.source_path
            ))

        report = self._recognizer.run(
            contour_set.contours,
            contour_set.image_size,
            source_path=contour_set.source_path,
            on_step=announce,
        )

        self._events.publish(RecognitionEvent(
            stage=STAGE_COMPLETE,
            message=f"Recognized {report.classified} shape(s)",
            progress=1.0,
            image_path=contour_set.source_path
        ))
        return report

    def recognize_file(self, image_path: Path | str) -> RecognitionReport:
        """Extract contours from an image and classify them.

        Raises:
            ImageProcessingError: If the image cannot be read
        """
        return self.recognize_set(self.extract(image_path))

    def subscribe_to_events(self, callback: EventCallback) -> None:
        """Subscribe to recognition events."""
        self._events.subscribe(callback)

    def unsubscribe_from_events(self, callback: EventCallback) -> None:
        self._events.unsubscribe(callback)
