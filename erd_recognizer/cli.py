"""Command-line interface for the ER diagram recognizer."""

import argparse
import json
import logging
import sys
from pathlib import Path

import pydantic

from .adapters import OpenCVContourSource
from .application.services import BatchRecognizer, DiagramRecognizer, RecognitionService, RenderStyle
from .config import SUPPORTED_IMAGE_EXTENSIONS
from .domain import Category, ClassifierConfig, ExpectedCounts, RecognitionReport
from .exceptions import ConfigurationError, ValidationError
from .utils.env import setup_logging

# Expected-counts key that applies to every image
ALL_IMAGES_KEY = "*"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_MISMATCH = 2

_ROW_LABELS = {
    Category.ATTRIBUTE: "Attributes",
    Category.ENTITY: "Entities",
    Category.RELATIONSHIP: "Relationships",
    Category.WEAK_ATTRIBUTE: "Weak Attributes",
    Category.WEAK_ENTITY: "Weak Entities",
    Category.WEAK_RELATIONSHIP: "Weak Relationships",
}


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    defaults = ClassifierConfig()
    parser = argparse.ArgumentParser(
        prog="erd-recognizer",
        description="Count entities, relationships and attributes in ER diagram images"
    )

    parser.add_argument("input", help="Input image or folder")
    parser.add_argument("-o", "--output", help="Folder for annotated images")

    parser.add_argument(
        "--style",
        choices=[s.value for s in RenderStyle if s is not RenderStyle.NONE],
        default=RenderStyle.BOXES.value,
        help="Annotated image style when --output is set (default: boxes)"
    )

    parser.add_argument(
        "--expected",
        type=Path,
        help="JSON file with expected counts, either one mapping of category "
             "to count or a mapping of image file name to such mappings"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print full reports as JSON instead of count tables"
    )

    parser.add_argument(
        "--log-file",
        help="Also write the log to this file"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    # Classifier thresholds
    cls_group = parser.add_argument_group("Classifier options")
    cls_group.add_argument(
        "--min-area",
        type=float,
        default=defaults.min_shape_area,
        help=f"Minimum area of a symbol (default: {defaults.min_shape_area:g})"
    )
    cls_group.add_argument(
        "--max-attribute-area",
        type=float,
        default=defaults.max_attribute_area,
        help=f"Attributes above this area are dropped as page frames "
             f"(default: {defaults.max_attribute_area:g})"
    )
    cls_group.add_argument(
        "--square-tolerance",
        type=float,
        default=defaults.square_aspect_tolerance,
        help=f"Max |1 - w/h| for a relationship (default: {defaults.square_aspect_tolerance:g})"
    )
    cls_group.add_argument(
        "--approx-tolerance",
        type=float,
        default=defaults.approx_tolerance_factor,
        help=f"Polygon simplification as a fraction of perimeter "
             f"(default: {defaults.approx_tolerance_factor:g})"
    )
    cls_group.add_argument(
        "--no-weak-attributes",
        action="store_true",
        help="Do not detect multivalued (double-bordered) attributes"
    )

    return parser


def build_config(parsed: argparse.Namespace) -> ClassifierConfig:
    """Build classifier config from parsed arguments.

    Raises:
        ConfigurationError: If a threshold is out of range
    """
    try:
        return ClassifierConfig(
            approx_tolerance_factor=parsed.approx_tolerance,
            min_shape_area=parsed.min_area,
            square_aspect_tolerance=parsed.square_tolerance,
            max_attribute_area=parsed.max_attribute_area,
            resolve_weak_attributes=not parsed.no_weak_attributes,
        )
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid classifier settings: {e}") from e


def load_expected(path: Path) -> dict[str, ExpectedCounts]:
    """Load expected counts keyed by image file name.

    A flat mapping of category names is stored under ``ALL_IMAGES_KEY``.

    Raises:
        ValidationError: If the file is unreadable or malformed
    """
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Cannot read expected counts: {e}", field="expected") from e

    if not isinstance(data, dict):
        raise ValidationError("Expected counts must be a JSON object", field="expected")

    category_names = {c.value for c in Category}
    try:
        if set(data) <= category_names:
            return {ALL_IMAGES_KEY: ExpectedCounts(**data)}
        return {name: ExpectedCounts(**counts) for name, counts in data.items()}
    except (pydantic.ValidationError, TypeError) as e:
        raise ValidationError(f"Malformed expected counts: {e}", field="expected") from e


def format_report(report: RecognitionReport, expected: ExpectedCounts | None) -> str:
    """Render an actual vs expected table for one image."""
    name = report.source_path.name if report.source_path else "<memory>"
    lines = [f"\n{name}", "Actual vs Expected"]
    for category, label in _ROW_LABELS.items():
        actual = report.result.count(category)
        wanted = expected.expected(category) if expected else None
        shown = "-" if wanted is None else str(wanted)
        lines.append(f"{label:<19}: {actual} : {shown}")
    return "\n".join(lines)


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Setup logging
    setup_logging(logging.DEBUG if parsed.verbose else logging.INFO, log_file=parsed.log_file)
    logger = logging.getLogger(__name__)

    input_path = Path(parsed.input)
    if not input_path.exists():
        logger.error(f"Input not found: {input_path}")
        return EXIT_ERROR

    try:
        config = build_config(parsed)
        expected = load_expected(parsed.expected) if parsed.expected else {}
    except (ConfigurationError, ValidationError) as e:
        logger.error(str(e))
        return EXIT_ERROR

    # Get files to process
    if input_path.is_file():
        files = [input_path]
    else:
        files = sorted(
            f for f in input_path.iterdir()
            if f.suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS
        )

    if not files:
        logger.error("No image files found")
        return EXIT_ERROR

    logger.info(f"Processing {len(files)} image(s)...")

    source = OpenCVContourSource()
    service = RecognitionService(source, DiagramRecognizer(config))
    batch = BatchRecognizer(service, source_loader=source.load_image)

    output_dir = Path(parsed.output) if parsed.output else None
    style = RenderStyle(parsed.style) if output_dir else RenderStyle.NONE
    result = batch.process_files(files, output_dir=output_dir, style=style)

    mismatched = []
    json_reports = []
    for item in result.items:
        if not item.success:
            continue
        wanted = expected.get(item.path.name, expected.get(ALL_IMAGES_KEY))
        if wanted is not None and not wanted.matches(item.report.result):
            mismatched.append(item.path.name)

        if parsed.json:
            data = item.report.to_dict()
            if wanted is not None:
                data["matches_expected"] = wanted.matches(item.report.result)
            json_reports.append(data)
        else:
            print(format_report(item.report, wanted))
        for output in item.outputs:
            logger.info(f"  Saved: {output}")

    if parsed.json:
        print(json.dumps(json_reports, indent=2))

    # Summary
    logger.info("=" * 50)
    if result.failed:
        logger.warning(f"Completed: {result.successful}/{result.total} succeeded")
        for item in result.items:
            if item.error:
                logger.error(f"  - {item.path.name}: {item.error}")
        return EXIT_ERROR

    if mismatched:
        logger.warning(f"Counts differ from expected for: {', '.join(mismatched)}")
        return EXIT_MISMATCH

    logger.info(f"Completed: All {result.total} images processed successfully")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
