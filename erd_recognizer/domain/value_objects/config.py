"""Configuration value objects with validation."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class ClassifierConfig(BaseModel):
    """Policy thresholds for shape classification and correction."""

    model_config = {"frozen": True}

    # Polygon simplification, as a fraction of contour perimeter
    approx_tolerance_factor: float = Field(default=0.02, gt=0.0, le=1.0)

    # Quadrilaterals and ovals must enclose strictly more than this
    min_shape_area: float = Field(default=500.0, ge=0.0)

    # Max |1 - w/h| for a quadrilateral to count as a relationship
    square_aspect_tolerance: float = Field(default=0.2, ge=0.0)

    # Attributes above this are page frames, not symbols
    max_attribute_area: float = Field(default=20000.0, gt=0.0)

    # Attributes get weak (multivalued) resolution like the other categories
    resolve_weak_attributes: bool = True

    @model_validator(mode='after')
    def check_area_bounds(self) -> ClassifierConfig:
        """The attribute ceiling must sit above the classification floor."""
        if self.max_attribute_area <= self.min_shape_area:
            raise ValueError(
                f"max_attribute_area ({self.max_attribute_area}) must be greater "
                f"than min_shape_area ({self.min_shape_area})"
            )
        return self


__all__ = [
    'ClassifierConfig',
]
