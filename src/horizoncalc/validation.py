"""Input validation for observer and subject heights."""
from __future__ import annotations
import math
from decimal import Decimal
from typing import Optional


def format_height(value: float) -> str:
    """Render a height the way error messages show it.

    Shortest round-trip digits in positional notation, no trailing ``.0``,
    sign kept on zero: ``0``, ``-0``, ``-5``, ``1.5``, ``-0.0000001``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


class HeightError(ValueError):
    """Raised when a height is not physically meaningful."""

    field = "height"

    def __init__(self, value: float):
        self.value = value
        super().__init__(
            f"{self.field} must have positive non-zero height: {format_height(value)}"
        )


class ObserverHeightError(HeightError):
    field = "observer"


class SubjectHeightError(HeightError):
    field = "subject"


def validate_heights(observer_height: float, subject_height: Optional[float] = None) -> None:
    """Validate raw observer and subject heights.

    Args:
        observer_height: Observer height in input units.
        subject_height: Subject height in input units, or None for the horizon.

    Raises:
        ObserverHeightError: If the observer height is not strictly positive.
        SubjectHeightError: If a subject height is given and is not strictly positive.
    """
    # "not > 0" also rejects NaN
    if not observer_height > 0.0:
        raise ObserverHeightError(observer_height)

    if subject_height is not None and not subject_height > 0.0:
        raise SubjectHeightError(subject_height)


__all__ = [
    "HeightError",
    "ObserverHeightError",
    "SubjectHeightError",
    "format_height",
    "validate_heights",
]
