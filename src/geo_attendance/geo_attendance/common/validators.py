from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_prn(value: str) -> str:
    """Registration numbers are opaque but always numeric."""
    prn = require_non_empty(value, "PRN")
    if not prn.isdigit():
        raise ValidationError("PRN must contain digits only")
    return prn


def parse_coordinate(value: Any, field_name: str) -> float:
    """Coerce a submitted coordinate to float.

    Non-finite values are passed through; the gate rejects them as an outcome.
    Only values that are not numbers at all are a validation error.
    """

    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")


def require_latitude(value: Any) -> float:
    lat = parse_coordinate(value, "Latitude")
    if not math.isfinite(lat) or not -90.0 <= lat <= 90.0:
        raise ValidationError("Latitude must be between -90 and 90")
    return lat


def require_longitude(value: Any) -> float:
    lng = parse_coordinate(value, "Longitude")
    if not math.isfinite(lng) or not -180.0 <= lng <= 180.0:
        raise ValidationError("Longitude must be between -180 and 180")
    return lng


def require_radius(value: Any) -> float:
    radius = parse_coordinate(value, "Radius")
    if not math.isfinite(radius) or radius < 0:
        raise ValidationError("Radius must be a non-negative number of meters")
    return radius
