"""
Search-form precondition checks and request construction.

The form keeps raw text; this module is the only place that turns it into
the typed request body sent to the comparable-search service.
"""
import math
import re
from typing import Dict, Optional

from starboard_comps.errors import ValidationError
from starboard_comps.models import (
    ComparableRequest, SubjectDraft, ZONING_OPTIONS,
    MIN_COMPARABLES, MAX_COMPARABLES, DEFAULT_COMPARABLES,
)

# field name -> label shown to the user
REQUIRED_FIELDS = {
    "latitude": "Latitude",
    "longitude": "Longitude",
    "square_feet": "Square Feet",
    "year_built": "Year Built",
    "zoning": "Zoning",
}

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def missing_fields(draft: SubjectDraft) -> list[str]:
    """Names of required fields that are blank."""
    return [name for name in REQUIRED_FIELDS if not str(getattr(draft, name) or "").strip()]


def is_submittable(draft: SubjectDraft) -> bool:
    return not missing_fields(draft)


def _parse_coordinate(text: str, label: str) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        raise ValidationError(f"{label} must be a number") from None
    if not math.isfinite(value):
        raise ValidationError(f"{label} must be a finite number")
    return value


def parse_integer_prefix(text: str) -> Optional[int]:
    """Leading integer digits only: "50000.9" -> 50000, "1e5" -> 1. None if there are none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _parse_integer(text: str, label: str) -> int:
    value = parse_integer_prefix(text)
    if value is None:
        raise ValidationError(f"{label} must be a whole number")
    return value


def clamp_num_comparables(value) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return DEFAULT_COMPARABLES
    return max(MIN_COMPARABLES, min(MAX_COMPARABLES, n))


def validate_draft(draft: SubjectDraft) -> ComparableRequest:
    """Check the draft and coerce it into a request body.

    Raises ValidationError naming every blank required field, or the first
    field whose text cannot be coerced.
    """
    missing = missing_fields(draft)
    if missing:
        labels = ", ".join(REQUIRED_FIELDS[m] for m in missing)
        raise ValidationError(f"Please fill in all required fields: {labels}", missing_fields=missing)

    latitude = _parse_coordinate(draft.latitude, "Latitude")
    longitude = _parse_coordinate(draft.longitude, "Longitude")

    square_feet = _parse_integer(draft.square_feet, "Square Feet")
    if square_feet <= 0:
        raise ValidationError("Square Feet must be greater than zero")
    year_built = _parse_integer(draft.year_built, "Year Built")

    zoning = draft.zoning.strip()
    if zoning not in ZONING_OPTIONS:
        raise ValidationError(f"Zoning must be one of: {', '.join(ZONING_OPTIONS)}")

    return ComparableRequest(
        latitude=latitude,
        longitude=longitude,
        square_feet=square_feet,
        year_built=year_built,
        zoning=zoning,
    )


def search_params(draft: SubjectDraft) -> Dict[str, int]:
    """Query parameters for the search call; n is never a body field."""
    return {"n": clamp_num_comparables(draft.num_comparables)}
