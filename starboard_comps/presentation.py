"""
Score-to-presentation rules for the results screen.

One three-way partition (High >= 0.8 > Medium >= 0.6 > Low) drives both the
text colour and the badge severity, for the overall score and for each
breakdown factor.
"""
import math
from enum import Enum
from typing import Iterable

from starboard_comps.models import ComparableResult, SubjectDraft
from starboard_comps.styles import SUCCESS, WARNING, DANGER
from starboard_comps.validation import parse_integer_prefix

HIGH_THRESHOLD = 0.8
MEDIUM_THRESHOLD = 0.6


class ScoreBand(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


BAND_COLORS = {
    ScoreBand.HIGH: SUCCESS,
    ScoreBand.MEDIUM: WARNING,
    ScoreBand.LOW: DANGER,
}

# badge severity name, Reflex colour scheme
BAND_BADGES = {
    ScoreBand.HIGH: ("default", "green"),
    ScoreBand.MEDIUM: ("secondary", "amber"),
    ScoreBand.LOW: ("destructive", "red"),
}

BREAKDOWN_LABELS = [
    ("location", "Location Match"),
    ("size", "Size Match"),
    ("year_built", "Age Match"),
    ("zoning", "Zoning Match"),
]


def score_band(score: float) -> ScoreBand:
    if score >= HIGH_THRESHOLD:
        return ScoreBand.HIGH
    if score >= MEDIUM_THRESHOLD:
        return ScoreBand.MEDIUM
    return ScoreBand.LOW


def score_color(score: float) -> str:
    return BAND_COLORS[score_band(score)]


def badge_variant(score: float) -> str:
    return BAND_BADGES[score_band(score)][0]


def badge_color_scheme(score: float) -> str:
    return BAND_BADGES[score_band(score)][1]


def to_percent(value: float) -> int:
    """Round half up to a whole percentage: 0.8049 -> 80, 0.844 -> 84."""
    return int(math.floor(value * 100 + 0.5))


def format_percent(value: float) -> str:
    return f"{to_percent(value)}%"


def progress_value(value: float) -> float:
    """0-100 fill level for a progress bar."""
    return max(0.0, min(100.0, value * 100))


def _as_sent(value):
    # Typed text reads the way the request body was built from it
    if isinstance(value, int):
        return value
    parsed = parse_integer_prefix(str(value))
    return value if parsed is None else parsed


def format_square_feet(value) -> str:
    value = _as_sent(value)
    if isinstance(value, int):
        return f"{value:,} sq ft"
    return f"{value} sq ft"


def format_year(value) -> str:
    return str(_as_sent(value))


def format_subject_coordinates(latitude: str, longitude: str) -> str:
    """Subject coordinates are shown as typed, truncated for the summary tile."""
    return f"{latitude[:7]}, {longitude[:8]}"


def format_coordinates(latitude: float, longitude: float) -> str:
    return f"{latitude:.4f}, {longitude:.4f}"


def comparable_title(result: ComparableResult) -> str:
    return result.property.address or f"Property {result.property.id}"


def build_breakdown_rows(result: ComparableResult) -> list[dict]:
    rows = []
    for field, label in BREAKDOWN_LABELS:
        value = getattr(result.breakdown, field)
        rows.append({
            "key": field,
            "label": label,
            "value": progress_value(value),
            "percent": format_percent(value),
            "color": score_color(value),
        })
    return rows


def build_result_card(result: ComparableResult) -> dict:
    """Flatten one comparable into the plain dict rendered by a result card."""
    prop = result.property
    return {
        "id": result.id,
        "title": comparable_title(result),
        "property_id": prop.id,
        "percent": format_percent(result.score),
        "match_label": f"{format_percent(result.score)} Match",
        "band": score_band(result.score).value,
        "score_color": score_color(result.score),
        "badge_color": badge_color_scheme(result.score),
        "size": format_square_feet(prop.square_feet),
        "year_built": format_year(prop.year_built),
        "zoning": prop.zoning,
        "location": format_coordinates(prop.latitude, prop.longitude),
        "breakdown": build_breakdown_rows(result),
    }


def build_result_cards(results: Iterable[ComparableResult]) -> list[dict]:
    # Server rank order is kept as-is
    return [build_result_card(r) for r in results]


def build_subject_summary(subject: SubjectDraft) -> dict:
    return {
        "size": format_square_feet(subject.square_feet),
        "year_built": format_year(subject.year_built),
        "zoning": subject.zoning,
        "location": format_subject_coordinates(subject.latitude, subject.longitude),
        "address": subject.address,
    }


def toggle_expansion(expanded: Iterable[str], card_id: str) -> list[str]:
    """Flip card_id's membership; other ids keep their order."""
    current = list(expanded)
    if card_id in current:
        return [i for i in current if i != card_id]
    return current + [card_id]
