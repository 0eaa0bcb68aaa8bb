from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, field_validator


class Zoning(str, Enum):
    INDUSTRIAL = "Industrial"
    MIXED_USE = "Mixed-Use"
    COMMERCIAL = "Commercial"
    OTHER = "Other"


ZONING_OPTIONS = [z.value for z in Zoning]

MIN_COMPARABLES = 1
MAX_COMPARABLES = 10
DEFAULT_COMPARABLES = 5


class SubjectDraft(BaseModel):
    """The subject property exactly as typed into the search form."""
    latitude: str = ""
    longitude: str = ""
    address: str = ""
    square_feet: str = ""
    year_built: str = ""
    zoning: str = ""
    num_comparables: int = DEFAULT_COMPARABLES


class ComparableRequest(BaseModel):
    """JSON body of POST /comparable."""
    latitude: float
    longitude: float
    square_feet: int
    year_built: int
    zoning: str


class ScoreBreakdown(BaseModel):
    location: float
    size: float
    year_built: float
    zoning: float


class ComparableProperty(BaseModel):
    id: str
    latitude: float
    longitude: float
    square_feet: int
    year_built: int
    zoning: str
    address: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return str(v) if isinstance(v, (int, float)) else v


class ComparableResult(BaseModel):
    id: str
    score: float
    breakdown: ScoreBreakdown
    property: ComparableProperty

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return str(v) if isinstance(v, (int, float)) else v


class SearchSession(BaseModel):
    """One search round trip: the submitted subject and the ranked results."""
    subject: SubjectDraft
    results: List[ComparableResult]
