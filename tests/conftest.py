import pytest

from starboard_comps import config
from starboard_comps.models import SubjectDraft


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("COMPARABLE_API_URL", "COMPARABLE_API_TIMEOUT", "COMPARABLE_API_MAX_ATTEMPTS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the test run
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: None)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def subject_draft():
    return SubjectDraft(
        latitude="34.0522",
        longitude="-118.2437",
        address="123 Industrial Way, Los Angeles, CA",
        square_feet="50000",
        year_built="2010",
        zoning="Industrial",
        num_comparables=5,
    )


@pytest.fixture
def comparables_payload():
    """Three comparables as the search service returns them, best match first."""
    return [
        {
            "id": "cmp-17",
            "score": 0.9213,
            "breakdown": {"location": 0.95, "size": 0.88, "year_built": 0.9, "zoning": 1.0},
            "property": {
                "id": "P-17", "latitude": 34.0611, "longitude": -118.2301,
                "square_feet": 48500, "year_built": 2008, "zoning": "Industrial",
                "address": "500 Alameda St, Los Angeles, CA",
            },
        },
        {
            "id": "cmp-04",
            "score": 0.7,
            "breakdown": {"location": 0.61, "size": 0.844, "year_built": 0.5, "zoning": 1.0},
            "property": {
                "id": "P-04", "latitude": 34.1, "longitude": -118.3,
                "square_feet": 62000, "year_built": 1999, "zoning": "Industrial",
            },
        },
        {
            "id": "cmp-31",
            "score": 0.41,
            "breakdown": {"location": 0.3, "size": 0.59, "year_built": 0.2, "zoning": 0.5},
            "property": {
                "id": "P-31", "latitude": 33.9, "longitude": -118.1,
                "square_feet": 20000, "year_built": 1975, "zoning": "Commercial",
                "address": None,
            },
        },
    ]
