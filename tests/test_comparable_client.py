import asyncio
import json

import httpx
import pytest

from starboard_comps.errors import SearchFailedError
from starboard_comps.models import ComparableRequest
from starboard_comps.services.comparable_client import ComparableSearchClient, parse_comparables

API_URL = "https://comps.example.test"


@pytest.fixture
def request_body():
    return ComparableRequest(latitude=34.0522, longitude=-118.2437, square_feet=50000,
                             year_built=2010, zoning="Industrial")


def _client(handler, **kwargs):
    return ComparableSearchClient(api_url=API_URL, transport=httpx.MockTransport(handler),
                                  backoff_seconds=0, **kwargs)


def test_posts_subject_as_json_with_n_in_query(request_body, comparables_payload):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=comparables_payload)

    asyncio.run(_client(handler).find_comparables(request_body, 5))

    sent = seen[0]
    assert sent.method == "POST"
    assert sent.url.path == "/comparable"
    assert sent.url.params["n"] == "5"
    assert json.loads(sent.content) == {
        "latitude": 34.0522,
        "longitude": -118.2437,
        "square_feet": 50000,
        "year_built": 2010,
        "zoning": "Industrial",
    }


def test_results_keep_server_order(request_body, comparables_payload):
    handler = lambda request: httpx.Response(200, json=comparables_payload)

    results = asyncio.run(_client(handler).find_comparables(request_body, 3))

    assert [r.id for r in results] == ["cmp-17", "cmp-04", "cmp-31"]
    assert results[0].breakdown.zoning == 1.0
    assert results[2].property.address is None


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_non_success_status_raises_search_failed(request_body, status):
    handler = lambda request: httpx.Response(status, text="nope")

    with pytest.raises(SearchFailedError) as exc_info:
        asyncio.run(_client(handler).find_comparables(request_body, 5))

    assert exc_info.value.status_code == status


def test_http_errors_are_not_retried(request_body):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500)

    with pytest.raises(SearchFailedError):
        asyncio.run(_client(handler, max_attempts=3).find_comparables(request_body, 5))
    assert len(calls) == 1


def test_transport_error_raises_search_failed(request_body):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SearchFailedError) as exc_info:
        asyncio.run(_client(handler).find_comparables(request_body, 5))
    assert exc_info.value.status_code is None


def test_transport_errors_retry_up_to_max_attempts(request_body, comparables_payload):
    calls = []

    def handler(request):
        calls.append(request)
        if len(calls) < 3:
            raise httpx.ConnectTimeout("timed out", request=request)
        return httpx.Response(200, json=comparables_payload)

    results = asyncio.run(_client(handler, max_attempts=3).find_comparables(request_body, 5))

    assert len(calls) == 3
    assert len(results) == 3


def test_single_attempt_by_default(request_body):
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("down", request=request)

    with pytest.raises(SearchFailedError):
        asyncio.run(_client(handler).find_comparables(request_body, 5))
    assert len(calls) == 1


def test_non_json_body_raises_search_failed(request_body):
    handler = lambda request: httpx.Response(200, text="<html>gateway</html>")
    with pytest.raises(SearchFailedError):
        asyncio.run(_client(handler).find_comparables(request_body, 5))


def test_parse_rejects_non_list_payload():
    with pytest.raises(SearchFailedError):
        parse_comparables({"results": []})


def test_parse_rejects_malformed_item(comparables_payload):
    del comparables_payload[1]["breakdown"]
    with pytest.raises(SearchFailedError):
        parse_comparables(comparables_payload)


def test_parse_coerces_numeric_ids(comparables_payload):
    comparables_payload[0]["id"] = 17
    comparables_payload[0]["property"]["id"] = 170
    result = parse_comparables(comparables_payload)[0]
    assert result.id == "17"
    assert result.property.id == "170"


def test_parse_empty_list():
    assert parse_comparables([]) == []


def test_base_url_comes_from_settings(monkeypatch):
    monkeypatch.setenv("COMPARABLE_API_URL", "https://staging.example.test/")
    client = ComparableSearchClient()
    assert client.endpoint == "https://staging.example.test/comparable"
