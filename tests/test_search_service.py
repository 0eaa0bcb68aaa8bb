import asyncio

import httpx
import pytest

from starboard_comps import presentation
from starboard_comps.errors import SearchFailedError, ValidationError
from starboard_comps.services.comparable_client import ComparableSearchClient, parse_comparables
from starboard_comps.services.search_service import (
    RESULTS_ROUTE, SEARCH_FAILED, SEARCH_ROUTE, begin_search, complete_search, load_results,
    run_comparable_search,
)
from starboard_comps.session_store import RESULTS_KEY, SUBJECT_KEY, SearchSessionStore


class DummyClient:
    def __init__(self, results=None, error=None):
        self.results = results or []
        self.error = error
        self.calls = []

    async def find_comparables(self, request, n):
        self.calls.append((request, n))
        if self.error:
            raise self.error
        return self.results


def test_validation_failure_makes_no_network_call(subject_draft):
    client = DummyClient()
    storage = {}
    draft = subject_draft.model_copy(update={"square_feet": ""})

    with pytest.raises(ValidationError):
        asyncio.run(run_comparable_search(draft, client, SearchSessionStore(storage)))

    assert client.calls == []
    assert storage == {}


def test_success_stores_session_and_passes_n(subject_draft, comparables_payload):
    client = DummyClient(results=parse_comparables(comparables_payload))
    store = SearchSessionStore({})
    draft = subject_draft.model_copy(update={"num_comparables": 3})

    session = asyncio.run(run_comparable_search(draft, client, store))

    request, n = client.calls[0]
    assert n == 3
    assert request.square_feet == 50000
    assert store.read() == session
    assert session.subject == draft


def test_failed_search_keeps_previous_session(subject_draft, comparables_payload):
    storage = {}
    store = SearchSessionStore(storage)
    store.write(subject_draft, parse_comparables(comparables_payload))
    before = dict(storage)

    client = ComparableSearchClient(
        api_url="https://comps.example.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(500)),
    )
    retry_draft = subject_draft.model_copy(update={"zoning": "Commercial"})

    with pytest.raises(SearchFailedError) as exc_info:
        asyncio.run(run_comparable_search(retry_draft, client, store))

    assert exc_info.value.status_code == 500
    assert storage == before
    # the draft itself is left for the user to resubmit
    assert retry_draft.zoning == "Commercial"


def test_end_to_end_cards_for_three_comparables(subject_draft, comparables_payload):
    client = ComparableSearchClient(
        api_url="https://comps.example.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=comparables_payload)),
    )
    store = SearchSessionStore({})

    asyncio.run(run_comparable_search(subject_draft, client, store))
    session = store.require()

    summary = presentation.build_subject_summary(session.subject)
    assert summary["size"] == "50,000 sq ft"
    assert summary["year_built"] == "2010"
    assert summary["zoning"] == "Industrial"

    cards = presentation.build_result_cards(session.results)
    assert [c["id"] for c in cards] == ["cmp-17", "cmp-04", "cmp-31"]
    assert [c["band"] for c in cards] == ["High", "Medium", "Low"]
    assert cards[1]["title"] == "Property P-04"


def _failing_client(status=500):
    return ComparableSearchClient(
        api_url="https://comps.example.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(status)),
    )


def test_submit_while_searching_is_ignored(subject_draft):
    assert begin_search(True, subject_draft) == (False, None)
    # no notice either, even when the draft is incomplete
    assert begin_search(True, subject_draft.model_copy(update={"zoning": ""})) == (False, None)


def test_submit_with_missing_field_gives_notice(subject_draft):
    launch, notice = begin_search(False, subject_draft.model_copy(update={"latitude": ""}))
    assert launch is False
    assert notice.title == "Missing Information"
    assert "Latitude" in notice.description


def test_submit_with_valid_draft_launches(subject_draft):
    assert begin_search(False, subject_draft) == (True, None)


def test_complete_search_success_merges_staged_session(subject_draft, comparables_payload):
    client = DummyClient(results=parse_comparables(comparables_payload))
    live = {"unrelated": "keep"}

    outcome = asyncio.run(complete_search(subject_draft, live, client))

    assert outcome.succeeded
    assert outcome.redirect == RESULTS_ROUTE
    assert outcome.notice is None
    assert set(outcome.storage) == {"unrelated", RESULTS_KEY, SUBJECT_KEY}
    assert live == {"unrelated": "keep"}


def test_complete_search_failure_keeps_prior_session_and_draft(subject_draft, comparables_payload):
    live = {}
    SearchSessionStore(live).write(subject_draft, parse_comparables(comparables_payload))
    before = dict(live)
    retry_draft = subject_draft.model_copy(update={"year_built": "1999"})
    before_draft = retry_draft.model_copy()

    outcome = asyncio.run(complete_search(retry_draft, live, _failing_client()))

    assert not outcome.succeeded
    assert outcome.redirect is None
    assert outcome.notice == SEARCH_FAILED
    assert outcome.storage == before
    assert live == before
    assert retry_draft == before_draft


def test_complete_search_unexpected_error_is_reported_as_failure(subject_draft):
    client = DummyClient(error=RuntimeError("boom"))

    outcome = asyncio.run(complete_search(subject_draft, {}, client))

    assert outcome.notice == SEARCH_FAILED
    assert outcome.storage == {}


def test_load_results_without_session_redirects():
    view = load_results({})

    assert view.status == "redirecting"
    assert view.redirect == SEARCH_ROUTE
    assert view.results == []
    assert view.subject == {}


@pytest.mark.parametrize("missing_key", [RESULTS_KEY, SUBJECT_KEY])
def test_load_results_with_half_session_redirects(subject_draft, comparables_payload, missing_key):
    storage = {}
    SearchSessionStore(storage).write(subject_draft, parse_comparables(comparables_payload))
    del storage[missing_key]

    view = load_results(storage)

    assert view.status == "redirecting"
    assert view.redirect == SEARCH_ROUTE
    assert view.results == []


def test_load_results_is_ready_and_leaves_session_in_place(subject_draft, comparables_payload):
    storage = {}
    SearchSessionStore(storage).write(subject_draft, parse_comparables(comparables_payload))
    before = dict(storage)

    first = load_results(storage)
    # returning to the form and back finds the same session
    second = load_results(storage)

    assert first.status == second.status == "ready"
    assert first.redirect is None
    assert [r["id"] for r in first.results] == ["cmp-17", "cmp-04", "cmp-31"]
    assert first.subject["zoning"] == "Industrial"
    assert second.results == first.results
    assert storage == before
