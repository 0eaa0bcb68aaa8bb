"""
Search pipeline behind the form's submit action:
validate -> build request -> call the service -> store the session.

The screen-level rules live here as plain functions so the Reflex handlers in
state.py stay thin:
  begin_search()    single-search guard + synchronous validation
  complete_search() one round trip against a staged copy of the session
  load_results()    the results-screen session guard
"""
import logging
from dataclasses import dataclass, field
from typing import Mapping, NamedTuple, Optional

from starboard_comps.errors import SearchFailedError, SessionMissingError, ValidationError
from starboard_comps.models import SearchSession, SubjectDraft
from starboard_comps.services.comparable_client import ComparableSearchClient
from starboard_comps.session_store import SearchSessionStore
from starboard_comps.validation import search_params, validate_draft

logger = logging.getLogger(__name__)

SEARCH_ROUTE = "/search"
RESULTS_ROUTE = "/results"


class Notice(NamedTuple):
    title: str
    description: str


MISSING_INFO_TITLE = "Missing Information"
SEARCH_FAILED = Notice("Search Failed", "Unable to find comparable properties. Please try again.")


async def run_comparable_search(
    draft: SubjectDraft,
    client: ComparableSearchClient,
    store: SearchSessionStore,
) -> SearchSession:
    """
    Run one search round trip.

    ValidationError is raised before any network traffic. SearchFailedError
    propagates from the client and leaves the store untouched. On success the
    previous session is replaced by {draft, results}.
    """
    request = validate_draft(draft)
    n = search_params(draft)["n"]

    results = await client.find_comparables(request, n)
    session = store.write(draft, results)
    logger.info(f"Search complete: {len(session.results)} comparable(s) for {request.zoning} subject")
    return session


def begin_search(is_searching: bool, draft: SubjectDraft) -> tuple[bool, Optional[Notice]]:
    """
    Decide whether a submit may start a search.

    Returns (launch, notice). While a search is outstanding the submit is a
    silent no-op; an invalid draft yields a notice and no launch.
    """
    if is_searching:
        logger.info("Search already in flight; ignoring submit")
        return False, None
    try:
        validate_draft(draft)
    except ValidationError as e:
        logger.info(f"Search blocked by validation: {e}")
        return False, Notice(MISSING_INFO_TITLE, str(e))
    return True, None


@dataclass
class SearchOutcome:
    # Session storage to keep after the attempt; the prior contents on failure
    storage: dict[str, str]
    redirect: Optional[str] = None
    notice: Optional[Notice] = None

    @property
    def succeeded(self) -> bool:
        return self.redirect is not None


async def complete_search(
    draft: SubjectDraft,
    storage: Mapping[str, str],
    client: ComparableSearchClient,
) -> SearchOutcome:
    """Run the search against a staged copy; the live storage is never written."""
    staged: dict[str, str] = {}
    try:
        await run_comparable_search(draft, client, SearchSessionStore(staged))
    except ValidationError as e:
        return SearchOutcome(storage=dict(storage), notice=Notice(MISSING_INFO_TITLE, str(e)))
    except Exception as e:
        if isinstance(e, SearchFailedError):
            logger.error(f"Error finding comparables: {e}")
        else:
            logger.exception("Unexpected error during comparable search")
        return SearchOutcome(storage=dict(storage), notice=SEARCH_FAILED)
    return SearchOutcome(storage={**storage, **staged}, redirect=RESULTS_ROUTE)


@dataclass
class ResultsView:
    status: str
    subject: dict = field(default_factory=dict)
    results: list[dict] = field(default_factory=list)
    redirect: Optional[str] = None


def load_results(storage: Mapping[str, str]) -> ResultsView:
    """ready with the session payload, or redirecting to the search form."""
    try:
        session = SearchSessionStore(dict(storage)).require()
    except SessionMissingError:
        logger.info("Results opened without a search session; redirecting to search")
        return ResultsView(status="redirecting", redirect=SEARCH_ROUTE)
    return ResultsView(
        status="ready",
        subject=session.subject.model_dump(),
        results=[r.model_dump() for r in session.results],
    )
