"""
Cross-screen handoff between the search form and the results screen.

The store wraps a plain string mapping (the per-tab Reflex state dict in the
app, a dict in tests). Both keys are written together and read together; a
reader that finds only one of them, or cannot decode either, sees no session.
"""
import json
import logging
from typing import Iterable, MutableMapping, Optional

from pydantic import TypeAdapter, ValidationError as PayloadError

from starboard_comps.errors import SessionMissingError
from starboard_comps.models import ComparableResult, SearchSession, SubjectDraft

logger = logging.getLogger(__name__)

RESULTS_KEY = "searchResults"
SUBJECT_KEY = "subjectProperty"

_results_adapter = TypeAdapter(list[ComparableResult])


class SearchSessionStore:
    def __init__(self, storage: MutableMapping[str, str]):
        self.storage = storage

    def write(self, subject: SubjectDraft, results: Iterable[ComparableResult]) -> SearchSession:
        """Replace the current session with {subject, results}."""
        session = SearchSession(subject=subject, results=list(results))
        results_json = _results_adapter.dump_json(session.results).decode("utf-8")
        subject_json = session.subject.model_dump_json()
        self.storage[RESULTS_KEY] = results_json
        self.storage[SUBJECT_KEY] = subject_json
        logger.info(f"Stored search session with {len(session.results)} result(s)")
        return session

    def read(self) -> Optional[SearchSession]:
        raw_results = self.storage.get(RESULTS_KEY)
        raw_subject = self.storage.get(SUBJECT_KEY)
        if not raw_results or not raw_subject:
            return None
        try:
            results = _results_adapter.validate_json(raw_results)
            subject = SubjectDraft.model_validate(json.loads(raw_subject))
        except (ValueError, PayloadError) as e:
            logger.warning(f"Discarding unreadable search session: {e}")
            return None
        return SearchSession(subject=subject, results=results)

    def require(self) -> SearchSession:
        session = self.read()
        if session is None:
            raise SessionMissingError("No search session available")
        return session

    def clear(self) -> None:
        self.storage.pop(RESULTS_KEY, None)
        self.storage.pop(SUBJECT_KEY, None)
