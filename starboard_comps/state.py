"""
Application state for the three screens.

AppState       holds the search-session handoff shared by every screen.
SearchState    the search form: field values, the single-search guard, submit.
ResultsState   the results screen: session guard, derived cards, expand/collapse.
"""
import logging

import reflex as rx

from starboard_comps import presentation
from starboard_comps.config import get_settings
from starboard_comps.models import ComparableResult, SubjectDraft, DEFAULT_COMPARABLES
from starboard_comps.services.comparable_client import ComparableSearchClient
from starboard_comps.services.search_service import (
    SEARCH_ROUTE, begin_search, complete_search, load_results,
)
from starboard_comps.validation import clamp_num_comparables

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)

FORM_FIELDS = ("latitude", "longitude", "address", "square_feet", "year_built", "zoning")


class AppState(rx.State):
    """Root state shared by all screens."""

    # searchResults / subjectProperty JSON, written only by SearchState
    session_storage: dict[str, str] = {}

    def go_to_search(self):
        return rx.redirect(SEARCH_ROUTE)


class SearchState(AppState):
    """Search form screen."""

    latitude: str = ""
    longitude: str = ""
    address: str = ""
    square_feet: str = ""
    year_built: str = ""
    zoning: str = ""
    num_comparables: int = DEFAULT_COMPARABLES

    # At most one outstanding search per form; claimed inside run_search
    is_searching: bool = False

    @rx.var
    def has_coordinates(self) -> bool:
        return bool(self.latitude and self.longitude)

    @rx.var
    def location_preview(self) -> str:
        if self.latitude and self.longitude:
            return f"Location: {self.latitude}, {self.longitude}"
        return "Enter coordinates to preview location"

    def _draft(self) -> SubjectDraft:
        return SubjectDraft(
            latitude=self.latitude,
            longitude=self.longitude,
            address=self.address,
            square_feet=self.square_feet,
            year_built=self.year_built,
            zoning=self.zoning,
            num_comparables=self.num_comparables,
        )

    # ── Event handlers ──────────────────────────────────────────────

    def update_field(self, field: str, value: str):
        if field not in FORM_FIELDS:
            logger.warning(f"Ignoring update to unknown form field {field!r}")
            return
        setattr(self, field, value)

    def set_num_comparables(self, value: list):
        raw = value[0] if isinstance(value, list) else value
        self.num_comparables = clamp_num_comparables(raw)

    def start_search(self):
        """Validate synchronously, then hand the network call to a background task."""
        launch, notice = begin_search(self.is_searching, self._draft())
        if notice:
            return rx.toast.error(notice.title, description=notice.description)
        if launch:
            return SearchState.run_search

    @rx.event(background=True)
    async def run_search(self):
        # The guard is re-checked and claimed under the state lock
        async with self:
            draft = self._draft()
            launch, notice = begin_search(self.is_searching, draft)
            if launch:
                self.is_searching = True
                app_state = await self.get_state(AppState)
                storage = dict(app_state.session_storage)
        if notice:
            yield rx.toast.error(notice.title, description=notice.description)
        if not launch:
            return

        outcome = await complete_search(draft, storage, ComparableSearchClient())

        async with self:
            self.is_searching = False
            if outcome.succeeded:
                app_state = await self.get_state(AppState)
                app_state.session_storage = {**app_state.session_storage, **outcome.storage}
        if outcome.notice:
            yield rx.toast.error(
                outcome.notice.title,
                description=outcome.notice.description,
                close_button=True,
            )
        if outcome.redirect:
            yield rx.redirect(outcome.redirect)


class ResultsState(AppState):
    """Results screen: loading -> ready | redirecting."""

    status: str = "loading"
    subject: dict = {}
    results: list[dict] = []
    expanded_ids: list[str] = []

    @rx.var
    def is_ready(self) -> bool:
        return self.status == "ready"

    @rx.var
    def result_count(self) -> int:
        return len(self.results)

    @rx.var
    def cards(self) -> list[dict]:
        return presentation.build_result_cards(ComparableResult.model_validate(r) for r in self.results)

    @rx.var
    def subject_summary(self) -> dict:
        if not self.subject:
            return {}
        return presentation.build_subject_summary(SubjectDraft.model_validate(self.subject))

    async def load_session(self):
        """on_load guard: results are only shown for a complete session."""
        self.status = "loading"
        self.expanded_ids = []
        app_state = await self.get_state(AppState)
        view = load_results(app_state.session_storage)
        self.subject = view.subject
        self.results = view.results
        self.status = view.status
        if view.redirect:
            return rx.redirect(view.redirect)

    def toggle_expansion(self, card_id: str):
        self.expanded_ids = presentation.toggle_expansion(self.expanded_ids, card_id)

    def new_search(self):
        # The stored session stays until the next successful search replaces it
        return rx.redirect(SEARCH_ROUTE)
