"""
Results screen: subject summary plus one card per comparable, in the order
the service ranked them. Only rendered once ResultsState.load_session has
found a complete session; otherwise the guard redirects to /search.
"""
import reflex as rx
from starboard_comps.state import ResultsState
from starboard_comps.components.header import site_header
from starboard_comps.components.subject_summary import subject_summary
from starboard_comps.components.comparable_card import comparable_card
from starboard_comps.components.skeleton_loader import skeleton_loader
from starboard_comps.styles import (
    main_content_style, secondary_button_style,
    TEXT_MUTED, SECONDARY,
)


def _results_header() -> rx.Component:
    return rx.box(
        rx.heading(
            "Comparable Properties for Your Industrial Site",
            size="8",
            margin_bottom="8px",
        ),
        rx.text(
            "Found " + ResultsState.result_count.to(str)
            + " properties that match your criteria with AI-powered precision scoring",
            color=TEXT_MUTED,
            font_size="1.1rem",
        ),
        margin_bottom="32px",
    )


def _results_body() -> rx.Component:
    return rx.box(
        _results_header(),
        subject_summary(),
        rx.cond(
            ResultsState.result_count > 0,
            rx.vstack(
                rx.foreach(ResultsState.cards, comparable_card),
                spacing="5",
                width="100%",
            ),
            rx.callout(
                "The search service returned no comparable properties for this subject. "
                "Try a different location or zoning.",
                icon="info",
                color_scheme="amber",
                width="100%",
            ),
        ),
        rx.center(
            rx.button("New Search", on_click=ResultsState.new_search, **secondary_button_style),
            margin_top="32px",
        ),
    )


def results_page() -> rx.Component:
    return rx.box(
        site_header(
            rx.badge(
                ResultsState.result_count.to(str) + " Comparables Found",
                variant="outline",
                color_scheme="teal",
                size="2",
                color=SECONDARY,
            ),
            leading=rx.button(
                rx.icon("arrow-left", size=16),
                "Back to Search",
                variant="ghost",
                on_click=ResultsState.new_search,
            ),
        ),
        rx.box(
            rx.cond(
                ResultsState.is_ready,
                _results_body(),
                skeleton_loader(),
            ),
            **main_content_style,
        ),
    )
