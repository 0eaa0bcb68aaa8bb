"""
Main application entry point: routing and app creation.
"""
import reflex as rx
from starboard_comps.state import ResultsState
from starboard_comps.styles import base_page_style, FONT_FAMILY, GOOGLE_FONT_URL
from starboard_comps.pages.landing import landing
from starboard_comps.pages.search import search_page
from starboard_comps.pages.results import results_page


def layout(page_content: rx.Component) -> rx.Component:
    return rx.box(page_content, **base_page_style)


def index() -> rx.Component:
    return layout(landing())


def search() -> rx.Component:
    return layout(search_page())


def results() -> rx.Component:
    return layout(results_page())


# ── Create app ─────────────────────────────────────────────────────
app = rx.App(
    theme=rx.theme(
        appearance="dark",
        has_background=True,
        radius="medium",
        accent_color="blue",
    ),
    style={
        "font_family": FONT_FAMILY,
    },
    head_components=[
        rx.el.link(rel="stylesheet", href=GOOGLE_FONT_URL),
        rx.el.meta(name="description", content="Starboard, AI-powered comparable search for industrial real estate"),
        rx.el.meta(name="viewport", content="width=device-width, initial-scale=1"),
    ],
)

app.add_page(index, route="/", title="Starboard | Industrial Property Comparables")
app.add_page(search, route="/search", title="Property Search | Starboard")
app.add_page(results, route="/results", title="Comparable Results | Starboard", on_load=ResultsState.load_session)
