"""
Landing screen: static product overview. Its only action is to hand off to
the search form.
"""
import reflex as rx
from starboard_comps.state import AppState
from starboard_comps.components.header import site_header
from starboard_comps.styles import (
    main_content_style, glass_card_style, primary_button_style, secondary_button_style,
    TEXT_PRIMARY, TEXT_SECONDARY, TEXT_MUTED, PRIMARY, SECONDARY, ACCENT,
    GRADIENT_PRIMARY, SUCCESS,
)

FEATURES = [
    ("building", "Industrial Focus",
     "Specialized algorithms designed specifically for industrial properties and zoning requirements", PRIMARY),
    ("zap", "AI-Powered Scoring",
     "Advanced machine learning algorithms provide precise compatibility scores for better decisions", SECONDARY),
    ("map-pin", "Location Intelligence",
     "Geographic proximity analysis with transportation, infrastructure, and market accessibility", ACCENT),
    ("chart-column", "Market Insights",
     "Comprehensive property analytics with detailed breakdowns and comparison metrics", PRIMARY),
]

STATS = [
    ("10,000+", "Properties Analyzed"),
    ("95%", "Accuracy Rate"),
    ("50+", "Cities Covered"),
    ("2.5s", "Average Search Time"),
]

STEPS = [
    ("01", "Enter Property Details",
     "Input your property's location, size, year built, and zoning information"),
    ("02", "AI Analysis",
     "Our advanced algorithms analyze thousands of properties to find the best matches"),
    ("03", "Get Results",
     "Receive detailed compatibility scores and comprehensive property comparisons"),
]


def _hero() -> rx.Component:
    return rx.vstack(
        rx.badge("AI-Powered Property Analysis", variant="surface", color_scheme="teal", size="2"),
        rx.heading(
            "Find Comparable Industrial Properties with AI",
            size="9",
            color=TEXT_PRIMARY,
            text_align="center",
        ),
        rx.text(
            "Discover the best property matches using advanced algorithms and comprehensive market data. "
            "Get precise compatibility scores in seconds.",
            font_size="1.2rem",
            color=TEXT_SECONDARY,
            max_width="640px",
            text_align="center",
        ),
        rx.button(
            "Start Property Search",
            rx.icon("arrow-right", size=16),
            on_click=AppState.go_to_search,
            size="4",
            **primary_button_style,
        ),
        spacing="5",
        align_items="center",
        padding_y="64px",
    )


def _stat(number: str, label: str) -> rx.Component:
    return rx.vstack(
        rx.text(number, font_size="2rem", font_weight="800", background=GRADIENT_PRIMARY,
                background_clip="text", color="transparent"),
        rx.text(label, color=TEXT_MUTED),
        align_items="center",
        spacing="1",
        **glass_card_style,
    )


def _feature(icon: str, title: str, description: str, color: str) -> rx.Component:
    return rx.vstack(
        rx.icon(icon, size=28, color=color),
        rx.heading(title, size="4", color=TEXT_PRIMARY),
        rx.text(description, color=TEXT_MUTED, font_size="0.9rem"),
        spacing="3",
        **glass_card_style,
    )


def _step(number: str, title: str, description: str) -> rx.Component:
    return rx.vstack(
        rx.text(number, font_size="2.5rem", font_weight="800", color=SECONDARY),
        rx.heading(title, size="4", color=TEXT_PRIMARY),
        rx.text(description, color=TEXT_MUTED, text_align="center"),
        align_items="center",
        spacing="2",
    )


def _call_to_action() -> rx.Component:
    return rx.vstack(
        rx.heading("Ready to Find Your Perfect Match?", size="7", color=TEXT_PRIMARY),
        rx.text(
            "Join thousands of professionals who trust Starboard for accurate industrial property analysis",
            color=TEXT_SECONDARY,
            text_align="center",
        ),
        rx.button(
            "Start Your Search Now",
            on_click=AppState.go_to_search,
            size="3",
            **secondary_button_style,
        ),
        rx.hstack(
            *[
                rx.hstack(rx.icon("circle-check", size=14, color=SUCCESS), rx.text(item, font_size="0.85rem"),
                          spacing="1", align_items="center")
                for item in ("Free to start", "Instant results", "No signup required")
            ],
            spacing="5",
            color=TEXT_MUTED,
            flex_wrap="wrap",
            justify="center",
        ),
        align_items="center",
        spacing="4",
        width="100%",
        **glass_card_style,
    )


def landing() -> rx.Component:
    return rx.box(
        site_header(
            rx.button("Features", variant="ghost"),
            rx.button("Get Started", on_click=AppState.go_to_search, **primary_button_style),
        ),
        rx.box(
            _hero(),
            rx.grid(
                *[_stat(n, label) for n, label in STATS],
                columns=rx.breakpoints(initial="2", md="4"),
                spacing="4",
                width="100%",
                margin_bottom="64px",
            ),
            rx.heading("Why Choose Starboard?", size="7", text_align="center", margin_bottom="8px"),
            rx.text(
                "Our advanced platform combines artificial intelligence with comprehensive market data "
                "to deliver unmatched accuracy in property comparisons.",
                color=TEXT_MUTED,
                text_align="center",
                margin_bottom="32px",
            ),
            rx.grid(
                *[_feature(*f) for f in FEATURES],
                columns=rx.breakpoints(initial="1", sm="2", md="4"),
                spacing="4",
                width="100%",
                margin_bottom="64px",
            ),
            rx.heading("How It Works", size="7", text_align="center", margin_bottom="8px"),
            rx.text("Get comparable properties in three simple steps", color=TEXT_MUTED,
                    text_align="center", margin_bottom="32px"),
            rx.grid(
                *[_step(*s) for s in STEPS],
                columns=rx.breakpoints(initial="1", md="3"),
                spacing="6",
                width="100%",
                margin_bottom="64px",
            ),
            _call_to_action(),
            **main_content_style,
        ),
    )
