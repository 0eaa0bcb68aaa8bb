"""Subject property summary card on the results screen."""
import reflex as rx
from starboard_comps.state import ResultsState
from starboard_comps.styles import (
    glass_card_style, TEXT_PRIMARY, TEXT_MUTED, ACCENT, SECONDARY,
)


def _summary_tile(icon: str, label: str, value: rx.Var, small: bool = False) -> rx.Component:
    return rx.vstack(
        rx.icon(icon, size=22, color=SECONDARY),
        rx.text(label, font_size="0.8rem", color=TEXT_MUTED),
        rx.text(
            value.to(str),
            font_size="0.75rem" if small else "1rem",
            font_weight="600",
            color=TEXT_PRIMARY,
        ),
        spacing="1",
        align_items="center",
        text_align="center",
    )


def subject_summary() -> rx.Component:
    """Size, year built, zoning and coordinates of the searched property."""
    summary = ResultsState.subject_summary
    return rx.box(
        rx.hstack(
            rx.icon("target", size=20, color=ACCENT),
            rx.heading("Your Subject Property", size="4", color=TEXT_PRIMARY),
            spacing="2",
            align_items="center",
            margin_bottom="16px",
        ),
        rx.grid(
            _summary_tile("ruler", "Size", summary["size"]),
            _summary_tile("calendar", "Year Built", summary["year_built"]),
            _summary_tile("building", "Zoning", summary["zoning"]),
            _summary_tile("map-pin", "Location", summary["location"], small=True),
            columns=rx.breakpoints(initial="2", md="4"),
            spacing="4",
            width="100%",
        ),
        rx.cond(
            summary["address"].to(str) != "",
            rx.text(
                summary["address"].to(str),
                font_size="0.85rem",
                color=TEXT_MUTED,
                margin_top="12px",
                text_align="center",
            ),
        ),
        width="100%",
        margin_bottom="32px",
        **glass_card_style,
    )
