"""Result card for one comparable property, with an expandable score breakdown."""
import reflex as rx
from starboard_comps.state import ResultsState
from starboard_comps.styles import (
    glass_card_style, TEXT_PRIMARY, TEXT_MUTED, BORDER,
    GRADIENT_PRIMARY, RADIUS_SM, FONT_MONO,
)


def _detail(label: str, value: rx.Var, mono: bool = False) -> rx.Component:
    return rx.box(
        rx.text(label, font_size="0.8rem", color=TEXT_MUTED),
        rx.text(
            value.to(str),
            font_weight="600",
            font_size="0.75rem" if mono else "1rem",
            font_family=FONT_MONO if mono else "inherit",
            color=TEXT_PRIMARY,
        ),
    )


def _breakdown_row(row: rx.Var) -> rx.Component:
    """One factor: label, rounded percentage in band colour, proportional bar."""
    return rx.box(
        rx.hstack(
            rx.text(row["label"].to(str), font_size="0.85rem"),
            rx.text(
                row["percent"].to(str),
                font_size="0.85rem",
                font_weight="600",
                color=row["color"].to(str),
            ),
            justify="between",
            width="100%",
            margin_bottom="4px",
        ),
        rx.progress(value=row["value"].to(int), height="8px", width="100%"),
        width="100%",
    )


def _breakdown(card: rx.Var) -> rx.Component:
    return rx.box(
        rx.divider(border_color=BORDER, margin_bottom="16px"),
        rx.hstack(
            rx.icon("chart-column", size=16),
            rx.text("Compatibility Score Breakdown", font_size="0.85rem", font_weight="600"),
            spacing="2",
            align_items="center",
            margin_bottom="12px",
        ),
        rx.vstack(
            rx.foreach(card["breakdown"].to(list[dict]), _breakdown_row),
            spacing="3",
            width="100%",
        ),
        margin_top="24px",
        width="100%",
    )


def comparable_card(card: rx.Var) -> rx.Component:
    """Render one entry of ResultsState.cards."""
    is_expanded = ResultsState.expanded_ids.contains(card["id"])
    return rx.box(
        rx.hstack(
            rx.hstack(
                rx.center(
                    rx.icon("building", size=20, color="white"),
                    width="40px",
                    height="40px",
                    flex_shrink="0",
                    background=GRADIENT_PRIMARY,
                    border_radius=RADIUS_SM,
                ),
                rx.box(
                    rx.heading(card["title"].to(str), size="4", color=TEXT_PRIMARY),
                    rx.text(
                        "Property ID: " + card["property_id"].to(str),
                        font_size="0.85rem",
                        color=TEXT_MUTED,
                    ),
                ),
                spacing="3",
                align_items="center",
            ),
            rx.hstack(
                rx.badge(
                    card["match_label"].to(str),
                    color_scheme=card["badge_color"].to(str),
                    variant="solid",
                    size="3",
                ),
                rx.icon_button(
                    rx.cond(is_expanded, rx.icon("chevron-up"), rx.icon("chevron-down")),
                    on_click=ResultsState.toggle_expansion(card["id"].to(str)),
                    variant="ghost",
                    size="2",
                ),
                spacing="3",
                align_items="center",
            ),
            justify="between",
            align_items="center",
            width="100%",
            margin_bottom="16px",
        ),
        rx.grid(
            _detail("Size", card["size"]),
            _detail("Year Built", card["year_built"]),
            _detail("Zoning", card["zoning"]),
            _detail("Location", card["location"], mono=True),
            columns=rx.breakpoints(initial="2", md="4"),
            spacing="4",
            width="100%",
        ),
        rx.cond(is_expanded, _breakdown(card)),
        width="100%",
        **glass_card_style,
    )
