"""Top navigation bar shared by all screens."""
import reflex as rx
from starboard_comps.styles import BORDER, GRADIENT_PRIMARY, RADIUS_SM, TEXT_PRIMARY


def brand() -> rx.Component:
    return rx.hstack(
        rx.center(
            rx.icon("building", size=18, color="white"),
            width="32px",
            height="32px",
            background=GRADIENT_PRIMARY,
            border_radius=RADIUS_SM,
        ),
        rx.text(
            "Starboard",
            font_size="1.5rem",
            font_weight="800",
            background=GRADIENT_PRIMARY,
            background_clip="text",
            color="transparent",
        ),
        spacing="2",
        align_items="center",
    )


def site_header(*actions: rx.Component, leading: rx.Component | None = None) -> rx.Component:
    """Brand on the left, navigation actions on the right."""
    left = rx.hstack(leading, brand(), spacing="4", align_items="center") if leading is not None else brand()
    return rx.box(
        rx.hstack(
            left,
            rx.hstack(*actions, spacing="3", align_items="center"),
            justify="between",
            align_items="center",
            max_width="1200px",
            margin="0 auto",
            width="100%",
        ),
        padding="16px 24px",
        border_bottom=f"1px solid {BORDER}",
        backdrop_filter="blur(8px)",
        color=TEXT_PRIMARY,
        width="100%",
    )
