import reflex as rx
from starboard_comps.styles import BG_CARD, RADIUS_SM, BORDER


def _skeleton_card(height: str) -> rx.Component:
    """A generic rounded card wrapper with a skeleton block inside."""
    return rx.box(
        rx.skeleton(width="100%", height=height),
        padding="16px",
        border_radius=RADIUS_SM,
        border=f"1px solid {BORDER}",
        background=BG_CARD,
    )


def skeleton_loader() -> rx.Component:
    """Placeholder layout shown while the results screen loads its session."""
    return rx.vstack(
        rx.hstack(
            rx.spinner(size="3"),
            rx.text("Loading results..."),
            spacing="3",
            align_items="center",
        ),
        # Subject summary
        rx.grid(
            _skeleton_card("64px"),
            _skeleton_card("64px"),
            _skeleton_card("64px"),
            _skeleton_card("64px"),
            columns=rx.breakpoints(initial="2", md="4"),
            spacing="4",
            width="100%",
        ),
        # Result cards
        _skeleton_card("120px"),
        _skeleton_card("120px"),
        _skeleton_card("120px"),
        width="100%",
        spacing="5",
        margin_top="24px",
    )
