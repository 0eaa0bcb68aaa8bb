"""
Search form screen: subject property input, search options and a location
preview. Submitting runs SearchState.start_search.
"""
import reflex as rx
from starboard_comps.state import SearchState
from starboard_comps.models import ZONING_OPTIONS, MIN_COMPARABLES, MAX_COMPARABLES
from starboard_comps.components.header import site_header
from starboard_comps.styles import (
    main_content_style, glass_card_style, input_style, label_style,
    TEXT_PRIMARY, TEXT_SECONDARY, TEXT_MUTED, PRIMARY, SECONDARY,
    GRADIENT_PRIMARY, PRIMARY_GLOW, SHADOW_GLOW, RADIUS_SM, BORDER, BG_ELEVATED,
)


def _section_label(icon: str, text: str) -> rx.Component:
    return rx.hstack(
        rx.icon(icon, size=16, color=SECONDARY),
        rx.text(text, font_size="0.9rem", font_weight="600", color=TEXT_PRIMARY),
        spacing="2",
        align_items="center",
        margin_bottom="4px",
    )


def _field(label: str, field: str, value: rx.Var, placeholder: str, numeric: bool = True) -> rx.Component:
    number_props = {"type": "number", "step": "any"} if numeric else {}
    return rx.box(
        rx.text(label, **label_style),
        rx.input(
            placeholder=placeholder,
            value=value,
            on_change=lambda v: SearchState.update_field(field, v),
            size="3",
            **number_props,
            **input_style,
        ),
        width="100%",
    )


def _search_button() -> rx.Component:
    return rx.button(
        rx.cond(
            SearchState.is_searching,
            rx.hstack(
                rx.spinner(size="2"),
                rx.text("Searching..."),
                spacing="2",
                align_items="center",
            ),
            rx.hstack(
                rx.icon("search", size=16),
                rx.text("Find Comparables"),
                spacing="2",
                align_items="center",
            ),
        ),
        on_click=SearchState.start_search,
        disabled=SearchState.is_searching,
        background=rx.cond(SearchState.is_searching, "rgba(59, 130, 246, 0.5)", GRADIENT_PRIMARY),
        color="white",
        border="none",
        border_radius=RADIUS_SM,
        font_weight="700",
        min_height="48px",
        width="100%",
        cursor=rx.cond(SearchState.is_searching, "wait", "pointer"),
        box_shadow=f"0 4px 14px {PRIMARY_GLOW}",
        _hover={
            "transform": "translateY(-2px)",
            "box_shadow": SHADOW_GLOW,
        },
    )


def search_form() -> rx.Component:
    return rx.vstack(
        rx.hstack(
            rx.icon("search", size=20, color=PRIMARY),
            rx.heading("Property Search", size="5", color=TEXT_PRIMARY),
            spacing="2",
            align_items="center",
        ),
        rx.text(
            "Enter the details of your subject property to find comparable industrial properties",
            color=TEXT_MUTED,
            font_size="0.9rem",
        ),

        # Location
        _section_label("map-pin", "Property Location"),
        rx.grid(
            _field("Latitude *", "latitude", SearchState.latitude, "34.0522"),
            _field("Longitude *", "longitude", SearchState.longitude, "-118.2437"),
            columns="2",
            spacing="4",
            width="100%",
        ),
        _field("Address (Optional)", "address", SearchState.address,
               "123 Industrial Way, Los Angeles, CA", numeric=False),

        # Property details
        _section_label("building", "Property Details"),
        rx.grid(
            _field("Square Feet *", "square_feet", SearchState.square_feet, "50000"),
            _field("Year Built *", "year_built", SearchState.year_built, "2010"),
            columns="2",
            spacing="4",
            width="100%",
        ),
        rx.box(
            rx.text("Zoning *", **label_style),
            rx.select(
                ZONING_OPTIONS,
                placeholder="Select zoning type",
                value=SearchState.zoning,
                on_change=lambda v: SearchState.update_field("zoning", v),
                size="3",
                width="100%",
            ),
            width="100%",
        ),

        # Options
        _section_label("zap", "Search Options"),
        rx.box(
            rx.text("Number of Comparables: " + SearchState.num_comparables.to(str), **label_style),
            rx.slider(
                value=[SearchState.num_comparables],
                min=MIN_COMPARABLES,
                max=MAX_COMPARABLES,
                step=1,
                on_change=SearchState.set_num_comparables,
                width="100%",
                margin_top="8px",
            ),
            rx.hstack(
                rx.text(str(MIN_COMPARABLES), font_size="0.75rem", color=TEXT_MUTED),
                rx.text(str(MAX_COMPARABLES), font_size="0.75rem", color=TEXT_MUTED),
                justify="between",
                width="100%",
                margin_top="4px",
            ),
            width="100%",
        ),

        _search_button(),
        spacing="4",
        width="100%",
        **glass_card_style,
    )


def location_preview() -> rx.Component:
    return rx.vstack(
        rx.hstack(
            rx.icon("map-pin", size=20, color=PRIMARY),
            rx.heading("Location Preview", size="5", color=TEXT_PRIMARY),
            spacing="2",
            align_items="center",
        ),
        rx.text("Visual preview of your property location", color=TEXT_MUTED, font_size="0.9rem"),
        rx.center(
            rx.vstack(
                rx.icon("map-pin", size=48, color=SECONDARY),
                rx.text(SearchState.location_preview, color=TEXT_SECONDARY, text_align="center"),
                align_items="center",
                spacing="3",
            ),
            aspect_ratio="1",
            width="100%",
            background="linear-gradient(135deg, rgba(30, 58, 138, 0.6) 0%, rgba(19, 78, 74, 0.6) 100%)",
            border=f"1px solid {BORDER}",
            border_radius=RADIUS_SM,
        ),
        rx.cond(
            SearchState.address != "",
            rx.box(
                rx.text("Address", font_size="0.8rem", color=TEXT_MUTED),
                rx.text(SearchState.address, color=TEXT_PRIMARY),
                padding="12px",
                background=BG_ELEVATED,
                border=f"1px solid {BORDER}",
                border_radius=RADIUS_SM,
                width="100%",
            ),
        ),
        spacing="4",
        width="100%",
        **glass_card_style,
    )


def search_page() -> rx.Component:
    return rx.box(
        site_header(
            rx.button("Home", variant="ghost", on_click=rx.redirect("/")),
            rx.button("Search", variant="ghost", color=PRIMARY),
        ),
        rx.box(
            rx.vstack(
                rx.heading("Find Your Perfect Industrial Match", size="8", text_align="center"),
                rx.text(
                    "Enter your property details and discover comparable industrial properties "
                    "with AI-powered precision",
                    font_size="1.1rem",
                    color=TEXT_SECONDARY,
                    text_align="center",
                    max_width="640px",
                ),
                align_items="center",
                spacing="3",
                margin_bottom="48px",
            ),
            rx.grid(
                search_form(),
                location_preview(),
                columns=rx.breakpoints(initial="1", lg="2"),
                spacing="6",
                width="100%",
            ),
            **main_content_style,
        ),
    )
