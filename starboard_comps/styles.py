"""
Design system for Starboard: dark industrial theme with glass cards.
"""

# ── Colour palette ──────────────────────────────────────────────────
BG_DARKEST = "#0B1120"
BG_ELEVATED = "rgba(255, 255, 255, 0.04)"
BG_CARD = "rgba(17, 24, 39, 0.7)"

PRIMARY = "#3B82F6"
PRIMARY_GLOW = "rgba(59, 130, 246, 0.2)"
SECONDARY = "#14B8A6"
ACCENT = "#F59E0B"
GRADIENT_PRIMARY = "linear-gradient(135deg, #3B82F6 0%, #14B8A6 100%)"
GRADIENT_PAGE = f"linear-gradient(135deg, {BG_DARKEST} 0%, {BG_DARKEST} 60%, rgba(30, 58, 138, 0.25) 100%)"

TEXT_PRIMARY = "#F8FAFC"
TEXT_SECONDARY = "#CBD5E1"
TEXT_MUTED = "#94A3B8"

BORDER = "rgba(255, 255, 255, 0.1)"
BORDER_GLOW = "rgba(59, 130, 246, 0.35)"

# Score band colours (text-green-400 / text-yellow-400 / text-red-400)
SUCCESS = "#4ADE80"
WARNING = "#FACC15"
DANGER = "#F87171"

RADIUS = "16px"
RADIUS_SM = "10px"
SHADOW_SM = "0 2px 4px rgba(0, 0, 0, 0.25)"
SHADOW_GLOW = f"0 0 15px {PRIMARY_GLOW}, 0 4px 12px rgba(0, 0, 0, 0.3)"

# ── Font stack ──────────────────────────────────────────────────────
FONT_FAMILY = "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif"
FONT_MONO = "'JetBrains Mono', 'Fira Code', monospace"
GOOGLE_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&family=JetBrains+Mono:wght@400;600&display=swap"

# ── Reusable style dictionaries ─────────────────────────────────────

base_page_style = {
    "font_family": FONT_FAMILY,
    "background": GRADIENT_PAGE,
    "color": TEXT_PRIMARY,
    "min_height": "100vh",
    "width": "100%",
}

main_content_style = {
    "max_width": "1200px",
    "width": "100%",
    "margin": "0 auto",
    "padding": "32px 24px",
}

glass_card_style = {
    "background": BG_CARD,
    "backdrop_filter": "blur(16px)",
    "border": f"1px solid {BORDER}",
    "border_radius": RADIUS,
    "padding": "24px",
    "box_shadow": SHADOW_SM,
    "transition": "all 0.3s ease",
    "_hover": {
        "box_shadow": SHADOW_GLOW,
        "border": f"1px solid {BORDER_GLOW}",
    },
}

primary_button_style = {
    "background": GRADIENT_PRIMARY,
    "color": "white",
    "border": "none",
    "border_radius": RADIUS_SM,
    "font_weight": "600",
    "min_height": "44px",
    "cursor": "pointer",
    "transition": "all 0.3s cubic-bezier(0.4, 0, 0.2, 1)",
    "box_shadow": f"0 4px 14px {PRIMARY_GLOW}",
    "_hover": {
        "transform": "translateY(-2px)",
        "box_shadow": SHADOW_GLOW,
        "filter": "brightness(1.1)",
    },
}

secondary_button_style = {
    "background": "rgba(59, 130, 246, 0.08)",
    "color": TEXT_SECONDARY,
    "border": "1px solid rgba(59, 130, 246, 0.25)",
    "border_radius": RADIUS_SM,
    "font_weight": "600",
    "min_height": "40px",
    "cursor": "pointer",
    "transition": "all 0.3s ease",
    "_hover": {
        "background": "rgba(59, 130, 246, 0.15)",
        "border": f"1px solid {PRIMARY}",
    },
}

input_style = {
    "border_radius": RADIUS_SM,
    "background": BG_ELEVATED,
    "color": TEXT_PRIMARY,
    "width": "100%",
}

label_style = {
    "font_size": "0.8rem",
    "font_weight": "600",
    "color": TEXT_SECONDARY,
    "margin_bottom": "4px",
}
