"""Shared style sheet for the Streamlit screens."""

FONT_FAMILY = "'Lora', serif"

BACKGROUND = "#ECE9E4"
TEXT = "#333"
MUTED = "#999"
ACCENT = "#87D0B2"
OVERLAY = "rgba(0, 0, 0, 0.3)"
CHIP = "rgba(128, 128, 128, 0.3)"

TEXT_STYLES = {
    "text": {"font-family": FONT_FAMILY},
    "text-bold": {"font-family": FONT_FAMILY, "font-weight": "bold"},
    "text-italic": {"font-family": FONT_FAMILY, "font-style": "italic"},
    "text-bold-italic": {"font-family": FONT_FAMILY, "font-weight": "bold", "font-style": "italic"},
}

HOME_STYLES = {
    ".stApp": {"background-color": BACKGROUND},
    ".greeting": {"font-size": "24px", "font-weight": "bold", "margin-bottom": "20px", "color": TEXT},
    ".section-title": {"font-size": "20px", "font-weight": "600", "margin-bottom": "16px", "color": TEXT},
    ".top-bar": {
        "display": "flex", "justify-content": "space-between", "align-items": "center",
        "background-color": "#FFFFFF", "height": "50px", "padding-left": "10px",
        "border-top-left-radius": "12px", "border-top-right-radius": "12px",
    },
    ".day-text": {"color": TEXT, "font-weight": "600", "font-size": "16px"},
    ".disabled-arrow": {"color": MUTED},
    ".plan": {
        "background-color": CHIP, "padding": "12px 16px", "color": TEXT, "font-weight": "600",
        "border-top-left-radius": "12px", "border-top-right-radius": "12px",
    },
    ".workout-card": {
        "height": "240px", "margin-bottom": "24px", "padding": "16px", "display": "flex",
        "flex-direction": "column", "justify-content": "flex-end", "background-color": OVERLAY,
        "border-bottom-left-radius": "12px", "border-bottom-right-radius": "12px",
    },
    ".workout-title": {
        "color": "#FFFFFF", "font-size": "18px", "margin-bottom": "8px",
        "text-shadow": "1px 1px 3px rgba(0, 0, 0, 0.5)",
    },
    ".workout-chip": {
        "display": "inline-block", "background-color": CHIP, "color": "#FFFFFF", "font-weight": "600",
        "font-size": "12px", "padding": "6px 12px", "border-radius": "16px", "margin-right": "8px",
    },
    ".category-card": {
        "height": "160px", "margin": "4px", "padding": "8px", "border-radius": "12px",
        "display": "flex", "align-items": "flex-end", "justify-content": "center",
        "background-color": OVERLAY, "color": "#FFFFFF", "font-size": "14px", "font-weight": "600",
        "text-align": "center", "white-space": "pre-line",
        "text-shadow": "0 1px 2px rgba(0, 0, 0, 0.75)",
    },
    "div.stButton > button": {"background-color": ACCENT, "color": "#FFFFFF"},
}


def _rule(selector: str, props: dict) -> str:
    body = "; ".join(f"{k}: {v}" for k, v in props.items())
    return f"{selector} {{ {body}; }}"


def stylesheet() -> str:
    """CSS for all screens; text styles are exposed as .text, .text-bold, ..."""
    rules = [_rule(f".{name}", props) for name, props in TEXT_STYLES.items()]
    rules.append(_rule(".stApp, .stApp p, .stApp h1, .stApp h2, .stApp h3", {"font-family": FONT_FAMILY}))
    rules += [_rule(sel, props) for sel, props in HOME_STYLES.items()]
    return "<style>\n" + "\n".join(rules) + "\n</style>"
