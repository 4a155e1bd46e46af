"""Xfer Time theme system. Color palettes + shared QSS template."""

from typing import Dict, List, Optional, Tuple

from xfertime.core.estimator import SpeedClass


# --- Color Palettes ---

PALETTES: Dict[str, dict] = {
    "light": {
        "name": "Daylight",
        "bg": "#f9fafb", "bg_card": "#ffffff", "bg_hover": "#f3f4f6",
        "bg_active": "#e5e7eb", "bg_input": "#ffffff", "bg_alt": "#f3f4f6",
        "border": "#e5e7eb", "border_light": "#d1d5db",
        "text": "#111827", "text_muted": "#4b5563", "text_dim": "#6b7280",
        "accent": "#2563eb", "accent_hover": "#1d4ed8",
        "green": "#16a34a", "red": "#ef4444", "orange": "#f97316",
    },
    "dark": {
        "name": "Xfer Dark",
        "bg": "#0c0e14", "bg_card": "#12141c", "bg_hover": "#181b27",
        "bg_active": "#1a1e2e", "bg_input": "#0f1119", "bg_alt": "#0e1018",
        "border": "#1e2233", "border_light": "#262b3d",
        "text": "#e2e4ea", "text_muted": "#6b7089", "text_dim": "#4a4e64",
        "accent": "#3b82f6", "accent_hover": "#2563eb",
        "green": "#22c55e", "red": "#ef4444", "orange": "#f59e0b",
    },
    "dracula": {
        "name": "Dracula",
        "bg": "#282a36", "bg_card": "#2d303e", "bg_hover": "#343746",
        "bg_active": "#3a3d4e", "bg_input": "#21222c", "bg_alt": "#2a2c39",
        "border": "#44475a", "border_light": "#555870",
        "text": "#f8f8f2", "text_muted": "#6272a4", "text_dim": "#515a82",
        "accent": "#bd93f9", "accent_hover": "#a87bf0",
        "green": "#50fa7b", "red": "#ff5555", "orange": "#ffb86c",
    },
    "nord": {
        "name": "Nord",
        "bg": "#2e3440", "bg_card": "#3b4252", "bg_hover": "#434c5e",
        "bg_active": "#4c566a", "bg_input": "#2e3440", "bg_alt": "#353b49",
        "border": "#434c5e", "border_light": "#4c566a",
        "text": "#eceff4", "text_muted": "#7b88a1", "text_dim": "#5e6b82",
        "accent": "#88c0d0", "accent_hover": "#81a1c1",
        "green": "#a3be8c", "red": "#bf616a", "orange": "#d08770",
    },
}

DEFAULT_THEME = "dark"

_CLASSIFICATION_COLORS = {
    SpeedClass.FAST: "green",
    SpeedClass.MODERATE: "orange",
    SpeedClass.SLOW: "red",
}
_NEUTRAL_COLOR = "text_muted"
_NEUTRAL_LABEL = "Connection"


def _hex_to_rgb(hex_color: str) -> str:
    """Convert '#RRGGBB' to 'R, G, B' for rgba() usage."""
    h = hex_color.lstrip("#")
    return f"{int(h[0:2], 16)}, {int(h[2:4], 16)}, {int(h[4:6], 16)}"


def get_theme_names() -> List[Tuple[str, str]]:
    """Return list of (key, display_name) tuples."""
    return [(k, v["name"]) for k, v in PALETTES.items()]


def get_palette(theme_key: str = DEFAULT_THEME) -> dict:
    """Return the palette dict for the given theme."""
    return PALETTES.get(theme_key, PALETTES[DEFAULT_THEME])


# --- Active Theme State ---

_active_key: str = DEFAULT_THEME
_active_palette: dict = PALETTES[DEFAULT_THEME]


def set_current(theme_key: str):
    """Set the active theme. Call this when theme changes."""
    global _active_key, _active_palette
    _active_key = theme_key if theme_key in PALETTES else DEFAULT_THEME
    _active_palette = PALETTES[_active_key]


def active_key() -> str:
    return _active_key


def c(key: str) -> str:
    """Shortcut: return a single color from the active palette."""
    return _active_palette.get(key, "#ff00ff")


def _speed_class(classification) -> Optional[SpeedClass]:
    # Accepts a SpeedClass member or its plain string value
    if isinstance(classification, SpeedClass):
        return classification
    try:
        return SpeedClass(classification)
    except (ValueError, TypeError):
        return None


def classification_color(classification) -> str:
    """Return the theme color for a speed class, neutral when unknown."""
    return c(_CLASSIFICATION_COLORS.get(_speed_class(classification), _NEUTRAL_COLOR))


def classification_label(classification) -> str:
    """Return the connection label for a speed class, "Connection" when unknown."""
    speed_class = _speed_class(classification)
    return speed_class.display_name if speed_class else _NEUTRAL_LABEL


def classification_card_style(classification) -> str:
    """QSS for the result card: tinted background and border in the class color."""
    rgb = _hex_to_rgb(classification_color(classification))
    return (
        f"QFrame#resultCard {{ background-color: rgba({rgb}, 0.08);"
        f" border: 2px solid rgba({rgb}, 0.35); border-radius: 12px; }}"
    )


def get_stylesheet(theme_key: str = DEFAULT_THEME) -> str:
    """Generate full QSS stylesheet for the given theme."""
    p = dict(get_palette(theme_key))
    for key in ("accent", "red", "green", "orange"):
        p[f"{key}_rgb"] = _hex_to_rgb(p[key])
    return _QSS_TEMPLATE.format(**p)


_QSS_TEMPLATE = """
/* ===== GLOBAL ===== */
QWidget {{
    background-color: {bg};
    color: {text};
    font-family: "Segoe UI", "SF Pro Display", "Helvetica Neue", sans-serif;
    font-size: 13px;
    selection-background-color: {accent};
    selection-color: #ffffff;
}}
QMainWindow {{ background-color: {bg}; }}

/* ===== MENU BAR ===== */
QMenuBar {{
    background-color: {bg_card};
    border-bottom: 1px solid {border};
    padding: 2px 8px; font-size: 12px;
}}
QMenuBar::item {{
    background: transparent; padding: 6px 12px;
    border-radius: 6px; color: {text_muted};
}}
QMenuBar::item:selected, QMenuBar::item:pressed {{
    background-color: {bg_hover}; color: {text};
}}
QMenu {{
    background-color: {bg_card};
    border: 1px solid {border_light};
    border-radius: 10px; padding: 4px;
}}
QMenu::item {{
    padding: 8px 32px 8px 12px;
    border-radius: 6px; font-size: 12px;
}}
QMenu::item:selected {{ background-color: {bg_hover}; color: {text}; }}

/* ===== BUTTONS ===== */
QPushButton {{
    background-color: {bg_hover}; color: {text};
    border: 1px solid {border_light}; border-radius: 8px;
    padding: 8px 16px; font-weight: 500; font-size: 12px;
}}
QPushButton:hover {{
    background-color: rgba({accent_rgb}, 0.12);
    border-color: {accent}; color: {accent};
}}
QPushButton:pressed {{ background-color: {bg_active}; }}

/* ===== INPUT FIELDS ===== */
QDoubleSpinBox, QComboBox {{
    background-color: {bg_input}; color: {text};
    border: 1px solid {border_light}; border-radius: 8px;
    padding: 8px 12px; font-size: 15px;
    selection-background-color: {accent};
}}
QDoubleSpinBox:focus, QComboBox:focus {{ border-color: {accent}; }}
QComboBox::drop-down {{
    border: none; width: 28px;
    subcontrol-origin: padding; subcontrol-position: center right;
}}
QComboBox::down-arrow {{
    width: 10px; height: 10px;
    image: none;
    border-left: 4px solid transparent;
    border-right: 4px solid transparent;
    border-top: 5px solid {text_muted};
    margin-right: 8px;
}}
QComboBox QAbstractItemView {{
    background-color: {bg_card}; border: 1px solid {border_light};
    selection-background-color: {bg_hover}; selection-color: {text};
    outline: none; padding: 4px;
}}

/* ===== STATUS BAR ===== */
QStatusBar {{
    background-color: {bg}; border-top: 1px solid {border};
    color: {text_dim}; font-size: 11px; padding: 2px 12px;
}}
QStatusBar::item {{ border: none; }}

/* ===== MESSAGE BOX ===== */
QMessageBox {{ background-color: {bg_card}; }}
QMessageBox QLabel {{ color: {text}; font-size: 13px; background-color: transparent; }}

/* ===== TOOLTIP ===== */
QToolTip {{
    background-color: {bg_card}; color: {text};
    border: 1px solid {border_light}; border-radius: 6px;
    padding: 6px 10px; font-size: 11px;
}}

/* ===== LABELS ===== */
QLabel {{ background-color: transparent; }}
QLabel#pageTitle {{ font-size: 28px; font-weight: 700; }}
QLabel#pageSubtitle {{ color: {text_muted}; font-size: 14px; }}
QLabel#panelTitle {{ font-size: 18px; font-weight: 600; }}
QLabel#fieldLabel {{ color: {text_muted}; font-size: 12px; font-weight: 600; }}
QLabel#resultCaption {{ color: {text_muted}; font-size: 12px; font-weight: 600; }}
QLabel#resultValue {{ font-size: 30px; font-weight: 700; }}
QLabel#resultLabel {{ color: {text_dim}; font-size: 12px; }}

/* ===== FRAMES ===== */
QFrame#card {{
    background-color: {bg_card}; border: 1px solid {border}; border-radius: 14px;
}}
"""
