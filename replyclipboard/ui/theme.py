# -*- coding: utf-8 -*-
"""
theme.py - Terminal style theme configuration
Defines colors, fonts, and sizes shared by the snippet window and toasts
"""

from dataclasses import dataclass


@dataclass
class ReplyTheme:
    """Dark terminal-style theme"""

    # Backgrounds
    bg_dark: str = "#0a0e14"
    bg_medium: str = "#0d1117"
    bg_light: str = "#161b22"
    bg_hover: str = "#21262d"
    bg_selected: str = "#1f2a37"

    # Accents
    accent_green: str = "#00ff9f"
    accent_cyan: str = "#00d4ff"
    accent_purple: str = "#bd00ff"
    accent_orange: str = "#ff9f00"
    accent_red: str = "#ff0050"

    # Text
    text_primary: str = "#e6edf3"
    text_secondary: str = "#8b949e"
    text_muted: str = "#484f58"

    # Borders
    border_default: str = "#30363d"
    border_active: str = "#00ff9f"

    # Fonts
    font_mono: str = "Consolas"
    font_size_small: int = 10
    font_size_normal: int = 12
    font_size_large: int = 14
    font_size_title: int = 18

    # Dimensions
    corner_radius: int = 8
    padding: int = 12
    toast_width: int = 640

    prompt_symbol: str = "❯"


# Global theme instance
theme = ReplyTheme()


def get_toast_color(style: str) -> str:
    """Accent color for a toast style label"""
    toast_colors = {
        "success": theme.accent_green,
        "info": theme.accent_cyan,
        "alert": theme.accent_orange,
        "error": theme.accent_red,
        "fatal": theme.accent_purple
    }
    return toast_colors.get(style, theme.text_muted)
