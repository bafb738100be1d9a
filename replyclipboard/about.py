# -*- coding: utf-8 -*-
"""
about.py - About box contents: name, version and third-party credits
"""

from typing import Dict, List

from .config import APP_DISPLAY_NAME, APP_VERSION

CREDITS: Dict[str, List[str]] = {
    "customtkinter": ["Tom Schimansky"],
    "pystray": ["Moses Palmér"],
    "pyperclip": ["Al Sweigart"],
    "requests": ["Kenneth Reitz"],
    "Pillow": ["Jeffrey A. Clark and contributors"],
}


def about_title() -> str:
    return f"{APP_DISPLAY_NAME} v{APP_VERSION}"


def about_text(credits: Dict[str, List[str]] = None) -> str:
    """Version line followed by one credit line per package, sorted"""
    credits = CREDITS if credits is None else credits
    lines = [about_title(), "", "Built with:"]
    for package in sorted(credits, key=str.lower):
        lines.append(f"  {package} - {', '.join(credits[package])}")
    return "\n".join(lines)
