# -*- coding: utf-8 -*-
"""
ui - User Interface module for Reply Clipboard
Provides the terminal-style snippet window and its widgets
"""

from .theme import theme, ReplyTheme, get_toast_color
from .main_window import MainWindow

__all__ = ['theme', 'ReplyTheme', 'get_toast_color', 'MainWindow']
