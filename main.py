# -*- coding: utf-8 -*-
"""
Reply Clipboard - Snippets to your clipboard
============================================

A lightweight desktop utility for short, named text snippets.
Features:
- One-click copy from the window or the tray menu
- %%CLIP%% placeholder filled with the current clipboard
- JSON backup/restore of all snippets through the clipboard
- Update notifications from the published version manifest

Usage:
    python main.py
"""

from replyclipboard.app import main

if __name__ == "__main__":
    main()
