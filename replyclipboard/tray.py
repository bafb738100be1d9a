# -*- coding: utf-8 -*-
"""
tray.py - System tray menu
Lists every snippet for one-click copying while the window is hidden
"""

import threading
from typing import Callable, List, Optional
from PIL import Image, ImageDraw
import pystray
from pystray import MenuItem as Item

from .config import APP_NAME, APP_DISPLAY_NAME


def create_icon_image(size: int = 64, color: str = "#00ff9f") -> Image.Image:
    """Create a clipboard-with-list icon"""
    image = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    margin = size // 8
    clip_height = size // 6

    # Board
    draw.rounded_rectangle(
        [margin, margin + clip_height // 2, size - margin, size - margin],
        radius=size // 10,
        fill=color
    )

    # Clip
    clip_width = size // 3
    clip_x = (size - clip_width) // 2
    draw.rounded_rectangle(
        [clip_x, margin, clip_x + clip_width, margin + clip_height],
        radius=size // 20,
        fill=color
    )

    # Bullet list
    line_y_start = margin + clip_height + size // 8
    line_spacing = size // 7
    bullet = max(2, size // 16)
    for i in range(3):
        y = line_y_start + i * line_spacing
        x = size // 4
        draw.ellipse([x - bullet, y - bullet, x + bullet, y + bullet], fill="#0a0e14")
        draw.line(
            [x + 3 * bullet, y, size - size // 4, y],
            fill="#0a0e14",
            width=max(2, size // 20)
        )

    return image


class TrayIcon:
    """
    System tray icon whose menu mirrors the snippet list.
    """

    def __init__(
        self,
        list_snippets: Callable[[], List] = None,
        on_copy: Callable[[str], None] = None,
        on_show: Callable[[], None] = None,
        on_check_updates: Callable[[], None] = None,
        on_about: Callable[[], None] = None,
        on_quit: Callable[[], None] = None,
        is_blocked: Callable[[], bool] = None
    ):
        self.list_snippets = list_snippets or (lambda: [])
        self.on_copy = on_copy or (lambda x: None)
        self.on_show = on_show or (lambda: None)
        self.on_check_updates = on_check_updates or (lambda: None)
        self.on_about = on_about or (lambda: None)
        self.on_quit = on_quit or (lambda: None)
        self.is_blocked = is_blocked or (lambda: False)

        self._icon: Optional[pystray.Icon] = None
        self._thread: Optional[threading.Thread] = None
        self._running = False

    def start(self):
        """Start tray icon in background thread"""
        if self._running:
            return
        self._running = True
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _copy_action(self, snippet_id: str):
        return lambda: self.on_copy(snippet_id)

    def _enabled(self, item) -> bool:
        return not self.is_blocked()

    def _menu_items(self):
        """Snippets sorted by name, then window actions"""
        snippets = sorted(self.list_snippets(), key=lambda s: s.name or "")
        for snippet in snippets:
            yield Item(snippet.name or "(unnamed)", self._copy_action(snippet.id), enabled=self._enabled)
        if snippets:
            yield pystray.Menu.SEPARATOR
        yield Item("Open window...", lambda: self.on_show(), default=True)
        yield Item("Check for updates", lambda: self.on_check_updates(), enabled=self._enabled)
        yield Item("About...", lambda: self.on_about())
        yield pystray.Menu.SEPARATOR
        yield Item("Quit", lambda: self._quit())

    def _run(self):
        self._icon = pystray.Icon(
            APP_NAME,
            create_icon_image(),
            APP_DISPLAY_NAME,
            pystray.Menu(lambda: tuple(self._menu_items()))
        )
        self._icon.run()

    def _quit(self):
        self.on_quit()
        self.stop()

    def refresh(self):
        """Rebuild the menu after the snippet list changed"""
        if self._icon:
            self._icon.update_menu()

    def stop(self):
        """Stop tray icon"""
        self._running = False
        if self._icon:
            self._icon.stop()
