# -*- coding: utf-8 -*-
"""
app.py - Main application controller for Reply Clipboard
Coordinates all components: UI, tray, snippet store, clipboard, backup,
version check and notifications
"""

import logging
import webbrowser
from typing import Optional

from .config import config, APP_VERSION, LOG_FILE, ensure_dirs
from .logging_ import setup_json_logging
from .errors import StoreError
from .store import SnippetStore
from .clipboard import ClipboardChannel, create_channel
from .actions import SnippetActions
from .version_check import VersionChecker, VersionCheckResult, VersionCheckSnapshot
from .notifications import Notification, NotificationQueue, ToastStyle, version_notification
from .tray import TrayIcon
from .ui.main_window import MainWindow

logger = logging.getLogger(__name__)

TICK_MS = 500
QUIT_DELAY_MS = 1500


class ReplyClipboardApp:
    """
    Main application controller.
    Owns the notification queue and translates UI actions into
    store, clipboard and backup operations.
    """

    def __init__(
        self,
        store: Optional[SnippetStore] = None,
        clipboard: Optional[ClipboardChannel] = None,
        checker: Optional[VersionChecker] = None
    ):
        ensure_dirs()
        setup_json_logging(config.log_level, LOG_FILE)

        self._window = None
        self._store = store or SnippetStore()
        self._clipboard = clipboard or create_channel()
        self._notifications = NotificationQueue(max_items=config.max_toasts)
        self._checker = checker or VersionChecker(
            url=config.version_url,
            platform=config.manifest_platform,
            app_version=APP_VERSION,
            timeout=config.request_timeout,
            on_log=self._log
        )
        self._last_version_result = VersionCheckResult.COMPLETE
        self._checker.subscribe(self._on_version_state)

        self._actions = SnippetActions(
            self._store,
            self._clipboard,
            notify=self._toast,
            on_changed=self._refresh_snippets,
            on_log=self._log,
            is_blocked=lambda: self._notifications.has_blocking
        )
        self._blocked = False

        # Create UI with callbacks
        self._window = MainWindow(
            on_add=self._add_snippet,
            on_copy=self._actions.copy,
            on_save=self._actions.save,
            on_delete=self._actions.delete,
            on_backup=self._actions.backup,
            on_restore=self._actions.restore,
            on_check_updates=lambda: self._check_for_updates(manual=True),
            on_about=self._show_about,
            on_toast_button=self._toast_button,
            on_toast_dismiss=self._toast_dismiss,
            always_on_top=config.always_on_top
        )

        self._tray = None
        if config.minimize_to_tray:
            self._tray = TrayIcon(
                list_snippets=self._store.get_all,
                on_copy=lambda i: self._window.after(0, lambda: self._actions.copy(i)),
                on_show=lambda: self._window.after(0, self._show_window),
                on_check_updates=lambda: self._window.after(0, lambda: self._check_for_updates(manual=True)),
                on_about=lambda: self._window.after(0, self._show_about),
                on_quit=lambda: self._window.after(0, self._quit),
                is_blocked=lambda: self._blocked
            )
            self._window.protocol("WM_DELETE_WINDOW", self._window.withdraw)

        self._refresh_snippets()
        self._log(f"Reply Clipboard v{APP_VERSION} initialized, clipboard: {self._clipboard.name}")

    def _log(self, message: str):
        """Log to file and, thread-safe, to the UI"""
        logger.info(message)
        if self._window is not None:
            self._window.after(0, lambda: self._window.log(message))

    # Snippets
    def _refresh_snippets(self):
        try:
            snippets = self._store.get_all()
        except StoreError as e:
            logger.exception("Failed to load snippets")
            self._toast(ToastStyle.ERROR, "Failed to load snippets", str(e))
            return
        self._window.update_snippets(snippets)
        if self._tray:
            self._tray.refresh()

    def _add_snippet(self):
        snippet = self._actions.add()
        if snippet is not None:
            self._window.select_snippet(snippet)

    def _show_about(self):
        self._show_window()
        self._window.show_about()

    # Version check
    def _check_for_updates(self, manual: bool = False):
        if not self._checker.check_for_updates(manual=manual):
            self._log("[VERSION] Check not started")

    def _on_version_state(self, snapshot: VersionCheckSnapshot):
        """Called on the checker thread"""
        self._window.after(0, lambda: self._handle_version_state(snapshot))

    def _handle_version_state(self, snapshot: VersionCheckSnapshot):
        if snapshot.result == self._last_version_result:
            return
        self._last_version_result = snapshot.result
        notification = version_notification(
            snapshot.result,
            snapshot.toast,
            on_download=self._download,
            on_retry=self._retry_version_check,
            on_reset=self._checker.reset
        )
        if notification is None:
            return
        if snapshot.result != VersionCheckResult.MANUAL_CHECK_COMPLETE:
            self._notifications.dismiss_all_non_blocking()
        self._notifications.enqueue(notification)
        self._render_notifications()

    def _retry_version_check(self):
        self._checker.reset()
        self._checker.check_for_updates()

    def _download(self, link: str):
        webbrowser.open(link)
        self._window.after(QUIT_DELAY_MS, self._quit)

    # Notifications
    def _toast(self, style: ToastStyle, title: str, message: str):
        self._notifications.enqueue(Notification(style, title, message))
        self._render_notifications()

    def _toast_button(self, notification_id: str):
        notification = self._notifications.get(notification_id)
        if notification is None or notification.on_button is None:
            return
        notification.on_button()
        self._notifications.dismiss(notification_id)
        self._render_notifications()

    def _toast_dismiss(self, notification_id: str):
        if self._notifications.dismiss(notification_id):
            self._render_notifications()

    def _render_notifications(self):
        self._window.render_notifications(self._notifications.items)
        blocked = self._notifications.has_blocking
        self._window.set_blocked(blocked)
        if blocked != self._blocked:
            self._blocked = blocked
            if self._tray:
                self._tray.refresh()

    def _tick(self):
        """Expire timed toasts"""
        if self._notifications.prune():
            self._render_notifications()
        self._window.after(TICK_MS, self._tick)

    # Window
    def _show_window(self):
        self._window.deiconify()
        self._window.lift()
        self._window.focus_force()

    def _quit(self):
        if self._tray:
            self._tray.stop()
        self._window.quit()

    def run(self):
        """Run the application"""
        if self._tray:
            self._tray.start()
            if config.start_minimized:
                self._window.withdraw()
        if config.check_for_updates_on_launch:
            self._check_for_updates()
        self._window.after(TICK_MS, self._tick)
        self._window.mainloop()

        # Cleanup on exit
        if self._tray:
            self._tray.stop()
        self._checker.wait(timeout=1)
        self._window.destroy()


def main():
    """Application entry point"""
    app = ReplyClipboardApp()
    app.run()


if __name__ == "__main__":
    main()
