# -*- coding: utf-8 -*-
"""
notifications.py - Toast notification queue
Owned by the application controller; the UI only renders what is queued
"""

import time
import uuid
import threading
from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .version_check import VersionCheckResult, VersionCheckToast


class ToastStyle(Enum):
    """Toast styles with their default lifetime in seconds"""
    SUCCESS = ("success", 3.0)
    INFO = ("info", 5.0)
    ALERT = ("alert", 10.0)
    ERROR = ("error", 10.0)
    FATAL = ("fatal", None)

    def __init__(self, label: str, duration: Optional[float]):
        self.label = label
        self.duration = duration


@dataclass
class Notification:
    """A single toast"""
    style: ToastStyle
    title: str
    message: str
    duration: Optional[float] = None
    blocking: bool = False
    modal: bool = False
    button_title: Optional[str] = None
    on_button: Optional[Callable[[], None]] = None
    on_dismissed: Optional[Callable[[], None]] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created: float = field(default_factory=time.monotonic)

    def __post_init__(self):
        if self.style is ToastStyle.FATAL:
            self.blocking = True
            self.modal = True
        if self.duration is None and not self.blocking:
            self.duration = self.style.duration

    def expired(self, now: float) -> bool:
        if self.blocking or self.duration is None:
            return False
        return now - self.created >= self.duration


class NotificationQueue:
    """Bounded queue of visible toasts, oldest dropped first"""

    def __init__(self, max_items: int = 5):
        self.max_items = max_items
        self._items: List[Notification] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> List[Notification]:
        with self._lock:
            return list(self._items)

    @property
    def has_blocking(self) -> bool:
        return any(n.blocking for n in self.items)

    @property
    def has_modal(self) -> bool:
        return any(n.modal for n in self.items)

    def enqueue(self, notification: Notification) -> Notification:
        with self._lock:
            self._items.append(notification)
            while len(self._items) > self.max_items:
                self._items.pop(0)
        return notification

    def get(self, notification_id: str) -> Optional[Notification]:
        for n in self.items:
            if n.id == notification_id:
                return n
        return None

    def _remove(self, notification_id: str, force: bool = False) -> Optional[Notification]:
        with self._lock:
            for i, n in enumerate(self._items):
                if n.id == notification_id:
                    if n.blocking and not force:
                        return None
                    return self._items.pop(i)
        return None

    def dismiss(self, notification_id: str) -> bool:
        """Remove a dismissible toast and run its dismiss callback"""
        notification = self._remove(notification_id)
        if notification is None:
            return False
        if notification.on_dismissed:
            notification.on_dismissed()
        return True

    def dismiss_all_non_blocking(self):
        with self._lock:
            self._items = [n for n in self._items if n.blocking]

    def prune(self, now: Optional[float] = None) -> List[Notification]:
        """Dismiss every toast whose lifetime elapsed"""
        now = time.monotonic() if now is None else now
        expired = [n for n in self.items if n.expired(now)]
        for n in expired:
            self.dismiss(n.id)
        return expired


def _download_suffix(toast: VersionCheckToast) -> str:
    return ", click Download to open your browser" if toast.link_to_current_version else ""


def version_notification(
    result: VersionCheckResult,
    toast: VersionCheckToast,
    on_download: Callable[[str], None],
    on_retry: Callable[[], None],
    on_reset: Callable[[], None]
) -> Optional[Notification]:
    """Build the toast for a version check outcome, if it needs one"""
    link = toast.link_to_current_version
    if result == VersionCheckResult.NEW_AVAILABLE:
        return Notification(
            ToastStyle.ALERT,
            "New version available",
            f"You are using v{toast.app_version} and v{toast.current_version} is available"
            f"{_download_suffix(toast)} (this will go away in {ToastStyle.ALERT.duration:g} seconds)",
            button_title="Download" if link else None,
            on_button=(lambda: on_download(link)) if link else None,
            on_dismissed=on_reset
        )
    if result == VersionCheckResult.NEW_REQUIRED:
        return Notification(
            ToastStyle.FATAL,
            "New version required",
            f"You are using v{toast.app_version} and v{toast.current_version} is required"
            f"{_download_suffix(toast)} or quit the application",
            button_title="Download" if link else None,
            on_button=(lambda: on_download(link)) if link else None
        )
    if result == VersionCheckResult.MANUAL_CHECK_COMPLETE:
        return Notification(
            ToastStyle.INFO,
            "Latest version",
            f"You are using the latest version v{toast.app_version}",
            on_dismissed=on_reset
        )
    if result == VersionCheckResult.CHECK_FAILED:
        return Notification(
            ToastStyle.ALERT,
            "Failed to check version",
            f"Failed to check the app version. You are using v{toast.app_version} "
            f"(this will go away in {ToastStyle.ALERT.duration:g} seconds)",
            button_title="Retry",
            on_button=on_retry,
            on_dismissed=on_reset
        )
    return None
