# -*- coding: utf-8 -*-
"""
version_check.py - Remote version manifest check
Fetches the published manifest, compares it with the running build and
publishes a single outcome. Only one check runs at a time.
"""

import re
import threading
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional
import requests

from .config import APP_VERSION
from .errors import VersionCheckError

logger = logging.getLogger(__name__)

_CHUNK = re.compile(r'(\d+)')
FALLBACK_PLATFORM = "macOS"


def _component_key(component: str) -> list:
    """Split a version component into numbers and text for ordering"""
    key = []
    for part in _CHUNK.split(component):
        if not part:
            continue
        key.append((0, int(part), "") if part.isdigit() else (1, 0, part.lower()))
    return key


def compare_versions(a: str, b: str) -> int:
    """
    Compare dotted version strings numerically.
    Returns -1, 0 or 1. Missing trailing components count as zero,
    so "1.2" equals "1.2.0".
    """
    left = [c.strip() for c in a.strip().split('.')]
    right = [c.strip() for c in b.strip().split('.')]
    width = max(len(left), len(right))
    left += ['0'] * (width - len(left))
    right += ['0'] * (width - len(right))
    for x, y in zip(left, right):
        kx, ky = _component_key(x), _component_key(y)
        if kx != ky:
            return -1 if kx < ky else 1
    return 0


def is_newer(candidate: str, running: str) -> bool:
    """True when candidate is strictly newer than the running version"""
    return compare_versions(candidate, running) > 0


@dataclass(frozen=True)
class VersionEntry:
    """Release information for one platform"""
    current: str
    link: str
    vital: bool

    @classmethod
    def from_dict(cls, data) -> 'VersionEntry':
        if not isinstance(data, dict):
            raise VersionCheckError("Manifest entry is not an object")
        for key, kind in (('current', str), ('link', str), ('vital', bool)):
            if not isinstance(data.get(key), kind):
                raise VersionCheckError(f"Manifest entry has no valid '{key}'")
        return cls(current=data['current'], link=data['link'], vital=data['vital'])


def parse_manifest(data, platform: str) -> VersionEntry:
    """
    Pick the entry for platform out of a decoded manifest.
    Manifests that only publish the macOS entry serve every platform.
    """
    if not isinstance(data, dict):
        raise VersionCheckError("Manifest is not an object")
    if platform in data:
        return VersionEntry.from_dict(data[platform])
    if FALLBACK_PLATFORM in data:
        logger.debug("Manifest has no entry for %s, using %s", platform, FALLBACK_PLATFORM)
        return VersionEntry.from_dict(data[FALLBACK_PLATFORM])
    raise VersionCheckError(f"Manifest has no entry for {platform}")


def fetch_manifest(url: str, platform: str, timeout: float = 120.0) -> VersionEntry:
    """Download and decode the version manifest"""
    try:
        response = requests.get(
            url,
            headers={'Accept': 'application/json', 'Cache-Control': 'no-cache'},
            timeout=timeout
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise VersionCheckError(f"Failed to fetch {url}: {e}") from e
    return parse_manifest(data, platform)


class VersionCheckResult(Enum):
    """Outcome of the latest version check"""
    CHECKING = "checking"
    COMPLETE = "complete"
    NEW_AVAILABLE = "new_available"
    NEW_REQUIRED = "new_required"
    MANUAL_CHECK_COMPLETE = "manual_check_complete"
    CHECK_FAILED = "check_failed"


@dataclass(frozen=True)
class VersionCheckToast:
    """Version details shown to the user"""
    app_version: str = "unknown"
    current_version: str = "unknown"
    link_to_current_version: str = ""


@dataclass(frozen=True)
class VersionCheckSnapshot:
    """Read-only view of the checker state"""
    result: VersionCheckResult = VersionCheckResult.COMPLETE
    toast: VersionCheckToast = field(default_factory=VersionCheckToast)
    busy: bool = False


class VersionChecker:
    """
    Owns the version check state machine.

    check_for_updates() starts a background check and returns at once;
    the outcome is published to subscribers and exposed through snapshot.
    """

    def __init__(
        self,
        url: str,
        platform: str,
        app_version: str = APP_VERSION,
        timeout: float = 120.0,
        fetch: Optional[Callable[[str, str, float], VersionEntry]] = None,
        on_log: Optional[Callable[[str], None]] = None,
        enabled: bool = True
    ):
        self.url = url
        self.platform = platform
        self.app_version = app_version
        self.timeout = timeout
        self.enabled = enabled
        self._fetch = fetch or fetch_manifest
        self.on_log = on_log or (lambda x: None)

        self._busy = threading.Lock()
        self._state_lock = threading.Lock()
        self._snapshot = VersionCheckSnapshot(toast=VersionCheckToast(app_version=app_version))
        self._subscribers: List[Callable[[VersionCheckSnapshot], None]] = []
        self._thread: Optional[threading.Thread] = None

    def _log(self, message: str):
        self.on_log(f"[VERSION] {message}")

    @property
    def snapshot(self) -> VersionCheckSnapshot:
        with self._state_lock:
            return self._snapshot

    @property
    def is_checking(self) -> bool:
        return self._busy.locked()

    def subscribe(self, callback: Callable[[VersionCheckSnapshot], None]) -> Callable[[], None]:
        """Register for state changes. Returns an unsubscribe function."""
        with self._state_lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._state_lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)
        return unsubscribe

    def _publish(
        self,
        result: VersionCheckResult,
        toast: Optional[VersionCheckToast] = None,
        busy: bool = False,
        release: bool = False
    ):
        with self._state_lock:
            self._snapshot = VersionCheckSnapshot(
                result=result,
                toast=toast or self._snapshot.toast,
                busy=busy
            )
            if release:
                # subscribers may start the next check right away
                self._busy.release()
            snapshot = self._snapshot
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(snapshot)

    def check_for_updates(self, manual: bool = False) -> bool:
        """
        Start a check in the background.
        Returns False if nothing was started: checks disabled, a check
        already running, or a required update still pending.
        """
        if not self.enabled:
            return False
        if not self._busy.acquire(blocking=False):
            self._log("Check already in progress")
            return False
        if self.snapshot.result == VersionCheckResult.NEW_REQUIRED:
            self._busy.release()
            return False

        self._publish(VersionCheckResult.CHECKING, busy=True)
        self._log("Manual check started" if manual else "Checking for updates")
        self._thread = threading.Thread(target=self._run, args=(manual,), daemon=True)
        self._thread.start()
        return True

    def _run(self, manual: bool):
        """Worker body, always releases the busy lock"""
        try:
            result, toast = self._evaluate(manual)
        except BaseException:
            self._busy.release()
            raise
        self._publish(result, toast, release=True)

    def _evaluate(self, manual: bool):
        running = self.app_version
        try:
            entry = self._fetch(self.url, self.platform, self.timeout)
        except Exception as e:
            # any failure collapses into CHECK_FAILED
            logger.warning("Version check failed: %s", e)
            self._log(f"Check failed: {e}")
            return VersionCheckResult.CHECK_FAILED, VersionCheckToast(app_version=running)

        if is_newer(entry.current, running):
            toast = VersionCheckToast(
                app_version=running,
                current_version=entry.current,
                link_to_current_version=entry.link
            )
            if entry.vital:
                self._log(f"v{entry.current} is required")
                return VersionCheckResult.NEW_REQUIRED, toast
            self._log(f"v{entry.current} is available")
            return VersionCheckResult.NEW_AVAILABLE, toast

        self._log(f"v{running} is the latest version")
        toast = VersionCheckToast(app_version=running)
        if manual:
            return VersionCheckResult.MANUAL_CHECK_COMPLETE, toast
        return VersionCheckResult.COMPLETE, toast

    def reset(self) -> bool:
        """Return to idle after a notification was dismissed"""
        snapshot = self.snapshot
        if snapshot.result in (VersionCheckResult.NEW_REQUIRED, VersionCheckResult.CHECKING):
            return False
        if snapshot.result != VersionCheckResult.COMPLETE:
            self._publish(VersionCheckResult.COMPLETE)
        return True

    def wait(self, timeout: Optional[float] = None):
        """Block until the running check, if any, finishes"""
        thread = self._thread
        if thread:
            thread.join(timeout)
