import pytest

from replyclipboard.notifications import (
    Notification, NotificationQueue, ToastStyle, version_notification
)
from replyclipboard.version_check import VersionCheckResult, VersionCheckToast


def make(title="t", style=ToastStyle.INFO, **kwargs):
    return Notification(style, title, "message", **kwargs)


def test_style_defaults():
    assert make(style=ToastStyle.SUCCESS).duration == ToastStyle.SUCCESS.duration
    fatal = make(style=ToastStyle.FATAL)
    assert fatal.blocking and fatal.modal
    assert fatal.duration is None


def test_queue_is_capped_oldest_first():
    queue = NotificationQueue(max_items=5)
    for i in range(7):
        queue.enqueue(make(title=str(i)))
    assert [n.title for n in queue.items] == ["2", "3", "4", "5", "6"]
    assert len(queue) == 5


def test_dismiss_runs_callback():
    dismissed = []
    queue = NotificationQueue()
    n = queue.enqueue(make(on_dismissed=lambda: dismissed.append(True)))
    assert queue.dismiss(n.id)
    assert dismissed == [True]
    assert not queue.dismiss(n.id)


def test_blocking_cannot_be_dismissed():
    queue = NotificationQueue()
    n = queue.enqueue(make(style=ToastStyle.FATAL))
    assert not queue.dismiss(n.id)
    assert queue.has_blocking
    assert queue.has_modal


def test_dismiss_all_non_blocking():
    dismissed = []
    queue = NotificationQueue()
    queue.enqueue(make(title="a", on_dismissed=lambda: dismissed.append("a")))
    queue.enqueue(make(title="b", style=ToastStyle.FATAL))
    queue.dismiss_all_non_blocking()
    assert [n.title for n in queue.items] == ["b"]
    assert dismissed == []


def test_prune_expires_timed_toasts():
    dismissed = []
    queue = NotificationQueue()
    short = queue.enqueue(make(title="short", duration=1.0, on_dismissed=lambda: dismissed.append("short")))
    queue.enqueue(make(title="long", duration=60.0))
    queue.enqueue(make(title="fatal", style=ToastStyle.FATAL))

    assert queue.prune(short.created + 0.5) == []
    expired = queue.prune(short.created + 1.0)
    assert [n.title for n in expired] == ["short"]
    assert dismissed == ["short"]
    assert [n.title for n in queue.items] == ["long", "fatal"]


@pytest.fixture()
def actions():
    calls = []
    return calls, {
        "on_download": lambda link: calls.append(("download", link)),
        "on_retry": lambda: calls.append(("retry",)),
        "on_reset": lambda: calls.append(("reset",)),
    }


NEWER = VersionCheckToast(app_version="1.2.0", current_version="1.3.0",
                          link_to_current_version="https://example.com/dl")


def test_new_available_notification(actions):
    calls, callbacks = actions
    n = version_notification(VersionCheckResult.NEW_AVAILABLE, NEWER, **callbacks)
    assert n.style is ToastStyle.ALERT
    assert not n.blocking
    assert "v1.2.0" in n.message and "v1.3.0 is available" in n.message
    assert n.button_title == "Download"
    n.on_button()
    n.on_dismissed()
    assert calls == [("download", "https://example.com/dl"), ("reset",)]


def test_new_required_notification(actions):
    calls, callbacks = actions
    n = version_notification(VersionCheckResult.NEW_REQUIRED, NEWER, **callbacks)
    assert n.style is ToastStyle.FATAL
    assert n.blocking
    assert n.on_dismissed is None
    assert "v1.3.0 is required" in n.message


def test_new_available_without_link_has_no_button(actions):
    _, callbacks = actions
    toast = VersionCheckToast(app_version="1.2.0", current_version="1.3.0")
    n = version_notification(VersionCheckResult.NEW_AVAILABLE, toast, **callbacks)
    assert n.button_title is None
    assert n.on_button is None


def test_manual_check_complete_notification(actions):
    calls, callbacks = actions
    toast = VersionCheckToast(app_version="1.2.0")
    n = version_notification(VersionCheckResult.MANUAL_CHECK_COMPLETE, toast, **callbacks)
    assert n.style is ToastStyle.INFO
    assert n.message == "You are using the latest version v1.2.0"
    n.on_dismissed()
    assert calls == [("reset",)]


def test_check_failed_notification(actions):
    calls, callbacks = actions
    toast = VersionCheckToast(app_version="1.2.0")
    n = version_notification(VersionCheckResult.CHECK_FAILED, toast, **callbacks)
    assert n.button_title == "Retry"
    n.on_button()
    assert calls == [("retry",)]


@pytest.mark.parametrize("result", [VersionCheckResult.CHECKING, VersionCheckResult.COMPLETE])
def test_quiet_results_have_no_notification(actions, result):
    _, callbacks = actions
    assert version_notification(result, VersionCheckToast(), **callbacks) is None
