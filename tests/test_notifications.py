import subprocess

import pytest

from pioctl.errors import NotificationError
from pioctl.notifications import NotificationsManager


class FakeRun:
    def __init__(self, returncode=0, stdout=b"", error=None):
        self.calls = []
        self.returncode = returncode
        self.stdout = stdout
        self.error = error

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, b"")


def test_notify_returns_printed_id(monkeypatch):
    fake = FakeRun(stdout=b"42\n")
    monkeypatch.setattr(subprocess, "run", fake)
    assert NotificationsManager().notify_update("T", "B") == 42
    assert fake.calls == [["notify-send", "--print-id", "T", "B"]]


def test_notify_passes_replace_and_expire(monkeypatch):
    fake = FakeRun(stdout=b"7")
    monkeypatch.setattr(subprocess, "run", fake)
    result = NotificationsManager().notify_update("T", "B", 7, 3000, False)
    assert result == 7
    assert fake.calls == [
        ["notify-send", "--print-id", "--replace-id=7", "--expire-time=3000", "T", "B"]
    ]


def test_dry_run_prints_and_still_sends(monkeypatch, capsys):
    fake = FakeRun(stdout=b"5\n")
    monkeypatch.setattr(subprocess, "run", fake)
    assert NotificationsManager().notify_update("Title", "Body", dry_run=True) == 5
    assert len(fake.calls) == 1
    assert "[DRY RUN] Notification: Title | Body" in capsys.readouterr().out


def test_failing_command_raises(monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(returncode=1))
    with pytest.raises(NotificationError) as info:
        NotificationsManager().notify_update("T", "B")
    assert info.value.detail == "Command notify-send failed for: T | B"


def test_unparsable_id_raises(monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(stdout=b"abc\n"))
    with pytest.raises(NotificationError) as info:
        NotificationsManager().notify_update("T", "B")
    assert info.value.detail == "Failed to parse notification ID: abc"


def test_missing_command_raises(monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(error=FileNotFoundError("x")))
    with pytest.raises(NotificationError) as info:
        NotificationsManager().notify_update("T", "B")
    assert info.value.detail == "Failed to execute command notify-send"


def test_negative_id_is_rejected(monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(stdout=b"-1"))
    with pytest.raises(NotificationError):
        NotificationsManager().notify_update("T", "B")