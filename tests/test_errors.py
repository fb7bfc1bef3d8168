import pytest

from pioctl.errors import (
    AudioCommandError,
    AudioError,
    AudioSinkError,
    ConfigCreateError,
    ConfigReadError,
    ConfigWriteError,
    CurrentProfileNotSetError,
    DesktopError,
    DisplayCommandError,
    DisplayError,
    EncodingError,
    NotEnoughProfilesError,
    NotificationError,
    OutputParseError,
    PioctlError,
    ProfileNotFoundError,
)


@pytest.mark.parametrize(
    "error, message",
    [
        (AudioCommandError("boom"), "Failed to execute command: boom"),
        (AudioSinkError("sink"), "Failed to set audio sink: sink"),
        (DesktopError("ws 1"), "Failed to execute command ws 1"),
        (DisplayCommandError("hyprctl"), "Failed to execute command hyprctl"),
        (EncodingError("get_monitors"), "Failed to encode/decode data get_monitors"),
        (NotificationError("notify-send"), "Failed to execute command: notify-send"),
    ],
)
def test_messages_with_detail(error, message):
    assert str(error) == message


@pytest.mark.parametrize(
    "error_class, message",
    [
        (OutputParseError, "Failed to parse command output"),
        (CurrentProfileNotSetError, "Current profile not set"),
        (ProfileNotFoundError, "Profile not found"),
        (NotEnoughProfilesError, "Not enough profiles to switch (need at least 2)"),
        (ConfigReadError, "Failed to get config"),
        (ConfigCreateError, "Failed to create config"),
        (ConfigWriteError, "Failed to set config"),
    ],
)
def test_fixed_messages(error_class, message):
    assert str(error_class()) == message


def test_detail_is_kept():
    error = AudioSinkError("prefix")
    assert error.detail == "prefix"


@pytest.mark.parametrize(
    "error, base, message",
    [
        (AudioCommandError("x"), AudioError, "Failed to execute command: x"),
        (AudioSinkError("x"), AudioError, "Failed to set audio sink: x"),
        (ProfileNotFoundError(), DisplayError, "Profile not found"),
        (ConfigReadError(), DisplayError, "Failed to get config"),
        (DesktopError("x"), PioctlError, "Failed to execute command x"),
        (NotificationError("x"), PioctlError, "Failed to execute command: x"),
    ],
)
def test_hierarchy(error, base, message):
    with pytest.raises(base) as info:
        raise error
    assert str(info.value) == message


def _classify(error):
    try:
        raise error
    except AudioError:
        return "audio"
    except DisplayError:
        return "display"


def test_display_errors_are_not_audio_errors():
    assert _classify(ProfileNotFoundError()) == "display"
    assert _classify(AudioSinkError("x")) == "audio"