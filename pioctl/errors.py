"""Exception hierarchy for audio, display, desktop and notification failures."""


class PioctlError(Exception):
    """Base class of every error raised by the package."""

    template = "{}"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(self.template.format(detail))


class AudioError(PioctlError):
    """An audio sink operation failed."""


class AudioCommandError(AudioError):
    """The audio control command could not be run or reported a failure."""

    template = "Failed to execute command: {}"


class AudioSinkError(AudioError):
    """An audio sink could not be configured."""

    template = "Failed to set audio sink: {}"


class DesktopError(PioctlError):
    """A workspace dispatch command failed."""

    template = "Failed to execute command {}"


class DisplayError(PioctlError):
    """A monitor or profile operation failed."""


class DisplayCommandError(DisplayError):
    """The compositor command could not be run or reported a failure."""

    template = "Failed to execute command {}"


class OutputParseError(DisplayError):
    """The output of a command was not valid text."""

    template = "Failed to parse command output"


class EncodingError(DisplayError):
    """Data could not be encoded or decoded; the detail names the operation."""

    template = "Failed to encode/decode data {}"


class CurrentProfileNotSetError(DisplayError):
    """No profile has been recorded as current."""

    template = "Current profile not set"


class ProfileNotFoundError(DisplayError):
    """The requested profile does not exist."""

    template = "Profile not found"


class NotEnoughProfilesError(DisplayError):
    """Cycling needs at least two profiles."""

    template = "Not enough profiles to switch (need at least 2)"


class ConfigReadError(DisplayError):
    """A configuration file could not be read or parsed."""

    template = "Failed to get config"


class ConfigCreateError(DisplayError):
    """The configuration directory could not be created."""

    template = "Failed to create config"


class ConfigWriteError(DisplayError):
    """Configuration state could not be written."""

    template = "Failed to set config"


class NotificationError(PioctlError):
    """A desktop notification could not be sent."""

    template = "Failed to execute command: {}"