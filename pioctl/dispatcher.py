"""Carrying out a parsed command against the managers."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pioctl.audio import AudioManager
from pioctl.desktop import DesktopManager
from pioctl.display import DisplayManager
from pioctl.errors import NotificationError, PioctlError
from pioctl.models import Profile
from pioctl.notifications import NotificationsManager
from pioctl.profiles import ProfilesManager

ICON_LOADING = "\uf110"
ICON_CHECK = "\uf00c"
ICON_ERROR = "\uf00d"
ICON_SEP = "\u2003"
_FINAL_EXPIRE_MS = 3000


class CommandName(Enum):
    """The subcommands the program understands."""

    MONITORS = "monitors"
    AUDIO_SINKS = "audio-sinks"
    PROFILES = "profiles"
    CURRENT = "current"
    RESTORE = "restore"
    APPLY = "apply"
    APPLY_NEXT = "apply-next"


@dataclass(frozen=True)
class Command:
    """A subcommand with its arguments."""

    name: CommandName
    delay_ms: Optional[int] = None
    profile_id: Optional[str] = None


def _eprint(message: str) -> None:
    print(message, file=sys.stderr)


class Dispatcher:
    """Runs commands, reporting results on stdout and failures on stderr."""

    def __init__(
        self,
        dry_run: bool,
        display_manager: DisplayManager,
        audio_manager: AudioManager,
        desktop_manager: DesktopManager,
        profiles_manager: ProfilesManager,
        notifications_manager: NotificationsManager,
    ) -> None:
        self.dry_run = dry_run
        self.display_manager = display_manager
        self.audio_manager = audio_manager
        self.desktop_manager = desktop_manager
        self.profiles_manager = profiles_manager
        self.notifications_manager = notifications_manager

    def handle_command(self, command: Optional[Command]) -> None:
        """Run ``command``; with no command, exit with status 1."""
        if command is None:
            _eprint("No command provided, use --help for usage")
            raise SystemExit(1)
        handlers: dict[CommandName, Callable[[Command], None]] = {
            CommandName.PROFILES: self._profiles,
            CommandName.CURRENT: self._current,
            CommandName.RESTORE: self._restore,
            CommandName.APPLY: self._apply,
            CommandName.APPLY_NEXT: self._apply_next,
            CommandName.MONITORS: self._monitors,
            CommandName.AUDIO_SINKS: self._audio_sinks,
        }
        handlers[command.name](command)

    def _profiles(self, command: Command) -> None:
        try:
            print(self.profiles_manager.get_profiles())
        except PioctlError as err:
            _eprint(f"Failed to get profiles: {err}")

    def _current(self, command: Command) -> None:
        try:
            print(self.profiles_manager.get_current_profile_json())
        except PioctlError as err:
            _eprint(f"Failed to get current profile: {err}")

    def _restore(self, command: Command) -> None:
        try:
            profile = self.profiles_manager.get_current_profile()
        except PioctlError as err:
            _eprint(f"Failed to get current profile: {err}")
            return
        delay = command.delay_ms or 0
        if self.dry_run:
            print(f"[DRY RUN] Restoring profile: {profile.name}, with delay: {delay}ms")
        else:
            time.sleep(delay / 1000)
        self.apply_profile(profile)

    def _apply(self, command: Command) -> None:
        try:
            profile = self.profiles_manager.get_profile_by_id(command.profile_id or "")
        except PioctlError as err:
            _eprint(f"Failed to get profile by id: {err}")
            return
        self.apply_profile(profile)

    def _apply_next(self, command: Command) -> None:
        try:
            profile = self.profiles_manager.get_next_profile()
        except PioctlError as err:
            _eprint(f"Failed to get next profile: {err}")
            return
        self.apply_profile(profile)

    def _monitors(self, command: Command) -> None:
        try:
            print(self.display_manager.get_monitors_json(self.dry_run))
        except PioctlError as err:
            _eprint(f"Failed to get monitors: {err}")

    def _audio_sinks(self, command: Command) -> None:
        try:
            sinks = self.audio_manager.get_audio_sinks(self.dry_run)
        except PioctlError as err:
            _eprint(f"Failed to get audio sinks: {err}")
            return
        for sink in sinks:
            print(sink)

    def _notify(
        self,
        title: str,
        statuses: dict[str, str],
        replace_id: Optional[int],
        expire_ms: Optional[int] = None,
    ) -> Optional[int]:
        body = "\n".join(f"{icon}{ICON_SEP}{label}" for label, icon in statuses.items())
        try:
            return self.notifications_manager.notify_update(
                title, body, replace_id, expire_ms, self.dry_run
            )
        except NotificationError:
            return None

    def _wait(self, delay: Optional[int], what: str) -> None:
        if delay is None:
            return
        if self.dry_run:
            print(f"[DRY RUN] Delay before {what}: {delay}ms")
        else:
            time.sleep(delay / 1000)

    def _stage(
        self,
        profile: Profile,
        label: str,
        action: Callable[[], None],
        failure_prefix: str,
    ) -> bool:
        try:
            action()
        except PioctlError as err:
            _eprint(f"{failure_prefix}{err}")
            return False
        prefix = "[DRY RUN] " if self.dry_run else ""
        print(f"{prefix}{label} config applied successfully: {profile.name}")
        return True

    def apply_profile(self, profile: Profile) -> None:
        """Apply monitors, audio and desktop settings, reporting progress."""
        title = f"Applying profile: {profile.name}\n\u00a0"
        statuses = {"Monitors": ICON_LOADING, "Audio": ICON_LOADING, "Desktop": ICON_LOADING}
        notification_id = self._notify(title, statuses, None)

        self._wait(profile.monitors_config.delay_before_ms, "setting monitors config")
        monitors_ok = self._stage(
            profile,
            "Monitor",
            lambda: self.display_manager.set_monitors_config(
                profile.monitors_config, self.dry_run
            ),
            "Failed to apply profile: ",
        )
        if monitors_ok:
            try:
                self.profiles_manager.set_current_profile_id(profile.name)
            except PioctlError as err:
                _eprint(f"Warning: Failed to update current profile: {err}")
        statuses["Monitors"] = ICON_CHECK if monitors_ok else ICON_ERROR
        self._notify(title, statuses, notification_id)

        self._wait(
            profile.audio_sinks_config.delay_before_ms, "settings audio sinks config"
        )
        audio_ok = self._stage(
            profile,
            "Audio",
            lambda: self.audio_manager.set_audio_sinks_config(
                profile.audio_sinks_config, self.dry_run
            ),
            "Warning: Failed to update audio sinks ",
        )
        statuses["Audio"] = ICON_CHECK if audio_ok else ICON_ERROR
        self._notify(title, statuses, notification_id)

        self._wait(profile.desktop_config.delay_before_ms, "setting desktop config")
        desktop_ok = self._stage(
            profile,
            "Desktop",
            lambda: self.desktop_manager.dispatch_desktops(
                profile.desktop_config, self.dry_run
            ),
            "Warning: Failed to apply desktop config: ",
        )
        statuses["Desktop"] = ICON_CHECK if desktop_ok else ICON_ERROR
        self._notify(title, statuses, notification_id, _FINAL_EXPIRE_MS)