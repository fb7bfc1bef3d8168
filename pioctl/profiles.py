"""Loading profiles from the config directory and tracking the current one."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import platformdirs

from pioctl.errors import (
    ConfigCreateError,
    ConfigReadError,
    ConfigWriteError,
    CurrentProfileNotSetError,
    NotEnoughProfilesError,
    ProfileNotFoundError,
)
from pioctl.models import Profile

APP_NAME = "pioctl"
_CURRENT_PROFILE_FILE = "current_profile"

PathLike = Union[str, Path]


def default_config_dir() -> Path:
    """Directory holding the ``*.json`` profile files."""
    return Path(platformdirs.user_config_dir(APP_NAME, appauthor=False))


def default_data_dir() -> Path:
    """Directory holding the record of the current profile."""
    return Path(platformdirs.user_data_dir(APP_NAME, appauthor=False))


class ProfilesManager:
    """Profiles are ``<id>.json`` files; the id is the file name stem."""

    def __init__(
        self,
        config_dir: Optional[PathLike] = None,
        data_dir: Optional[PathLike] = None,
    ) -> None:
        self.config_dir = Path(config_dir) if config_dir is not None else default_config_dir()
        self.data_dir = Path(data_dir) if data_dir is not None else default_data_dir()

    def _profile_path(self, stem: str) -> Path:
        return self.config_dir / f"{stem}.json"

    def _load_profiles(self) -> list[tuple[str, Profile]]:
        """Return (stem, profile) pairs sorted by stem."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            raise ConfigCreateError() from None
        try:
            paths = [path for path in self.config_dir.iterdir() if path.suffix == ".json"]
        except OSError:
            raise ConfigReadError() from None

        profiles = []
        for path in paths:
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                raise ConfigReadError() from None
            try:
                profile = Profile.from_json(content)
            except ValueError as exc:
                print(f'Failed to parse profile "{path}": {exc}')
                raise ConfigReadError() from None
            profiles.append((path.stem, profile))
        profiles.sort(key=lambda item: item[0])
        return profiles

    def _current_profile_stem(self) -> str:
        path = self.data_dir / _CURRENT_PROFILE_FILE
        if not path.exists():
            raise CurrentProfileNotSetError()
        try:
            return path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            raise ConfigReadError() from None

    def _save_current_profile_stem(self, stem: str) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            (self.data_dir / _CURRENT_PROFILE_FILE).write_text(stem, encoding="utf-8")
        except OSError:
            raise ConfigWriteError() from None

    def _profile_by_stem(self, stem: str) -> Profile:
        path = self._profile_path(stem)
        if not path.exists():
            raise ProfileNotFoundError()
        try:
            return Profile.from_json(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            raise ConfigReadError() from None

    def _resolve_current_stem(self) -> tuple[str, Optional[Profile]]:
        """Return the current stem, choosing and recording the first if unset."""
        try:
            return self._current_profile_stem(), None
        except CurrentProfileNotSetError:
            profiles = self._load_profiles()
            if not profiles:
                raise ProfileNotFoundError() from None
            stem, profile = profiles[0]
            self._save_current_profile_stem(stem)
            return stem, profile

    def get_profiles(self) -> str:
        """Every profile as its path followed by its JSON, separated by ``---``."""
        return "\n---\n".join(
            f"{self._profile_path(stem)}\n{profile.to_json()}"
            for stem, profile in self._load_profiles()
        )

    def get_current_profile(self) -> Profile:
        """The current profile; the first one becomes current if none is set."""
        stem, profile = self._resolve_current_stem()
        return profile if profile is not None else self._profile_by_stem(stem)

    def get_current_profile_json(self) -> str:
        """The current profile's path followed by its JSON."""
        stem, _ = self._resolve_current_stem()
        profile = self._profile_by_stem(stem)
        return f"{self._profile_path(stem)}\n{profile.to_json()}"

    def get_profile_by_id(self, profile_id: str) -> Profile:
        return self._profile_by_stem(profile_id)

    def get_next_profile(self) -> Profile:
        """The profile after the current one in stem order, wrapping around."""
        profiles = self._load_profiles()
        if len(profiles) < 2:
            raise NotEnoughProfilesError()

        self.get_current_profile()
        current_stem = self._current_profile_stem()

        stems = [stem for stem, _ in profiles]
        try:
            current_index = stems.index(current_stem)
        except ValueError:
            raise ProfileNotFoundError() from None
        return profiles[(current_index + 1) % len(profiles)][1]

    def set_current_profile_id(self, profile_id: str) -> None:
        """Record a profile as current, by file stem or else by display name."""
        if self._profile_path(profile_id).exists():
            self._save_current_profile_stem(profile_id)
            return
        stem = next(
            (stem for stem, profile in self._load_profiles() if profile.name == profile_id),
            None,
        )
        if stem is None:
            raise ProfileNotFoundError()
        self._save_current_profile_stem(stem)