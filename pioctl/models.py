"""Data types for monitors, audio sinks, workspaces and profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

_U8 = 8
_U32 = 32


def _mapping(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"invalid type for {what}: expected an object")
    return value


def _field(data: dict, key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _uint(value: Any, bits: int, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid type for `{key}`: expected an unsigned integer")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"invalid value for `{key}`: {value} out of range")
    return value


def _opt_uint(data: dict, key: str, bits: int) -> Optional[int]:
    value = data.get(key)
    return None if value is None else _uint(value, bits, key)


def _float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"invalid type for `{key}`: expected a number")
    return float(value)


def _bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"invalid type for `{key}`: expected a boolean")
    return value


def _str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{key}`: expected a string")
    return value


def _opt_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    return None if value is None else _str(value, key)


def _list(value: Any, key: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"invalid type for `{key}`: expected a list")
    return value


@dataclass
class Size:
    """A width and height pair, also used for positions."""

    width: int
    height: int

    @classmethod
    def from_dict(cls, data: Any) -> Size:
        data = _mapping(data, "Size")
        return cls(
            width=_uint(_field(data, "width"), _U32, "width"),
            height=_uint(_field(data, "height"), _U32, "height"),
        )

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass
class Mode:
    """A resolution together with its available refresh rates."""

    resolution: Size
    refresh_rate: list[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "resolution": self.resolution.to_dict(),
            "refresh_rate": list(self.refresh_rate),
        }


@dataclass
class Monitor:
    """A connected monitor and its current state."""

    id: int
    name: str
    model: str
    description: str
    scale: float
    transformation: int
    resolution: Size
    refresh_rate: float
    is_enabled: bool
    mirror_of_name: Optional[str]
    current_position: Size
    modes: list[Mode] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "model": self.model,
            "description": self.description,
            "scale": self.scale,
            "transformation": self.transformation,
            "resolution": self.resolution.to_dict(),
            "refresh_rate": self.refresh_rate,
            "is_enabled": self.is_enabled,
            "mirror_of_name": self.mirror_of_name,
            "current_position": self.current_position.to_dict(),
            "modes": [mode.to_dict() for mode in self.modes],
        }


class Transformation(IntEnum):
    """Monitor rotation and flip codes."""

    NORMAL = 0
    ROTATE_90 = 1
    ROTATE_180 = 2
    ROTATE_270 = 3
    FLIP = 4
    FLIP_ROTATE_90 = 5
    FLIP_ROTATE_180 = 6
    FLIP_ROTATE_270 = 7

    def code(self) -> int:
        return int(self)

    @classmethod
    def from_code(cls, code: int) -> Optional[Transformation]:
        try:
            return cls(code)
        except ValueError:
            return None


@dataclass
class Workspace:
    """A workspace and the monitor it belongs on."""

    index: str
    monitor_name: str
    active: bool = False
    focused: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Workspace:
        data = _mapping(data, "Workspace")
        return cls(
            index=_str(_field(data, "index"), "index"),
            monitor_name=_str(_field(data, "monitor_name"), "monitor_name"),
            active=_bool(data.get("active", False), "active"),
            focused=_bool(data.get("focused", False), "focused"),
        )

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "monitor_name": self.monitor_name,
            "active": self.active,
            "focused": self.focused,
        }


@dataclass
class AudioConfig:
    """Desired volume for the sink whose name starts with ``sink_name``."""

    sink_name: str
    volume: int
    default: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> AudioConfig:
        data = _mapping(data, "AudioConfig")
        return cls(
            sink_name=_str(_field(data, "sink_name"), "sink_name"),
            volume=_uint(_field(data, "volume"), _U8, "volume"),
            default=_bool(data.get("default", False), "default"),
        )

    def to_dict(self) -> dict:
        return {
            "sink_name": self.sink_name,
            "volume": self.volume,
            "default": self.default,
        }


@dataclass
class AudioSinksConfig:
    """The audio part of a profile."""

    delay_before_ms: Optional[int]
    audio_sinks: list[AudioConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> AudioSinksConfig:
        data = _mapping(data, "AudioSinksConfig")
        sinks = _list(_field(data, "audio_sinks"), "audio_sinks")
        return cls(
            delay_before_ms=_opt_uint(data, "delay_before_ms", _U32),
            audio_sinks=[AudioConfig.from_dict(item) for item in sinks],
        )

    def to_dict(self) -> dict:
        return {
            "delay_before_ms": self.delay_before_ms,
            "audio_sinks": [sink.to_dict() for sink in self.audio_sinks],
        }


@dataclass
class DesktopConfig:
    """The workspace part of a profile."""

    delay_before_ms: Optional[int]
    workspaces: list[Workspace] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> DesktopConfig:
        data = _mapping(data, "DesktopConfig")
        workspaces = _list(_field(data, "workspaces"), "workspaces")
        return cls(
            delay_before_ms=_opt_uint(data, "delay_before_ms", _U32),
            workspaces=[Workspace.from_dict(item) for item in workspaces],
        )

    def to_dict(self) -> dict:
        return {
            "delay_before_ms": self.delay_before_ms,
            "workspaces": [workspace.to_dict() for workspace in self.workspaces],
        }


@dataclass
class MonitorConfig:
    """Desired settings for one monitor."""

    name: str
    scale: float
    transformation: int
    resolution: Size
    refresh_rate: float
    is_enabled: bool
    mirror_of_name: Optional[str]
    current_position: Size

    @classmethod
    def from_dict(cls, data: Any) -> MonitorConfig:
        data = _mapping(data, "MonitorConfig")
        return cls(
            name=_str(_field(data, "name"), "name"),
            scale=_float(_field(data, "scale"), "scale"),
            transformation=_uint(_field(data, "transformation"), _U8, "transformation"),
            resolution=Size.from_dict(_field(data, "resolution")),
            refresh_rate=_float(_field(data, "refresh_rate"), "refresh_rate"),
            is_enabled=_bool(_field(data, "is_enabled"), "is_enabled"),
            mirror_of_name=_opt_str(data, "mirror_of_name"),
            current_position=Size.from_dict(_field(data, "current_position")),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "scale": self.scale,
            "transformation": self.transformation,
            "resolution": self.resolution.to_dict(),
            "refresh_rate": self.refresh_rate,
            "is_enabled": self.is_enabled,
            "mirror_of_name": self.mirror_of_name,
            "current_position": self.current_position.to_dict(),
        }


@dataclass
class MonitorsConfig:
    """The monitor part of a profile."""

    delay_before_ms: Optional[int]
    disabled_to_enabled_delay_ms: Optional[int]
    monitors: list[MonitorConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> MonitorsConfig:
        data = _mapping(data, "MonitorsConfig")
        monitors = _list(_field(data, "monitors"), "monitors")
        return cls(
            delay_before_ms=_opt_uint(data, "delay_before_ms", _U32),
            disabled_to_enabled_delay_ms=_opt_uint(
                data, "disabled_to_enabled_delay_ms", _U32
            ),
            monitors=[MonitorConfig.from_dict(item) for item in monitors],
        )

    def to_dict(self) -> dict:
        return {
            "delay_before_ms": self.delay_before_ms,
            "disabled_to_enabled_delay_ms": self.disabled_to_enabled_delay_ms,
            "monitors": [monitor.to_dict() for monitor in self.monitors],
        }


@dataclass
class Profile:
    """A named set of monitor, audio and desktop settings."""

    name: str
    monitors_config: MonitorsConfig
    audio_sinks_config: AudioSinksConfig
    desktop_config: DesktopConfig

    @classmethod
    def from_dict(cls, data: Any) -> Profile:
        data = _mapping(data, "Profile")
        return cls(
            name=_str(_field(data, "name"), "name"),
            monitors_config=MonitorsConfig.from_dict(_field(data, "monitors_config")),
            audio_sinks_config=AudioSinksConfig.from_dict(
                _field(data, "audio_sinks_config")
            ),
            desktop_config=DesktopConfig.from_dict(_field(data, "desktop_config")),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "monitors_config": self.monitors_config.to_dict(),
            "audio_sinks_config": self.audio_sinks_config.to_dict(),
            "desktop_config": self.desktop_config.to_dict(),
        }

    @classmethod
    def from_json(cls, text: str) -> Profile:
        """Parse a profile from JSON text; raises ValueError on bad input."""
        return cls.from_dict(json.loads(text))

    def to_json(self) -> str:
        """Render the profile as indented JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)