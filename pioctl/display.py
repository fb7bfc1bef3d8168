"""Monitor discovery and configuration through the Hyprland compositor."""

from __future__ import annotations

import json
import sys
import time
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, Iterable

from pioctl.errors import (
    DisplayCommandError,
    EncodingError,
    OutputParseError,
)
from pioctl.models import Mode, Monitor, MonitorConfig, MonitorsConfig, Size
from pioctl.runner import run

HYPRLAND_CMD = "hyprctl"

_U8_LIMIT = 1 << 8
_U32_LIMIT = 1 << 32
_I32_MIN = -(1 << 31)
_I32_LIMIT = 1 << 31


class DisplayManager(ABC):
    """Reads and changes the monitor layout."""

    @abstractmethod
    def get_monitors(self, dry_run: bool) -> list[Monitor]:
        """Return every known monitor."""

    @abstractmethod
    def get_monitors_json(self, dry_run: bool) -> str:
        """Return every known monitor as indented JSON."""

    @abstractmethod
    def set_monitors_config(self, config: MonitorsConfig, dry_run: bool) -> None:
        """Apply a monitor layout."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_uint(limit: int) -> Callable[[Any], bool]:
    return lambda value: _is_int(value) and 0 <= value < limit


def _is_i32(value: Any) -> bool:
    return _is_int(value) and _I32_MIN <= value < _I32_LIMIT


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _require(data: dict, key: str, check: Callable[[Any], bool], what: str) -> Any:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    if not check(value):
        raise ValueError(f"invalid value for `{key}`: expected {what}")
    return value


def monitor_from_hyprland(data: Any) -> Monitor:
    """Build a Monitor from one entry of ``hyprctl monitors all -j``.

    Raises ValueError if a field is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise ValueError("invalid type for monitor: expected an object")
    mirror_of = _require(data, "mirrorOf", lambda v: isinstance(v, str), "a string")
    x = _require(data, "x", _is_i32, "a 32-bit integer")
    y = _require(data, "y", _is_i32, "a 32-bit integer")
    return Monitor(
        id=_require(data, "id", _is_uint(_U32_LIMIT), "an unsigned integer"),
        name=_require(data, "name", lambda v: isinstance(v, str), "a string"),
        model=_require(data, "model", lambda v: isinstance(v, str), "a string"),
        description=_require(
            data, "description", lambda v: isinstance(v, str), "a string"
        ),
        scale=float(_require(data, "scale", _is_number, "a number")),
        transformation=_require(
            data, "transform", _is_uint(_U8_LIMIT), "an unsigned byte"
        ),
        resolution=Size(
            width=_require(data, "width", _is_uint(_U32_LIMIT), "an unsigned integer"),
            height=_require(
                data, "height", _is_uint(_U32_LIMIT), "an unsigned integer"
            ),
        ),
        refresh_rate=float(_require(data, "refreshRate", _is_number, "a number")),
        is_enabled=not _require(
            data, "disabled", lambda v: isinstance(v, bool), "a boolean"
        ),
        mirror_of_name=None if mirror_of == "none" else mirror_of,
        current_position=Size(width=x % _U32_LIMIT, height=y % _U32_LIMIT),
        modes=parse_modes(
            _require(data, "availableModes", _is_str_list, "a list of strings")
        ),
    )


def _parse_u32(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    value = int(digits)
    return value if value < _U32_LIMIT else None


def _parse_float(text: str) -> float | None:
    if not text or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _strip_hz(text: str) -> str:
    while text.endswith("Hz"):
        text = text[:-2]
    return text


def parse_modes(mode_strings: Iterable[str]) -> list[Mode]:
    """Group ``WIDTHxHEIGHT@RATEHz`` strings by resolution.

    Malformed entries are skipped. Resolutions come largest first and the
    refresh rates of each resolution are sorted from highest to lowest.
    """
    rates_by_resolution: dict[tuple[int, int], list[float]] = {}
    for mode_str in mode_strings:
        parts = mode_str.split("@")
        if len(parts) != 2:
            continue
        resolution_parts = parts[0].split("x")
        if len(resolution_parts) != 2:
            continue
        width = _parse_u32(resolution_parts[0])
        height = _parse_u32(resolution_parts[1])
        if width is None or height is None:
            continue
        rate = _parse_float(_strip_hz(parts[1]))
        if rate is None:
            continue
        rates_by_resolution.setdefault((width, height), []).append(rate)

    return [
        Mode(resolution=Size(width, height), refresh_rate=sorted(rates, reverse=True))
        for (width, height), rates in sorted(
            rates_by_resolution.items(), key=lambda item: item[0], reverse=True
        )
    ]


def _format_number(value: float) -> str:
    """Render a number the short way: no exponent, no trailing ``.0``."""
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _eprint(message: str) -> None:
    print(message, file=sys.stderr)


class HyprlandDisplayManager(DisplayManager):
    """Display manager driven by ``hyprctl``."""

    def get_monitors(self, dry_run: bool) -> list[Monitor]:
        failure = f"Failed to execute command {HYPRLAND_CMD} monitors all -j"
        try:
            output = run(HYPRLAND_CMD, ["monitors", "all", "-j"], dry_run)
        except OSError:
            raise DisplayCommandError(failure) from None
        if not output.success():
            raise DisplayCommandError(failure)

        try:
            text = output.stdout.decode("utf-8")
        except UnicodeDecodeError:
            raise OutputParseError() from None

        try:
            entries = json.loads(text)
            if not isinstance(entries, list):
                raise ValueError("expected a list of monitors")
            return [monitor_from_hyprland(entry) for entry in entries]
        except ValueError:
            raise EncodingError("get_monitors") from None

    def get_monitors_json(self, dry_run: bool) -> str:
        monitors = self.get_monitors(dry_run)
        return json.dumps(
            [monitor.to_dict() for monitor in monitors], indent=2, ensure_ascii=False
        )

    def set_monitors_config(self, config: MonitorsConfig, dry_run: bool) -> None:
        any_disabled = False
        for monitor in config.monitors:
            if not monitor.is_enabled:
                self._set_disabled_monitor(monitor, dry_run)
                any_disabled = True

        delay = config.disabled_to_enabled_delay_ms
        if any_disabled and delay is not None:
            if dry_run:
                print(f"[DRY RUN] Disabling-to-Enabling delay: {delay}ms")
            else:
                time.sleep(delay / 1000)

        for monitor in config.monitors:
            if monitor.is_enabled:
                self._set_enabled_monitor(monitor, dry_run)

    def _apply_keyword(self, monitor: MonitorConfig, setting: str, dry_run: bool):
        try:
            return run(HYPRLAND_CMD, ["keyword", "monitor", setting], dry_run)
        except OSError as exc:
            message = f"Failed to execute command for monitor {monitor.name}: {exc}"
            _eprint(message)
            raise DisplayCommandError(message) from exc

    def _set_disabled_monitor(self, monitor: MonitorConfig, dry_run: bool) -> None:
        output = self._apply_keyword(monitor, f"{monitor.name},disable", dry_run)
        if output.success():
            if not dry_run:
                print(f"Successfully disabled monitor: {monitor.name}")
            return
        detail = output.stdout.decode("utf-8", errors="replace").strip()
        message = f"Failed to disable monitor {monitor.name}: {detail}"
        _eprint(message)
        raise DisplayCommandError(message)

    def _set_enabled_monitor(self, monitor: MonitorConfig, dry_run: bool) -> None:
        resolution = f"{monitor.resolution.width}x{monitor.resolution.height}"
        refresh = _format_number(monitor.refresh_rate)
        position = f"{monitor.current_position.width}x{monitor.current_position.height}"
        setting = (
            f"{monitor.name},{resolution}@{refresh},{position},"
            f"{_format_number(monitor.scale)}"
        )
        output = self._apply_keyword(monitor, setting, dry_run)
        if output.success():
            if not dry_run:
                print(
                    f"Successfully configured monitor: {monitor.name} "
                    f"({resolution}@{refresh}Hz)"
                )
            return
        detail = output.stdout.decode("utf-8", errors="replace").strip()
        message = f"Failed to configure monitor {monitor.name}: {detail}"
        _eprint(message)
        raise DisplayCommandError(message)


def get_display_manager() -> DisplayManager:
    """Return the display manager for the running desktop."""
    return HyprlandDisplayManager()