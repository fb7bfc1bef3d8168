"""Audio sink discovery and configuration through PipeWire's ``pactl``."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from pioctl.errors import AudioCommandError, AudioError, AudioSinkError
from pioctl.models import AudioConfig, AudioSinksConfig
from pioctl.runner import CommandOutput, run

PIPE_WIRE_CMD = "pactl"
_ATTEMPTS = 10
_RETRY_DELAY_MS = 500


class AudioManager(ABC):
    """Lists audio sinks and applies volume and default-sink settings."""

    @abstractmethod
    def get_audio_sinks(self, dry_run: bool) -> list[str]:
        """Return the names of every audio output sink."""

    @abstractmethod
    def set_audio_sinks_config(self, config: AudioSinksConfig, dry_run: bool) -> None:
        """Apply the audio part of a profile."""


def parse_sink_names(text: str) -> list[str]:
    """Return the sink names from ``pactl list short sinks`` output.

    The name is the second whitespace-separated field; lines with fewer
    than two fields are skipped.
    """
    return [
        fields[1]
        for fields in (line.split() for line in text.splitlines())
        if len(fields) >= 2
    ]


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _eprint(message: str) -> None:
    print(message, file=sys.stderr)


class PipeWireAudioManager(AudioManager):
    """Audio manager driven by ``pactl``."""

    def get_audio_sinks(self, dry_run: bool) -> list[str]:
        if dry_run:
            print(f"[DRY RUN] {PIPE_WIRE_CMD} list short sinks")
            return []
        return parse_sink_names(self._list_sinks())

    def set_audio_sinks_config(self, config: AudioSinksConfig, dry_run: bool) -> None:
        for sink in config.audio_sinks:
            if not self._apply_sink(sink, dry_run):
                raise AudioSinkError(
                    f"Failed to set sink with prefix '{sink.sink_name}' "
                    f"after {_ATTEMPTS} attempts"
                )

    def _apply_sink(self, sink: AudioConfig, dry_run: bool) -> bool:
        for _ in range(_ATTEMPTS):
            name = self._find_sink_by_prefix(sink.sink_name)
            if name is not None:
                if sink.default:
                    try:
                        self._set_default_sink(name, dry_run)
                    except AudioError as exc:
                        _eprint(f"Failed to set default sink '{name}': {exc}")
                    else:
                        print(f"Set default sink to '{name}'")
                try:
                    self._set_sink_volume(name, sink.volume, dry_run)
                except AudioError as exc:
                    _eprint(f"Failed to set volume for sink '{name}': {exc}")
                else:
                    print(f"Set volume for sink '{name}' to {sink.volume}%")
                    return True

            if dry_run:
                print(f"[DRY RUN] Waiting {_RETRY_DELAY_MS}ms")
            else:
                time.sleep(_RETRY_DELAY_MS / 1000)
        return False

    @staticmethod
    def _execute(args: Sequence[str]) -> CommandOutput:
        try:
            return run(PIPE_WIRE_CMD, args, False)
        except OSError as exc:
            raise AudioCommandError(str(exc)) from exc

    def _list_sinks(self) -> str:
        output = self._execute(["list", "short", "sinks"])
        if not output.success():
            raise AudioCommandError(_text(output.stderr))
        return _text(output.stdout)

    def _find_sink_by_prefix(self, prefix: str) -> Optional[str]:
        return next(
            (name for name in parse_sink_names(self._list_sinks()) if name.startswith(prefix)),
            None,
        )

    def _set_default_sink(self, sink_name: str, dry_run: bool) -> None:
        if dry_run:
            print(f"[DRY RUN] {PIPE_WIRE_CMD} set-default-sink {sink_name}")
            return
        output = self._execute(["set-default-sink", sink_name])
        if not output.success():
            raise AudioSinkError(_text(output.stderr))

    def _set_sink_volume(self, sink_name: str, volume: int, dry_run: bool) -> None:
        volume_str = f"{volume}%"
        if dry_run:
            print(f"[DRY RUN] {PIPE_WIRE_CMD} set-sink-volume {sink_name} {volume_str}")
            return
        output = self._execute(["set-sink-volume", sink_name, volume_str])
        if not output.success():
            raise AudioCommandError(_text(output.stderr))


def get_audio_manager() -> AudioManager:
    """Return the audio manager for the running system."""
    return PipeWireAudioManager()