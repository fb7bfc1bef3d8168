"""Running external commands, with an optional dry-run mode."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class CommandOutput:
    """Exit code and captured output of a finished command."""

    returncode: int = 0
    stdout: bytes = b""
    stderr: bytes = b""

    def success(self) -> bool:
        return self.returncode == 0


def run(command: str, args: Sequence[str], dry_run: bool) -> CommandOutput:
    """Run ``command`` with ``args`` and capture its output.

    In dry-run mode the command line is printed and an empty successful
    result is returned. Raises OSError if the command cannot be started.
    """
    if dry_run:
        print(f"[DRY RUN] {command} {' '.join(args)}")
        return CommandOutput()
    completed = subprocess.run([command, *args], capture_output=True, check=False)
    return CommandOutput(completed.returncode, completed.stdout, completed.stderr)