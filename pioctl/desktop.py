"""Placing and activating workspaces through the Hyprland compositor."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pioctl.errors import DesktopError
from pioctl.models import DesktopConfig
from pioctl.runner import CommandOutput, run

HYPRLAND_CMD = "hyprctl"


class DesktopManager(ABC):
    """Moves workspaces to monitors and activates them."""

    @abstractmethod
    def dispatch_desktops(self, desktop_config: DesktopConfig, dry_run: bool) -> None:
        """Apply a workspace layout."""


class HyprlandDesktopManager(DesktopManager):
    """Desktop manager driven by ``hyprctl dispatch``."""

    def dispatch_desktops(self, desktop_config: DesktopConfig, dry_run: bool) -> None:
        for workspace in desktop_config.workspaces:
            self._activate_workspace(workspace.index, dry_run)
            self._move_workspace_to_monitor(
                workspace.index, workspace.monitor_name, dry_run
            )

        active = sorted(
            (ws for ws in desktop_config.workspaces if ws.active),
            key=lambda ws: ws.focused,
        )
        for workspace in active:
            self._focus_monitor(workspace.monitor_name, dry_run)
            self._activate_workspace(workspace.index, dry_run)

    @staticmethod
    def _dispatch(args: list[str], action: str, dry_run: bool) -> CommandOutput:
        try:
            output = run(HYPRLAND_CMD, ["dispatch", *args], dry_run)
        except OSError as exc:
            raise DesktopError(
                f"Failed to execute command to {action}: {exc}"
            ) from exc
        if not output.success():
            detail = output.stdout.decode("utf-8", errors="replace").strip()
            raise DesktopError(f"Failed to {action}: {detail}")
        return output

    def _activate_workspace(self, index: str, dry_run: bool) -> CommandOutput:
        return self._dispatch(
            ["workspace", index], f"activate workspace {index}", dry_run
        )

    def _focus_monitor(self, monitor_name: str, dry_run: bool) -> CommandOutput:
        return self._dispatch(
            ["focusmonitor", monitor_name], f"focus monitor {monitor_name}", dry_run
        )

    def _move_workspace_to_monitor(
        self, index: str, monitor_name: str, dry_run: bool
    ) -> CommandOutput:
        return self._dispatch(
            ["moveworkspacetomonitor", index, monitor_name],
            f"move workspace {index} to monitor {monitor_name}",
            dry_run,
        )


def get_desktop_manager() -> DesktopManager:
    """Return the desktop manager for the running desktop."""
    return HyprlandDesktopManager()