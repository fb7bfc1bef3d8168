"""Desktop notifications through ``notify-send``."""

from __future__ import annotations

from typing import Optional

from pioctl.errors import NotificationError
from pioctl.runner import run

NOTIFY_CMD = "notify-send"
_U32_LIMIT = 1 << 32


def _parse_u32(text: str) -> Optional[int]:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    value = int(digits)
    return value if value < _U32_LIMIT else None


class NotificationsManager:
    """Sends and updates desktop notifications."""

    def notify_update(
        self,
        title: str,
        body: str,
        replace_id: Optional[int] = None,
        expire_ms: Optional[int] = None,
        dry_run: bool = False,
    ) -> int:
        """Show or replace a notification and return its id.

        The notification is sent even in dry-run mode; the message is also
        printed then.
        """
        if dry_run:
            print(f"[DRY RUN] Notification: {title} | {body}")

        args = ["--print-id"]
        if replace_id is not None:
            args.append(f"--replace-id={replace_id}")
        if expire_ms is not None:
            args.append(f"--expire-time={expire_ms}")
        args += [title, body]

        try:
            output = run(NOTIFY_CMD, args, False)
        except OSError:
            raise NotificationError(f"Failed to execute command {NOTIFY_CMD}") from None

        if not output.success():
            raise NotificationError(f"Command {NOTIFY_CMD} failed for: {title} | {body}")

        id_str = output.stdout.decode("utf-8", errors="replace").strip()
        notification_id = _parse_u32(id_str)
        if notification_id is None:
            raise NotificationError(f"Failed to parse notification ID: {id_str}")
        return notification_id