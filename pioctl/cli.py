"""Command-line entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from pioctl.audio import get_audio_manager
from pioctl.desktop import get_desktop_manager
from pioctl.dispatcher import Command, CommandName, Dispatcher
from pioctl.display import get_display_manager
from pioctl.notifications import NotificationsManager
from pioctl.profiles import ProfilesManager

_VERSION = "0.1.0"


def _delay(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid delay: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid delay: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every subcommand."""
    parser = argparse.ArgumentParser(prog="pioctl")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print commands without executing them"
    )
    sub = parser.add_subparsers(dest="command_name", metavar="COMMAND")
    sub.add_parser(
        CommandName.MONITORS.value,
        help="List all connected monitors and their current configuration",
    )
    sub.add_parser(
        CommandName.AUDIO_SINKS.value, help="List all available audio output sinks"
    )
    sub.add_parser(
        CommandName.PROFILES.value, help="List all profiles defined in the config directory"
    )
    sub.add_parser(CommandName.CURRENT.value, help="Show the currently active profile")
    restore = sub.add_parser(
        CommandName.RESTORE.value,
        help="Re-apply the current profile, with an optional delay before starting",
    )
    restore.add_argument("delay_ms", nargs="?", type=_delay, default=None)
    apply = sub.add_parser(
        CommandName.APPLY.value,
        help="Apply a specific profile by its ID (config filename stem)",
    )
    apply.add_argument("profile_id")
    sub.add_parser(
        CommandName.APPLY_NEXT.value,
        help="Apply the next profile in alphabetical order, cycling back to the first",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse ``argv`` into ``dry_run`` and ``command`` (a Command or None)."""
    namespace = build_parser().parse_args(argv)
    command = None
    if namespace.command_name is not None:
        command = Command(
            name=CommandName(namespace.command_name),
            delay_ms=getattr(namespace, "delay_ms", None),
            profile_id=getattr(namespace, "profile_id", None),
        )
    return argparse.Namespace(dry_run=namespace.dry_run, command=command)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; exits with status 1 when no command is given."""
    args = parse_args(argv)
    dispatcher = Dispatcher(
        args.dry_run,
        get_display_manager(),
        get_audio_manager(),
        get_desktop_manager(),
        ProfilesManager(),
        NotificationsManager(),
    )
    dispatcher.handle_command(args.command)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())