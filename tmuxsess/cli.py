"""Command line interface for starting, listing and stopping tmux sessions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .errors import SessionError
from .session import SessionManager

PROG = "tmuxsess"
VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its ``start``, ``list`` and ``stop`` commands."""
    parser = argparse.ArgumentParser(prog=PROG, description="A modern tmux session manager")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    start = commands.add_parser(
        "start", help="Start a tmux session", description="Start a tmux session"
    )
    start.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Session name (optional, detects from directory if not provided)",
    )
    start.add_argument(
        "--attach",
        action="store_true",
        default=True,
        help="Attach to session after creation or to existing session",
    )
    start.add_argument(
        "--no-attach",
        action="store_true",
        default=False,
        help="Do not attach to session (overrides --attach)",
    )
    start.add_argument(
        "--append",
        action="store_true",
        default=False,
        help="Add windows to existing session instead of creating new one",
    )

    commands.add_parser(
        "list",
        help="List available session configurations",
        description="List available session configurations",
    )

    stop = commands.add_parser(
        "stop", help="Stop a tmux session", description="Stop a tmux session"
    )
    stop.add_argument("name", help="Session name to stop")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments; ``argv`` excludes the program name."""
    return build_parser().parse_args(argv)


def _run(args: argparse.Namespace, manager: SessionManager) -> None:
    if args.command == "start":
        should_attach = False if args.no_attach else args.attach
        print(
            manager.start_session_with_options(
                args.name, None, attach=should_attach, append=args.append
            )
        )
    elif args.command == "list":
        configs = manager.list_configs()
        if not configs:
            print("No configurations found")
            return
        print("Available configurations:")
        for config in configs:
            root = config.root if config.root is not None else "~"
            print(f"  {config.name} - {root} ({len(config.windows)} windows)")
    elif args.command == "stop":
        print(manager.stop_session(args.name))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the process exit status."""
    args = parse_args(argv)
    try:
        _run(args, SessionManager())
    except SessionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())