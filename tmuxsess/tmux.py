"""Thin wrapper around the ``tmux`` command line client."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Union

from .errors import TmuxCommandError

PathLike = Union[str, "os.PathLike[str]"]

NO_TTY_MESSAGE = (
    "Failed to attach: No TTY available "
    "(running in non-interactive environment like Docker)"
)


def _path_str(path: PathLike) -> str:
    return str(os.fspath(path))


class TmuxCommand:
    """A tmux invocation built up argument by argument.

    ``arg`` and ``socket`` return the command itself so calls can be chained.
    """

    def __init__(self, socket_path: PathLike | None = None) -> None:
        self.args: list[str] = []
        self.socket_path: str | None = (
            _path_str(socket_path) if socket_path is not None else None
        )

    def socket(self, socket_path: PathLike) -> TmuxCommand:
        """Run against the tmux server listening on ``socket_path``."""
        self.socket_path = _path_str(socket_path)
        return self

    def arg(self, arg: object) -> TmuxCommand:
        """Append one argument."""
        self.args.append(str(arg))
        return self

    def argv(self) -> list[str]:
        """The full argument vector, starting with ``tmux``."""
        prefix = ["tmux"]
        if self.socket_path is not None:
            prefix += ["-S", self.socket_path]
        return prefix + self.args

    def execute(self) -> str:
        """Run the command non-interactively and return its standard output."""
        try:
            result = subprocess.run(self.argv(), capture_output=True, check=False)
        except OSError as exc:
            raise TmuxCommandError(f"Failed to execute tmux: {exc}") from exc
        if result.returncode != 0:
            raise TmuxCommandError(result.stderr.decode("utf-8", errors="replace"))
        return result.stdout.decode("utf-8", errors="replace")

    def execute_interactive(self) -> None:
        """Run the command attached to the current terminal."""
        if not is_tty_available():
            raise TmuxCommandError(NO_TTY_MESSAGE)
        try:
            result = subprocess.run(self.argv(), check=False)
        except OSError as exc:
            raise TmuxCommandError(f"Failed to execute tmux: {exc}") from exc
        if result.returncode != 0:
            code = result.returncode if result.returncode > 0 else -1
            raise TmuxCommandError(f"tmux command failed with exit code: {code}")

    def __repr__(self) -> str:
        return f"TmuxCommand(args={self.args!r}, socket_path={self.socket_path!r})"


def is_tty_available() -> bool:
    """Whether standard input is a terminal."""
    stdin = sys.stdin
    if stdin is None:
        return False
    try:
        return bool(stdin.isatty())
    except (ValueError, OSError):
        return False


def window_target(session_name: str, window_name: str) -> str:
    """Target string addressing a window of a session."""
    return f"{session_name}:{window_name}"


def pane_target(session_name: str, window_name: str, pane_index: int) -> str:
    """Target string addressing a pane of a window."""
    return f"{session_name}:{window_name}.{pane_index}"


def _optional_window_target(session_name: str, window_name: str) -> str:
    return window_target(session_name, window_name) if window_name else session_name


def _command(socket_path: PathLike | None, *args: object) -> TmuxCommand:
    command = TmuxCommand(socket_path)
    for item in args:
        command.arg(item)
    return command


def session_exists(session_name: str, socket_path: PathLike | None = None) -> bool:
    """Whether a session of that name exists on the server."""
    try:
        _command(socket_path, "has-session", "-t", session_name).execute()
    except TmuxCommandError:
        return False
    return True


def new_session(
    session_name: str, working_dir: PathLike, socket_path: PathLike | None = None
) -> str:
    """Create a detached session starting in ``working_dir``."""
    return _command(
        socket_path, "new-session", "-d", "-s", session_name, "-c", _path_str(working_dir)
    ).execute()


def set_base_index(session_name: str, socket_path: PathLike | None = None) -> str:
    """Number windows of the session from 0."""
    return _command(
        socket_path, "set-option", "-t", session_name, "base-index", "0"
    ).execute()


def set_pane_base_index(session_name: str, socket_path: PathLike | None = None) -> str:
    """Number panes of the session from 0."""
    return _command(
        socket_path, "set-option", "-t", session_name, "pane-base-index", "0"
    ).execute()


def first_window_index(session_name: str, socket_path: PathLike | None = None) -> str:
    """Index of the first window in the session, as tmux prints it."""
    output = _command(
        socket_path, "list-windows", "-t", session_name, "-F", "#{window_index}"
    ).execute()
    lines = output.splitlines()
    if not lines:
        raise TmuxCommandError("No windows found in session")
    return lines[0].strip()


def rename_window(
    session_name: str,
    window_target: str,
    new_name: str,
    socket_path: PathLike | None = None,
) -> str:
    """Rename the window ``window_target`` of the session."""
    target = f"{session_name}:{window_target}"
    return _command(socket_path, "rename-window", "-t", target, new_name).execute()


def new_window(
    session_name: str,
    window_name: str,
    command: str | None = None,
    working_dir: PathLike | None = None,
    socket_path: PathLike | None = None,
) -> str:
    """Create a named window, optionally in a directory and running a command."""
    cmd = _command(socket_path, "new-window", "-t", session_name, "-n", window_name)
    if working_dir is not None:
        cmd.arg("-c").arg(_path_str(working_dir))
    if command is not None:
        cmd.arg(command)
    return cmd.execute()


def send_keys(
    session_name: str, window_name: str, keys: str, socket_path: PathLike | None = None
) -> str:
    """Type ``keys`` followed by Enter into a window."""
    target = window_target(session_name, window_name)
    return _command(socket_path, "send-keys", "-t", target, keys, "Enter").execute()


def send_keys_to_pane(
    session_name: str,
    window_name: str,
    pane_index: int,
    keys: str,
    socket_path: PathLike | None = None,
) -> str:
    """Type ``keys`` followed by Enter into one pane of a window."""
    target = pane_target(session_name, window_name, pane_index)
    return _command(socket_path, "send-keys", "-t", target, keys, "Enter").execute()


def kill_session(session_name: str, socket_path: PathLike | None = None) -> str:
    """Kill a session."""
    return _command(socket_path, "kill-session", "-t", session_name).execute()


def _split_window(
    flag: str,
    session_name: str,
    window_name: str,
    command: str,
    working_dir: PathLike | None,
    socket_path: PathLike | None,
) -> str:
    cmd = _command(
        socket_path,
        "split-window",
        flag,
        "-t",
        _optional_window_target(session_name, window_name),
    )
    if working_dir is not None:
        cmd.arg("-c").arg(_path_str(working_dir))
    if command.strip():
        cmd.arg(command)
    return cmd.execute()


def split_window_horizontal(
    session_name: str,
    window_name: str,
    command: str = "",
    working_dir: PathLike | None = None,
    socket_path: PathLike | None = None,
) -> str:
    """Split a window side by side; a blank command leaves the shell to start."""
    return _split_window("-h", session_name, window_name, command, working_dir, socket_path)


def split_window_vertical(
    session_name: str,
    window_name: str,
    command: str = "",
    working_dir: PathLike | None = None,
    socket_path: PathLike | None = None,
) -> str:
    """Split a window above and below; a blank command leaves the shell to start."""
    return _split_window("-v", session_name, window_name, command, working_dir, socket_path)


def select_layout(
    session_name: str,
    window_name: str,
    layout: str,
    socket_path: PathLike | None = None,
) -> str:
    """Apply a tmux layout to a window."""
    target = _optional_window_target(session_name, window_name)
    return _command(socket_path, "select-layout", "-t", target, layout).execute()


def attach_session(session_name: str, socket_path: PathLike | None = None) -> None:
    """Attach the current terminal to a session."""
    _command(socket_path, "attach-session", "-t", session_name).execute_interactive()


def kill_server(socket_path: PathLike | None = None) -> str:
    """Kill the tmux server."""
    return _command(socket_path, "kill-server").execute()