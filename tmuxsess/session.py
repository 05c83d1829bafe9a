"""Starting, listing and stopping tmux sessions described by configuration files."""

from __future__ import annotations

import os
import re
from pathlib import Path

from . import tmux
from .config import (
    CommandWindows,
    Config,
    LayoutWindows,
    SimpleWindow,
    WindowLayout,
    detect_session_name,
    load_config,
    parse_config_file,
)
from .config import config_dir as default_config_dir
from .errors import SessionError, SessionIOError, TmuxCommandError

_ENV_VAR = re.compile(r"\$\{(\w+)\}|\$(\w+)")


def _expand_tilde(path: str) -> str:
    if path == "~" or path.startswith("~/"):
        try:
            home = str(Path.home())
        except (RuntimeError, KeyError):
            return path
        return home + path[1:]
    return path


def _expand_env(path: str) -> str | None:
    """Substitute environment variables, or return None if one is undefined."""
    missing = False

    def substitute(match: re.Match[str]) -> str:
        nonlocal missing
        name = match.group(1) or match.group(2)
        value = os.environ.get(name)
        if value is None:
            missing = True
            return match.group(0)
        return value

    expanded = _ENV_VAR.sub(substitute, path)
    return None if missing else expanded


def expand_path(path: str) -> Path:
    """Expand a leading ``~`` and environment variables in ``path``.

    When a referenced variable is undefined only the tilde is expanded.
    """
    tilde_expanded = _expand_tilde(path)
    fully_expanded = _expand_env(tilde_expanded)
    return Path(fully_expanded if fully_expanded is not None else tilde_expanded)


class SessionManager:
    """Creates and manages tmux sessions, optionally on a dedicated server socket."""

    def __init__(self, socket_path: str | os.PathLike[str] | None = None) -> None:
        self.socket_path = Path(socket_path) if socket_path is not None else None

    def start_session(
        self,
        name: str | None = None,
        config_dir: str | os.PathLike[str] | None = None,
    ) -> str:
        """Start a session and attach to it."""
        return self.start_session_with_options(name, config_dir, attach=True, append=False)

    def start_session_with_options(
        self,
        name: str | None = None,
        config_dir: str | os.PathLike[str] | None = None,
        attach: bool = True,
        append: bool = False,
    ) -> str:
        """Start a session, returning a message describing what happened."""
        session_name = name if name is not None else detect_session_name()

        if tmux.session_exists(session_name, self.socket_path):
            if append:
                raise TmuxCommandError("Append functionality not yet implemented")
            if attach:
                try:
                    tmux.attach_session(session_name, self.socket_path)
                except SessionError as exc:
                    raise TmuxCommandError(
                        f"Failed to attach to session '{session_name}': {exc}"
                    ) from exc
                return f"Attached to existing session '{session_name}'"
            return f"Session '{session_name}' already exists"

        if config_dir is not None:
            config = parse_config_file(Path(config_dir) / f"{session_name}.yml")
        else:
            config = load_config(session_name)

        root_path = expand_path(config.root or "~")
        tmux.new_session(session_name, root_path, self.socket_path)
        tmux.set_base_index(session_name, self.socket_path)
        tmux.set_pane_base_index(session_name, self.socket_path)

        self._create_windows(session_name, config, root_path)

        if attach:
            try:
                tmux.attach_session(session_name, self.socket_path)
            except SessionError as exc:
                raise TmuxCommandError(
                    f"Started session '{session_name}' but failed to attach: {exc}"
                ) from exc
            return f"Started and attached to session '{session_name}'"
        return f"Started detached session '{session_name}'"

    def _create_windows(self, session_name: str, config: Config, root_path: Path) -> None:
        for index, window in enumerate(config.windows):
            if isinstance(window, SimpleWindow):
                window_name = f"window-{index}"
                self._open_window(session_name, window_name, index == 0, root_path)
                self._send_command(session_name, window_name, window.command)
            elif isinstance(window, CommandWindows):
                for position, (window_name, command) in enumerate(window.windows.items()):
                    first = index == 0 and position == 0
                    self._open_window(session_name, window_name, first, root_path)
                    self._send_command(session_name, window_name, command)
            elif isinstance(window, LayoutWindows):
                for position, (window_name, layout) in enumerate(window.windows.items()):
                    first = index == 0 and position == 0
                    self._open_window(session_name, window_name, first, root_path)
                    self._build_panes(session_name, window_name, layout, root_path)

    def _open_window(
        self, session_name: str, window_name: str, first: bool, root_path: Path
    ) -> None:
        if first:
            initial = tmux.first_window_index(session_name, self.socket_path)
            tmux.rename_window(session_name, initial, window_name, self.socket_path)
        else:
            tmux.new_window(session_name, window_name, None, root_path, self.socket_path)

    def _send_command(self, session_name: str, window_name: str, command: str) -> None:
        if command.strip():
            tmux.send_keys(session_name, window_name, command, self.socket_path)

    def _build_panes(
        self,
        session_name: str,
        window_name: str,
        layout: WindowLayout,
        root_path: Path,
    ) -> None:
        if not layout.panes:
            raise TmuxCommandError("Window layout must have at least one pane")
        first_pane, *other_panes = layout.panes
        if first_pane.strip():
            tmux.send_keys_to_pane(session_name, window_name, 0, first_pane, self.socket_path)

        for pane_index, pane_command in enumerate(other_panes, start=1):
            tmux.split_window_horizontal(
                session_name, window_name, "", root_path, self.socket_path
            )
            if pane_command.strip():
                tmux.send_keys_to_pane(
                    session_name, window_name, pane_index, pane_command, self.socket_path
                )

        if layout.layout is not None:
            tmux.select_layout(session_name, window_name, layout.layout, self.socket_path)

    def start_session_from_directory(
        self,
        directory: str | os.PathLike[str],
        config_dir: str | os.PathLike[str] | None = None,
    ) -> str:
        """Start the session named after ``directory``."""
        return self.start_session(detect_session_name(directory), config_dir)

    def list_configs(self, config_dir: str | os.PathLike[str] | None = None) -> list[Config]:
        """Parse every YAML configuration in the directory, skipping invalid files."""
        search_dir = Path(config_dir) if config_dir is not None else default_config_dir()
        if not search_dir.exists():
            return []

        try:
            entries = sorted(search_dir.iterdir())
        except OSError as exc:
            raise SessionIOError(str(exc)) from exc

        configs = []
        for path in entries:
            if not (path.is_file() and path.suffix in (".yml", ".yaml")):
                continue
            try:
                configs.append(parse_config_file(path))
            except SessionError:
                continue
        return configs

    def stop_session(self, name: str) -> str:
        """Kill a running session."""
        if not tmux.session_exists(name, self.socket_path):
            raise TmuxCommandError(f"Session '{name}' does not exist")
        tmux.kill_session(name, self.socket_path)
        return f"Stopped session '{name}'"