"""Session configuration files: discovery, loading and parsing."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import yaml

from .errors import ConfigNotFoundError, ConfigParseError, SessionIOError

CONFIG_SUBDIR = ("", ".config", "tmuxsess")


@dataclass
class WindowLayout:
    """A window split into panes, with an optional tmux layout name."""

    panes: list[str]
    layout: str | None = None


@dataclass
class SimpleWindow:
    """A window given only as a command string."""

    command: str


@dataclass
class CommandWindows:
    """Windows given as a mapping of window name to command."""

    windows: dict[str, str] = field(default_factory=dict)


@dataclass
class LayoutWindows:
    """Windows given as a mapping of window name to pane layout."""

    windows: dict[str, WindowLayout] = field(default_factory=dict)


Window = Union[SimpleWindow, CommandWindows, LayoutWindows]


@dataclass
class Config:
    """A parsed session configuration."""

    name: str
    windows: list[Window]
    root: str | None = None


def _parse_layout(value: Any) -> WindowLayout | None:
    if not isinstance(value, dict):
        return None
    panes = value.get("panes")
    if not isinstance(panes, list) or not all(isinstance(p, str) for p in panes):
        return None
    layout = value.get("layout")
    if layout is not None and not isinstance(layout, str):
        return None
    return WindowLayout(panes=list(panes), layout=layout)


def parse_window(data: Any) -> Window:
    """Turn one entry of a ``windows`` list into a window description."""
    if isinstance(data, str):
        return SimpleWindow(data)
    if isinstance(data, dict) and all(isinstance(key, str) for key in data):
        if all(isinstance(value, str) for value in data.values()):
            return CommandWindows(dict(data))
        layouts = {name: _parse_layout(value) for name, value in data.items()}
        if all(layout is not None for layout in layouts.values()):
            return LayoutWindows(layouts)
    raise ConfigParseError("data did not match any variant of untagged enum WindowConfig")


def parse_config(text: str) -> Config:
    """Parse a configuration from YAML text."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigParseError(str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigParseError("invalid type: expected struct Config")
    for key in ("name", "windows"):
        if key not in data:
            raise ConfigParseError(f"missing field `{key}`")

    name = data["name"]
    if not isinstance(name, str):
        raise ConfigParseError("invalid type for field `name`: expected a string")
    root = data.get("root")
    if root is not None and not isinstance(root, str):
        raise ConfigParseError("invalid type for field `root`: expected a string")
    windows = data["windows"]
    if not isinstance(windows, list):
        raise ConfigParseError("invalid type for field `windows`: expected a sequence")

    return Config(name=name, root=root, windows=[parse_window(entry) for entry in windows])


def detect_session_name(path: str | os.PathLike[str] | None = None) -> str:
    """Return the basename of ``path``, or of the current directory when omitted."""
    directory = Path(path) if path is not None else Path.cwd()
    name = directory.name
    if name in ("", ".."):
        raise ConfigNotFoundError("Could not determine directory name")
    return name


def config_dir() -> Path:
    """Directory holding all session configuration files."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigNotFoundError("Could not find home directory") from exc
    return home.joinpath(*CONFIG_SUBDIR[1:])


def config_file_path(session_name: str) -> Path:
    """Path of the configuration file for ``session_name``."""
    return config_dir() / f"{session_name}.yml"


def load_config(session_name: str) -> Config:
    """Load the configuration for ``session_name`` from the configuration directory."""
    path = config_file_path(session_name)
    if not path.exists():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")
    return parse_config_file(path)


def parse_config_file(file_path: str | os.PathLike[str]) -> Config:
    """Read and parse a YAML configuration file."""
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SessionIOError(str(exc)) from exc
    return parse_config(text)