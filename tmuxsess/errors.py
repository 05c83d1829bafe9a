"""Exceptions raised by the session manager."""

from __future__ import annotations


class SessionError(Exception):
    """Base class for every error the session manager reports."""

    prefix = "Session error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class ConfigNotFoundError(SessionError):
    """A configuration file or the directory it depends on could not be found."""

    prefix = "Configuration file not found"


class ConfigParseError(SessionError):
    """A configuration file is not valid YAML or does not have the expected shape."""

    prefix = "Failed to parse YAML"


class TmuxCommandError(SessionError):
    """A tmux invocation failed or could not be started."""

    prefix = "tmux command failed"


class SessionIOError(SessionError):
    """Reading or listing files failed."""

    prefix = "IO error"