import pytest

from tmuxsess.config import parse_config
from tmuxsess.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    SessionError,
    SessionIOError,
    TmuxCommandError,
)


def test_config_not_found_error_display():
    error = ConfigNotFoundError("~/.config/tmuxsess/test.yml")
    assert str(error) == "Configuration file not found: ~/.config/tmuxsess/test.yml"


def test_tmux_error_display():
    error = TmuxCommandError("Session already exists")
    assert str(error) == "tmux command failed: Session already exists"


def test_yaml_error_conversion():
    with pytest.raises(ConfigParseError) as info:
        parse_config("invalid: yaml: content: {{")
    assert "Failed to parse YAML:" in str(info.value)


def test_io_error_display():
    error = SessionIOError("File not found")
    text = str(error)
    assert "IO error:" in text
    assert "File not found" in text


def test_error_repr():
    error = ConfigNotFoundError("test.yml")
    debug = repr(error)
    assert "ConfigNotFoundError" in debug
    assert "test.yml" in debug


@pytest.mark.parametrize(
    "cls", [ConfigNotFoundError, ConfigParseError, TmuxCommandError, SessionIOError]
)
def test_all_errors_share_base(cls):
    error = cls("detail")
    assert isinstance(error, SessionError)
    assert error.detail == "detail"
    assert str(error).endswith(": detail")