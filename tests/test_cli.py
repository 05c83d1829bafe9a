import os
import uuid

import pytest

from tmuxsess.cli import build_parser, main, parse_args


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def _unique(prefix):
    return f"{prefix}-{os.getpid()}-{uuid.uuid4().hex[:8]}"


def test_parse_start_command_with_name():
    args = parse_args(["start", "my-session"])
    assert args.command == "start"
    assert args.name == "my-session"
    assert args.attach is True
    assert args.no_attach is False
    assert args.append is False


def test_parse_start_command_without_name():
    args = parse_args(["start"])
    assert args.command == "start"
    assert args.name is None
    assert args.attach is True
    assert args.no_attach is False
    assert args.append is False


def test_parse_start_command_with_no_attach():
    args = parse_args(["start", "--no-attach"])
    assert args.name is None
    assert args.attach is True
    assert args.no_attach is True
    assert args.append is False


def test_parse_start_command_with_append():
    args = parse_args(["start", "my-session", "--append"])
    assert args.name == "my-session"
    assert args.attach is True
    assert args.no_attach is False
    assert args.append is True


def test_parse_list_command():
    args = parse_args(["list"])
    assert args.command == "list"


def test_parse_stop_command():
    args = parse_args(["stop", "my-session"])
    assert args.command == "stop"
    assert args.name == "my-session"


def test_parse_start_with_all_flags():
    args = parse_args(["start", "test-session", "--attach", "--no-attach", "--append"])
    assert args.name == "test-session"
    assert args.attach is True
    assert args.no_attach is True
    assert args.append is True


def test_command_is_required():
    with pytest.raises(SystemExit) as excinfo:
        parse_args([])
    assert excinfo.value.code == 2


def test_stop_requires_name():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["stop"])
    assert excinfo.value.code == 2


def test_cli_help_displays(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "A modern tmux session manager" in capsys.readouterr().out


def test_start_command_exists(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["start", "--help"])
    assert excinfo.value.code == 0
    assert "Start a tmux session" in capsys.readouterr().out


def test_list_command_exists(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["list", "--help"])
    assert excinfo.value.code == 0
    assert "List available session configurations" in capsys.readouterr().out


def test_stop_command_exists(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["stop", "--help"])
    assert excinfo.value.code == 0
    assert "Stop a tmux session" in capsys.readouterr().out


def test_start_command_shows_attach_flags():
    help_text = build_parser()._subparsers._group_actions[0].choices["start"].format_help()
    assert "--attach" in help_text
    assert "--no-attach" in help_text
    assert "--append" in help_text


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "0.1.0" in capsys.readouterr().out


def test_start_with_no_attach_flag_without_config(home, capsys):
    status = main(["start", _unique("nonexistent-session"), "--no-attach"])
    assert status == 1
    assert "Configuration file not found" in capsys.readouterr().err


def test_start_with_append_flag_without_config(home, capsys):
    status = main(["start", _unique("nonexistent-session"), "--append"])
    assert status == 1
    assert "Configuration file not found" in capsys.readouterr().err


def test_list_without_config_directory(home, capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out.strip() == "No configurations found"


def test_list_command(home, capsys):
    config_dir = home / ".config" / "tmuxsess"
    config_dir.mkdir(parents=True)
    for name in ("web-app", "api-server", "data-pipeline"):
        (config_dir / f"{name}.yml").write_text(
            f'name: {name}\nroot: ~/projects/{name}\nwindows:\n  - main: echo "Starting {name}"\n'
        )
    (config_dir / "no-root.yaml").write_text(
        "name: no-root\nwindows:\n  - editor: vim\n  - server: make run\n"
    )
    (config_dir / "broken.yml").write_text("invalid yaml content {{{")
    (config_dir / "notes.txt").write_text("not a config")

    assert main(["list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Available configurations:"
    assert sorted(lines[1:]) == sorted(
        [
            "  web-app - ~/projects/web-app (1 windows)",
            "  api-server - ~/projects/api-server (1 windows)",
            "  data-pipeline - ~/projects/data-pipeline (1 windows)",
            "  no-root - ~ (2 windows)",
        ]
    )


def test_stop_nonexistent_session(home, capsys):
    name = _unique("definitely-does-not-exist")
    assert main(["stop", name]) == 1
    err = capsys.readouterr().err
    assert f"Session '{name}' does not exist" in err
    assert err.startswith("Error: ")