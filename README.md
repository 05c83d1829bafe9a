# tmuxsess

A tmux session manager. All session configurations are kept together in
`~/.config/tmuxsess/`. You can start a session by running the command from
inside a project directory. The name of that directory selects the
configuration.

## Installation

```bash
pip install .
```

`tmux` must be on your `PATH`.

## Configuration

Each session has its own YAML file, `~/.config/tmuxsess/<name>.yml`:

```yaml
name: myproject
root: ~/code/myproject
windows:
  - editor: vim
  - server: rails server
  - main:
      layout: main-vertical
      panes:
        - vim src/main.rs
        - cargo watch -x run
```

- `name` and `windows` are required. `root` is optional.
- `root` is the working directory of every window and pane. A leading `~`
  and environment variables (`$VAR` or `${VAR}`) are expanded. If a
  variable is undefined, only the `~` is expanded. If `root` is left out,
  your home directory is used.
- A window entry of the form `name: command` opens a window with that name
  and types the command into it, followed by Enter. A blank command is not
  sent.
- A window entry that is a bare string opens a window named `window-<n>`,
  where `<n>` is the entry's position in the list, and types the string
  into it.
- A window entry with `panes` opens one pane for each item in the list,
  and there must be at least one item. The first item goes to the window's
  first pane. Each further item splits the window side by side and is
  typed into the new pane. If `layout` is given, it is then applied with
  `select-layout`.
- The first window reuses the window that tmux creates with the session.
  Windows and panes are numbered from 0.

## Usage

```bash
tmuxsess start myproject              # create the session and attach to it
tmuxsess start                        # take the session name from the current directory
tmuxsess start myproject --no-attach  # create the session without attaching
tmuxsess list                         # show the available configurations
tmuxsess stop myproject               # kill the session
tmuxsess --version
```

If the session already exists, `start` attaches to it. With `--no-attach`,
`start` only reports that the session already exists.

Attaching needs a terminal on standard input. Without one, `start` fails
with an error, even though the session may already have been created.

`list` reads every `.yml` and `.yaml` file in the configuration directory
and skips files that cannot be parsed. For each configuration it prints
the name, the root and the number of window entries.

If a command fails, the error is printed to standard error and the exit
status is 1.

## Library use

```python
from tmuxsess.session import SessionManager

manager = SessionManager(None)
print(manager.start_session_with_options("myproject", None, False, False))
for config in manager.list_configs(None):
    print(config.name, len(config.windows))
print(manager.stop_session("myproject"))
```

To run against a separate tmux server, give a socket path to
`SessionManager`. The second argument of `start_session_with_options` and
the argument of `list_configs` can name a directory to read configurations
from in place of the default one.

The modules of the package are:

- `tmuxsess.config`: parses configurations (`parse_config`,
  `parse_config_file`, `load_config`) and finds them (`config_dir`,
  `config_file_path`, `detect_session_name`).
- `tmuxsess.tmux`: `TmuxCommand`, together with one function for each
  tmux operation the manager uses.
- `tmuxsess.errors`: the exceptions. All of them derive from
  `SessionError`.

## Limitations

- `start --append` does not add windows to a running session. If the
  session already exists, it fails with "Append functionality not yet
  implemented". If the session does not exist yet, the flag has no effect.
- Windows can only be split side by side from a configuration. Vertical
  splits are available only through `tmuxsess.tmux.split_window_vertical`.