"""Start, list and stop tmux sessions described by centrally stored YAML configurations."""

__version__ = "0.1.1"

__all__ = ["cli", "config", "errors", "session", "tmux"]