[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmuxsess"
version = "0.1.1"
description = "A tmux session manager with centralized YAML configuration and directory-aware session detection."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["tmux", "session", "manager", "terminal", "yaml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tmuxsess = "tmuxsess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tmuxsess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
