"""
sysx IO Module

Command execution, console input, environment-variable caching and file helpers.
"""

from .cmd import CommandResult, read_input, run, silent_run
from .env import (
    EnvCache,
    get_args,
    get_full_args,
    get_full_str_args,
    get_str_args,
)
from .fs import TextFile, get_dir_size, normalize_path

__all__ = [
    "CommandResult",
    "silent_run",
    "run",
    "read_input",
    "EnvCache",
    "get_args",
    "get_full_args",
    "get_full_str_args",
    "get_str_args",
    "TextFile",
    "normalize_path",
    "get_dir_size",
]
