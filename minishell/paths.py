"""Locating the executable for a command name."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from minishell.lexer import split_words

if TYPE_CHECKING:
    from minishell.environment import Environment


class CommandNotFound(Exception):
    """Raised when no executable can be found for a command."""

    def __init__(self, cmd: str) -> None:
        super().__init__(f"Command not found: {cmd}")
        self.cmd = cmd


def get_cmd_path(cmd: str | None, env: Environment | None) -> str | None:
    """Search the PATH directories for the first word of ``cmd``."""
    if not cmd or env is None:
        return None
    search = env.lookup_prefix("PATH")
    if not search:
        return None
    words = split_words(cmd, " ")
    if not words:
        return None
    for directory in split_words(search, ":"):
        candidate = f"{directory}/{words[0]}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def configure_path(cmd: str, env: Environment | None) -> str:
    """Resolve ``cmd`` through PATH, or as an explicit executable path.

    Raises CommandNotFound when neither works.
    """
    found = get_cmd_path(cmd, env)
    if found is not None:
        return found
    if ((cmd.startswith("./") or cmd.startswith("/"))
            and os.access(cmd, os.F_OK) and os.access(cmd, os.X_OK)):
        return cmd
    raise CommandNotFound(cmd)