"""Expansion of ``$`` references in words and here-document lines."""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minishell.environment import Environment

DEFAULT_EXIT_STATUS = 0

_ALPHA = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_NAME = _ALNUM | {"_"}


def detect_quotes(text: str, any_quote: bool) -> bool:
    """Whether ``text`` holds a quote; only single quotes count unless ``any_quote``."""
    quotes = "\"'" if any_quote else "'"
    return any(ch in quotes for ch in text)


def _expand_dollar(text: str, i: int, env: Environment | None,
                   exit_status: int) -> tuple[str, int]:
    """Expand the reference after the ``$`` at ``text[i - 1]``.

    Returns the replacement and the index just past what was consumed.
    """
    nxt = text[i] if i < len(text) else ""
    if nxt == "$":
        return "@", i + 1
    if nxt not in _ALNUM and nxt != "?":
        return "$", i
    if nxt == "?":
        return str(exit_status), i + 1
    if nxt in _ALPHA:
        end = i
        while end < len(text) and text[end] in _NAME:
            end += 1
        name = text[i:end]
        value = env.lookup_prefix(name) if env is not None else None
        return value or "", end
    return nxt, i + 1


def expand(text: str, env: Environment | None,
           exit_status: int = DEFAULT_EXIT_STATUS) -> str:
    """Expand variables in a word and strip its quotes.

    Nothing inside single quotes is expanded.
    """
    out: list[str] = []
    in_single = in_double = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"' and not in_single:
            in_double = not in_double
            i += 1
        elif ch == "'" and not in_double:
            in_single = not in_single
            i += 1
        elif ch == "$" and not in_single:
            piece, i = _expand_dollar(text, i + 1, env, exit_status)
            out.append(piece)
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def expand_heredoc(text: str, quoted: bool, env: Environment | None,
                   exit_status: int = DEFAULT_EXIT_STATUS) -> str:
    """Expand a here-document line; a quoted delimiter leaves it unchanged.

    Quotes in the line are kept as they are.
    """
    if quoted:
        return text
    out: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == "$":
            piece, i = _expand_dollar(text, i + 1, env, exit_status)
            out.append(piece)
        else:
            out.append(text[i])
            i += 1
    return "".join(out)