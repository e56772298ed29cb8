"""Splitting an input line into typed tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from minishell.expand import expand

if TYPE_CHECKING:
    from minishell.environment import Environment

_QUOTES = "\"'"
_DOUBLE_OPERATORS = ("<<", ">>")
_SINGLE_OPERATORS = "|<>"


class TokenType(IntEnum):
    """Kind of a lexical token."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    HEREDOC = 4
    APPEND = 5


_OPERATOR_TYPES = {
    "|": TokenType.PIPE,
    "<": TokenType.REDIR_IN,
    ">": TokenType.REDIR_OUT,
    "<<": TokenType.HEREDOC,
    ">>": TokenType.APPEND,
}


def define_token_type(text: str) -> TokenType:
    """Return the token type of ``text``: an operator or a plain word."""
    return _OPERATOR_TYPES.get(text, TokenType.WORD)


@dataclass
class Token:
    """A word or operator from the input line."""

    text: str
    type: TokenType = TokenType.WORD

    @classmethod
    def from_text(cls, text: str) -> Token:
        """Create a token whose type follows from its text."""
        return cls(text, define_token_type(text))


def add_space_inputs(text: str) -> str:
    """Surround every unquoted ``|``, ``<``, ``>``, ``<<`` and ``>>`` with spaces."""
    out: list[str] = []
    quote_char = ""
    i = 0
    while i < len(text):
        ch = text[i]
        if not quote_char and ch in _QUOTES:
            quote_char = ch
            out.append(ch)
            i += 1
        elif quote_char and ch == quote_char:
            quote_char = ""
            out.append(ch)
            i += 1
        elif not quote_char and text[i:i + 2] in _DOUBLE_OPERATORS:
            out.append(f" {text[i:i + 2]} ")
            i += 2
        elif not quote_char and ch in _SINGLE_OPERATORS:
            out.append(f" {ch} ")
            i += 1
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _word_end(text: str, start: int, sep: str) -> int:
    """Index just past the word starting at ``start``; quoted parts never end it."""
    i = start
    while i < len(text) and text[i] != sep:
        if text[i] in _QUOTES:
            close = text.find(text[i], i + 1)
            i = len(text) if close == -1 else close + 1
        else:
            i += 1
    return i


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, keeping quoted sections (quotes included) whole."""
    words: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == sep:
            i += 1
            continue
        end = _word_end(text, i, sep)
        words.append(text[i:end])
        i = end
    return words


def tokenize(text: str, env: Environment | None) -> list[Token]:
    """Turn an input line into tokens, expanding words that hold a ``$``."""
    tokens = [Token.from_text(word)
              for word in split_words(add_space_inputs(text), " ")]
    for token in tokens:
        if token.type is TokenType.WORD and "$" in token.text:
            token.text = expand(token.text, env)
    return tokens