"""Syntax checks on an input line and its tokens."""

from __future__ import annotations

from typing import Sequence

from minishell.lexer import Token, TokenType

_REDIRECTIONS = frozenset(
    {TokenType.REDIR_IN, TokenType.REDIR_OUT, TokenType.HEREDOC, TokenType.APPEND}
)


class ShellSyntaxError(Exception):
    """Raised when the input holds a token the grammar does not allow there."""

    def __init__(self, token: str) -> None:
        super().__init__(f"syntax error near unexpected token `{token}'")
        self.token = token


def check_unclosed_quotes(text: str) -> None:
    """Raise ShellSyntaxError if ``text`` leaves a quote open."""
    in_single = in_double = False
    for ch in text:
        if ch == '"' and not in_single:
            in_double = not in_double
        elif ch == "'" and not in_double:
            in_single = not in_single
    if in_single or in_double:
        raise ShellSyntaxError("newline")


def _check_redirection(current: Token, following: Token | None) -> None:
    if current.type not in _REDIRECTIONS:
        return
    if following is None:
        raise ShellSyntaxError("newline")
    if following.type is not TokenType.WORD:
        raise ShellSyntaxError(following.text)


def check_unexpected_token(tokens: Sequence[Token]) -> None:
    """Raise ShellSyntaxError on a misplaced pipe or redirection."""
    for index, current in enumerate(tokens):
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if (current.type is TokenType.REDIR_IN and following is not None
                and following.type is TokenType.REDIR_OUT):
            raise ShellSyntaxError("newline")
        if current.type is TokenType.PIPE and following is None:
            raise ShellSyntaxError("|")
        _check_redirection(current, following)
        if tokens[0].type is TokenType.PIPE:
            raise ShellSyntaxError("|")