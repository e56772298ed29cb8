"""Commands the shell carries out itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO

from minishell.environment import Environment, is_valid_identifier, split_key_value

_BUILTIN_NAMES = ("echo", "cd", "pwd", "export", "unset", "env", "exit")


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def is_builtin(name: str | None) -> str | None:
    """Return the builtin that ``name`` starts with, or None for other commands."""
    if not name:
        return None
    return next((builtin for builtin in _BUILTIN_NAMES if name.startswith(builtin)), None)


def echo(args: Sequence[str], out: TextIO | None = None) -> None:
    """Print the arguments separated by spaces.

    A first argument starting with ``-n`` is dropped and the line is
    then ended with a newline; otherwise no newline is written.
    """
    stream = _stream(out)
    words = list(args[1:])
    newline = bool(words) and words[0].startswith("-n")
    if newline:
        words = words[1:]
    stream.write(" ".join(words))
    if newline:
        stream.write("\n")


def cd(args: Sequence[str], out: TextIO | None = None) -> int:
    """Change the working directory to ``args[1]``."""
    if len(args) < 2:
        _stream(out).write("cd: path required\n")
        return 0
    try:
        os.chdir(args[1])
    except OSError as exc:
        print(f"cd: {exc.strerror}", file=sys.stderr)
    return 0


def pwd(out: TextIO | None = None) -> None:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        print(f"getcwd() error: {exc.strerror}", file=sys.stderr)
        return
    _stream(out).write(f"{cwd}\n")


def env(environment: Environment, out: TextIO | None = None) -> None:
    """Print every variable as ``KEY=VALUE``, or ``KEY`` when it has no value."""
    stream = _stream(out)
    for var in environment:
        if var.value is not None:
            stream.write(f"{var.key}={var.value}\n")
        else:
            stream.write(f"{var.key}\n")


def export(environment: Environment, args: Sequence[str], out: TextIO | None = None) -> None:
    """Export ``KEY=VALUE`` or ``KEY`` arguments; with none, list the variables."""
    stream = _stream(out)
    if len(args) < 2:
        for var in environment:
            if not var.value:
                stream.write(f"declare -x {var.key}\n")
            else:
                stream.write(f'declare -x {var.key}="{var.value}"\n')
        return
    for arg in args[1:]:
        pair = split_key_value(arg)
        key, value = pair if pair is not None else (arg, None)
        if not is_valid_identifier(key):
            stream.write(f"export: `{key}{value or ''}`: not a valid identifier\n")
            continue
        environment.export(key, value)


def unset(environment: Environment, args: Sequence[str], out: TextIO | None = None) -> None:
    """Remove the named variables from the environment."""
    stream = _stream(out)
    for name in args[1:]:
        if not is_valid_identifier(name):
            stream.write(f"unset: `{name}`: not a valid identifier\n")
            continue
        environment.unset(name)


def run_builtin(args: Sequence[str], environment: Environment,
                out: TextIO | None = None) -> bool:
    """Run ``args`` as a builtin; return False when it is not one."""
    name = is_builtin(args[0]) if args else None
    if name is None:
        return False
    if name == "echo":
        echo(args, out)
    elif name == "cd":
        cd(args, out)
    elif name == "pwd":
        pwd(out)
    elif name == "export":
        export(environment, args, out)
    elif name == "unset":
        unset(environment, args, out)
    elif name == "env":
        env(environment, out)
    return True