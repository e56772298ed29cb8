"""Running parsed commands, alone or joined by pipes."""

from __future__ import annotations

import io
import os
import subprocess
import sys
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Iterator, Sequence, TextIO

from minishell.environment import Environment
from minishell.paths import CommandNotFound, configure_path
from minishell.shell_builtins import is_builtin, run_builtin

_OUTPUT_FILE_MODE = 0o642


@dataclass
class Command:
    """One command of a pipeline with its optional redirection."""

    args: list[str] = field(default_factory=list)
    redirect: str | None = None
    target: str | None = None


class RedirectionError(Exception):
    """Raised when a redirection file cannot be opened."""

    def __init__(self, path: str | None, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


def _open_output(op: str, target: str | None) -> TextIO:
    if not target:
        raise RedirectionError(target, "missing file name")
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if op.startswith(">>") else os.O_TRUNC
    try:
        fd = os.open(target, flags, _OUTPUT_FILE_MODE)
    except OSError as exc:
        raise RedirectionError(target, exc.strerror or str(exc)) from exc
    return os.fdopen(fd, "w", encoding="utf-8")


def _read_input(target: str | None) -> str:
    if not target:
        raise RedirectionError(target, "missing file name")
    try:
        with open(target, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        raise RedirectionError(target, exc.strerror or str(exc)) from exc


@contextmanager
def _subshell(env: Environment | None) -> Iterator[Environment]:
    """Give a builtin a private copy of the environment and working directory."""
    cwd = os.getcwd()
    try:
        yield Environment(replace(var) for var in (env or ()))
    finally:
        os.chdir(cwd)


def _file_target(out: TextIO) -> TextIO | None:
    try:
        out.fileno()
    except (OSError, ValueError, AttributeError):
        return None
    return out


def _run_external(args: list[str], env: Environment | None,
                  stdin_data: str | None, out: TextIO) -> int:
    try:
        path = configure_path(args[0], env)
    except CommandNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    direct = _file_target(out)
    if direct is not None:
        direct.flush()
    child_env = {var.key: var.value or "" for var in (env or ())}
    try:
        result = subprocess.run(
            args,
            executable=path,
            input=stdin_data,
            stdout=direct if direct is not None else subprocess.PIPE,
            env=child_env,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if direct is None and result.stdout:
        out.write(result.stdout)
    return result.returncode


def _run_stage(command: Command, env: Environment | None,
               stdin_data: str | None, out: TextIO) -> int:
    with ExitStack() as stack:
        op = command.redirect or ""
        if op.startswith(">"):
            out = stack.enter_context(_open_output(op, command.target))
        elif op.startswith("<"):
            stdin_data = _read_input(command.target)
        if not command.args:
            return 0
        if is_builtin(command.args[0]):
            with _subshell(env) as child_env:
                run_builtin(command.args, child_env, out)
            return 0
        return _run_external(command.args, env, stdin_data, out)


def run_single(command: Command, env: Environment | None,
               out: TextIO | None = None) -> int:
    """Run one command and return its exit status.

    Builtins run on a copy of the environment, so their changes do not last.
    """
    return _run_stage(command, env, None, sys.stdout if out is None else out)


def run_pipeline(commands: Sequence[Command], env: Environment | None,
                 out: TextIO | None = None) -> int:
    """Run commands joined by pipes; return the status of the last one."""
    sink_final = sys.stdout if out is None else out
    data: str | None = None
    status = 0
    for index, command in enumerate(commands):
        last = index == len(commands) - 1
        sink = sink_final if last else io.StringIO()
        status = _run_stage(command, env, data, sink)
        if not last:
            data = sink.getvalue()
    return status


def execute_command(commands: Sequence[Command], env: Environment | None,
                    out: TextIO | None = None) -> int:
    """Run a command list: a pipeline if it has several commands."""
    if not commands:
        return 0
    if len(commands) > 1:
        return run_pipeline(commands, env, out)
    return run_single(commands[0], env, out)