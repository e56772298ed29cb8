"""Interactive front end that asks for commands piece by piece and runs them."""

from __future__ import annotations

import os
import sys
from typing import Callable, Sequence

from minishell.environment import fill_env
from minishell.executor import Command, RedirectionError, execute_command

PromptInput = Callable[[str], "str | None"]

_REDIRECTIONS = ("<", ">", ">>", "<<")


def _prompt(text: str) -> str | None:
    """Read one line; None at end of input."""
    try:
        return input(text)
    except EOFError:
        print("exit")
        return None


def read_command(prompt_input: PromptInput | None = None) -> list[str] | None:
    """Ask for a command and its arguments; None at end of input."""
    ask = prompt_input or _prompt
    name = ask("Command (e.g. ls): ")
    if name is None:
        return None
    args = [name]
    while True:
        arg = ask(f"Argument #{len(args)} (or just ENTER to skip): ")
        if not arg:
            return args
        args.append(arg)


def read_redirection(prompt_input: PromptInput | None = None) -> tuple[str, str] | None:
    """Ask for a redirection operator and its file; None when there is none."""
    ask = prompt_input or _prompt
    op = ask("Redirection (<, >, >>, << or ENTER to skip): ")
    if not op:
        return None
    if op not in _REDIRECTIONS:
        print("Invalid redirection operator.")
        return None
    question = "Here-document delimiter: " if op == "<<" else "Redirection file: "
    target = ask(question)
    if target is None:
        return None
    return op, target


def build_command_list(prompt_input: PromptInput | None = None) -> list[Command]:
    """Ask for commands until the user declines to add another pipe."""
    ask = prompt_input or _prompt
    commands: list[Command] = []
    while True:
        print(f"\n--- Command #{len(commands) + 1} ---")
        args = read_command(ask)
        if args is None:
            break
        redirection = read_redirection(ask)
        commands.append(Command(args, *redirection) if redirection else Command(args))
        if ask("Add a pipe to another command? (y/n): ") != "y":
            break
    return commands


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive loop until ``exit`` or end of input."""
    environment = fill_env(f"{key}={value}" for key, value in os.environ.items())
    for var in environment:
        print(f"Key : {var.key}")
        print(f"Value : {var.value}")
    while True:
        commands = build_command_list(_prompt)
        if not commands:
            break
        first = commands[0]
        if not first.args or not first.args[0]:
            continue
        if first.args[0] == "exit":
            print("Bye 👋")
            break
        try:
            execute_command(commands, environment, sys.stdout)
        except RedirectionError as exc:
            print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())