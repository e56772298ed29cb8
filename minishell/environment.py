"""Shell environment: an ordered collection of variables."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterable, Iterator

_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_REST = frozenset(string.ascii_letters + string.digits + "_")


@dataclass
class EnvVar:
    """A single environment variable."""

    key: str
    value: str | None = None
    is_exported: bool = False


class Environment:
    """Ordered set of environment variables, kept in insertion order."""

    def __init__(self, entries: Iterable[EnvVar] = ()) -> None:
        self._vars: list[EnvVar] = list(entries)

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)

    def find(self, key: str) -> EnvVar | None:
        """Return the variable whose key equals ``key`` exactly, if any."""
        return next((var for var in self._vars if var.key == key), None)

    def lookup_prefix(self, prefix: str) -> str | None:
        """Return the value of the first variable whose key starts with ``prefix``."""
        for var in self._vars:
            if var.key.startswith(prefix):
                return var.value
        return None

    def export(self, key: str, value: str | None = None) -> EnvVar:
        """Mark ``key`` as exported, setting its value when one is given.

        A new variable is appended at the end, with an empty value when
        none is given. Raises ValueError for an invalid identifier.
        """
        if not is_valid_identifier(key):
            raise ValueError(f"`{key}`: not a valid identifier")
        found = self.find(key)
        if found is not None:
            if value is not None:
                found.value = value
            found.is_exported = True
            return found
        var = EnvVar(key, value if value is not None else "", True)
        self._vars.append(var)
        return var

    def unset(self, key: str) -> bool:
        """Remove the first variable named ``key``; report whether one was removed."""
        for index, var in enumerate(self._vars):
            if var.key == key:
                del self._vars[index]
                return True
        return False

    def to_array(self) -> list[str]:
        """Return the variables as ``KEY=VALUE`` strings."""
        return [f"{var.key}={var.value or ''}" for var in self._vars]


def fill_env(envp: Iterable[str]) -> Environment:
    """Build an environment from ``KEY=VALUE`` strings, skipping entries without ``=``."""
    entries = []
    for item in envp:
        pair = split_key_value(item)
        if pair is not None:
            entries.append(EnvVar(pair[0], pair[1]))
    return Environment(entries)


def split_key_value(text: str) -> tuple[str, str] | None:
    """Split ``text`` at its first ``=``; None when there is none."""
    key, sep, value = text.partition("=")
    if not sep:
        return None
    return key, value


def is_valid_identifier(text: str | None) -> bool:
    """Whether ``text`` is a valid shell variable name."""
    if not text or text[0] not in _IDENT_START:
        return False
    return all(ch in _IDENT_REST for ch in text)