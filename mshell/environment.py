"""The shell's variable table, with the rules of export and unset."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Iterator, Optional

from mshell.libstr import is_alnum, is_digit


def is_valid_identifier(arg: str) -> bool:
    """Return True if ``arg`` is acceptable to export.

    The part before the first ``=`` must consist of letters, digits and
    underscores, must not start with a digit and must not be empty.
    """
    if not arg or arg[0] == "=" or is_digit(arg[0]):
        return False
    name = arg.split("=", 1)[0]
    if not all(is_alnum(ch) or ch == "_" for ch in name):
        return False
    return not all(is_digit(ch) for ch in arg)


def parse_assignment(arg: str) -> tuple[str, Optional[str]]:
    """Split ``NAME=value`` into name and value; no ``=`` gives a None value."""
    name, sep, value = arg.partition("=")
    return name, (value if sep else None)


def format_export_line(entry: str) -> str:
    """Return ``entry`` as a ``declare -x`` line, quoting any value."""
    name, value = parse_assignment(entry)
    if value is None:
        return f"declare -x {name}\n"
    return f'declare -x {name}="{value}"\n'


def _compare_entries(a: str, b: str) -> int:
    for x, y in zip(a, b):
        if x > y:
            return 1
        if x < y:
            return -1
    return 0


class Environment:
    """Ordered shell variables; a variable may be declared without a value."""

    def __init__(self, items: Iterable[tuple[str, Optional[str]]] = ()) -> None:
        self._vars: dict[str, Optional[str]] = {}
        for name, value in items:
            self.set(name, value)

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build an environment from ``NAME=value`` strings."""
        return cls(parse_assignment(entry) for entry in entries)

    def get(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None if unset or without value."""
        return self._vars.get(name)

    def set(self, name: str, value: Optional[str]) -> None:
        """Define or update ``name``.

        Setting an existing variable to None leaves its value unchanged; a
        new variable is added at the end.
        """
        if name in self._vars and value is None:
            return
        self._vars[name] = value

    def remove(self, name: str) -> bool:
        """Remove ``name``; return whether it was present."""
        return self._vars.pop(name, _MISSING) is not _MISSING

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)

    def env_lines(self) -> list[str]:
        """Return ``NAME=value`` lines for the variables that have a value."""
        return [
            f"{name}={value}\n" for name, value in self._vars.items() if value is not None
        ]

    def export_entries(self) -> list[str]:
        """Return every variable as ``NAME=value`` or ``NAME``, sorted."""
        entries = [
            name if value is None else f"{name}={value}"
            for name, value in self._vars.items()
        ]
        return sorted(entries, key=cmp_to_key(_compare_entries))

    def export_lines(self) -> list[str]:
        """Return the sorted ``declare -x`` listing, leaving out ``_``."""
        return [
            format_export_line(entry)
            for entry in self.export_entries()
            if not entry.startswith("_=")
        ]


_MISSING = object()