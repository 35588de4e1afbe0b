"""Command history kept in a file in the home directory."""

from __future__ import annotations

import os
from typing import Iterator, TextIO

from mshell.errors import FatalShellError, format_complex
from mshell.textops import split

DELIMITER = "\x03"
DEFAULT_FILENAME = ".msh_history.txt"
_FILE_MODE = 0o770


class History:
    """Entries separated by ``DELIMITER`` in ``<home_dir>/<filename>``."""

    def __init__(self, home_dir: str, filename: str = DEFAULT_FILENAME) -> None:
        self.home_dir = home_dir
        self.filename = filename
        self._entries: list[str] = []

    def path(self) -> str:
        """Return the path of the history file."""
        return f"{self.home_dir}/{self.filename}"

    def _open(self, flags: int, mode: str) -> TextIO:
        path = self.path()
        try:
            fd = os.open(path, flags, _FILE_MODE)
        except OSError as exc:
            raise FatalShellError(format_complex(f": {exc.strerror}", path), 1) from exc
        return open(fd, mode, encoding="utf-8", newline="")

    def append(self, line: str) -> None:
        """Record ``line`` in memory and add it to the file."""
        with self._open(os.O_WRONLY | os.O_CREAT | os.O_APPEND, "a") as stream:
            stream.write(line + DELIMITER)
        self._entries.append(line)

    def load(self) -> list[str]:
        """Read every entry from the file, creating it if missing."""
        with self._open(os.O_RDONLY | os.O_CREAT, "r") as stream:
            content = stream.read()
        self._entries = split(content, DELIMITER)
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)