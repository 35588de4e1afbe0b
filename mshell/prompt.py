"""Building the interactive prompt and finding the host name."""

from __future__ import annotations

from typing import Optional

from mshell.linereader import LineReader

HOSTNAME_FILE = "/etc/hostname"


def make_prompt(username: str, hostname: str, cwd: str, home_dir: str) -> str:
    """Return ``user@host:~<dir>$ ``.

    When ``cwd`` starts with ``home_dir`` that prefix is left out of the
    directory part.
    """
    if cwd.startswith(home_dir):
        cwd = cwd[len(home_dir):]
    return f"{username}@{hostname}:~{cwd}$ "


def trim_hostname(text: str) -> str:
    """Return ``text`` up to its first dot."""
    return text.split(".", 1)[0]


def read_hostname(path: str = HOSTNAME_FILE) -> Optional[str]:
    """Read the short host name from the first line of ``path``.

    Returns None when the file is empty; an unreadable file raises OSError.
    """
    with open(path, encoding="utf-8") as stream:
        line = LineReader(stream).readline()
    if line is None:
        return None
    return trim_hostname(line.removesuffix("\n"))