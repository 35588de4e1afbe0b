"""Exceptions raised by the shell and the formats of its error messages."""

from __future__ import annotations

PREFIX = "msh: "


class ShellError(Exception):
    """A shell error carrying the text that is shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FatalShellError(ShellError):
    """An error after which the shell must stop with ``exit_code``."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ShellExit(Exception):
    """Request to leave the shell with the given status code."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


def format_simple(msg: str) -> str:
    """Return ``msg`` with the shell prefix."""
    return f"{PREFIX}{msg}"


def format_complex(msg: str, param: str) -> str:
    """Return ``msh: <param><msg>`` followed by a newline."""
    return f"{PREFIX}{param}{msg}\n"


def format_complex_token(msg: str, param: str) -> str:
    """Like :func:`format_complex`, closing the quoted token with ``'``."""
    return f"{PREFIX}{param}{msg}'\n"


def format_token_error(p1: str, p2: str) -> str:
    """Return ``msh: <p1><p2>'`` followed by a newline."""
    return f"{PREFIX}{p1}{p2}'\n"


def format_func_error(cmdname: str, arg: str, errmsg: str) -> str:
    """Return ``msh: <cmdname><arg>: <errmsg>`` followed by a newline."""
    return f"{PREFIX}{cmdname}{arg}: {errmsg}\n"


def format_export_error(cmdname: str, arg: str, errmsg: str) -> str:
    """Return ``msh: <cmdname>`<arg>': <errmsg>`` followed by a newline."""
    return f"{PREFIX}{cmdname}`{arg}': {errmsg}\n"