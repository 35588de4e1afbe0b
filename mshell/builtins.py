"""The built-in commands: echo, cd, pwd, env, export, unset and exit."""

from __future__ import annotations

import errno
import os
import re
import sys
from dataclasses import dataclass, field
from itertools import dropwhile
from typing import Callable, Optional, TextIO

from mshell.environment import Environment, is_valid_identifier, parse_assignment
from mshell.errors import (
    ShellExit,
    format_complex,
    format_export_error,
    format_func_error,
)
from mshell.libstr import is_digit
from mshell.prompt import make_prompt

LLONG_MAX = 2**63 - 1
LLONG_MIN = -(2**63)

_CD_ERROR_NAMES = (
    ("ENOTDIR", "Not a directory"),
    ("ENOENT", "No such file or directory"),
    ("EACCES", "Permission denied"),
    ("EFAULT", "Bad address"),
    ("EIO", "Input/output error"),
    ("ELOOP", "Too many simbolic links"),
    ("ENAMETOOLONG", "Name too long"),
    ("EROFS", "Read-only file system"),
    ("ENOMEM", "Out of memory"),
)
_CD_ERRORS = {
    getattr(errno, name): text for name, text in _CD_ERROR_NAMES if hasattr(errno, name)
}
_NUMERIC_ARGUMENT = re.compile(r" *[+-]?[0-9]* *")
_LEADING_SKIP = "\t\n\v\f\r "


@dataclass
class ShellState:
    """What the built-ins read and change: variables, directories, prompt."""

    env: Environment = field(default_factory=Environment)
    home_dir: str = ""
    username: Optional[str] = None
    hostname: Optional[str] = None
    cwd: str = ""
    prompt: str = ""
    last_exit: int = 0
    stdout: Optional[TextIO] = None
    stderr: Optional[TextIO] = None

    def _out(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    def _err(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr

    def refresh_prompt(self) -> str:
        """Re-read the working directory and rebuild the prompt from it."""
        try:
            self.cwd = os.getcwd()
        except OSError:
            return self.prompt
        if self.username and self.hostname:
            self.prompt = make_prompt(self.username, self.hostname, self.cwd, self.home_dir)
        return self.prompt


@dataclass
class Command:
    """One simple command, with its neighbours in a pipeline noted."""

    args: list[str]
    has_prev: bool = False
    has_next: bool = False

    def in_pipeline(self) -> bool:
        """Return True when the command is part of a pipeline."""
        return self.has_prev or self.has_next


def cd_error_message(errcode: Optional[int], arg: str) -> Optional[str]:
    """Return the message cd shows for ``errcode``, or None if it shows none."""
    text = _CD_ERRORS.get(errcode) if errcode is not None else None
    if text is None:
        return None
    return format_func_error("cd: ", arg, text)


def _is_n_flag(arg: str) -> bool:
    return arg.startswith("-") and all(ch == "n" for ch in arg[1:])


def has_no_newline_flag(args: list[str]) -> bool:
    """Return True if the first argument after the command name is ``-n...n``."""
    if len(args) < 2:
        return False
    first = args[1]
    return first.startswith("-n") and all(ch == "n" for ch in first[1:])


def parse_exit_code(text: str) -> Optional[int]:
    """Parse a leading decimal integer in the 64-bit signed range.

    Leading whitespace and one sign are accepted and parsing stops at the
    first non-digit. Returns None when the value leaves the range.
    """
    stripped = text.lstrip(_LEADING_SKIP)
    negative = False
    if stripped[:1] in ("+", "-"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    res = 0
    for ch in stripped:
        if not is_digit(ch):
            break
        digit = ord(ch) - ord("0")
        if negative:
            if -res < -((-(LLONG_MIN + digit)) // 10):
                return None
        elif res > (LLONG_MAX - digit) // 10:
            return None
        res = res * 10 + digit
    return -res if negative else res


def is_numeric_argument(text: str) -> bool:
    """Return True if ``text`` is an optional sign and digits, padded by spaces."""
    if not text:
        return False
    return _NUMERIC_ARGUMENT.fullmatch(text) is not None


def builtin_echo(shell: ShellState, command: Command, out: TextIO) -> int:
    """Write the arguments separated by spaces; ``-n`` flags drop the newline."""
    args = command.args[1:]
    if has_no_newline_flag(command.args):
        out.write(" ".join(dropwhile(_is_n_flag, args)))
    else:
        out.write(" ".join(args) + "\n")
    return 0


def _change_directory(shell: ShellState, target: str) -> bool:
    try:
        os.chdir(target)
    except OSError as exc:
        message = cd_error_message(exc.errno, target)
        if message:
            shell._err().write(message)
        return False
    return True


def _update_variables(shell: ShellState) -> None:
    try:
        newpwd = os.getcwd()
    except OSError as exc:
        shell._err().write(f"getcwd: {exc.strerror}\n")
        return
    oldpwd = shell.env.get("PWD")
    if oldpwd is not None:
        shell.env.set("OLDPWD", oldpwd)
    else:
        shell.env.remove("OLDPWD")
    shell.env.set("PWD", newpwd)
    shell.refresh_prompt()


def _previous_dir(shell: ShellState) -> int:
    target = shell.env.get("OLDPWD")
    if target is None:
        shell._err().write(format_func_error("cd", "", "OLDPWD not set"))
        return 0
    if not _change_directory(shell, target):
        return 1
    shell._out().write(f"{target}\n")
    _update_variables(shell)
    return 0


def builtin_cd(shell: ShellState, command: Command, out: TextIO) -> int:
    """Change directory, keeping PWD, OLDPWD and the prompt up to date."""
    if command.in_pipeline():
        return 0
    args = command.args
    if len(args) > 2:
        shell._err().write(format_func_error("cd", "", "too many arguments"))
        return 1
    target = args[1] if len(args) > 1 else "~"
    if target == "-":
        return _previous_dir(shell)
    if target == "~":
        target = shell.home_dir
    if not _change_directory(shell, target):
        return 1
    _update_variables(shell)
    return 0


def builtin_pwd(shell: ShellState, command: Command, out: TextIO) -> int:
    """Write the current directory."""
    out.write(f"{shell.cwd}\n")
    return 0


def builtin_env(shell: ShellState, command: Command, out: TextIO) -> int:
    """Write every variable that has a value."""
    out.writelines(shell.env.env_lines())
    return 0


def builtin_export(shell: ShellState, command: Command, out: TextIO) -> int:
    """Define variables, or list them all when given no arguments."""
    args = command.args[1:]
    if not args:
        out.writelines(shell.env.export_lines())
    error = False
    for arg in args:
        if not is_valid_identifier(arg):
            shell._err().write(
                format_export_error("export: ", arg, "not a valid identifier")
            )
            error = True
            continue
        if command.in_pipeline():
            continue
        name, value = parse_assignment(arg)
        shell.env.set(name, value)
    return 1 if error else 0


def builtin_unset(shell: ShellState, command: Command, out: TextIO) -> int:
    """Remove the named variables."""
    if command.in_pipeline():
        return 0
    for name in command.args[1:]:
        shell.env.remove(name)
    return 0


def _numeric_error(shell: ShellState, command: Command) -> None:
    shell._out().write("exit\n")
    shell._err().write(
        format_func_error("exit: ", command.args[1], "numeric argument required")
    )
    if not command.in_pipeline():
        raise ShellExit(2)


def builtin_exit(shell: ShellState, command: Command, out: TextIO) -> int:
    """Leave the shell by raising ShellExit, unless inside a pipeline."""
    args = command.args
    status = shell.last_exit
    if len(args) > 1 and not is_numeric_argument(args[1]):
        _numeric_error(shell, command)
    if len(args) > 2:
        shell._out().write("exit\n")
        shell._err().write(format_complex("too many arguments", "exit: "))
        return 1
    if len(args) < 2:
        if command.in_pipeline():
            return status
        shell._out().write("exit\n")
        raise ShellExit(status)
    code = parse_exit_code(args[1])
    if code is None:
        _numeric_error(shell, command)
        return 2
    status = code % 256
    if not command.in_pipeline():
        shell._out().write("exit\n")
        raise ShellExit(status)
    return status


_BUILTINS: dict[str, Callable[[ShellState, Command, TextIO], int]] = {
    "echo": builtin_echo,
    "cd": builtin_cd,
    "pwd": builtin_pwd,
    "env": builtin_env,
    "export": builtin_export,
    "unset": builtin_unset,
    "exit": builtin_exit,
}


def run_builtin(shell: ShellState, command: Command, out: TextIO) -> int:
    """Run the built-in named by the command's first argument."""
    name = command.args[0] if command.args else ""
    handler = _BUILTINS.get(name)
    if handler is None:
        raise ValueError(f"not a builtin: {name!r}")
    return handler(shell, command, out)