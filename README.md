# mshell

This library holds the parts of a small interactive shell. The modules are:

- `mshell.builtins` has the builtin commands `echo`, `cd`, `pwd`, `env`, `export`, `unset` and `exit`.
  - Each builtin takes a `ShellState`, a `Command` and a text stream, and returns a status code.
  - `run_builtin` picks the builtin named by the command's first argument. For any other name it raises `ValueError`.
  - `cd` keeps `PWD` and `OLDPWD` up to date and rebuilds the prompt. `cd -` goes back to the directory in `OLDPWD`.
  - `export` without arguments writes the sorted `declare -x` listing.
  - `cd`, `unset` and assignments made by `export` do nothing when the command is part of a pipeline.
- `mshell.environment` has the `Environment` class, an ordered table of shell variables.
  - A variable can be declared without a value.
  - `env_lines()` gives the lines for `env`. `export_lines()` gives the sorted `declare -x` lines, without `_`.
  - The module also has `is_valid_identifier`, `parse_assignment` and `format_export_line`.
- `mshell.prompt` has three functions.
  - `make_prompt(username, hostname, cwd, home_dir)` builds a prompt of the form `user@host:~<dir>$ `. When the directory starts with the home directory, that prefix is left out.
  - `trim_hostname` cuts a host name at its first dot.
  - `read_hostname(path)` reads a short host name from the first line of a file. The default file is `/etc/hostname`.
- `mshell.history` has the `History` class. It keeps command history in `<home_dir>/<filename>`, with `.msh_history.txt` as the default file name.
  - Entries in the file are separated by the character `\x03`.
  - `append(line)` adds an entry to the file.
  - `load()` reads every entry back from the file.
- `mshell.syntax` has three functions.
  - `find_unclosed_quote` returns the first quote that is never closed.
  - `check_quotes` writes a syntax error and returns 2 when a quote is left open.
  - `heredoc_warning` formats the warning for a here-document that ended at end of file.
- `mshell.errors` formats error messages in the shell's `msh: ...` style. It also defines the exceptions `ShellError`, `FatalShellError` (which has an `exit_code`) and `ShellExit` (which has a `code`).
- `mshell.linereader` has the `LineReader` class and the `read_lines` function. They read a text or binary stream line by line through a buffer of fixed size, 50 by default.
- `mshell.libstr` and `mshell.textops` are string helpers that follow the shell's rules. They cover whitespace, 32-bit `atoi`, word counting, `split`, `strtrim`, `substr`, `strnstr`, `strcmp`/`strncmp` and `strlcat`.

## Installation

```
pip install .
```

## Example

```python
import io
from mshell.builtins import ShellState, Command, run_builtin
from mshell.environment import Environment

shell = ShellState(env=Environment.from_strings(["HOME=/home/user", "PATH=/bin"]))
out = io.StringIO()
run_builtin(shell, Command(["export", "GREETING=hi"]), out)
run_builtin(shell, Command(["echo", "-n", "hello"]), out)
print(out.getvalue())             # hello
print(shell.env.get("GREETING"))  # hi
```

`exit` does not end the process. It raises `ShellExit` and leaves the caller to decide what to do. Inside a pipeline it returns a status instead.

## What this package does not do

This package is not a working shell, and it has no command to run. It has:

- no read–eval loop
- no lexer, parser or variable expansion
- no pipelines or redirections
- no way to run external programs

It provides the builtins and the supporting pieces listed above, for a caller that supplies all of those things.

## Running the tests

```
pip install .[test]
pytest
```