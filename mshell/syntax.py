"""Quote balance checks and here-document warnings."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from mshell.errors import FatalShellError, format_simple, format_token_error

QUOTES = "\"'"
SYNTAX_QUOTE_ERROR = "unexpected EOF while looking for matching "
QUOTE_CHECK_FAILURE = "fatal error: no command line to check for quotes\n"
QUOTE_CHECK_EXIT_CODE = 42
SYNTAX_ERROR_STATUS = 2


def find_unclosed_quote(line: str) -> Optional[str]:
    """Return the first quote character in ``line`` that is never closed.

    A quote opens a span that ends at the next quote of the same kind; other
    quote characters inside that span are ordinary text. Returns None when
    every quote is balanced.
    """
    i = 0
    while i < len(line):
        ch = line[i]
        if ch in QUOTES:
            closing = line.find(ch, i + 1)
            if closing < 0:
                return ch
            i = closing
        i += 1
    return None


def check_quotes(line: Optional[str], err: Optional[TextIO] = None) -> int:
    """Check ``line`` for unbalanced quotes.

    Writes a syntax error to ``err`` (standard error by default) and returns
    2 when a quote is left open, otherwise returns 0. A missing line is a
    fatal error.
    """
    if line is None:
        raise FatalShellError(format_simple(QUOTE_CHECK_FAILURE), QUOTE_CHECK_EXIT_CODE)
    quote = find_unclosed_quote(line)
    if quote is None:
        return 0
    stream = err if err is not None else sys.stderr
    stream.write(format_token_error(SYNTAX_QUOTE_ERROR, f"`{quote}"))
    return SYNTAX_ERROR_STATUS


def heredoc_warning(line: int, limiter: str) -> str:
    """Return the warning for a here-document closed by end of file.

    ``limiter`` is the delimiter as stored, with one trailing character
    (its newline) that is left out of the message.
    """
    wanted = limiter[:-1] if limiter else ""
    return (
        f"msh: warning: here-document at line {line} "
        f"delimited by end-of-file (wanted `{wanted}')\n"
    )