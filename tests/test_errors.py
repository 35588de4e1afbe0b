from mshell.errors import (
    FatalShellError,
    ShellError,
    ShellExit,
    format_complex,
    format_complex_token,
    format_export_error,
    format_func_error,
    format_simple,
    format_token_error,
)


def test_format_simple_prefix():
    assert format_simple("malloc error\n") == "msh: malloc error\n"


def test_format_complex_order_and_newline():
    text = format_complex(": No such file or directory", "abc")
    assert text.startswith("msh: abc")
    assert text.endswith(": No such file or directory\n")


def test_format_complex_token_closes_quote():
    text = format_complex_token("|", "syntax error near unexpected token `")
    assert text.startswith("msh: syntax error near unexpected token `|")
    assert text.endswith("'\n")


def test_format_token_error():
    text = format_token_error("unexpected EOF while looking for matching ", "`\"")
    assert text == "msh: unexpected EOF while looking for matching `\"'\n"


def test_format_func_error():
    text = format_func_error("cd: ", "nowhere", "No such file or directory")
    assert text == "msh: cd: nowhere: No such file or directory\n"


def test_format_func_error_empty_arg():
    text = format_func_error("cd", "", "too many arguments")
    assert text.startswith("msh: cd: ")
    assert text.endswith("too many arguments\n")


def test_format_export_error_quotes_argument():
    text = format_export_error("export: ", "1abc", "not a valid identifier")
    assert "`1abc'" in text
    assert text.startswith("msh: export: ")
    assert text.endswith(": not a valid identifier\n")


def test_fatal_error_carries_code_and_message():
    err = FatalShellError("msh: boom\n", 2)
    assert err.exit_code == 2
    assert err.message == "msh: boom\n"
    assert issubclass(FatalShellError, ShellError)


def test_fatal_error_default_code():
    err = FatalShellError("x")
    assert err.exit_code == 1


def test_shell_exit_code():
    shell_exit = ShellExit(42)
    assert shell_exit.code == 42