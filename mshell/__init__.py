"""Building blocks of a small interactive shell: builtins, environment, prompt, history and quote checks."""

__version__ = "0.1.0"