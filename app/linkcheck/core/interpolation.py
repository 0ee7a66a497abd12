"""Environment variable interpolation for header values.

Header values may reference environment variables as ``$NAME`` so that
secrets (tokens, passwords) never have to be written into the config file.
A backslash neutralizes a following ``$`` or ``\\``; before any other
character it is kept as-is.

Examples:
    ``Basic $TOKEN``  -> ``Basic <value of TOKEN>``
    ``\\$TOKEN``       -> ``$TOKEN``
    ``C:\\dir``        -> ``C:\\dir``
"""

import os
from collections.abc import Mapping


class InterpolationError(ValueError):
    """Base exception for header value interpolation errors."""


class MissingVariableError(InterpolationError):
    """Raised when a referenced environment variable is not set.

    Only the variable name is part of the message, never a value.

    Attributes:
        name: Name of the missing variable (may be empty).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Failed to retrieve `{name}` env var: not present in the environment")


def _is_ident(ch: str) -> bool:
    """Check if a character may be part of a variable name (ASCII only)."""
    return ch.isascii() and (ch.isalnum() or ch == "_")


def interpolate_env(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Expand ``$NAME`` references in a string.

    Args:
        value: The literal string as written in the config.
        environ: Variable lookup. Defaults to ``os.environ``.

    Returns:
        The fully expanded string.

    Raises:
        MissingVariableError: If a referenced variable is not set. No
            partial result is produced.
    """
    env = os.environ if environ is None else environ
    out: list[str] = []
    backslash = False
    i = 0
    length = len(value)

    while i < length:
        ch = value[i]
        i += 1

        if backslash:
            if ch not in ("$", "\\"):
                out.append("\\")
            out.append(ch)
            backslash = False
        elif ch == "\\":
            backslash = True
        elif ch == "$":
            start = i
            while i < length and _is_ident(value[i]):
                i += 1
            name = value[start:i]
            if name not in env:
                raise MissingVariableError(name)
            out.append(env[name])
        else:
            out.append(ch)

    # Unterminated escape
    if backslash:
        out.append("\\")

    return "".join(out)
