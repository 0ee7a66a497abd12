"""HTTP header entries attached to outbound link-check requests.

Headers are written in the config as ``"Name: Value"`` strings. Values may
reference environment variables (see :mod:`linkcheck.core.interpolation`),
which are expanded once when the config is loaded.
"""

from collections.abc import Mapping

from linkcheck.core.interpolation import InterpolationError, interpolate_env

# Separator between header name and value
HEADER_SEPARATOR = ": "


class HeaderParseError(ValueError):
    """Base exception for header record parsing errors."""


class MissingSeparatorError(HeaderParseError):
    """Raised when a header record does not contain ``": "``."""

    def __init__(self, record: str) -> None:
        self.record = record
        super().__init__(
            f"The `{record}` HTTP header must contain `{HEADER_SEPARATOR}` but it doesn't"
        )


class HeaderInterpolationError(HeaderParseError):
    """Raised when a header value references variables that cannot be resolved.

    Attributes:
        name: Header name the value belongs to.
        variable: Name of the missing variable, if known.
    """

    def __init__(self, name: str, error: InterpolationError) -> None:
        self.name = name
        self.variable: str | None = getattr(error, "name", None)
        super().__init__(f"Cannot resolve the `{name}` HTTP header: {error}")


class HttpHeader:
    """A single HTTP header as configured by the user.

    Only ``name`` and the literal ``value`` take part in equality, hashing,
    ``repr()``, ``str()`` and serialization. The interpolated value may carry
    secrets pulled from the environment and is kept out of all of those.

    Instances are normally created with :meth:`parse`.

    Args:
        name: Header name, verbatim (not trimmed).
        value: Header value as written, including ``$VAR`` references.
        interpolated_value: ``value`` with variables expanded.
    """

    __slots__ = ("_interpolated_value", "_name", "_value")

    def __init__(self, name: str, value: str, interpolated_value: str) -> None:
        self._name = name
        self._value = value
        self._interpolated_value = interpolated_value

    @classmethod
    def parse(cls, record: str, environ: Mapping[str, str] | None = None) -> "HttpHeader":
        """Parse a ``"Name: Value"`` record.

        Args:
            record: The header record. Split at the first ``": "``.
            environ: Variable lookup for interpolation. Defaults to ``os.environ``.

        Returns:
            Parsed header with its value resolved against the environment.

        Raises:
            MissingSeparatorError: If the record contains no ``": "``.
            HeaderInterpolationError: If the value references a missing variable.
        """
        name, sep, value = record.partition(HEADER_SEPARATOR)
        if not sep:
            raise MissingSeparatorError(record)

        try:
            interpolated = interpolate_env(value, environ)
        except InterpolationError as e:
            raise HeaderInterpolationError(name, e) from e

        return cls(name, value, interpolated)

    @property
    def name(self) -> str:
        """Header name."""
        return self._name

    @property
    def value(self) -> str:
        """Header value as written in the config."""
        return self._value

    @property
    def interpolated_value(self) -> str:
        """Resolved value, for building outbound requests only.

        Never print, log or persist this value.
        """
        return self._interpolated_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpHeader):
            return NotImplemented
        return (self._name, self._value) == (other._name, other._value)

    def __hash__(self) -> int:
        return hash((self._name, self._value))

    def __repr__(self) -> str:
        return f"HttpHeader(name={self._name!r}, value={self._value!r})"

    def __str__(self) -> str:
        return f"{self._name}{HEADER_SEPARATOR}{self._value}"
