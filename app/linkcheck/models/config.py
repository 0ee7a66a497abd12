"""Link checker configuration model.

This module defines the Pydantic model for the link checker options as
stored in TOML (kebab-case keys), e.g.::

    follow-web-links = true
    exclude = ["google\\\\.com"]
    warning-policy = "error"

    [http-headers]
    "https://api\\\\.github\\\\.com" = ["Authorization: Bearer $GITHUB_TOKEN"]
"""

import logging
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from linkcheck import APP_NAME, __version__
from linkcheck.core.exclusion import ExclusionMatcher
from linkcheck.models.header import HttpHeader
from linkcheck.models.pattern import LinkPattern

logger = logging.getLogger(__name__)

# Cached link results stay valid for around 12 hours
DEFAULT_CACHE_TIMEOUT = 60 * 60 * 12

DEFAULT_USER_AGENT = f"{APP_NAME}-{__version__}"


class WarningPolicy(str, Enum):
    """How warnings found while checking links are treated.

    Attributes:
        IGNORE: Silently ignore them.
        WARN: Report them, but don't fail the check.
        ERROR: Treat warnings as errors.
    """

    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"

    @property
    def reports_warnings(self) -> bool:
        """Whether warnings should be shown to the user."""
        return self is not WarningPolicy.IGNORE

    @property
    def fails_on_warnings(self) -> bool:
        """Whether warnings should fail the check."""
        return self is WarningPolicy.ERROR


class LinkCheckConfig(BaseModel):
    """Options for the link checker.

    Every field has a default, so any subset of keys (including none) is a
    valid config. Header values are resolved against the environment while
    validating; a header that cannot be parsed or resolved rejects the
    whole config.

    Attributes:
        follow_web_links: Check links to the internet too (slow).
        traverse_parent_directories: Allow links to files outside the source directory.
        exclude: Patterns of links that are never checked.
        user_agent: User-agent sent with web requests.
        cache_timeout_seconds: How long a cached result is valid for.
        warning_policy: How warnings are treated.
        http_headers: Headers to send to sites matching each pattern.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    follow_web_links: Annotated[
        bool,
        Field(alias="follow-web-links", strict=True, description="Check links to the internet"),
    ] = False
    traverse_parent_directories: Annotated[
        bool,
        Field(
            alias="traverse-parent-directories",
            strict=True,
            description="Allow links outside the source directory",
        ),
    ] = False
    exclude: Annotated[
        list[LinkPattern],
        Field(default_factory=list, description="Link patterns to skip"),
    ]
    user_agent: Annotated[
        str,
        Field(alias="user-agent", strict=True, description="User-agent for web requests"),
    ] = DEFAULT_USER_AGENT
    cache_timeout_seconds: Annotated[
        int,
        Field(
            alias="cache-timeout", strict=True, ge=0, description="Cache validity in seconds"
        ),
    ] = DEFAULT_CACHE_TIMEOUT
    warning_policy: Annotated[
        WarningPolicy,
        Field(alias="warning-policy", description="How warnings are treated"),
    ] = WarningPolicy.WARN
    http_headers: Annotated[
        dict[LinkPattern, list[HttpHeader]],
        Field(
            alias="http-headers",
            default_factory=dict,
            description="Headers to send to matching sites",
        ),
    ]

    @model_validator(mode="before")
    @classmethod
    def warn_unknown_keys(cls, data: Any) -> Any:
        """Log keys that don't belong to the config (they are ignored)."""
        if isinstance(data, dict):
            known: set[str] = set()
            for name, info in cls.model_fields.items():
                known.add(name)
                if info.alias:
                    known.add(info.alias)
            for key in data:
                if key not in known:
                    logger.warning("Ignoring unknown config key: %s", key)
        return data

    @field_validator("exclude", mode="before")
    @classmethod
    def parse_exclude(cls, v: Any) -> Any:
        """Compile exclusion pattern strings."""
        if not isinstance(v, list):
            return v
        return [LinkPattern(item) if isinstance(item, str) else item for item in v]

    @field_validator("http_headers", mode="before")
    @classmethod
    def parse_http_headers(cls, v: Any, info: ValidationInfo) -> Any:
        """Compile header patterns and parse their ``"Name: Value"`` records.

        The environment used for interpolation can be overridden by passing
        ``context={"environ": {...}}`` to ``model_validate``.
        """
        if not isinstance(v, dict):
            return v
        environ = info.context.get("environ") if info.context else None

        result: dict[Any, Any] = {}
        for key, records in v.items():
            pattern = LinkPattern(key) if isinstance(key, str) else key
            if isinstance(records, list):
                records = [
                    HttpHeader.parse(item, environ) if isinstance(item, str) else item
                    for item in records
                ]
            result[pattern] = records
        return result

    @classmethod
    def from_toml_dict(
        cls, data: dict[str, Any], environ: dict[str, str] | None = None
    ) -> "LinkCheckConfig":
        """Build a config from a TOML table.

        Args:
            data: The parsed TOML table.
            environ: Variable lookup for header values. Defaults to ``os.environ``.

        Returns:
            Validated LinkCheckConfig.

        Raises:
            pydantic.ValidationError: If any field or header is invalid.
        """
        context = {"environ": environ} if environ is not None else None
        return cls.model_validate(data, context=context)

    def to_toml_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary suitable for TOML serialization.

        Header values are written in their literal form, as they were read.

        Returns:
            Dictionary with kebab-case keys.
        """
        return {
            "follow-web-links": self.follow_web_links,
            "traverse-parent-directories": self.traverse_parent_directories,
            "exclude": [pattern.source for pattern in self.exclude],
            "user-agent": self.user_agent,
            "cache-timeout": self.cache_timeout_seconds,
            "warning-policy": self.warning_policy.value,
            "http-headers": {
                pattern.source: [str(header) for header in headers]
                for pattern, headers in self.http_headers.items()
            },
        }

    def should_skip(self, link: str) -> bool:
        """Check if a link matches any of the ``exclude`` patterns."""
        return ExclusionMatcher(self.exclude).should_skip(link)

    def headers_for(self, url: str) -> list[tuple[str, str]]:
        """Collect the headers to send with a request to ``url``.

        Headers of every matching pattern are returned in config order, with
        their values resolved. Only use the result to build the request.

        Args:
            url: The URL about to be requested.

        Returns:
            List of (name, resolved value) pairs.
        """
        headers: list[tuple[str, str]] = []
        for pattern, entries in self.http_headers.items():
            if pattern.matches(url):
                headers.extend((entry.name, entry.interpolated_value) for entry in entries)
        return headers
