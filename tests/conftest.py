"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import pytest

# Value of the TOKEN variable used by header interpolation tests
TOKEN_VALUE = "QWxhZGRpbjpPcGVuU2VzYW1l"


@pytest.fixture
def token_env() -> dict[str, str]:
    """Environment mapping with a secret token."""
    return {"TOKEN": TOKEN_VALUE}


@pytest.fixture
def sample_config_toml() -> str:
    """A config using every option."""
    return """follow-web-links = true
traverse-parent-directories = true
exclude = ["google\\\\.com"]
user-agent = "Internet Explorer"
cache-timeout = 3600
warning-policy = "error"

[http-headers]
https = ["Accept: html/text", "Authorization: Basic $TOKEN"]
"""


@pytest.fixture
def sample_book_toml(sample_config_toml: str) -> str:
    """A book.toml with the options in the [output.linkcheck] table."""
    body = sample_config_toml.replace("[http-headers]", "[output.linkcheck.http-headers]")
    return f"""[book]
title = "Example"

[output.html]

[output.linkcheck]
{body}"""
