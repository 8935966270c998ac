"""Shared test configuration for core-bridge."""

import base64
import json
import logging

import pytest

from core_bridge import config


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep a developer's config file, env vars and log handlers out of tests.

    Each test runs from an empty temporary directory, so the default
    config/config.yaml is absent unless a test writes one.
    """
    monkeypatch.delenv(config.ENV_INITIAL_VALUE, raising=False)
    monkeypatch.chdir(tmp_path)

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def b64url(data) -> str:
    """Unpadded base64url encoding of *data* (str is UTF-8 encoded first)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def make_token(header, payload, signature: str = "sig") -> str:
    """Build a compact token from JSON-able objects or raw JSON text."""
    if not isinstance(header, str):
        header = json.dumps(header, separators=(",", ":"))
    if not isinstance(payload, str):
        payload = json.dumps(payload, separators=(",", ":"))
    return f"{b64url(header)}.{b64url(payload)}.{signature}"


# Well-known example token (HS256, secret "your-256-bit-secret")
SAMPLE_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
    ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)


@pytest.fixture
def sample_token() -> str:
    return SAMPLE_TOKEN
