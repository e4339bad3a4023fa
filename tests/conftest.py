"""Pytest configuration for the Security Playground."""
import base64
import json

import pytest

from shared.config import PlaygroundConfig


@pytest.fixture
def quiet_config():
    """Configuration with the Rich stderr log handler disabled."""
    config = PlaygroundConfig()
    config.global_settings.console_logging = False
    return config


def encode_segment(obj):
    raw = json.dumps(obj, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


@pytest.fixture
def make_token():
    """Build an unsigned three-part token from header and payload dicts."""
    def _make(header, payload, signature="sig"):
        return f"{encode_segment(header)}.{encode_segment(payload)}.{signature}"
    return _make
