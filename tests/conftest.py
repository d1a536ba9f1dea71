"""
Shared test fixtures for shortcode-registry tests.
Patches config so no real .env is read and resets the shared registry.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state and no shared registry."""
    from shortcode_registry import config, helpers

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "DEBUG", False)
    monkeypatch.setattr(config, "FLAG_STORE_PATH", "")
    helpers.reset_default_registry()
    yield
    helpers.reset_default_registry()


@pytest.fixture
def host():
    from shortcode_registry.host import MemoryHost

    return MemoryHost()


@pytest.fixture
def registry(host):
    from shortcode_registry.registry import ShortcodeRegistry

    return ShortcodeRegistry(host)


def echo(attributes, content, tag):
    """Callback that renders its inputs, for asserting what dispatch passed."""
    pairs = ",".join(f"{k}={v}" for k, v in sorted(attributes.items()))
    return f"{tag}[{pairs}]{content or ''}"
