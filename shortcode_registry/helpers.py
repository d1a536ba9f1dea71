"""
One-call helpers: set prefix, add a batch of definitions, install/uninstall.

Without an explicit registry these use a shared default registry, created
on first use and reused afterwards.
"""

from __future__ import annotations

from shortcode_registry.host import default_host
from shortcode_registry.registry import ShortcodeRegistry

_default_registry: ShortcodeRegistry | None = None


def get_default_registry():
    """Return the shared registry, creating it on first call."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ShortcodeRegistry(default_host())
    return _default_registry


def reset_default_registry():
    """Drop the shared registry so the next call builds a fresh one."""
    global _default_registry
    _default_registry = None


def register(shortcodes=None, prefix="", *, registry=None):
    """Register a {tag: config} mapping under an optional prefix.

    Example::

        register(
            {"profile": {"callback": render_profile, "attributes": {"user_id": "1"}}},
            "acme",
        )

    Returns the result of install(): False when nothing valid was given.
    """
    registry = registry if registry is not None else get_default_registry()
    registry.set_prefix(prefix)
    registry.add_batch(shortcodes or {})
    return registry.install()


def unregister(shortcodes=None, prefix="", *, registry=None):
    """Remove the tags of a {tag: config} mapping registered under prefix.

    Pass the same mapping used with register(): it is added again before
    uninstalling, so only the tags it names (plus any already stored) are
    removed.
    """
    registry = registry if registry is not None else get_default_registry()
    registry.set_prefix(prefix)
    registry.add_batch(shortcodes or {})
    return registry.uninstall()


register_shortcodes = register
unregister_shortcodes = unregister
