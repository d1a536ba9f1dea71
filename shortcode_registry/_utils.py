"""
Shared pure-utility functions for shortcode-registry.

These helpers have no state and no side effects.
"""

from shortcode_registry import config


def is_valid_tag(tag):
    """Return True if tag is a string of lowercase letters, digits, _ or -."""
    if not isinstance(tag, str):
        return False
    return config.TAG_PATTERN.fullmatch(tag) is not None


def prefix_tag(tag, prefix):
    """Namespace a tag as '{prefix}_{tag}'. Identity when prefix is empty."""
    return f"{prefix}_{tag}" if prefix else tag


def option_key(key, prefix):
    """Prefix a flag key the same way tags are prefixed."""
    return prefix_tag(key, prefix)


def format_log_line(message, prefix=""):
    """Build a debug log line: '[prefix] Shortcodes: message'."""
    head = f"[{prefix}] " if prefix else ""
    return f"{head}Shortcodes: {message}"
