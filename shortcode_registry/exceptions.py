"""
shortcode-registry exception hierarchy.

These are raised by validation and caught by the registry, which turns
them into log lines and AddResult values. Public operations never raise them.
"""


class ShortcodeError(Exception):
    """Base class — every subclass carries a stable reason code."""

    reason = "error"


class InvalidTagError(ShortcodeError):
    """Tag does not match ^[a-z0-9_-]+$."""

    reason = "invalid_tag"


class InvalidCallbackError(ShortcodeError):
    """Definition has no callback, or the callback is not callable."""

    reason = "invalid_callback"


class EmptyRegistrationSetError(ShortcodeError):
    """install() was called with nothing to install."""

    reason = "empty_registration_set"
