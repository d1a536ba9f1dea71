"""
Typed models for shortcode definitions and per-definition add results.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from shortcode_registry._utils import is_valid_tag
from shortcode_registry.exceptions import InvalidCallbackError, InvalidTagError
from shortcode_registry.types import ShortcodeCallback


@dataclass(frozen=True)
class ShortcodeDefinition:
    """One validated shortcode: tag, callback and default attributes."""

    tag: str
    callback: ShortcodeCallback
    attributes: dict[str, str] = field(default_factory=dict)
    description: str = ""

    @classmethod
    def from_config(cls, tag, config):
        """Validate a raw config dict (or definition) for ``tag``.

        Raises InvalidTagError or InvalidCallbackError. Omitted
        ``attributes`` and ``description`` default to empty; extra keys
        are ignored.
        """
        if not is_valid_tag(tag):
            raise InvalidTagError(f"Invalid shortcode tag: {tag}")

        if isinstance(config, ShortcodeDefinition):
            config = {
                "callback": config.callback,
                "attributes": config.attributes,
                "description": config.description,
            }
        elif not isinstance(config, Mapping):
            raise InvalidCallbackError(f"Invalid callback for shortcode: {tag}")

        callback = config.get("callback")
        if not callable(callback):
            raise InvalidCallbackError(f"Invalid callback for shortcode: {tag}")

        return cls(
            tag=tag,
            callback=callback,
            attributes=dict(config.get("attributes") or {}),
            description=config.get("description") or "",
        )


@dataclass(frozen=True)
class AddResult:
    """Outcome of adding one definition: added, or skipped with a reason."""

    tag: str
    added: bool
    reason: str | None = None
    message: str = ""

    @classmethod
    def ok(cls, tag):
        return cls(tag=tag, added=True)

    @classmethod
    def skipped(cls, tag, error):
        return cls(tag=tag, added=False, reason=error.reason, message=str(error))
