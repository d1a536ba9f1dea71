"""Typed shapes for shortcode configuration dicts and callbacks.

These document the shape of the plain dicts callers pass to
ShortcodeRegistry.add() and register(). Runtime behavior does not
depend on them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional, TypedDict

Attributes = dict[str, str]

# (merged attributes, enclosed content or None, unprefixed tag) -> output
ShortcodeCallback = Callable[[Attributes, Optional[str], str], str]

# What the host binds to a prefixed tag: (raw attributes, content) -> output
DispatchWrapper = Callable[..., str]


class ShortcodeConfig(TypedDict, total=False):
    """One entry of a definitions mapping, keyed by tag."""

    callback: ShortcodeCallback
    attributes: Attributes
    description: str
