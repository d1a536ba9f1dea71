"""shortcode-registry — declare shortcodes as plain config and install them on a host."""

from shortcode_registry.config import VERSION
from shortcode_registry.exceptions import (
    EmptyRegistrationSetError,
    InvalidCallbackError,
    InvalidTagError,
    ShortcodeError,
)
from shortcode_registry.helpers import (
    get_default_registry,
    register,
    register_shortcodes,
    reset_default_registry,
    unregister,
    unregister_shortcodes,
)
from shortcode_registry.host import Host, JsonFlagStore, MemoryFlagStore, MemoryHost
from shortcode_registry.models import AddResult, ShortcodeDefinition
from shortcode_registry.registry import ShortcodeRegistry
from shortcode_registry.types import ShortcodeCallback, ShortcodeConfig

__all__ = [
    "VERSION",
    "AddResult",
    "EmptyRegistrationSetError",
    "Host",
    "InvalidCallbackError",
    "InvalidTagError",
    "JsonFlagStore",
    "MemoryFlagStore",
    "MemoryHost",
    "ShortcodeCallback",
    "ShortcodeConfig",
    "ShortcodeDefinition",
    "ShortcodeError",
    "ShortcodeRegistry",
    "get_default_registry",
    "register",
    "register_shortcodes",
    "reset_default_registry",
    "unregister",
    "unregister_shortcodes",
]
