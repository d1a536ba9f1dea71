"""
ShortcodeRegistry — declare shortcodes as plain config, install them on a host.

A registry validates and stores definitions keyed by unprefixed tag, then
binds one dispatch wrapper per tag with the host under the prefixed tag.
Bad entries are logged (debug mode) and skipped, never raised.
"""

from __future__ import annotations

import sys

from shortcode_registry import config
from shortcode_registry._utils import format_log_line, option_key, prefix_tag
from shortcode_registry.exceptions import EmptyRegistrationSetError, ShortcodeError
from shortcode_registry.models import AddResult, ShortcodeDefinition


class ShortcodeRegistry:
    """Holds shortcode definitions and installs/uninstalls them on a host."""

    def __init__(self, host, prefix="", debug=None):
        self.host = host
        self.prefix = prefix or ""
        # Read once; later changes to config.DEBUG do not affect this registry.
        self.debug = config.DEBUG if debug is None else bool(debug)
        self._definitions: dict[str, ShortcodeDefinition] = {}

    def __len__(self):
        return len(self._definitions)

    def __contains__(self, tag):
        return tag in self._definitions

    def _log(self, message):
        """Emit one debug line to stderr when debug is enabled."""
        if not self.debug:
            return
        print(format_log_line(message, self.prefix), file=sys.stderr)

    # -- building --

    def set_prefix(self, prefix):
        self.prefix = prefix or ""
        return self

    def _add(self, tag, shortcode):
        try:
            definition = ShortcodeDefinition.from_config(tag, shortcode)
        except ShortcodeError as e:
            self._log(str(e))
            return AddResult.skipped(tag, e)
        self._definitions[tag] = definition
        return AddResult.ok(tag)

    def add(self, tag, shortcode):
        """Add (or overwrite) one definition. Invalid input is skipped."""
        self._add(tag, shortcode)
        return self

    def add_batch(self, shortcodes):
        """Add every entry of a {tag: config} mapping, in iteration order.

        Returns one AddResult per entry. There is no rollback: valid
        entries are kept even when others are skipped.
        """
        if not shortcodes:
            return []
        return [self._add(tag, shortcode) for tag, shortcode in shortcodes.items()]

    def list_definitions(self):
        """Return a copy of the stored {tag: ShortcodeDefinition} mapping."""
        return dict(self._definitions)

    def get_definition(self, tag):
        """Return the definition for an unprefixed tag. Raises KeyError if unknown."""
        try:
            return self._definitions[tag]
        except KeyError:
            raise KeyError(f"Unknown shortcode: {tag!r}") from None

    # -- host side --

    def _installed_key(self):
        return option_key(config.INSTALLED_OPTION, self.prefix)

    def _make_wrapper(self, tag):
        def dispatch(attributes=None, content=None):
            # Resolve at call time so a later add() for this tag is honored.
            definition = self._definitions[tag]
            merged = self.host.merge_attributes(definition.attributes, attributes, tag)
            return definition.callback(merged, content, tag)

        dispatch.__name__ = f"shortcode_{tag.replace('-', '_')}"
        return dispatch

    def _require_definitions(self):
        if not self._definitions:
            raise EmptyRegistrationSetError("No shortcodes to install")

    def install(self):
        """Bind every stored definition on the host. False if there are none."""
        try:
            self._require_definitions()
        except EmptyRegistrationSetError as e:
            self._log(str(e))
            return False

        for tag in self._definitions:
            self.host.register_dispatch(prefix_tag(tag, self.prefix), self._make_wrapper(tag))
            self._log(f"Registered shortcode: {tag}")

        self.host.set_flag(self._installed_key(), True)
        return True

    def uninstall(self):
        """Unbind every stored tag and clear the installed flag.

        The stored definitions are left untouched.
        """
        for tag in self._definitions:
            self.host.remove_dispatch(prefix_tag(tag, self.prefix))
            self._log(f"Removed shortcode: {tag}")

        self.host.clear_flag(self._installed_key())
        return True

    def is_installed(self):
        """Read the durable installed flag for the current prefix."""
        return bool(self.host.get_flag(self._installed_key(), False))
