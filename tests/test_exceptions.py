"""Tests for the exception hierarchy and package re-exports."""

from shortcode_registry.exceptions import (
    EmptyRegistrationSetError,
    InvalidCallbackError,
    InvalidTagError,
    ShortcodeError,
)


class TestExceptionHierarchy:
    def test_all_are_shortcode_errors(self):
        for cls in (InvalidTagError, InvalidCallbackError, EmptyRegistrationSetError):
            assert issubclass(cls, ShortcodeError)

    def test_reason_codes(self):
        assert InvalidTagError.reason == "invalid_tag"
        assert InvalidCallbackError.reason == "invalid_callback"
        assert EmptyRegistrationSetError.reason == "empty_registration_set"


class TestReExports:
    def test_init_re_exports(self):
        import shortcode_registry

        assert shortcode_registry.ShortcodeError is ShortcodeError
        assert shortcode_registry.InvalidTagError is InvalidTagError
        assert callable(shortcode_registry.register)
        assert callable(shortcode_registry.unregister)
