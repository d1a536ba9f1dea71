"""
Host platform adapter — the tag dispatch table, attribute merging and
durable flag storage the registry talks to.

MemoryHost is a complete in-process host. Flag storage is pluggable so
the installed flag can outlive the process (JsonFlagStore).
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Mapping
from typing import Any, Protocol

from shortcode_registry import config


class Host(Protocol):
    """What a shortcode registry needs from the platform it runs on."""

    def register_dispatch(self, tag: str, wrapper) -> None: ...

    def remove_dispatch(self, tag: str) -> None: ...

    def merge_attributes(self, defaults: Mapping, raw: Any, tag: str = "") -> dict: ...

    def get_flag(self, key: str, default: Any = None) -> Any: ...

    def set_flag(self, key: str, value: Any) -> None: ...

    def clear_flag(self, key: str) -> None: ...


# ---------------------------------------------------------------------------
# Flag stores
# ---------------------------------------------------------------------------


class MemoryFlagStore:
    """Flags kept in a dict. Lives as long as the object."""

    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value

    def delete(self, key):
        self._data.pop(key, None)

    def as_dict(self):
        return dict(self._data)


class JsonFlagStore:
    """Flags persisted to a JSON object file.

    Every write rewrites the whole file via temp file + rename. A missing
    or unreadable file reads as empty.
    """

    def __init__(self, path):
        self.path = os.fspath(path)

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data):
        target_dir = os.path.dirname(self.path) or "."
        os.makedirs(target_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, prefix=".flags_tmp_")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except Exception:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise
        # Owner-only on Unix/Mac. No-op on Windows.
        try:
            os.chmod(self.path, 0o600)
        except (OSError, NotImplementedError):
            pass

    def get(self, key, default=None):
        return self._load().get(key, default)

    def set(self, key, value):
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key):
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def as_dict(self):
        return self._load()


# ---------------------------------------------------------------------------
# In-process host
# ---------------------------------------------------------------------------


def _normalize_raw(raw):
    """Raw attributes arrive as a mapping, or None/'' when the tag had none."""
    if raw is None or raw == "":
        return {}
    if isinstance(raw, Mapping):
        return raw
    return dict(raw)


class MemoryHost:
    """Dispatch table + attribute merge + flag storage, all in-process."""

    def __init__(self, flags=None):
        self.flags = flags if flags is not None else MemoryFlagStore()
        self._dispatch = {}
        self._attribute_filters = {}

    # -- dispatch table --

    def register_dispatch(self, tag, wrapper):
        self._dispatch[tag] = wrapper

    def remove_dispatch(self, tag):
        self._dispatch.pop(tag, None)

    def has_dispatch(self, tag):
        return tag in self._dispatch

    def dispatch_tags(self):
        """Return bound tags in binding order."""
        return tuple(self._dispatch)

    def dispatch(self, tag, attributes=None, content=None):
        """Expand one tag: call its bound wrapper. Raises KeyError if unbound."""
        try:
            wrapper = self._dispatch[tag]
        except KeyError:
            raise KeyError(f"No shortcode bound to tag: {tag!r}") from None
        return wrapper(attributes, content)

    # -- attributes --

    def add_attribute_filter(self, tag, fn):
        """Register fn(out, defaults, raw, tag) -> dict, run after merging for tag."""
        self._attribute_filters.setdefault(tag, []).append(fn)

    def merge_attributes(self, defaults, raw, tag=""):
        """Merge raw use-site attributes over defaults.

        Only keys present in defaults survive; raw values override them.
        """
        raw = _normalize_raw(raw)
        out = {name: raw[name] if name in raw else default for name, default in defaults.items()}
        if tag:
            for fn in self._attribute_filters.get(tag, ()):
                out = fn(out, dict(defaults), dict(raw), tag)
        return out

    # -- flags --

    def get_flag(self, key, default=None):
        return self.flags.get(key, default)

    def set_flag(self, key, value):
        self.flags.set(key, value)

    def clear_flag(self, key):
        self.flags.delete(key)


def default_host():
    """Build the host used by the shared default registry."""
    if config.FLAG_STORE_PATH:
        return MemoryHost(flags=JsonFlagStore(config.FLAG_STORE_PATH))
    return MemoryHost()
