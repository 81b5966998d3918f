"""Error types raised by localekit."""

from __future__ import annotations

from typing import Any


class LocaleKitError(Exception):
    """Base class for every error raised by this package."""


class ResourceMissingError(LocaleKitError, LookupError):
    """No resource data is registered for a locale, or a bundle lacks a key."""

    def __init__(self, message: str, *, locale: Any = None, key: str | None = None) -> None:
        super().__init__(message)
        self.locale = locale
        self.key = key


class InvalidArgumentError(LocaleKitError, ValueError):
    """A required value was None or not one of the accepted values."""
