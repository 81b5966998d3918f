"""Locale data for date/time formatting and text-attribute keys."""

from .core.errors import InvalidArgumentError, LocaleKitError, ResourceMissingError
from .core.locale import Locale, get_default_locale, set_default_locale
from .core.resources import LocaleResources, SymbolBundle, default_resources
from .symbols import DateFormatSymbols
from .text_attribute import TextAttribute

__all__ = [
    "DateFormatSymbols",
    "Locale",
    "LocaleResources",
    "SymbolBundle",
    "TextAttribute",
    "default_resources",
    "get_default_locale",
    "set_default_locale",
    # Errors
    "LocaleKitError",
    "ResourceMissingError",
    "InvalidArgumentError",
]
