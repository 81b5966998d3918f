"""Localizable date/time formatting data.

``DateFormatSymbols`` holds the names a date formatter needs for one locale:
eras, month and weekday names (full and abbreviated), AM/PM markers, the
localized pattern characters and the time-zone display names.

Every list handed out by a getter is a fresh copy and every setter stores a
copy of its argument, so callers cannot reach the internal lists. The one
exception is ``set_zone_strings``, which copies the outer list only.

Zone names are not read at construction. They are loaded from the locale the
first time they are needed (``get_zone_strings``, equality, hashing or
serialization) and cached for the life of the instance.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Sequence

from .core.errors import InvalidArgumentError
from .core.locale import Locale, get_default_locale
from .core.logging_config import get_logger
from .core.resources import LocaleResources, ZoneRow, default_resources


log = get_logger(__name__)

_ARRAY_FIELDS = ("_ampms", "_eras", "_months", "_short_months", "_short_weekdays", "_weekdays")


def _copy(data: Optional[Sequence[Any]], name: str) -> List[Any]:
    if data is None:
        raise InvalidArgumentError(f"{name[0].upper()}{name[1:]} must not be None")
    return list(data)


class DateFormatSymbols:
    """Date/time formatting symbols for a single locale.

    Index conventions follow the calendar: ``get_months()[0]`` is January,
    ``get_weekdays()[0]`` is Sunday, ``get_am_pm_strings()[0]`` is AM and
    ``get_eras()[0]`` is BC. Month lists may carry a 13th entry for calendars
    with an intercalary month (empty in Gregorian data).
    """

    def __init__(
        self,
        locale: "Locale | str | None" = None,
        *,
        provider: Optional[LocaleResources] = None,
    ) -> None:
        self.locale: Optional[Locale] = get_default_locale() if locale is None else Locale.parse(locale)
        self._provider = provider or default_resources
        bundle = self._provider.get_bundle(self.locale)
        self._local_pattern_chars: str = bundle.local_pattern_chars
        self._ampms: List[str] = list(bundle.ampm)
        self._eras: List[str] = list(bundle.eras)
        self._months: List[str] = list(bundle.months)
        self._short_months: List[str] = list(bundle.short_months)
        self._short_weekdays: List[str] = list(bundle.short_weekdays)
        self._weekdays: List[str] = list(bundle.weekdays)
        self._zone_strings: Optional[List[ZoneRow]] = None
        self._zone_lock = threading.Lock()

    # --- zone strings -------------------------------------------------

    def _internal_zone_strings(self) -> List[ZoneRow]:
        """Zone table without a defensive copy; loads it on first use."""
        with self._zone_lock:
            if self._zone_strings is None:
                self._zone_strings = self._provider.get_display_time_zones(self.locale)
                log.debug("Loaded %d zone rows for %s", len(self._zone_strings), self.locale)
            return self._zone_strings

    def get_zone_strings(self) -> List[ZoneRow]:
        """Rows of zone id, long and short standard name, long and short daylight name."""
        return [list(row) for row in self._internal_zone_strings()]

    def set_zone_strings(self, data: Sequence[ZoneRow]) -> None:
        # Rows are stored as given; only the outer list is copied.
        rows = _copy(data, "zone strings")
        # Taken under the lock so a load already in progress cannot overwrite it
        with self._zone_lock:
            self._zone_strings = rows

    # --- simple symbol arrays -----------------------------------------

    def get_am_pm_strings(self) -> List[str]:
        return list(self._ampms)

    def set_am_pm_strings(self, data: Sequence[str]) -> None:
        self._ampms = _copy(data, "AM/PM strings")

    def get_eras(self) -> List[str]:
        return list(self._eras)

    def set_eras(self, data: Sequence[str]) -> None:
        self._eras = _copy(data, "eras")

    def get_months(self) -> List[str]:
        return list(self._months)

    def set_months(self, data: Sequence[str]) -> None:
        self._months = _copy(data, "months")

    def get_short_months(self) -> List[str]:
        return list(self._short_months)

    def set_short_months(self, data: Sequence[str]) -> None:
        self._short_months = _copy(data, "short months")

    def get_weekdays(self) -> List[str]:
        return list(self._weekdays)

    def set_weekdays(self, data: Sequence[str]) -> None:
        self._weekdays = _copy(data, "weekdays")

    def get_short_weekdays(self) -> List[str]:
        return list(self._short_weekdays)

    def set_short_weekdays(self, data: Sequence[str]) -> None:
        self._short_weekdays = _copy(data, "short weekdays")

    def get_local_pattern_chars(self) -> str:
        """Pattern letters for era, year, month, day, ... in formatter order."""
        return self._local_pattern_chars

    def set_local_pattern_chars(self, data: str) -> None:
        if data is None:
            raise InvalidArgumentError("Local pattern chars must not be None")
        self._local_pattern_chars = data

    # --- object protocol ----------------------------------------------

    def clone(self) -> DateFormatSymbols:
        """Shallow copy: the clone shares this instance's lists."""
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        other._zone_lock = threading.Lock()
        return other

    __copy__ = clone

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DateFormatSymbols):
            return NotImplemented
        if self._local_pattern_chars != other._local_pattern_chars:
            return False
        for name in _ARRAY_FIELDS:
            if getattr(self, name) != getattr(other, name):
                return False
        # Neither table loaded yet: the locale decides without touching resources
        if self._zone_strings is None and other._zone_strings is None:
            if self.locale != other.locale:
                return False
            if self._provider is other._provider:
                return True
        mine = self._internal_zone_strings()
        theirs = other._internal_zone_strings()
        if len(mine) != len(theirs):
            return False
        return all(list(a) == list(b) for a, b in zip(mine, theirs))

    def __hash__(self) -> int:
        h = hash(self._local_pattern_chars)
        for name in _ARRAY_FIELDS:
            h += sum(hash(s) for s in getattr(self, name))
        for row in self._internal_zone_strings():
            h += sum(hash(s) for s in row if s is not None)
        return h

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(locale={str(self.locale) if self.locale else None!r})"

    # --- pickling -----------------------------------------------------

    def __getstate__(self) -> Dict[str, Any]:
        # Zone names must travel with the data; the locale and provider do not.
        self._internal_zone_strings()
        state = self.__dict__.copy()
        state["_zone_strings"] = [list(row) for row in self._zone_strings or []]
        for key in ("locale", "_provider", "_zone_lock"):
            state.pop(key, None)
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)
        self.locale = None
        self._provider = default_resources
        self._zone_lock = threading.Lock()
