"""JSON snapshots of DateFormatSymbols.

A snapshot always carries the zone table, loading it first if needed, so it
can be restored where no resource bundles are available. Like a pickled
instance, a restored one has no locale.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .symbols import DateFormatSymbols


log = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class SymbolSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: int = SNAPSHOT_VERSION
    local_pattern_chars: str
    am_pm: List[str]
    eras: List[str]
    months: List[str]
    short_months: List[str]
    weekdays: List[str]
    short_weekdays: List[str]
    zone_strings: List[List[Optional[str]]] = Field(default_factory=list)

    @classmethod
    def from_symbols(cls, symbols: DateFormatSymbols) -> SymbolSnapshot:
        return cls(
            local_pattern_chars=symbols.get_local_pattern_chars(),
            am_pm=symbols.get_am_pm_strings(),
            eras=symbols.get_eras(),
            months=symbols.get_months(),
            short_months=symbols.get_short_months(),
            weekdays=symbols.get_weekdays(),
            short_weekdays=symbols.get_short_weekdays(),
            zone_strings=symbols.get_zone_strings(),
        )

    def to_symbols(self) -> DateFormatSymbols:
        symbols = DateFormatSymbols.__new__(DateFormatSymbols)
        symbols.__setstate__(
            {
                "_local_pattern_chars": self.local_pattern_chars,
                "_ampms": list(self.am_pm),
                "_eras": list(self.eras),
                "_months": list(self.months),
                "_short_months": list(self.short_months),
                "_short_weekdays": list(self.short_weekdays),
                "_weekdays": list(self.weekdays),
                "_zone_strings": [list(row) for row in self.zone_strings],
            }
        )
        return symbols


def dumps(symbols: DateFormatSymbols, indent: Optional[int] = None) -> str:
    return SymbolSnapshot.from_symbols(symbols).model_dump_json(indent=indent)


def loads(text: str | bytes) -> DateFormatSymbols:
    snapshot = SymbolSnapshot.model_validate_json(text)
    if snapshot.version != SNAPSHOT_VERSION:
        log.warning("Loading snapshot version %s (current is %s)", snapshot.version, SNAPSHOT_VERSION)
    return snapshot.to_symbols()
