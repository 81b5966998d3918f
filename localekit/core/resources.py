from __future__ import annotations

import json
import logging
import threading
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import settings
from .errors import ResourceMissingError
from .locale import Locale


log = logging.getLogger(__name__)

PACKAGE = "localekit.locales"

ZoneRow = List[Optional[str]]


class SymbolBundle(BaseModel):
    """Date/time symbols of one resource bundle, keyed as in the JSON files."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    local_pattern_chars: str = Field(alias="LocalPatternChars")
    ampm: List[str]
    eras: List[str]
    months: List[str]
    short_months: List[str] = Field(alias="shortMonths")
    weekdays: List[str]
    short_weekdays: List[str] = Field(alias="shortWeekdays")


class LocaleResources:
    """Resolves locale bundles from packaged JSON files and extra directories.

    Each bundle is a ``<tag>.json`` file. Lookups walk the locale's fallback
    chain (``en_GB`` then ``en``) and merge what they find, keys from the
    more specific bundle winning. Files from ``extra_dirs`` shadow packaged
    files of the same name.
    """

    def __init__(self, extra_dirs: Optional[Iterable[Path]] = None) -> None:
        self.extra_dirs: List[Path] = [Path(d) for d in (extra_dirs if extra_dirs is not None else settings.RESOURCE_DIRS)]
        self._raw: Dict[str, Optional[Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def _read(self, tag: str) -> Optional[Dict[str, Any]]:
        for d in self.extra_dirs:
            path = d / f"{tag}.json"
            if path.is_file():
                with path.open(encoding="utf-8") as fh:
                    return json.load(fh)
        res = resources.files(PACKAGE).joinpath(f"{tag}.json")
        if res.is_file():
            return json.loads(res.read_text(encoding="utf-8"))
        return None

    def _load(self, tag: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            if tag not in self._raw:
                try:
                    data = self._read(tag)
                except ValueError as e:  # JSONDecodeError, UnicodeDecodeError
                    log.warning("Bundle %s is not valid JSON: %s", tag, e)
                    raise ResourceMissingError(f"Bundle {tag} is not valid JSON", locale=tag) from e
                if data is not None and not isinstance(data, dict):
                    raise ResourceMissingError(f"Bundle {tag} is not a JSON object", locale=tag)
                self._raw[tag] = data
                log.debug("Loaded bundle %s (%s)", tag, "found" if data is not None else "absent")
            return self._raw[tag]

    def _resolve(self, locale: Locale) -> tuple[str, Dict[str, Any]] | None:
        """Merge every bundle on the fallback chain, specific keys winning.

        Returns the most specific tag found and the merged data, or None when
        no bundle on the chain exists.
        """
        found = [(tag, data) for tag in locale.fallback_chain() if (data := self._load(tag)) is not None]
        if not found:
            return None
        merged: Dict[str, Any] = {}
        for _, data in reversed(found):
            merged.update(data)
        return found[0][0], merged

    def get_bundle(self, locale: "Locale | str") -> SymbolBundle:
        loc = Locale.parse(locale)
        found = self._resolve(loc)
        if found is None:
            log.warning("No resource bundle for locale %s", loc)
            raise ResourceMissingError(f"Can't find resource bundle for locale {loc}", locale=loc)
        tag, data = found
        try:
            return SymbolBundle.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(p) for p in first.get("loc", ()))
            log.warning("Bundle %s is unusable: %s", tag, e)
            raise ResourceMissingError(
                f"Can't find resource {key!r} in bundle {tag}", locale=loc, key=key
            ) from e

    def get_display_time_zones(self, locale: "Locale | str") -> List[ZoneRow]:
        """Zone display rows: id, long/short standard name, long/short daylight name."""
        loc = Locale.parse(locale)
        found = self._resolve(loc)
        if found is None or "zoneStrings" not in found[1]:
            log.debug("No zone strings for locale %s", loc)
            return []
        tag, data = found
        rows = data["zoneStrings"]
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise ResourceMissingError(f"zoneStrings in bundle {tag} is not a list", locale=tag, key="zoneStrings")
        return [_zone_row(row, tag) for row in rows]

    def available_locales(self) -> List[str]:
        tags = {p.stem for d in self.extra_dirs if d.is_dir() for p in d.glob("*.json")}
        tags.update(
            Path(entry.name).stem
            for entry in resources.files(PACKAGE).iterdir()
            if entry.name.endswith(".json")
        )
        return sorted(tags)


def _zone_row(row: Sequence[Any], tag: str) -> ZoneRow:
    if not isinstance(row, (list, tuple)) or len(row) != 5:
        raise ResourceMissingError(f"Malformed zone row {row!r} in bundle {tag}", locale=tag, key="zoneStrings")
    return [None if v is None else str(v) for v in row]


default_resources = LocaleResources()
