from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from typing import List

from .config import settings
from .errors import InvalidArgumentError


log = logging.getLogger(__name__)

_TAG_RE = re.compile(r"^(?P<lang>[A-Za-z]{2,8})(?:[_-](?P<country>[A-Za-z]{2}|\d{3})?(?:[_-](?P<variant>[\w-]+))?)?$")


@dataclass(frozen=True)
class Locale:
    """A language, optional country and optional variant.

    Rendered as ``lang[_COUNTRY[_variant]]``, which is also the name of the
    resource bundle that backs it.
    """

    language: str
    country: str = ""
    variant: str = ""

    def __post_init__(self) -> None:
        if not self.language:
            raise InvalidArgumentError("Locale language must not be empty")
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "country", self.country.upper())

    @classmethod
    def parse(cls, tag: "str | Locale") -> Locale:
        if isinstance(tag, Locale):
            return tag
        if tag is None:
            raise InvalidArgumentError("Locale tag must not be None")
        m = _TAG_RE.match(tag.strip())
        if not m:
            raise InvalidArgumentError(f"Invalid locale tag: {tag!r}")
        return cls(m.group("lang"), m.group("country") or "", m.group("variant") or "")

    def fallback_chain(self) -> List[str]:
        """Bundle names to try, most specific first."""
        chain: List[str] = []
        if self.variant:
            chain.append(f"{self.language}_{self.country}_{self.variant}")
        if self.country:
            chain.append(f"{self.language}_{self.country}")
        chain.append(self.language)
        return chain

    def __str__(self) -> str:
        return self.fallback_chain()[0]


_default_lock = threading.Lock()
_default: Locale | None = None


def get_default_locale() -> Locale:
    global _default
    with _default_lock:
        if _default is None:
            _default = Locale.parse(settings.DEFAULT_LOCALE)
        return _default


def set_default_locale(locale: "Locale | str") -> None:
    """Replace the process-wide default locale."""
    global _default
    if locale is None:
        raise InvalidArgumentError("Default locale must not be None")
    parsed = Locale.parse(locale)
    with _default_lock:
        _default = parsed
    log.info("Default locale set to %s", parsed)
