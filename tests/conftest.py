import json
import threading
import time

import pytest

from localekit.core import locale as locale_mod
from localekit.core.resources import LocaleResources


FULL_BUNDLE = {
    "LocalPatternChars": "GyMdkHmsSEDFwWahKzZ",
    "ampm": ["AM", "PM"],
    "eras": ["BC", "AD"],
    "months": ["M1", "M2", "M3", "M4", "M5", "M6", "M7", "M8", "M9", "M10", "M11", "M12"],
    "shortMonths": ["m1", "m2", "m3", "m4", "m5", "m6", "m7", "m8", "m9", "m10", "m11", "m12"],
    "weekdays": ["D1", "D2", "D3", "D4", "D5", "D6", "D7"],
    "shortWeekdays": ["d1", "d2", "d3", "d4", "d5", "d6", "d7"],
    "zoneStrings": [["Test/Zone", "Test Standard", "TST", "Test Daylight", "TDT"]],
}


class CountingResources(LocaleResources):
    """Packaged resources that count (and optionally slow down) zone lookups."""

    def __init__(self, delay: float = 0.0, **kwargs):
        super().__init__(**kwargs)
        self.delay = delay
        self.zone_calls = 0
        self._count_lock = threading.Lock()

    def get_display_time_zones(self, locale):
        with self._count_lock:
            self.zone_calls += 1
        if self.delay:
            time.sleep(self.delay)
        return super().get_display_time_zones(locale)


@pytest.fixture(autouse=True)
def reset_default_locale(monkeypatch):
    monkeypatch.setattr(locale_mod, "_default", None)


@pytest.fixture
def counting_resources():
    return CountingResources(extra_dirs=[])


@pytest.fixture
def slow_resources():
    return CountingResources(delay=0.05, extra_dirs=[])


@pytest.fixture
def bundle_dir(tmp_path):
    """Directory of extra bundles; write files with ``write(tag, data)``."""

    def write(tag, data):
        path = tmp_path / f"{tag}.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    write.path = tmp_path
    return write
