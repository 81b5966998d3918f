import json
import pickle

import pytest
from pydantic import ValidationError

from localekit import DateFormatSymbols
from localekit.serialization import SymbolSnapshot, dumps, loads


def test_pickle_forces_zone_population(counting_resources):
    symbols = DateFormatSymbols("en", provider=counting_resources)
    data = pickle.dumps(symbols)
    assert counting_resources.zone_calls == 1

    restored = pickle.loads(data)
    assert restored.locale is None
    assert restored.get_zone_strings() == symbols.get_zone_strings()
    assert restored.get_months() == symbols.get_months()
    assert restored == symbols
    assert counting_resources.zone_calls == 1


def test_pickle_keeps_mutations():
    symbols = DateFormatSymbols("fr")
    symbols.set_local_pattern_chars("xyz")
    symbols.set_zone_strings([["A/B", "a", "b", None, None]])
    restored = pickle.loads(pickle.dumps(symbols))
    assert restored.get_local_pattern_chars() == "xyz"
    assert restored.get_zone_strings() == [["A/B", "a", "b", None, None]]


def test_json_round_trip():
    symbols = DateFormatSymbols("de")
    text = dumps(symbols)
    payload = json.loads(text)
    assert payload["months"][0] == "Januar"
    assert payload["zone_strings"]

    restored = loads(text)
    assert restored == symbols
    assert restored.locale is None
    assert restored.get_short_weekdays() == symbols.get_short_weekdays()


def test_snapshot_from_symbols_copies():
    symbols = DateFormatSymbols("en")
    snapshot = SymbolSnapshot.from_symbols(symbols)
    symbols.set_months(["changed"])
    assert snapshot.months[0] == "January"


def test_snapshot_missing_field_rejected():
    with pytest.raises(ValidationError):
        loads('{"months": []}')
