import asyncio

import pytest
import requests

from packages.engine import Validator, DictionaryLookup, ValidationUnavailable
from packages.wordbank import Difficulty, load_catalog


def _check(validator, word):
    return asyncio.run(validator.is_acceptable(word))


def test_every_secret_word_is_acceptable_offline():
    catalog = load_catalog()
    validator = Validator(catalog)  # no lookup: closed world
    for d in Difficulty:
        for w in catalog.words_for(d):
            assert _check(validator, w) is True


def test_dictionary_tier_does_not_call_lookup(catalog, fake_lookup):
    lookup = fake_lookup()
    v = Validator(catalog, lookup)
    assert _check(v, "crane") is True
    assert _check(v, "SLATE") is True
    assert lookup.calls == []


def test_lookup_decides_unknown_words(catalog, fake_lookup):
    lookup = fake_lookup(known=["fjeld"])
    v = Validator(catalog, lookup)
    assert _check(v, "FJELD") is True
    assert _check(v, "QWERT") is False
    assert lookup.calls == ["fjeld", "qwert"]


def test_lookup_failure_fails_open(catalog, fake_lookup):
    v = Validator(catalog, fake_lookup(error=ValidationUnavailable("offline")))
    assert _check(v, "QWERT") is True


def test_without_lookup_unknown_words_are_rejected(catalog):
    assert _check(Validator(catalog), "QWERT") is False


@pytest.mark.parametrize("word", ["", "CRAN", "CRANES", "CR4NE", "crâne"])
def test_malformed_words_are_rejected(catalog, fake_lookup, word):
    lookup = fake_lookup(known=[word])
    assert _check(Validator(catalog, lookup), word) is False
    assert lookup.calls == []


# --- DictionaryLookup over a stub HTTP session ---

class _Response:
    def __init__(self, status_code):
        self.status_code = status_code
        self.ok = 200 <= status_code < 400


class _Session:
    def __init__(self, status_code=200, error=None):
        self.status_code = status_code
        self.error = error
        self.urls = []
        self.timeouts = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return _Response(self.status_code)


def _exists(lookup, word):
    return asyncio.run(lookup.exists(word))


def test_dictionary_lookup_found_and_missing():
    s = _Session(200)
    lookup = DictionaryLookup("https://dict.example/{word}", session=s)
    assert _exists(lookup, "QWERT") is True
    assert s.urls == ["https://dict.example/qwert"]
    assert s.timeouts == [None]

    assert _exists(DictionaryLookup("https://dict.example/{word}", session=_Session(404)), "qwert") is False


@pytest.mark.parametrize("session", [
    _Session(500),
    _Session(429),
    _Session(error=requests.ConnectionError("no route")),
    _Session(error=requests.Timeout("slow")),
])
def test_dictionary_lookup_unavailable(session):
    lookup = DictionaryLookup("https://dict.example/{word}", timeout=2.5, session=session)
    with pytest.raises(ValidationUnavailable):
        _exists(lookup, "qwert")


def test_validator_fails_open_on_transport_error(catalog):
    lookup = DictionaryLookup("https://dict.example/{word}",
                              session=_Session(error=requests.ConnectionError("down")))
    assert _check(Validator(catalog, lookup), "QWERT") is True
