"""
Tiered guess validation.

This module answers the question: "Is this word an acceptable guess?"
Tiers, short-circuiting on the first that decides:
  1) secret candidates (any difficulty)  -> accept; the secret is always legal
  2) permissive dictionary               -> accept, no suspension
  3) external word lookup                -> accept / reject on a definitive
                                            answer; FAIL OPEN when the lookup
                                            is unavailable so offline play works

Only tier 3 suspends. The lookup is pluggable: anything with an
`async exists(word: str) -> bool` that raises ValidationUnavailable when it
cannot decide. Without a lookup the validator is closed-world (tiers 1-2).
"""

from __future__ import annotations

import asyncio
from typing import Optional

import requests

from packages.utils.game_logger import game_logger
from packages.wordbank.catalog import WordCatalog, is_word
from .errors import ValidationUnavailable


class DictionaryLookup:
    """
    Word-existence check against a dictionary HTTP API.

    `url_template` receives the lowercase word as `{word}`. HTTP 200 means
    the word exists, 404 means it does not; any other status or a transport
    error raises ValidationUnavailable.

    `timeout` is passed straight to requests; None waits indefinitely.
    """

    def __init__(self, url_template: str, *, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.url_template = url_template
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, word: str) -> requests.Response:
        url = self.url_template.format(word=word.lower())
        return self.session.get(url, timeout=self.timeout)

    async def exists(self, word: str) -> bool:
        try:
            # requests is blocking; keep the event loop free while it runs
            r = await asyncio.to_thread(self._get, word)
        except requests.RequestException as e:
            raise ValidationUnavailable(str(e)) from e

        if r.ok:
            return True
        if r.status_code == 404:
            return False
        raise ValidationUnavailable(f"lookup returned HTTP {r.status_code}")


class Validator:
    """Decides whether a submitted word may be played."""

    def __init__(self, catalog: WordCatalog, lookup=None):
        self.catalog = catalog
        self.lookup = lookup
        # Frozen views computed once; the catalog never changes
        self._secrets = catalog.secret_candidates
        self._dictionary = catalog.dictionary

    async def is_acceptable(self, word: str) -> bool:
        """
        Return True if `word` is an acceptable guess.

        Never raises for lookup failures: those resolve to True.
        """
        w = word.strip().upper()
        if not is_word(w):
            return False

        if w in self._secrets:
            game_logger.log_validation(w, "secret", True)
            return True
        if w in self._dictionary:
            game_logger.log_validation(w, "dictionary", True)
            return True
        if self.lookup is None:
            game_logger.log_validation(w, "closed", False)
            return False

        try:
            found = await self.lookup.exists(w.lower())
        except ValidationUnavailable as e:
            game_logger.log_error(e, "lookup_fail_open", word=w)
            return True

        game_logger.log_validation(w, "lookup", found)
        return bool(found)
