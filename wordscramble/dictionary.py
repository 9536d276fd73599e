from __future__ import annotations
import logging
from typing import Iterable, Optional, Set

from wordfreq import top_n_list

from .errors import ResourceMissing
from .words import read_word_list

logger = logging.getLogger(__name__)

# Spelling oracle for a single language pack.
# By default backed by the wordfreq lexicon; a plain word list file can replace it.

DEFAULT_LANGUAGE = 'en'
DEFAULT_LEXICON_SIZE = 200000


class DictionaryService:
    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        # Store lowercase alphabetic words only
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip().isalpha()}
        self.language = language

    @classmethod
    def from_wordfreq(cls, language: str = DEFAULT_LANGUAGE, size: int = DEFAULT_LEXICON_SIZE) -> 'DictionaryService':
        try:
            words = top_n_list(language, size, wordlist='best')
        except (LookupError, ValueError) as exc:
            raise ResourceMissing(f"wordfreq:{language}", str(exc)) from exc
        if not words:
            raise ResourceMissing(f"wordfreq:{language}", 'no word list for this language')
        service = cls(words, language=language)
        logger.info("Loaded %d dictionary words (%s) from wordfreq", len(service), language)
        return service

    @classmethod
    def from_file(cls, path: str, language: str = DEFAULT_LANGUAGE) -> 'DictionaryService':
        service = cls(read_word_list(path), language=language)
        logger.info("Loaded %d dictionary words (%s) from %s", len(service), language, path)
        return service

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def is_valid(self, word: str, language: Optional[str] = None) -> bool:
        if not word:
            return False
        # Only one language pack is loaded
        if language is not None and language != self.language:
            return False
        return word.strip().lower() in self._words
