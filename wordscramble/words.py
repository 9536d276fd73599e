from __future__ import annotations
import logging
import random
from typing import List, Optional

from .errors import ResourceMissing

logger = logging.getLogger(__name__)

DEFAULT_ROOT = 'silkworm'


def read_word_list(path: str) -> List[str]:
    """Read a newline-delimited word list: one lowercase word per line, no header.

    Blank lines (including the trailing newline most editors leave behind)
    are skipped. Any failure to open or decode the file is a ResourceMissing.
    """
    try:
        with open(path, 'r', encoding='utf-8') as fid:
            text = fid.read()
    except FileNotFoundError:
        raise ResourceMissing(path) from None
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceMissing(path, str(exc)) from exc
    words = []
    for line in text.split('\n'):
        word = line.strip().lower()
        if word:
            words.append(word)
    return words


class WordSource:
    def __init__(self, path: Optional[str] = None, words: Optional[List[str]] = None,
                 rng: Optional[random.Random] = None, fallback: str = DEFAULT_ROOT):
        self.path = path
        self.fallback = fallback
        self._rng = rng or random.Random()
        self._words: Optional[List[str]] = list(words) if words is not None else None

    @property
    def loaded(self) -> bool:
        return self._words is not None

    def load(self) -> List[str]:
        if self._words is None:
            if self.path is None:
                raise ResourceMissing('<unset>', 'no word list configured')
            self._words = read_word_list(self.path)
            logger.info("Loaded %d start words from %s", len(self._words), self.path)
        return self._words

    def pick_root(self) -> str:
        words = self.load()
        if not words:
            logger.warning("Start word list is empty, using %r", self.fallback)
            return self.fallback
        return self._rng.choice(words)
