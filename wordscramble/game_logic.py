from __future__ import annotations
import logging
from typing import List, Optional

from .dictionary import DEFAULT_LANGUAGE, DictionaryService
from .errors import SessionNotStarted, ValidationRejection
from .schemas import AcceptedWord, SessionState, SubmitResult
from .words import WordSource

logger = logging.getLogger(__name__)

# Entries this short are treated as stray keystrokes, not answers
MIN_WORD_LENGTH = 3


def normalize(raw: str) -> str:
    return raw.strip().lower()


def can_spell(word: str, root: str) -> bool:
    """True if every letter of word can be taken from root, each root letter used at most once."""
    remaining = list(root)
    for letter in word:
        try:
            remaining.remove(letter)
        except ValueError:
            return False
    return True


class GameSession:
    """One player's round: a root word, the words found so far and the score.

    The session is idle until the first reset(); after that every reset()
    re-rolls the root word and clears the history.
    """

    def __init__(self, source: WordSource, dictionary: DictionaryService,
                 language: str = DEFAULT_LANGUAGE):
        self.source = source
        self.dictionary = dictionary
        self.language = language
        self.root_word: Optional[str] = None
        self.used_words: List[str] = []
        self.score = 0

    @property
    def is_active(self) -> bool:
        return self.root_word is not None

    def reset(self) -> None:
        self.root_word = self.source.pick_root()
        self.used_words = []
        self.score = 0
        logger.info("New round with root word %r", self.root_word)

    def is_not_root_word(self, word: str) -> bool:
        return word != self.root_word

    def is_original(self, word: str) -> bool:
        return word not in self.used_words

    def is_possible(self, word: str) -> bool:
        return can_spell(word, self.root_word or '')

    def is_real(self, word: str) -> bool:
        return self.dictionary.is_valid(word, self.language)

    def validate(self, word: str) -> None:
        # Order matters: it decides which alert the player sees
        if not self.is_not_root_word(word):
            raise ValidationRejection('Word not accepted', "You can't enter the given word")
        if not self.is_original(word):
            raise ValidationRejection('Word used already', 'Be more original')
        if not self.is_possible(word):
            raise ValidationRejection('Word not possible', f"You can't spell '{word}' from '{self.root_word}'")
        if not self.is_real(word):
            raise ValidationRejection('Word not recognized', 'The entered word is not real')

    def submit(self, raw: str) -> SubmitResult:
        if not self.is_active:
            raise SessionNotStarted("reset() must be called before submitting words")
        answer = normalize(raw)
        if len(answer) < MIN_WORD_LENGTH:
            return SubmitResult(status='ignored', word=answer)
        try:
            self.validate(answer)
        except ValidationRejection as rejection:
            logger.debug("Rejected %r: %s", answer, rejection)
            return SubmitResult(status='rejected', word=answer,
                                title=rejection.title, message=rejection.message)
        self.used_words.insert(0, answer)
        self.score += 1
        return SubmitResult(status='accepted', word=answer)

    def snapshot(self, game_id: str) -> SessionState:
        return SessionState(
            gameId=game_id,
            rootWord=self.root_word or '',
            score=self.score,
            usedWords=[AcceptedWord(word=w, length=len(w)) for w in self.used_words],
        )
