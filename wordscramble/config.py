from __future__ import annotations
import logging
import os
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / 'data'


class Config:
    START_WORDS_PATH = os.environ.get('WORDSCRAMBLE_START_WORDS') or str(DATA_DIR / 'start.txt')
    # Plain word list replacing the wordfreq lexicon when set
    DICTIONARY_PATH = os.environ.get('WORDSCRAMBLE_DICTIONARY') or None
    DICTIONARY_SIZE = int(os.environ.get('WORDSCRAMBLE_DICTIONARY_SIZE', '200000'))
    LANGUAGE = os.environ.get('WORDSCRAMBLE_LANGUAGE', 'en')
    # Used only when the start word list is empty
    FALLBACK_ROOT = os.environ.get('WORDSCRAMBLE_FALLBACK_ROOT', 'silkworm')
    CORS_ORIGINS = [o.strip() for o in os.environ.get('WORDSCRAMBLE_CORS_ORIGINS', '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


def configure_logging(level: str = Config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
