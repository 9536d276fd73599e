from __future__ import annotations


class WordScrambleError(Exception):
    pass


class ResourceMissing(WordScrambleError):
    """A bundled word list could not be located or read. Fatal at startup."""

    def __init__(self, path: str, reason: str = 'not found'):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load word list {path}: {reason}")


class ValidationRejection(WordScrambleError):
    """A candidate failed one of the vocal checks; carries the alert text."""

    def __init__(self, title: str, message: str):
        self.title = title
        self.message = message
        super().__init__(f"{title}: {message}")


class SessionNotStarted(WordScrambleError):
    pass
