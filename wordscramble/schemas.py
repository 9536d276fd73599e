from __future__ import annotations
from pydantic import BaseModel
from typing import List, Literal, Optional

SubmitStatus = Literal['accepted', 'rejected', 'ignored']

class AcceptedWord(BaseModel):
    word: str
    length: int

class SessionState(BaseModel):
    gameId: str
    rootWord: str
    score: int = 0
    # most recent first
    usedWords: List[AcceptedWord] = []

class SubmitRequest(BaseModel):
    word: str

class SubmitResult(BaseModel):
    status: SubmitStatus
    word: str
    title: Optional[str] = None
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status == 'accepted'

class SubmitResponse(BaseModel):
    result: SubmitResult
    state: SessionState

class WordRejection(BaseModel):
    gameId: str
    word: str
    title: str
    message: str

class WordValidation(BaseModel):
    word: str
    valid: bool
