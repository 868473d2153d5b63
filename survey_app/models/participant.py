"""Participant record value type.

A participant is identified by its secret, which doubles as the access token
sent with every request. Answers are kept as a dense list indexed by question
position; positions never answered hold the ``EMPTY_ANSWER`` sentinel.
"""

from __future__ import annotations

from functools import total_ordering
from typing import List, Optional

from pydantic import BaseModel, Field


EMPTY_ANSWER = "empty"


@total_ordering
class ParticipantRecord(BaseModel):
    secret: str
    name: Optional[str] = None
    answers: List[str] = Field(default_factory=list)

    def _sort_key(self) -> tuple:
        # None sorts before any name
        return (self.secret, self.name is not None, self.name or "", self.answers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ParticipantRecord):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def place_answer(self, position: int, value: str) -> None:
        """Grow ``answers`` with the sentinel up to ``position`` and assign it.

        Existing entries other than ``position`` are left untouched.
        """
        if position < 0:
            raise ValueError(f"answer position must be non-negative, got {position}")
        missing = position + 1 - len(self.answers)
        if missing > 0:
            self.answers.extend([EMPTY_ANSWER] * missing)
        self.answers[position] = value

    @classmethod
    def with_answer(cls, secret: str, position: int, value: str) -> "ParticipantRecord":
        record = cls(secret=secret)
        record.place_answer(position, value)
        return record


__all__ = ["EMPTY_ANSWER", "ParticipantRecord"]
