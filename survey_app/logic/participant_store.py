"""In-memory participant state store.

Holds the secret -> ParticipantRecord mapping for the lifetime of the process.
Every operation runs under a single lock for its whole read-modify-write so
concurrent requests for the same secret are linearized and readers never see
a half-written record. Records handed out are deep copies.

The store is constructed by the application factory and injected into route
handlers via ``app.state``; there is no module-level instance.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from survey_app.models.participant import ParticipantRecord


logger = logging.getLogger(__name__)


class ParticipantStore:
    def __init__(self) -> None:
        self._records: Dict[str, ParticipantRecord] = {}
        self._lock = threading.Lock()

    def set_name(self, secret: str, name: str) -> None:
        """Set the display name for ``secret``, creating the record if unseen."""
        with self._lock:
            record = self._records.get(secret)
            if record is None:
                record = ParticipantRecord(secret=secret, name=name)
                self._records[secret] = record
            else:
                record.name = name
            logger.debug("participant_name_set secret=%s record=%s", secret, record)

    def set_answer(self, secret: str, position: int, value: str) -> None:
        """Store ``value`` at ``position`` in the answers of ``secret``.

        Gaps below ``position`` are filled with the empty sentinel. A record
        with no name is created when ``secret`` is unseen.
        """
        if position < 0:
            raise ValueError(f"answer position must be non-negative, got {position}")
        with self._lock:
            record = self._records.get(secret)
            if record is None:
                record = ParticipantRecord.with_answer(secret, position, value)
                self._records[secret] = record
            else:
                record.place_answer(position, value)
            logger.debug("participant_answer_set secret=%s position=%s record=%s", secret, position, record)

    def get_all(self) -> List[ParticipantRecord]:
        """Return a snapshot copy of every record, in no particular order."""
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records.values()]

    def get(self, secret: str) -> Optional[ParticipantRecord]:
        with self._lock:
            record = self._records.get(secret)
            return record.model_copy(deep=True) if record is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


__all__ = ["ParticipantStore"]
