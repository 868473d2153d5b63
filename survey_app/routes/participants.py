"""Participant routes: name and answer updates, aggregated results.

Handlers only translate query parameters into store calls; all merge and
fill semantics live in ParticipantStore.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query
import logging

from survey_app.logic.participant_store import ParticipantStore
from survey_app.models.participant import ParticipantRecord
from survey_app.routes.deps import get_store, question_position

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/updateName", summary="Set a participant's display name")
def update_name(
    secret: str = Query(...),
    name: str = Query(...),
    store: ParticipantStore = Depends(get_store),
) -> dict:
    store.set_name(secret, name)
    return {}


@router.get("/updateQuestion", summary="Record a participant's answer to one question")
def update_question(
    secret: str = Query(...),
    selected: str = Query(...),
    question: int = Depends(question_position),
    store: ParticipantStore = Depends(get_store),
) -> dict:
    store.set_answer(secret, question, selected)
    return {}


@router.get("/getResults", response_model=List[ParticipantRecord], summary="All participant records")
def get_results(store: ParticipantStore = Depends(get_store)) -> List[ParticipantRecord]:
    records = store.get_all()
    logger.debug("results_read count=%s", len(records))
    return records


__all__ = ["router", "update_name", "update_question", "get_results"]
