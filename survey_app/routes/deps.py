"""Request-scoped accessors for state built by the application factory."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Query, Request

from survey_app.config import Settings
from survey_app.logic.participant_store import ParticipantStore
from survey_app.logic.visibility_flag import VisibilityFlag


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> ParticipantStore:
    return request.app.state.participants


def get_visibility(request: Request) -> VisibilityFlag:
    return request.app.state.visibility


def question_position(
    question: int = Query(..., ge=0, description="Zero-based question position"),
    settings: Settings = Depends(get_settings),
) -> int:
    """Validate the answer position against the configured upper bound."""
    if question > settings.max_question_index:
        raise HTTPException(
            status_code=422,
            detail={
                "title": "Invalid Request",
                "status": 422,
                "detail": f"question must be at most {settings.max_question_index}",
                "code": "QUESTION_OUT_OF_RANGE",
            },
        )
    return question


__all__ = ["get_settings", "get_store", "get_visibility", "question_position"]
