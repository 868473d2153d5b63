"""Questionnaire and answer-visibility routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse, Response

from survey_app.config import Settings
from survey_app.logic.visibility_flag import VisibilityFlag
from survey_app.routes.deps import get_settings, get_visibility

router = APIRouter()


@router.get("/getQuestionnaire", response_class=PlainTextResponse, summary="Raw questionnaire text")
def get_questionnaire(settings: Settings = Depends(get_settings)) -> str:
    return settings.questionnaire


@router.get("/getShowAnswers", response_class=PlainTextResponse, summary="Whether answers are public")
def get_show_answers(visibility: VisibilityFlag = Depends(get_visibility)) -> str:
    return "true" if visibility.get() else "false"


@router.get("/setShowAnswers", summary="Toggle answer visibility (admin secret required)")
def set_show_answers(
    secret: str = Query(...),
    show: str = Query(...),
    visibility: VisibilityFlag = Depends(get_visibility),
) -> Response:
    """Apply ``show == "true"`` when ``secret`` is the admin secret.

    A wrong secret is ignored and the response is identical either way.
    """
    visibility.set(secret, show == "true")
    return Response(status_code=200)


__all__ = ["router", "get_questionnaire", "get_show_answers", "set_show_answers"]
