"""APIRouter registration for the survey service."""

from __future__ import annotations

from fastapi import APIRouter

from survey_app.routes.participants import router as participants_router
from survey_app.routes.questionnaire import router as questionnaire_router

api_router = APIRouter()
api_router.include_router(participants_router, tags=["Participants"])
api_router.include_router(questionnaire_router, tags=["Questionnaire", "Visibility"])

__all__ = ["api_router"]
