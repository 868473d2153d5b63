from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from survey_app.config import Settings, load_settings
from survey_app.http.problem import (
    handle_http_exception,
    handle_request_validation_error,
    handle_unexpected_error,
)
from survey_app.http.request_id import RequestIdMiddleware
from survey_app.logging_setup import configure_logging
from survey_app.logic.participant_store import ParticipantStore
from survey_app.logic.visibility_flag import VisibilityFlag
from survey_app.middleware.cors import apply_cors
from survey_app.routes import api_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the survey service application.

    Settings are loaded from the environment when not supplied. Each call
    constructs its own participant store and visibility flag, held on
    ``app.state`` for the lifetime of the application.
    """
    configure_logging()
    if settings is None:
        settings = load_settings()

    app = FastAPI(title="Survey Service", version="0.1.0")
    app.state.settings = settings
    app.state.participants = ParticipantStore()
    app.state.visibility = VisibilityFlag(settings.admin_secret)

    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    apply_cors(app, origins=settings.cors_origins)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(api_router, prefix=API_PREFIX)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "participants": len(app.state.participants)}

    logger.info(
        "survey_app_created questionnaire_chars=%s cors_origins=%s",
        len(settings.questionnaire),
        settings.cors_origins,
    )
    return app


def run() -> None:  # pragma: no cover - process entrypoint
    """Start the service under uvicorn using HOST/PORT from the environment."""
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(create_app(), host=host, port=port, log_config=None)


# Intentionally do not instantiate the app at import time to prevent side effects.
