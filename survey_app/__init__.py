"""FastAPI application package for the survey service.

Exposes the application factory. Participant and visibility state live in
`survey_app/logic/`, route handlers in `survey_app/routes/`.
"""

from __future__ import annotations

from survey_app.main import create_app

__all__ = ["create_app"]
