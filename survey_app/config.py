"""Configuration utilities for the survey service.

Settings are resolved once at startup from environment variables:
- Questionnaire: inline via `QUESTIONNAIRE_STRING`, else read from the file
  named by `QUESTIONNAIRE`.
- Admin secret: `ADMIN_SECRET` (required).
- Optional: `CORS_ORIGINS` (comma separated) and `MAX_QUESTION_INDEX`.
Validation: Pydantic models enforce required fields and value constraints.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, field_validator


ENV_QUESTIONNAIRE_STRING = "QUESTIONNAIRE_STRING"
ENV_QUESTIONNAIRE = "QUESTIONNAIRE"
ENV_ADMIN_SECRET = "ADMIN_SECRET"
ENV_CORS_ORIGINS = "CORS_ORIGINS"
ENV_MAX_QUESTION_INDEX = "MAX_QUESTION_INDEX"

DEFAULT_MAX_QUESTION_INDEX = 1023

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when startup configuration is missing or unreadable."""


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    questionnaire: str
    admin_secret: str
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    max_question_index: int = Field(default=DEFAULT_MAX_QUESTION_INDEX, ge=0)

    @field_validator("admin_secret")
    @classmethod
    def admin_secret_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v:
            raise ValueError("admin_secret must be a non-empty string")
        return v


def _read_questionnaire() -> str:
    inline = _env(ENV_QUESTIONNAIRE_STRING)
    if inline is not None:
        return inline
    path_text = _env(ENV_QUESTIONNAIRE)
    if not path_text:
        raise ConfigError(f"Need '{ENV_QUESTIONNAIRE_STRING}' or '{ENV_QUESTIONNAIRE}' environment variable")
    path = Path(path_text)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read questionnaire %s: %s", path, e)
        raise ConfigError(f"Couldn't read questionnaire file {path}") from e


def _parse_origins(text: Optional[str]) -> List[str]:
    if not text:
        return ["*"]
    origins = [o.strip() for o in text.split(",") if o.strip()]
    return origins or ["*"]


def load_settings() -> Settings:
    """Load settings from the environment with validation.

    Raises ConfigError when a required value is missing or the questionnaire
    file cannot be read; Pydantic validation errors are logged and re-raised.
    """
    admin_secret = _env(ENV_ADMIN_SECRET)
    if admin_secret is None:
        raise ConfigError(f"Need '{ENV_ADMIN_SECRET}'")
    questionnaire = _read_questionnaire()
    max_index_text = _env(ENV_MAX_QUESTION_INDEX) or str(DEFAULT_MAX_QUESTION_INDEX)

    try:
        return Settings(
            questionnaire=questionnaire,
            admin_secret=admin_secret,
            cors_origins=_parse_origins(_env(ENV_CORS_ORIGINS)),
            max_question_index=max_index_text.strip(),
        )
    except PydanticValidationError as e:
        logger.error("Invalid application configuration: %s", e)
        raise


__all__ = [
    "ConfigError",
    "Settings",
    "load_settings",
]
