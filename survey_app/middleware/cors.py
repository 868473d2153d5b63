"""CORS configuration helpers.

The survey frontend is served from a different origin, so every route is
open to cross-origin calls with the methods the client uses.
"""

from __future__ import annotations

from typing import Iterable
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


ALLOW_METHODS: list[str] = ["POST", "GET", "PATCH", "OPTIONS"]
EXPOSE_HEADERS: list[str] = ["X-Request-Id"]


def apply_cors(app: FastAPI, *, origins: Iterable[str] | None = None) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(origins or ["*"]),
        allow_credentials=True,
        allow_methods=ALLOW_METHODS,
        allow_headers=["*"],
        expose_headers=EXPOSE_HEADERS,
    )


__all__ = ["apply_cors", "ALLOW_METHODS", "EXPOSE_HEADERS"]
