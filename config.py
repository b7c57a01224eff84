"""Configuration helpers for the swagger-edge service."""

from __future__ import annotations

import os
from dotenv import load_dotenv
from typing import Final

DEFAULT_DOCS_PATH: Final[str] = "/docs"
DEFAULT_INSTANCE_NAME: Final[str] = "swagger"
DEFAULT_TITLE: Final[str] = "Swagger UI"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"


load_dotenv(override=True)


def _normalise(value: str | None, *, default: str = "") -> str:
    value = (value or "").strip()
    if not value:
        return default
    return value


def _normalise_docs_path(value: str | None) -> str:
    resolved = _normalise(value, default=DEFAULT_DOCS_PATH).strip("/")
    if not resolved:
        return DEFAULT_DOCS_PATH
    return f"/{resolved}"


DOCS_PATH: Final[str] = _normalise_docs_path(os.environ.get("SWAGGER_DOCS_PATH"))
INSTANCE_NAME: Final[str] = _normalise(os.environ.get("SWAGGER_INSTANCE_NAME"), default=DEFAULT_INSTANCE_NAME)
DOC_URL: Final[str] = _normalise(os.environ.get("SWAGGER_DOC_URL"))
TITLE: Final[str] = _normalise(os.environ.get("SWAGGER_TITLE"), default=DEFAULT_TITLE)
LOG_LEVEL: Final[str] = _normalise(os.environ.get("SWAGGER_LOG_LEVEL"), default=DEFAULT_LOG_LEVEL).upper()

__all__ = [
    "DOCS_PATH",
    "DOC_URL",
    "INSTANCE_NAME",
    "LOG_LEVEL",
    "TITLE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_DOCS_PATH",
    "DEFAULT_INSTANCE_NAME",
    "DEFAULT_TITLE",
]
