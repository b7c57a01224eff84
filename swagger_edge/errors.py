"""Exceptions raised by the Swagger handler and the doc registry."""

from __future__ import annotations


class SwaggerError(Exception):
    """Base class for swagger-edge failures."""


class SwaggerTemplateError(SwaggerError):
    """The index template could not be compiled."""


class DocRegistryError(SwaggerError):
    pass


class DocNotFoundError(DocRegistryError, LookupError):
    def __init__(self, detail: str, *, name: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.name = name


__all__ = ["DocNotFoundError", "DocRegistryError", "SwaggerError", "SwaggerTemplateError"]
