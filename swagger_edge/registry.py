"""Named store of generated API specification documents."""

from __future__ import annotations

import json
import threading
from typing import Any, Callable, Dict, List, Mapping, Union

from .config import DEFAULT_INSTANCE_NAME
from .errors import DocNotFoundError, DocRegistryError
from .logging import log_error, log_event

DocSource = Union[str, Mapping[str, Any], Callable[[], Any], Any]


def _serialise_doc(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    if isinstance(value, Mapping):
        return json.dumps(value)
    raise TypeError(f"unsupported swagger doc type: {type(value).__name__}")


class DocRegistry:
    """Thread-safe mapping of instance name to a specification document.

    A document may be registered as a ready string, a mapping, a zero-argument
    callable producing either, or an object with a ``read_doc()`` method.
    Callables are evaluated on every read so generators that cache
    (``FastAPI.openapi``) stay in charge of caching.
    """

    def __init__(self) -> None:
        self._docs: Dict[str, DocSource] = {}
        self._lock = threading.Lock()

    def register(self, name: str, doc: DocSource) -> None:
        with self._lock:
            if name in self._docs:
                raise DocRegistryError(f"register called twice for swagger doc: {name}")
            self._docs[name] = doc
        log_event("doc_registered", name=name)

    def unregister(self, name: str) -> None:
        with self._lock:
            removed = self._docs.pop(name, None)
        if removed is not None:
            log_event("doc_unregistered", name=name)

    def clear(self) -> None:
        with self._lock:
            self._docs.clear()

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._docs)

    def read_doc(self, name: str = DEFAULT_INSTANCE_NAME) -> str:
        with self._lock:
            if not self._docs:
                log_error("swagger_doc_missing", name=name, registered=0)
                raise DocNotFoundError("no swagger doc has been registered yet", name=name)
            try:
                source = self._docs[name]
            except KeyError:
                log_error("swagger_doc_missing", name=name, registered=len(self._docs))
                raise DocNotFoundError(f"no swagger doc registered for name: {name}", name=name) from None

        reader = getattr(source, "read_doc", None)
        if callable(reader):
            return _serialise_doc(reader())
        if callable(source):
            return _serialise_doc(source())
        return _serialise_doc(source)


registry = DocRegistry()


def register(name: str, doc: DocSource) -> None:
    registry.register(name, doc)


def unregister(name: str) -> None:
    registry.unregister(name)


def read_doc(name: str = DEFAULT_INSTANCE_NAME) -> str:
    return registry.read_doc(name)


def register_app(app, name: str = DEFAULT_INSTANCE_NAME, *, target: DocRegistry | None = None) -> None:
    """Register a FastAPI application's generated OpenAPI schema under ``name``."""
    (target or registry).register(name, app.openapi)


__all__ = [
    "DocRegistry",
    "read_doc",
    "register",
    "register_app",
    "registry",
    "unregister",
]
