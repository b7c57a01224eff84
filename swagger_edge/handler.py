"""Starlette handler serving the Swagger UI page and its JSON document.

Usage::

    app = FastAPI()
    mount(app, "/docs")  # /docs and /docs/ -> /docs/index.html, /docs/doc.json
"""

from __future__ import annotations

import posixpath
import re
import threading
from typing import Optional

from fastapi import Request, status
from fastapi.responses import HTMLResponse, Response

from . import registry as doc_registry
from .config import Config, config_default
from .logging import log_debug, log_event
from .registry import DocRegistry
from .template import INDEX_TEMPLATE, compile_index, render_index

DEFAULT_DOC_URL = "doc.json"
DEFAULT_INDEX = "index.html"
DEFAULT_WILDCARD = "path"
FORWARDED_PREFIX_HEADER = "X-Forwarded-Prefix"

_WILDCARD_RE = re.compile(r"\{(\w+):path\}")
_SLASHES_RE = re.compile(r"/{2,}")


def join_path(*parts: str) -> str:
    """Join URL path segments and clean the result like a POSIX path."""
    joined = "/".join(part for part in parts if part)
    if not joined:
        return ""
    return posixpath.normpath(_SLASHES_RE.sub("/", joined))


def strip_wildcards(route_path: str) -> str:
    return _WILDCARD_RE.sub("", route_path).replace("*", "")


def get_forwarded_prefix(request: Request) -> str:
    """Return ``X-Forwarded-Prefix`` without trailing slashes, or ``""``."""
    header = request.headers.get(FORWARDED_PREFIX_HEADER) or ""
    if not header:
        return ""

    end = len(header)
    while end > 1 and header[end - 1] == "/":
        end -= 1
    return header[:end]


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", "") or ""


def route_prefix(request: Request) -> str:
    """Mount prefix of the matched route, including a sub-application's root path."""
    route_path = _route_path(request)
    prefix = strip_wildcards(route_path)
    if route_path and prefix == route_path:
        # Exact mount route ("/docs") registered next to "/docs/{path:path}".
        prefix = prefix.rstrip("/") + "/"
    return (request.scope.get("root_path") or "") + prefix


def wildcard_value(request: Request) -> str:
    names = _WILDCARD_RE.findall(_route_path(request))
    name = names[-1] if names else DEFAULT_WILDCARD
    return str(request.path_params.get(name, "") or "")


class SwaggerHandler:
    """Serve ``index.html``, ``doc.json`` and the mount-root redirect.

    The mount prefix is taken from the first request that reaches the
    handler and is kept for the lifetime of the instance.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        index_template: str = INDEX_TEMPLATE,
        docs: Optional[DocRegistry] = None,
    ) -> None:
        self.config = config_default(config)
        self._index = compile_index(index_template)
        self._docs = docs
        self._prefix = ""
        self._prefix_ready = False
        self._lock = threading.Lock()

    @property
    def prefix(self) -> Optional[str]:
        return self._prefix if self._prefix_ready else None

    def resolve_prefix(self, request: Request) -> str:
        if self._prefix_ready:
            return self._prefix

        with self._lock:
            if not self._prefix_ready:
                prefix = route_prefix(request)
                forwarded_prefix = get_forwarded_prefix(request)
                if forwarded_prefix:
                    prefix = forwarded_prefix + prefix

                if not self.config.url:
                    self.config.url = join_path(prefix, DEFAULT_DOC_URL)

                self._prefix = prefix
                self._prefix_ready = True
                log_event(
                    "swagger_prefix_resolved",
                    prefix=prefix,
                    forwarded_prefix=forwarded_prefix or None,
                    doc_url=self.config.url,
                )
        return self._prefix

    def render_index(self) -> str:
        return render_index(self._index, self.config)

    def read_doc(self) -> str:
        docs = self._docs or doc_registry.registry
        return docs.read_doc(self.config.instance_name)

    async def __call__(self, request: Request) -> Response:
        prefix = self.resolve_prefix(request)
        path = wildcard_value(request)

        if path == DEFAULT_INDEX:
            response: Response = HTMLResponse(self.render_index())
        elif path == DEFAULT_DOC_URL:
            response = Response(content=self.read_doc(), media_type="application/json")
        elif path in ("", "/"):
            response = Response(
                status_code=status.HTTP_301_MOVED_PERMANENTLY,
                headers={"Location": join_path(prefix, DEFAULT_INDEX)},
            )
        else:
            response = Response(status_code=status.HTTP_404_NOT_FOUND)

        log_debug("swagger_dispatch", segment=path, status=response.status_code)
        return response


handler_default = SwaggerHandler()


def mount(app, path: str = "/docs", handler: Optional[SwaggerHandler] = None) -> SwaggerHandler:
    """Route ``{path}`` and ``{path}/{path:path}`` on a FastAPI app or router to ``handler``.

    Both routes answer GET and HEAD and stay out of the generated schema.
    """
    target = handler or handler_default

    async def swagger_endpoint(request: Request) -> Response:
        return await target(request)

    base = path.rstrip("/")
    if base:
        app.add_api_route(base, swagger_endpoint, methods=["GET", "HEAD"], include_in_schema=False)
    route = f"{base}/{{{DEFAULT_WILDCARD}:path}}"
    app.add_api_route(route, swagger_endpoint, methods=["GET", "HEAD"], include_in_schema=False)
    return target


__all__ = [
    "DEFAULT_DOC_URL",
    "DEFAULT_INDEX",
    "SwaggerHandler",
    "get_forwarded_prefix",
    "handler_default",
    "join_path",
    "mount",
    "route_prefix",
    "strip_wildcards",
    "wildcard_value",
]
