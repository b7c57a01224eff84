import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import DOC_URL, DOCS_PATH, INSTANCE_NAME, LOG_LEVEL, TITLE

from .config import Config
from .errors import DocNotFoundError
from .handler import SwaggerHandler, mount
from .logging import (
    configure_logging,
    log_duration,
    log_event,
    reset_correlation_id,
    set_correlation_id,
)
from .registry import register_app, unregister

configure_logging(LOG_LEVEL, force=True)


@asynccontextmanager
async def _app_lifespan(application: FastAPI):
    register_app(application, INSTANCE_NAME)
    log_event("startup_complete", instance_name=INSTANCE_NAME, docs_path=DOCS_PATH)
    try:
        yield
    finally:
        unregister(INSTANCE_NAME)
        log_event("shutdown_complete")


app = FastAPI(
    title="Swagger Edge",
    version="1.0.0",
    lifespan=_app_lifespan,
    docs_url=None,
    redoc_url=None,
)


@app.exception_handler(DocNotFoundError)
async def doc_not_found_handler(_: Request, exc: DocNotFoundError) -> JSONResponse:
    problem = {
        "type": "https://errors.swagger-edge/DOC_NOT_FOUND",
        "title": "Swagger document not found",
        "status": 404,
        "detail": exc.detail,
    }
    if exc.name:
        problem["instance_name"] = exc.name
    return JSONResponse(problem, status_code=404, media_type="application/problem+json")


@app.middleware("http")
async def correlation_middleware(request: Request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID") or str(uuid4())
    token = set_correlation_id(correlation_id)
    start_time = time.perf_counter()
    try:
        log_event("incoming_request", method=request.method, path=str(request.url.path))
        response = await call_next(request)
        response.headers.setdefault("X-Correlation-ID", correlation_id)
        log_duration("request_complete", start_time, status=response.status_code)
        return response
    finally:
        reset_correlation_id(token)


@app.get("/healthz")
def healthz():
    return {"ok": True, "docs_path": DOCS_PATH, "instance_name": INSTANCE_NAME}


swagger_handler = mount(
    app,
    DOCS_PATH,
    SwaggerHandler(Config(url=DOC_URL, instance_name=INSTANCE_NAME, title=TITLE)),
)
