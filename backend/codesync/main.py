from __future__ import annotations
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from codesync.config import settings
from codesync.db import store, reset_store
from codesync.logging_setup import configure_logging
from codesync.schemas.common import ErrorResponse
from codesync.routes.system import router as system_router
from codesync.routes.auth import router as auth_router
from codesync.routes.contests import router as contests_router
from codesync.routes.problems import router as problems_router
from codesync.routes.submissions import router as submissions_router
from codesync.routes.rooms import router as rooms_router
import structlog

configure_logging()
log = structlog.get_logger()

# Seed at import so the data is there even when the ASGI lifespan is not run
if settings.seed_demo and not store.contests:
    reset_store(seed=True)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    log.info("startup", env=settings.environment, version=settings.app_version, git_sha=settings.git_sha,
             auth_enabled=settings.auth_enabled, contests=len(store.contests))
    yield
    # Shutdown
    log.info("shutdown")

app = FastAPI(
    title=f"{settings.app_display_name} API",
    version=settings.app_version,
    lifespan=lifespan,
    description=f"{settings.app_display_name} API for collaborative editing and coding contests",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.environment == "dev" else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(system_router)
app.include_router(auth_router)
app.include_router(contests_router)
app.include_router(problems_router)
app.include_router(submissions_router)
app.include_router(rooms_router)

@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(e.get("type") == "missing" for e in errors):
        message = "Missing required fields"
    else:
        parts = []
        for e in errors:
            loc = ".".join(str(p) for p in e.get("loc", ()) if p != "body")
            parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
        message = "; ".join(parts) or "Invalid request"
    return JSONResponse(status_code=400, content=ErrorResponse(message=message).model_dump())

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = rid
    structlog.contextvars.bind_contextvars(request_id=rid)
    response: Response = await call_next(request)
    response.headers["X-Request-ID"] = rid
    structlog.contextvars.clear_contextvars()
    return response

def run():
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)
