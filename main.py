# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Team Directory Service
======================
CRUD over team member records: create (email must be unused), list, get by
memberId, update names/email, and idempotent delete.

    POST   /api/team               create
    GET    /api/team               list
    GET    /api/team/{memberId}    get
    PUT    /api/team/{memberId}    update
    DELETE /api/team/{memberId}    delete

Port: 8080
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from team_directory.controllers import system_controller, team_controller
from team_directory.core.config import settings
from team_directory.core.database import engine, init_db
from team_directory.core.dependencies import get_team_member_repo, get_team_member_service
from team_directory.core.logging import get_logger
from team_directory.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger("team-directory")

ERROR_CODES = {
    400: "validation_error",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    503: "service_unavailable",
}


@asynccontextmanager
async def lifespan(application: FastAPI):
    if settings.CREATE_TABLES:
        init_db(engine)
        logger.info("Database schema ensured")
    try:
        get_team_member_service().seed_gauges()
    except SQLAlchemyError:
        logger.warning("Could not seed gauges, DB may not be ready yet")
    yield
    get_team_member_repo().dispose()
    logger.info("Shutting down, connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Team Directory Service",
    version=settings.SERVICE_VERSION,
    description="CRUD API for team member records",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": ERROR_CODES.get(exc.status_code, "http_error"), "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # malformed bodies, including a bad email, are client errors (400, not 422)
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'][1:]) or 'body'}: {err['msg']}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": "validation_error", "detail": problems})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return JSONResponse(status_code=500, content={"error": "internal_server_error", "detail": str(exc)})


app.include_router(system_controller.router)
app.include_router(team_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level="info")
