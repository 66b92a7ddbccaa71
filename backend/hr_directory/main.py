"""FastAPI application entry point."""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .config import get_settings
from .database import create_schema, engine
from .log import get_logger, install_http_logging, setup_logging
from .routers.analytics import router as analytics_router
from .routers.employees import router as employees_router
from .routers.org_chart import router as org_chart_router
from .routers.pnl import router as pnl_router

setup_logging(get_settings().log_level)
log = get_logger("hr_directory")

app = FastAPI(title="HR Directory Backend", version="0.1.0")
app.include_router(employees_router)
app.include_router(pnl_router)
app.include_router(analytics_router)
app.include_router(org_chart_router)
install_http_logging(app)


@app.on_event("startup")
async def on_startup() -> None:
    """Ensure database tables exist."""

    await create_schema(engine)
    log.info("startup_complete", database=engine.url.render_as_string(hide_password=True))


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    """Log anything the routers did not turn into an HTTP error."""

    log.exception("unhandled_error", method=request.method, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    """Simple readiness probe for uptime checks."""

    return {"status": "ok"}
