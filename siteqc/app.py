# (c) Copyright Datacraft, 2026
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from siteqc.core.config import get_settings
from siteqc.core.db.engine import init_db
from siteqc.core.log import setup_logging
from siteqc.core.router_loader import discover_routers
from siteqc.core.routers.health import router as health_router
from siteqc.core.schemas import ErrorResponse
from siteqc.core.version import __version__

logger = logging.getLogger(__name__)
config = get_settings()
prefix = config.api_prefix

setup_logging(config.log_config, config.log_level)

ERROR_CODES = {
	400: "bad_request",
	404: "not_found",
	409: "conflict",
	422: "validation_error",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Application lifespan handler for startup/shutdown events."""
	logger.info("Starting SiteQC API server...")
	await init_db()

	yield

	logger.info("Shutting down SiteQC API server...")


app = FastAPI(
	title="SiteQC REST API",
	version=__version__,
	lifespan=lifespan,
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=config.cors_origins,
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
	body = ErrorResponse(error=message, code=ERROR_CODES.get(status_code, "http_error"))
	return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
	return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
	messages = []
	for error in exc.errors():
		location = ".".join(str(part) for part in error.get("loc", ()))
		messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
	return error_response(422, "; ".join(messages) or "Invalid request")


# Auto-discover and register all feature routers
core_path = Path(__file__).parent / "core"
routers = discover_routers(core_path)

for router, feature_name in routers:
	app.include_router(router, prefix=prefix)

app.include_router(health_router, prefix=prefix)
