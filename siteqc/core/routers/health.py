# (c) Copyright Datacraft, 2026
"""Liveness endpoint."""
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from siteqc.core.db.engine import get_db
from siteqc.core.version import __version__

router = APIRouter(tags=["health"])

logger = logging.getLogger(__name__)


@router.get("/health")
async def health(session: Annotated[AsyncSession, Depends(get_db)]) -> Any:
	"""Report whether the API and its database are reachable."""
	try:
		await session.execute(text("SELECT 1"))
	except SQLAlchemyError as e:
		logger.error(f"Health check failed: {e}")
		return JSONResponse(
			status_code=503,
			content={"status": "error", "version": __version__, "details": {"database": "down"}},
		)

	return {"status": "ok", "version": __version__, "details": {"database": "up"}}
