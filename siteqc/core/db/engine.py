# (c) Copyright Datacraft, 2026
import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from siteqc.core.config import get_settings
from siteqc.core.db.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
	# SQLite ignores ON DELETE clauses unless foreign keys are switched on
	cursor = dbapi_connection.cursor()
	cursor.execute("PRAGMA foreign_keys=ON")
	cursor.close()


def create_engine(url: str, **kwargs) -> AsyncEngine:
	async_engine = create_async_engine(url, **kwargs)
	if async_engine.dialect.name == "sqlite":
		event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
	return async_engine


engine = create_engine(settings.async_db_url, echo=settings.db_echo)

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def get_db():
	async with AsyncSessionLocal() as session:
		yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
	"""Create all tables that do not exist yet."""
	from siteqc.core import orm  # noqa: F401

	async with (bind or engine).begin() as conn:
		await conn.run_sync(Base.metadata.create_all)
	logger.info("Database schema ready")
