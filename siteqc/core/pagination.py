# (c) Copyright Datacraft, 2026
"""Page parameters and paginated queries."""
from dataclasses import dataclass
from typing import Any, Sequence

from fastapi import Query
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from siteqc.core.config import get_settings
from siteqc.core.schemas import Pagination


@dataclass
class PageParams:
	page: int = 1
	page_size: int = 50

	@property
	def offset(self) -> int:
		return (self.page - 1) * self.page_size

	def pagination(self, total: int) -> Pagination:
		return Pagination.build(self.page, self.page_size, total)


def get_page_params(
	page: int = Query(1, ge=1),
	page_size: int | None = Query(None, ge=1),
) -> PageParams:
	settings = get_settings()
	size = min(page_size or settings.default_page_size, settings.max_page_size)
	return PageParams(page=page, page_size=size)


async def paginate(
	session: AsyncSession,
	stmt: Select,
	params: PageParams,
) -> tuple[Sequence[Any], int]:
	"""Run ``stmt`` for one page and return the rows with the unpaged total."""
	count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
	total = await session.scalar(count_stmt) or 0

	result = await session.execute(stmt.offset(params.offset).limit(params.page_size))
	return result.scalars().all(), total
