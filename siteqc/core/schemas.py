# (c) Copyright Datacraft, 2026
"""Response envelopes shared by all routers."""
from datetime import datetime
from math import ceil
from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel

from siteqc.core.utils.tz import as_utc

T = TypeVar("T")

# Timezone-aware UTC on output, also for backends that return naive values
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


class ApiResponse(BaseModel, Generic[T]):
	success: bool = True
	data: T | None = None
	message: str | None = None


class Pagination(BaseModel):
	page: int
	page_size: int
	total: int
	total_pages: int

	@classmethod
	def build(cls, page: int, page_size: int, total: int) -> "Pagination":
		return cls(
			page=page,
			page_size=page_size,
			total=total,
			total_pages=ceil(total / page_size) if total else 0,
		)


class PaginatedResponse(BaseModel, Generic[T]):
	success: bool = True
	data: list[T]
	pagination: Pagination


class ErrorResponse(BaseModel):
	success: bool = False
	error: str
	code: str
