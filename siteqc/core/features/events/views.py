# (c) Copyright Datacraft, 2026
"""Pydantic models for Events feature."""
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from siteqc.core.schemas import UtcDateTime
from siteqc.core.types import EventType
from siteqc.core.utils.tz import as_utc


def check_event_types(value: list[EventType]) -> list[EventType]:
	if len(set(value)) != len(value):
		raise ValueError("event_types must not contain duplicates")
	return value


def check_period(start: datetime, end: datetime) -> None:
	if as_utc(end) < as_utc(start):
		raise ValueError("end_datetime must not be before start_datetime")


EventTypeList = Annotated[list[EventType], Field(min_length=1), AfterValidator(check_event_types)]


class EventCreate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	name: str = Field(..., min_length=1, max_length=255)
	start_datetime: datetime
	end_datetime: datetime
	event_types: EventTypeList

	@model_validator(mode="after")
	def check_dates(self) -> "EventCreate":
		check_period(self.start_datetime, self.end_datetime)
		return self


class EventUpdate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	name: str | None = Field(None, min_length=1, max_length=255)
	start_datetime: datetime | None = None
	end_datetime: datetime | None = None
	event_types: EventTypeList | None = None


class Event(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: str
	project_id: str
	name: str
	start_datetime: UtcDateTime
	end_datetime: UtcDateTime
	event_types: list[EventType]
	created_at: UtcDateTime | None = None
	updated_at: UtcDateTime | None = None
