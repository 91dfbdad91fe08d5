# (c) Copyright Datacraft, 2026
"""Pydantic models for Projects feature."""
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from siteqc.core.schemas import UtcDateTime
from siteqc.core.types import ProjectStatus


class ProjectBase(BaseModel):
	name: str = Field(..., min_length=1, max_length=255)
	client: str = Field(..., min_length=1, max_length=255)
	location: str = Field(..., min_length=1, max_length=500)
	status: ProjectStatus = ProjectStatus.NOT_STARTED
	start_date: date
	end_date: date | None = None


class ProjectCreate(ProjectBase):
	model_config = ConfigDict(extra="forbid")

	@model_validator(mode="after")
	def check_dates(self) -> "ProjectCreate":
		if self.end_date is not None and self.end_date < self.start_date:
			raise ValueError("end_date must not be before start_date")
		return self


class ProjectUpdate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	name: str | None = Field(None, min_length=1, max_length=255)
	client: str | None = Field(None, min_length=1, max_length=255)
	location: str | None = Field(None, min_length=1, max_length=500)
	status: ProjectStatus | None = None
	start_date: date | None = None
	end_date: date | None = None


class Project(ProjectBase):
	model_config = ConfigDict(from_attributes=True)

	id: str
	created_at: UtcDateTime | None = None
	updated_at: UtcDateTime | None = None
