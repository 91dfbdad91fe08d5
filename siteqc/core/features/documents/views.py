# (c) Copyright Datacraft, 2026
"""Pydantic models for Documents feature."""
from pydantic import BaseModel, ConfigDict, Field

from siteqc.core.schemas import UtcDateTime
from siteqc.core.types import DocumentStatus, FileFormat

PropertyValue = str | int | float | bool | None


class DocumentCreate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	document_type_id: str
	file_name: str = Field(..., min_length=1, max_length=255)
	file_format: FileFormat
	file_path: str | None = Field(None, max_length=1000)


class DocumentUpdate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	properties_values: dict[str, PropertyValue] | None = None
	status: DocumentStatus | None = None
	file_path: str | None = Field(None, max_length=1000)


class Document(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: str
	event_id: str
	document_type_id: str
	file_name: str
	file_format: FileFormat
	file_path: str | None = None
	properties_values: dict[str, PropertyValue] = {}
	status: DocumentStatus
	created_at: UtcDateTime | None = None
	updated_at: UtcDateTime | None = None
