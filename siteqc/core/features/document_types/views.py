# (c) Copyright Datacraft, 2026
"""Pydantic models for the document type catalog."""
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from siteqc.core.schemas import UtcDateTime


def normalize_properties(value: list[str]) -> list[str]:
	"""Strip property names and reject blanks and repeats."""
	names = [name.strip() for name in value]
	if any(not name for name in names):
		raise ValueError("Property names must not be blank")
	duplicates = sorted({name for name in names if names.count(name) > 1})
	if duplicates:
		raise ValueError(f"Duplicate property names: {', '.join(duplicates)}")
	return names


PropertyList = Annotated[list[str], AfterValidator(normalize_properties)]


class DocumentTypeCreate(BaseModel):
	model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

	name: str = Field(..., min_length=1, max_length=255)
	properties: PropertyList = []
	organization_id: str | None = None


class DocumentTypeUpdate(BaseModel):
	model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

	name: str | None = Field(None, min_length=1, max_length=255)
	properties: PropertyList | None = None
	organization_id: str | None = None


class DocumentType(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: str
	name: str
	properties: list[str]
	organization_id: str | None = None
	created_at: UtcDateTime | None = None
	updated_at: UtcDateTime | None = None
