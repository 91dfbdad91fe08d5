# (c) Copyright Datacraft, 2026
"""Pydantic models for Questionnaires feature."""
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from siteqc.core.schemas import UtcDateTime
from siteqc.core.types import EventType, Relation


def right_operand_error(
	document_2_id: str | None,
	property_2: str | None,
	comparison_value: str | None,
) -> str | None:
	"""
	Check that exactly one right operand form is populated.

	Returns an error message, or None when the combination is valid.
	"""
	uses_document = document_2_id is not None or property_2 is not None
	uses_value = comparison_value is not None

	if uses_document and uses_value:
		return "Question must compare against either document_2_id/property_2 or comparison_value, not both"
	if not uses_document and not uses_value:
		return "Question requires either document_2_id and property_2 or comparison_value"
	if uses_document and (document_2_id is None or property_2 is None):
		return "document_2_id and property_2 must be provided together"
	return None


class QuestionBase(BaseModel):
	document_1_id: str
	property_1: str
	relation: Relation
	document_2_id: str | None = None
	property_2: str | None = None
	comparison_value: str | None = None


class QuestionCreate(QuestionBase):
	model_config = ConfigDict(extra="forbid")

	property_1: str = Field(..., min_length=1, max_length=255)
	system_value: str = ""

	@field_validator("document_2_id", "property_2", "comparison_value", mode="before")
	@classmethod
	def blank_to_none(cls, value):
		if isinstance(value, str) and not value.strip():
			return None
		return value

	@model_validator(mode="after")
	def check_right_operand(self) -> "QuestionCreate":
		error = right_operand_error(self.document_2_id, self.property_2, self.comparison_value)
		if error:
			raise ValueError(error)
		return self


class QuestionUpdate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	document_1_id: str | None = None
	property_1: str | None = Field(None, min_length=1, max_length=255)
	relation: Relation | None = None
	document_2_id: str | None = None
	property_2: str | None = None
	comparison_value: str | None = None
	system_value: str | None = None

	@field_validator("document_2_id", "property_2", "comparison_value", mode="before")
	@classmethod
	def blank_to_none(cls, value):
		if isinstance(value, str) and not value.strip():
			return None
		return value


class Question(QuestionBase):
	model_config = ConfigDict(from_attributes=True)

	id: str
	questionnaire_id: str
	position: int
	system_value: str = ""
	created_at: UtcDateTime | None = None
	updated_at: UtcDateTime | None = None


class QuestionnaireCreate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	name: str = Field(..., min_length=1, max_length=255)
	description: str = Field(..., min_length=1)
	event_type: EventType | None = None
	organization_id: str | None = None


class QuestionnaireUpdate(BaseModel):
	model_config = ConfigDict(extra="forbid")

	name: str | None = Field(None, min_length=1, max_length=255)
	description: str | None = Field(None, min_length=1)
	event_type: EventType | None = None
	organization_id: str | None = None


class Questionnaire(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: str
	name: str
	description: str
	event_type: EventType | None = None
	organization_id: str | None = None
	questions: list[Question] = []
	created_at: UtcDateTime | None = None
	updated_at: UtcDateTime | None = None

	@computed_field
	@property
	def question_count(self) -> int:
		return len(self.questions)
