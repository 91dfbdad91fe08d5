# (c) Copyright Datacraft, 2026
"""Pydantic models for QA/QC processes."""
from pydantic import BaseModel, ConfigDict, Field, computed_field

from siteqc.core.schemas import UtcDateTime
from siteqc.core.types import QAQCResult


class QAQCProcessCreate(BaseModel):
	model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

	name: str = Field(..., min_length=1, max_length=255)
	description: str = ""
	event_id: str
	questionnaire_id: str


class Result(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: str
	process_id: str
	question_id: str
	position: int
	status: QAQCResult
	comment: str = ""
	error: bool = False
	left_value: str | None = None
	right_value: str | None = None


class QAQCProcess(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: str
	name: str
	description: str
	time: UtcDateTime
	event_id: str
	questionnaire_id: str
	result: QAQCResult
	results: list[Result] = []
	created_at: UtcDateTime | None = None
	updated_at: UtcDateTime | None = None

	@computed_field
	@property
	def failed_count(self) -> int:
		return sum(1 for r in self.results if r.status == QAQCResult.FAILED)
