# (c) Copyright Datacraft, 2026
"""Service layer for Questionnaires feature."""
import logging
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7str

from siteqc.core.exceptions import ValidationFailed
from siteqc.core.features.document_types.models import DocumentTypeModel
from siteqc.core.features.qaqc.models import QAQCProcessModel, ResultModel
from siteqc.core.features.qaqc.runner import aggregate
from siteqc.core.pagination import PageParams, paginate
from siteqc.core.types import EventType

from .models import QuestionModel, QuestionnaireModel
from .views import (
	Question,
	QuestionCreate,
	QuestionUpdate,
	Questionnaire,
	QuestionnaireCreate,
	QuestionnaireUpdate,
	right_operand_error,
)

logger = logging.getLogger(__name__)


# =====================================================
# Questionnaire Service
# =====================================================


async def list_questionnaires(
	session: AsyncSession,
	params: PageParams,
	event_type: EventType | None = None,
) -> tuple[Sequence[Questionnaire], int]:
	stmt = select(QuestionnaireModel).order_by(QuestionnaireModel.name)
	if event_type is not None:
		stmt = stmt.where(QuestionnaireModel.event_type == event_type)

	rows, total = await paginate(session, stmt, params)
	return [Questionnaire.model_validate(row) for row in rows], total


async def get_questionnaire(
	session: AsyncSession,
	questionnaire_id: str,
) -> Questionnaire | None:
	questionnaire = await session.get(QuestionnaireModel, questionnaire_id)
	return Questionnaire.model_validate(questionnaire) if questionnaire else None


async def create_questionnaire(
	session: AsyncSession,
	data: QuestionnaireCreate,
) -> Questionnaire:
	questionnaire = QuestionnaireModel(id=uuid7str(), questions=[], **data.model_dump())
	session.add(questionnaire)
	await session.commit()
	await session.refresh(questionnaire)
	logger.info(f"Questionnaire created: {questionnaire.id} ({questionnaire.name})")
	return Questionnaire.model_validate(questionnaire)


async def update_questionnaire(
	session: AsyncSession,
	questionnaire_id: str,
	data: QuestionnaireUpdate,
) -> Questionnaire | None:
	questionnaire = await session.get(QuestionnaireModel, questionnaire_id)
	if not questionnaire:
		return None

	update_data = data.model_dump(exclude_unset=True)
	for key in ("name", "description"):
		if key in update_data and update_data[key] is None:
			raise ValidationFailed(f"{key} cannot be null")

	for key, value in update_data.items():
		setattr(questionnaire, key, value)

	await session.commit()
	await session.refresh(questionnaire)
	logger.info(f"Questionnaire updated: {questionnaire.id}")
	return Questionnaire.model_validate(questionnaire)


async def delete_questionnaire(session: AsyncSession, questionnaire_id: str) -> bool:
	"""Delete a questionnaire with its questions and QA/QC processes."""
	questionnaire = await session.get(QuestionnaireModel, questionnaire_id)
	if not questionnaire:
		return False

	await session.delete(questionnaire)
	await session.commit()
	logger.info(f"Questionnaire deleted: {questionnaire_id}")
	return True


# =====================================================
# Question Service
# =====================================================


async def _check_operand(
	session: AsyncSession,
	document_type_id: str,
	property_name: str,
	field: str,
) -> None:
	document_type = await session.get(DocumentTypeModel, document_type_id)
	if document_type is None:
		raise ValidationFailed(f"{field}: document type '{document_type_id}' does not exist")
	if property_name not in document_type.properties:
		raise ValidationFailed(
			f"Property '{property_name}' is not defined by document type '{document_type.name}'"
		)


async def validate_question(session: AsyncSession, fields: dict[str, Any]) -> None:
	"""
	Validate a complete set of question fields.

	Raises ValidationFailed when the right operand is malformed or an
	operand names an unknown document type or property.
	"""
	error = right_operand_error(
		fields.get("document_2_id"),
		fields.get("property_2"),
		fields.get("comparison_value"),
	)
	if error:
		raise ValidationFailed(error)

	await _check_operand(session, fields["document_1_id"], fields["property_1"], "document_1_id")
	if fields.get("document_2_id") is not None:
		await _check_operand(session, fields["document_2_id"], fields["property_2"], "document_2_id")


async def list_questions(
	session: AsyncSession,
	questionnaire_id: str,
) -> Sequence[Question] | None:
	questionnaire = await session.get(QuestionnaireModel, questionnaire_id)
	if not questionnaire:
		return None
	return [Question.model_validate(q) for q in questionnaire.questions]


async def get_question(session: AsyncSession, question_id: str) -> Question | None:
	question = await session.get(QuestionModel, question_id)
	return Question.model_validate(question) if question else None


async def create_question(
	session: AsyncSession,
	questionnaire_id: str,
	data: QuestionCreate,
) -> Question | None:
	"""Append a question to the end of a questionnaire."""
	questionnaire = await session.get(QuestionnaireModel, questionnaire_id)
	if not questionnaire:
		return None

	fields = data.model_dump()
	await validate_question(session, fields)

	position = max((q.position for q in questionnaire.questions), default=0) + 1
	question = QuestionModel(id=uuid7str(), position=position, **fields)
	questionnaire.questions.append(question)

	await session.commit()
	await session.refresh(question)
	logger.info(f"Question created: {question.id} in questionnaire {questionnaire_id}")
	return Question.model_validate(question)


async def update_question(
	session: AsyncSession,
	question_id: str,
	data: QuestionUpdate,
) -> Question | None:
	"""
	Apply a partial update and re-validate the merged question.

	Switching the right operand form requires clearing the other form
	explicitly, e.g. sending ``comparison_value`` together with
	``document_2_id: null`` and ``property_2: null``.
	"""
	question = await session.get(QuestionModel, question_id)
	if not question:
		return None

	update_data = data.model_dump(exclude_unset=True)
	for key in ("document_1_id", "property_1", "relation"):
		if key in update_data and update_data[key] is None:
			raise ValidationFailed(f"{key} cannot be null")
	if update_data.get("system_value", "") is None:
		update_data["system_value"] = ""

	merged = {
		"document_1_id": question.document_1_id,
		"property_1": question.property_1,
		"relation": question.relation,
		"document_2_id": question.document_2_id,
		"property_2": question.property_2,
		"comparison_value": question.comparison_value,
	}
	merged.update({k: v for k, v in update_data.items() if k in merged})
	await validate_question(session, merged)

	for key, value in update_data.items():
		setattr(question, key, value)

	await session.commit()
	await session.refresh(question)
	logger.info(f"Question updated: {question.id}")
	return Question.model_validate(question)


async def delete_question(session: AsyncSession, question_id: str) -> bool:
	"""
	Delete a question; results that reference it cascade.

	Processes that had a result for the question get their overall
	result recomputed from the results that remain.
	"""
	question = await session.get(QuestionModel, question_id)
	if not question:
		return False

	affected = await session.scalars(
		select(ResultModel.process_id).where(ResultModel.question_id == question_id).distinct()
	)
	process_ids = list(affected.all())

	await session.delete(question)
	await session.flush()

	for process_id in process_ids:
		statuses = await session.scalars(
			select(ResultModel.status).where(ResultModel.process_id == process_id)
		)
		process = await session.get(QAQCProcessModel, process_id)
		process.result = aggregate(statuses.all())

	await session.commit()
	logger.info(f"Question deleted: {question_id}, {len(process_ids)} process result(s) recomputed")
	return True
