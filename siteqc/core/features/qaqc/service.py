# (c) Copyright Datacraft, 2026
"""Service layer for QA/QC processes."""
import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7str

from siteqc.core.exceptions import ValidationFailed
from siteqc.core.features.document_types.models import DocumentTypeModel
from siteqc.core.features.documents.models import DocumentModel
from siteqc.core.features.events.models import EventModel
from siteqc.core.features.questionnaires.models import QuestionModel, QuestionnaireModel
from siteqc.core.pagination import PageParams, paginate
from siteqc.core.types import QAQCResult
from siteqc.core.utils.tz import utc_now

from .evaluator import EvaluationPolicy, RuleEvaluator
from .models import QAQCProcessModel, ResultModel
from .runner import DocumentData, DocumentSnapshot, ProcessRunner, RunOutcome
from .views import QAQCProcess, QAQCProcessCreate

logger = logging.getLogger(__name__)


async def load_snapshot(
	session: AsyncSession,
	event_id: str,
	questions: Sequence[QuestionModel],
) -> DocumentSnapshot:
	"""Read an event's documents once and freeze them for a run."""
	stmt = (
		select(DocumentModel)
		.where(DocumentModel.event_id == event_id)
		.order_by(DocumentModel.created_at, DocumentModel.id)
	)
	result = await session.execute(stmt)
	documents = [DocumentData.from_model(row) for row in result.scalars().all()]

	type_ids = {doc.document_type_id for doc in documents}
	for question in questions:
		type_ids.add(question.document_1_id)
		if question.document_2_id is not None:
			type_ids.add(question.document_2_id)

	result = await session.execute(
		select(DocumentTypeModel.id, DocumentTypeModel.name).where(DocumentTypeModel.id.in_(type_ids))
	)
	type_names = {type_id: name for type_id, name in result.all()}
	return DocumentSnapshot(documents, type_names)


async def _evaluate(
	session: AsyncSession,
	event_id: str,
	questionnaire: QuestionnaireModel,
	policy: EvaluationPolicy | None,
) -> tuple[RunOutcome, list[ResultModel]]:
	questions = list(questionnaire.questions)
	if not questions:
		raise ValidationFailed(f"Questionnaire '{questionnaire.name}' has no questions")

	snapshot = await load_snapshot(session, event_id, questions)
	runner = ProcessRunner(RuleEvaluator(policy))
	run = runner.run(questions, snapshot)

	results = []
	for position, (question, item) in enumerate(zip(questions, run.items), start=1):
		outcome = item.outcome
		results.append(
			ResultModel(
				id=uuid7str(),
				question_id=question.id,
				position=position,
				status=outcome.status,
				comment=outcome.comment,
				error=outcome.error,
				left_value=outcome.left_value,
				right_value=outcome.right_value,
			)
		)
		if outcome.left_value is not None:
			question.system_value = outcome.left_value

	return run, results


async def create_process(
	session: AsyncSession,
	data: QAQCProcessCreate,
	policy: EvaluationPolicy | None = None,
) -> QAQCProcess:
	"""
	Run a questionnaire against an event's documents and store the outcome.

	Raises ValidationFailed when the event or questionnaire does not exist
	or the questionnaire has no questions.
	"""
	if await session.get(EventModel, data.event_id) is None:
		raise ValidationFailed(f"Event '{data.event_id}' does not exist")
	questionnaire = await session.get(QuestionnaireModel, data.questionnaire_id)
	if questionnaire is None:
		raise ValidationFailed(f"Questionnaire '{data.questionnaire_id}' does not exist")

	run, results = await _evaluate(session, data.event_id, questionnaire, policy)

	process = QAQCProcessModel(
		id=uuid7str(),
		name=data.name,
		description=data.description,
		time=utc_now(),
		event_id=data.event_id,
		questionnaire_id=data.questionnaire_id,
		result=run.result,
		results=results,
	)
	session.add(process)
	await session.commit()
	await session.refresh(process)
	logger.info(f"QA/QC process created: {process.id} ({process.result.value})")
	return QAQCProcess.model_validate(process)


async def rerun_process(
	session: AsyncSession,
	process_id: str,
	policy: EvaluationPolicy | None = None,
) -> QAQCProcess | None:
	"""Re-evaluate a process against the event's current documents, in place."""
	process = await session.get(QAQCProcessModel, process_id)
	if not process:
		return None

	questionnaire = await session.get(QuestionnaireModel, process.questionnaire_id)
	run, results = await _evaluate(session, process.event_id, questionnaire, policy)

	process.results = results
	process.result = run.result
	process.time = utc_now()

	await session.commit()
	await session.refresh(process)
	logger.info(f"QA/QC process rerun: {process.id} ({process.result.value})")
	return QAQCProcess.model_validate(process)


async def get_process(session: AsyncSession, process_id: str) -> QAQCProcess | None:
	process = await session.get(QAQCProcessModel, process_id)
	return QAQCProcess.model_validate(process) if process else None


async def list_processes(
	session: AsyncSession,
	params: PageParams,
	event_id: str | None = None,
	questionnaire_id: str | None = None,
	result: QAQCResult | None = None,
) -> tuple[Sequence[QAQCProcess], int]:
	"""List processes, most recent run first."""
	stmt = select(QAQCProcessModel).order_by(QAQCProcessModel.time.desc(), QAQCProcessModel.id)
	if event_id is not None:
		stmt = stmt.where(QAQCProcessModel.event_id == event_id)
	if questionnaire_id is not None:
		stmt = stmt.where(QAQCProcessModel.questionnaire_id == questionnaire_id)
	if result is not None:
		stmt = stmt.where(QAQCProcessModel.result == result)

	rows, total = await paginate(session, stmt, params)
	return [QAQCProcess.model_validate(row) for row in rows], total


async def delete_process(session: AsyncSession, process_id: str) -> bool:
	process = await session.get(QAQCProcessModel, process_id)
	if not process:
		return False

	await session.delete(process)
	await session.commit()
	logger.info(f"QA/QC process deleted: {process_id}")
	return True
