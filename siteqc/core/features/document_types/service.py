# (c) Copyright Datacraft, 2026
"""Service layer for the document type catalog."""
import logging
from typing import Sequence

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7str

from siteqc.core.exceptions import Conflict, ValidationFailed
from siteqc.core.features.documents.models import DocumentModel
from siteqc.core.features.questionnaires.models import QuestionModel
from siteqc.core.pagination import PageParams, paginate

from .models import DocumentTypeModel
from .views import DocumentType, DocumentTypeCreate, DocumentTypeUpdate

logger = logging.getLogger(__name__)


async def _name_taken(
	session: AsyncSession,
	name: str,
	exclude_id: str | None = None,
) -> bool:
	stmt = select(func.count()).select_from(DocumentTypeModel).where(
		DocumentTypeModel.name == name
	)
	if exclude_id is not None:
		stmt = stmt.where(DocumentTypeModel.id != exclude_id)
	return (await session.scalar(stmt) or 0) > 0


async def list_document_types(
	session: AsyncSession,
	params: PageParams,
	name: str | None = None,
	organization_id: str | None = None,
) -> tuple[Sequence[DocumentType], int]:
	stmt = select(DocumentTypeModel).order_by(DocumentTypeModel.name)
	if name:
		stmt = stmt.where(DocumentTypeModel.name.ilike(f"%{name}%"))
	if organization_id:
		stmt = stmt.where(DocumentTypeModel.organization_id == organization_id)

	rows, total = await paginate(session, stmt, params)
	return [DocumentType.model_validate(row) for row in rows], total


async def get_document_type(
	session: AsyncSession,
	document_type_id: str,
) -> DocumentType | None:
	document_type = await session.get(DocumentTypeModel, document_type_id)
	return DocumentType.model_validate(document_type) if document_type else None


async def create_document_type(
	session: AsyncSession,
	data: DocumentTypeCreate,
) -> DocumentType:
	if await _name_taken(session, data.name):
		raise Conflict(f"Document type '{data.name}' already exists")

	document_type = DocumentTypeModel(id=uuid7str(), **data.model_dump())
	session.add(document_type)
	await session.commit()
	await session.refresh(document_type)
	logger.info(f"Document type created: {document_type.id} ({document_type.name})")
	return DocumentType.model_validate(document_type)


async def _property_usage(
	session: AsyncSession,
	document_type_id: str,
	removed: set[str],
) -> tuple[int, int]:
	"""Count documents and questions that use any of the ``removed`` property names."""
	questions = await session.scalar(
		select(func.count()).select_from(QuestionModel).where(
			or_(
				and_(
					QuestionModel.document_1_id == document_type_id,
					QuestionModel.property_1.in_(removed),
				),
				and_(
					QuestionModel.document_2_id == document_type_id,
					QuestionModel.property_2.in_(removed),
				),
			)
		)
	) or 0

	result = await session.scalars(
		select(DocumentModel.properties_values).where(
			DocumentModel.document_type_id == document_type_id
		)
	)
	documents = sum(1 for values in result.all() if removed.intersection(values or {}))
	return documents, questions


async def update_document_type(
	session: AsyncSession,
	document_type_id: str,
	data: DocumentTypeUpdate,
) -> DocumentType | None:
	document_type = await session.get(DocumentTypeModel, document_type_id)
	if not document_type:
		return None

	update_data = data.model_dump(exclude_unset=True)
	for key in ("name", "properties"):
		if key in update_data and update_data[key] is None:
			raise ValidationFailed(f"{key} cannot be null")

	if "name" in update_data and await _name_taken(session, update_data["name"], document_type_id):
		raise Conflict(f"Document type '{update_data['name']}' already exists")

	if "properties" in update_data:
		removed = set(document_type.properties) - set(update_data["properties"])
		if removed:
			documents, questions = await _property_usage(session, document_type_id, removed)
			if documents or questions:
				raise Conflict(
					f"Properties {', '.join(sorted(removed))} of document type '{document_type.name}' "
					f"are used by {documents} document(s) and {questions} question(s)"
				)

	for key, value in update_data.items():
		setattr(document_type, key, value)

	await session.commit()
	await session.refresh(document_type)
	logger.info(f"Document type updated: {document_type.id}")
	return DocumentType.model_validate(document_type)


async def delete_document_type(session: AsyncSession, document_type_id: str) -> bool:
	"""
	Delete a catalog entry.

	Raises Conflict while documents or questions still reference it.
	"""
	document_type = await session.get(DocumentTypeModel, document_type_id)
	if not document_type:
		return False

	documents = await session.scalar(
		select(func.count()).select_from(DocumentModel).where(
			DocumentModel.document_type_id == document_type_id
		)
	) or 0
	questions = await session.scalar(
		select(func.count()).select_from(QuestionModel).where(
			or_(
				QuestionModel.document_1_id == document_type_id,
				QuestionModel.document_2_id == document_type_id,
			)
		)
	) or 0
	if documents or questions:
		raise Conflict(
			f"Document type '{document_type.name}' is referenced by "
			f"{documents} document(s) and {questions} question(s)"
		)

	await session.delete(document_type)
	await session.commit()
	logger.info(f"Document type deleted: {document_type_id}")
	return True
