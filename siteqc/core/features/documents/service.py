# (c) Copyright Datacraft, 2026
"""Service layer for Documents feature."""
import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7str

from siteqc.core.exceptions import ValidationFailed
from siteqc.core.features.document_types.models import DocumentTypeModel
from siteqc.core.features.events.models import EventModel
from siteqc.core.types import DocumentStatus

from .lifecycle import can_transition, unknown_properties
from .models import DocumentModel
from .views import Document, DocumentCreate, DocumentUpdate

logger = logging.getLogger(__name__)


async def list_event_documents(
	session: AsyncSession,
	event_id: str,
) -> Sequence[Document] | None:
	if await session.get(EventModel, event_id) is None:
		return None

	stmt = (
		select(DocumentModel)
		.where(DocumentModel.event_id == event_id)
		.order_by(DocumentModel.created_at, DocumentModel.id)
	)
	result = await session.execute(stmt)
	return [Document.model_validate(row) for row in result.scalars().all()]


async def get_document(session: AsyncSession, document_id: str) -> Document | None:
	document = await session.get(DocumentModel, document_id)
	return Document.model_validate(document) if document else None


async def create_document(
	session: AsyncSession,
	event_id: str,
	data: DocumentCreate,
) -> Document | None:
	"""Register a document for an event; it starts as Not Uploaded."""
	if await session.get(EventModel, event_id) is None:
		return None
	if await session.get(DocumentTypeModel, data.document_type_id) is None:
		raise ValidationFailed(f"Document type '{data.document_type_id}' does not exist")

	document = DocumentModel(
		id=uuid7str(),
		event_id=event_id,
		status=DocumentStatus.NOT_UPLOADED,
		properties_values={},
		**data.model_dump(),
	)
	session.add(document)
	await session.commit()
	await session.refresh(document)
	logger.info(f"Document created: {document.id} ({document.file_name}) for event {event_id}")
	return Document.model_validate(document)


async def update_document(
	session: AsyncSession,
	document_id: str,
	data: DocumentUpdate,
) -> Document | None:
	"""
	Replace property values and/or advance the status.

	Raises ValidationFailed for undeclared property names or a status
	change the lifecycle does not allow.
	"""
	document = await session.get(DocumentModel, document_id)
	if not document:
		return None

	update_data = data.model_dump(exclude_unset=True)

	if "status" in update_data:
		target = update_data["status"]
		if target is None:
			raise ValidationFailed("status cannot be null")
		if not can_transition(document.status, target):
			raise ValidationFailed(
				f"Cannot change document status from '{document.status.value}' to '{target.value}'"
			)
		document.status = target

	if "properties_values" in update_data:
		values = update_data["properties_values"] or {}
		document_type = await session.get(DocumentTypeModel, document.document_type_id)
		unknown = unknown_properties(values, document_type.properties)
		if unknown:
			raise ValidationFailed(
				f"Properties not defined by document type '{document_type.name}': {', '.join(unknown)}"
			)
		document.properties_values = dict(values)

	if "file_path" in update_data:
		document.file_path = update_data["file_path"]

	await session.commit()
	await session.refresh(document)
	logger.info(f"Document updated: {document.id} (status: {document.status.value})")
	return Document.model_validate(document)


async def delete_document(session: AsyncSession, document_id: str) -> bool:
	document = await session.get(DocumentModel, document_id)
	if not document:
		return False

	await session.delete(document)
	await session.commit()
	logger.info(f"Document deleted: {document_id}")
	return True
