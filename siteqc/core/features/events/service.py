# (c) Copyright Datacraft, 2026
"""Service layer for Events feature."""
import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7str

from siteqc.core.exceptions import ValidationFailed
from siteqc.core.features.document_types.models import DocumentTypeModel
from siteqc.core.features.document_types.views import DocumentType
from siteqc.core.features.projects.models import ProjectModel
from siteqc.core.types import EventType
from siteqc.core.utils.tz import as_utc

from .models import EventModel
from .views import Event, EventCreate, EventUpdate, check_period

logger = logging.getLogger(__name__)


async def list_project_events(
	session: AsyncSession,
	project_id: str,
) -> Sequence[Event] | None:
	"""List events of a project in chronological order, or None if the project is unknown."""
	if await session.get(ProjectModel, project_id) is None:
		return None

	stmt = (
		select(EventModel)
		.where(EventModel.project_id == project_id)
		.order_by(EventModel.start_datetime, EventModel.created_at)
	)
	result = await session.execute(stmt)
	return [Event.model_validate(row) for row in result.scalars().all()]


async def get_event(session: AsyncSession, event_id: str) -> Event | None:
	event = await session.get(EventModel, event_id)
	return Event.model_validate(event) if event else None


async def create_event(
	session: AsyncSession,
	project_id: str,
	data: EventCreate,
) -> Event | None:
	if await session.get(ProjectModel, project_id) is None:
		return None

	event = EventModel(
		id=uuid7str(),
		project_id=project_id,
		name=data.name,
		start_datetime=as_utc(data.start_datetime),
		end_datetime=as_utc(data.end_datetime),
		event_types=[t.value for t in data.event_types],
	)
	session.add(event)
	await session.commit()
	await session.refresh(event)
	logger.info(f"Event created: {event.id} in project {project_id}")
	return Event.model_validate(event)


async def update_event(
	session: AsyncSession,
	event_id: str,
	data: EventUpdate,
) -> Event | None:
	event = await session.get(EventModel, event_id)
	if not event:
		return None

	update_data = data.model_dump(exclude_unset=True)
	cleared = [key for key, value in update_data.items() if value is None]
	if cleared:
		raise ValidationFailed(f"Fields cannot be null: {', '.join(cleared)}")

	try:
		check_period(
			update_data.get("start_datetime", event.start_datetime),
			update_data.get("end_datetime", event.end_datetime),
		)
	except ValueError as e:
		raise ValidationFailed(str(e)) from e

	for key in ("start_datetime", "end_datetime"):
		if key in update_data:
			update_data[key] = as_utc(update_data[key])
	if "event_types" in update_data:
		update_data["event_types"] = [EventType(t).value for t in update_data["event_types"]]

	for key, value in update_data.items():
		setattr(event, key, value)

	await session.commit()
	await session.refresh(event)
	logger.info(f"Event updated: {event.id}")
	return Event.model_validate(event)


async def delete_event(session: AsyncSession, event_id: str) -> bool:
	"""Delete an event; its documents and QA/QC processes cascade."""
	event = await session.get(EventModel, event_id)
	if not event:
		return False

	await session.delete(event)
	await session.commit()
	logger.info(f"Event deleted: {event_id}")
	return True


def required_type_names(
	event_types: Sequence[EventType | str],
	mapping: dict[EventType, list[str]],
) -> list[str]:
	"""Document type names an event requires, in event-type order without repeats."""
	names: list[str] = []
	for event_type in event_types:
		for name in mapping.get(EventType(event_type), []):
			if name not in names:
				names.append(name)
	return names


async def get_required_document_types(
	session: AsyncSession,
	event_id: str,
	mapping: dict[EventType, list[str]],
) -> list[DocumentType] | None:
	"""
	Resolve the catalog entries an event's types require.

	Names without a matching catalog entry are skipped.
	"""
	event = await session.get(EventModel, event_id)
	if not event:
		return None

	names = required_type_names(event.event_types, mapping)
	if not names:
		return []

	stmt = select(DocumentTypeModel).where(DocumentTypeModel.name.in_(names))
	result = await session.execute(stmt)
	by_name = {row.name: row for row in result.scalars().all()}
	return [DocumentType.model_validate(by_name[name]) for name in names if name in by_name]
