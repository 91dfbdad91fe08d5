# (c) Copyright Datacraft, 2026
"""FastAPI router for Events feature."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from siteqc.core.config import Settings, get_settings
from siteqc.core.db.engine import get_db
from siteqc.core.exceptions import ValidationFailed
from siteqc.core.features.document_types.views import DocumentType
from siteqc.core.schemas import ApiResponse

from . import service
from .views import Event, EventCreate, EventUpdate

router = APIRouter(tags=["events"])


@router.get("/projects/{project_id}/events")
async def list_project_events(
	project_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[Event]]:
	"""List all events of a project."""
	events = await service.list_project_events(session, project_id)
	if events is None:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
	return ApiResponse[list[Event]](data=list(events))


@router.post("/projects/{project_id}/events", status_code=status.HTTP_201_CREATED)
async def create_event(
	project_id: str,
	data: EventCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Event]:
	"""Create a new event for a project."""
	event = await service.create_event(session, project_id, data)
	if not event:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
	return ApiResponse[Event](data=event, message="Event created")


@router.get("/events/{event_id}")
async def get_event(
	event_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Event]:
	event = await service.get_event(session, event_id)
	if not event:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
	return ApiResponse[Event](data=event)


@router.patch("/events/{event_id}")
async def update_event(
	event_id: str,
	data: EventUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Event]:
	try:
		event = await service.update_event(session, event_id, data)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	if not event:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
	return ApiResponse[Event](data=event, message="Event updated")


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
	event_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> None:
	deleted = await service.delete_event(session, event_id)
	if not deleted:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")


@router.get("/events/{event_id}/required-document-types")
async def get_required_document_types(
	event_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> ApiResponse[list[DocumentType]]:
	"""Document types required by the event's types."""
	document_types = await service.get_required_document_types(
		session, event_id, settings.required_document_types
	)
	if document_types is None:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
	return ApiResponse[list[DocumentType]](data=document_types)
