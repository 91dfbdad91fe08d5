# (c) Copyright Datacraft, 2026
"""FastAPI router for Documents feature."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from siteqc.core.db.engine import get_db
from siteqc.core.exceptions import ValidationFailed
from siteqc.core.schemas import ApiResponse

from . import service
from .views import Document, DocumentCreate, DocumentUpdate

router = APIRouter(tags=["documents"])


@router.get("/events/{event_id}/documents")
async def list_event_documents(
	event_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[Document]]:
	"""List the documents of an event."""
	documents = await service.list_event_documents(session, event_id)
	if documents is None:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
	return ApiResponse[list[Document]](data=list(documents))


@router.post("/events/{event_id}/documents", status_code=status.HTTP_201_CREATED)
async def create_document(
	event_id: str,
	data: DocumentCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Document]:
	try:
		document = await service.create_document(session, event_id, data)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	if not document:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
	return ApiResponse[Document](data=document, message="Document created")


@router.get("/documents/{document_id}")
async def get_document(
	document_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Document]:
	document = await service.get_document(session, document_id)
	if not document:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
	return ApiResponse[Document](data=document)


@router.patch("/documents/{document_id}")
async def update_document(
	document_id: str,
	data: DocumentUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Document]:
	"""Update parsed property values and/or the processing status."""
	try:
		document = await service.update_document(session, document_id, data)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	if not document:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
	return ApiResponse[Document](data=document, message="Document updated")


@router.delete("/documents/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
	document_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> None:
	deleted = await service.delete_document(session, document_id)
	if not deleted:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
