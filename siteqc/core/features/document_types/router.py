# (c) Copyright Datacraft, 2026
"""FastAPI router for the document type catalog."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from siteqc.core.db.engine import get_db
from siteqc.core.exceptions import Conflict, ValidationFailed
from siteqc.core.pagination import PageParams, get_page_params
from siteqc.core.schemas import ApiResponse, PaginatedResponse

from . import service
from .views import DocumentType, DocumentTypeCreate, DocumentTypeUpdate

router = APIRouter(prefix="/document-types", tags=["document-types"])


@router.get("")
async def list_document_types(
	session: Annotated[AsyncSession, Depends(get_db)],
	params: Annotated[PageParams, Depends(get_page_params)],
	name: str | None = None,
	organization_id: str | None = None,
) -> PaginatedResponse[DocumentType]:
	"""List document types ordered by name."""
	items, total = await service.list_document_types(session, params, name, organization_id)
	return PaginatedResponse[DocumentType](data=items, pagination=params.pagination(total))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_document_type(
	data: DocumentTypeCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[DocumentType]:
	try:
		document_type = await service.create_document_type(session, data)
	except Conflict as e:
		raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
	return ApiResponse[DocumentType](data=document_type, message="Document type created")


@router.get("/{document_type_id}")
async def get_document_type(
	document_type_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[DocumentType]:
	document_type = await service.get_document_type(session, document_type_id)
	if not document_type:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document type not found")
	return ApiResponse[DocumentType](data=document_type)


@router.patch("/{document_type_id}")
async def update_document_type(
	document_type_id: str,
	data: DocumentTypeUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[DocumentType]:
	try:
		document_type = await service.update_document_type(session, document_type_id, data)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	except Conflict as e:
		raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
	if not document_type:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document type not found")
	return ApiResponse[DocumentType](data=document_type, message="Document type updated")


@router.delete("/{document_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document_type(
	document_type_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> None:
	"""Delete a document type that nothing references."""
	try:
		deleted = await service.delete_document_type(session, document_type_id)
	except Conflict as e:
		raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
	if not deleted:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document type not found")
