# (c) Copyright Datacraft, 2026
"""FastAPI router for Projects feature."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from siteqc.core.db.engine import get_db
from siteqc.core.exceptions import ValidationFailed
from siteqc.core.pagination import PageParams, get_page_params
from siteqc.core.schemas import ApiResponse, PaginatedResponse
from siteqc.core.types import ProjectStatus

from . import service
from .views import Project, ProjectCreate, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("")
async def list_projects(
	session: Annotated[AsyncSession, Depends(get_db)],
	params: Annotated[PageParams, Depends(get_page_params)],
	project_status: Annotated[ProjectStatus | None, Query(alias="status")] = None,
) -> PaginatedResponse[Project]:
	"""List projects."""
	items, total = await service.list_projects(session, params, project_status)
	return PaginatedResponse[Project](data=items, pagination=params.pagination(total))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
	data: ProjectCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Project]:
	"""Create a new project."""
	project = await service.create_project(session, data)
	return ApiResponse[Project](data=project, message="Project created")


@router.get("/{project_id}")
async def get_project(
	project_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Project]:
	"""Get a project by ID."""
	project = await service.get_project(session, project_id)
	if not project:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
	return ApiResponse[Project](data=project)


@router.patch("/{project_id}")
async def update_project(
	project_id: str,
	data: ProjectUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Project]:
	"""Update a project."""
	try:
		project = await service.update_project(session, project_id, data)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	if not project:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
	return ApiResponse[Project](data=project, message="Project updated")


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
	project_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> None:
	"""Delete a project with all of its events."""
	deleted = await service.delete_project(session, project_id)
	if not deleted:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
