# (c) Copyright Datacraft, 2026
"""Service layer for Projects feature."""
import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7str

from siteqc.core.exceptions import ValidationFailed
from siteqc.core.pagination import PageParams, paginate
from siteqc.core.types import ProjectStatus

from .models import ProjectModel
from .views import Project, ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

# Fields that must be present when a project is updated
_REQUIRED_FIELDS = ("name", "client", "location", "status", "start_date")


async def list_projects(
	session: AsyncSession,
	params: PageParams,
	status: ProjectStatus | None = None,
) -> tuple[Sequence[Project], int]:
	"""List projects, most recently started first."""
	stmt = select(ProjectModel).order_by(
		ProjectModel.start_date.desc(), ProjectModel.created_at.desc()
	)
	if status is not None:
		stmt = stmt.where(ProjectModel.status == status)

	rows, total = await paginate(session, stmt, params)
	return [Project.model_validate(row) for row in rows], total


async def get_project(session: AsyncSession, project_id: str) -> Project | None:
	project = await session.get(ProjectModel, project_id)
	return Project.model_validate(project) if project else None


async def create_project(session: AsyncSession, data: ProjectCreate) -> Project:
	project = ProjectModel(id=uuid7str(), **data.model_dump())
	session.add(project)
	await session.commit()
	await session.refresh(project)
	logger.info(f"Project created: {project.id} ({project.name})")
	return Project.model_validate(project)


async def update_project(
	session: AsyncSession,
	project_id: str,
	data: ProjectUpdate,
) -> Project | None:
	"""
	Apply a partial update.

	Raises ValidationFailed when a required field is cleared or the
	resulting date range is inverted.
	"""
	project = await session.get(ProjectModel, project_id)
	if not project:
		return None

	update_data = data.model_dump(exclude_unset=True)
	cleared = [key for key in _REQUIRED_FIELDS if key in update_data and update_data[key] is None]
	if cleared:
		raise ValidationFailed(f"Fields cannot be null: {', '.join(cleared)}")

	start_date = update_data.get("start_date", project.start_date)
	end_date = update_data.get("end_date", project.end_date)
	if end_date is not None and end_date < start_date:
		raise ValidationFailed("end_date must not be before start_date")

	for key, value in update_data.items():
		setattr(project, key, value)

	await session.commit()
	await session.refresh(project)
	logger.info(f"Project updated: {project.id}")
	return Project.model_validate(project)


async def delete_project(session: AsyncSession, project_id: str) -> bool:
	"""Delete a project; its events, documents and processes cascade."""
	project = await session.get(ProjectModel, project_id)
	if not project:
		return False

	await session.delete(project)
	await session.commit()
	logger.info(f"Project deleted: {project_id}")
	return True
