# (c) Copyright Datacraft, 2026
"""FastAPI router for QA/QC processes."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from siteqc.core.config import Settings, get_settings
from siteqc.core.db.engine import get_db
from siteqc.core.exceptions import ValidationFailed
from siteqc.core.pagination import PageParams, get_page_params
from siteqc.core.schemas import ApiResponse, PaginatedResponse
from siteqc.core.types import QAQCResult

from . import service
from .evaluator import EvaluationPolicy
from .views import QAQCProcess, QAQCProcessCreate

router = APIRouter(prefix="/qaqc-processes", tags=["qaqc"])


def get_policy(settings: Annotated[Settings, Depends(get_settings)]) -> EvaluationPolicy:
	return EvaluationPolicy.from_settings(settings)


@router.get("")
async def list_processes(
	session: Annotated[AsyncSession, Depends(get_db)],
	params: Annotated[PageParams, Depends(get_page_params)],
	event_id: str | None = None,
	questionnaire_id: str | None = None,
	result: Annotated[QAQCResult | None, Query()] = None,
) -> PaginatedResponse[QAQCProcess]:
	"""List QA/QC processes with their results."""
	items, total = await service.list_processes(session, params, event_id, questionnaire_id, result)
	return PaginatedResponse[QAQCProcess](data=items, pagination=params.pagination(total))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_process(
	data: QAQCProcessCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
	policy: Annotated[EvaluationPolicy, Depends(get_policy)],
) -> ApiResponse[QAQCProcess]:
	"""Run a questionnaire against an event's documents."""
	try:
		process = await service.create_process(session, data, policy)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	return ApiResponse[QAQCProcess](data=process, message=f"QA/QC process {process.result.value}")


@router.get("/{process_id}")
async def get_process(
	process_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[QAQCProcess]:
	process = await service.get_process(session, process_id)
	if not process:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA/QC process not found")
	return ApiResponse[QAQCProcess](data=process)


@router.post("/{process_id}/rerun")
async def rerun_process(
	process_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
	policy: Annotated[EvaluationPolicy, Depends(get_policy)],
) -> ApiResponse[QAQCProcess]:
	"""Re-evaluate a process against the current documents."""
	try:
		process = await service.rerun_process(session, process_id, policy)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	if not process:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA/QC process not found")
	return ApiResponse[QAQCProcess](data=process, message=f"QA/QC process {process.result.value}")


@router.delete("/{process_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_process(
	process_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> None:
	deleted = await service.delete_process(session, process_id)
	if not deleted:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA/QC process not found")
