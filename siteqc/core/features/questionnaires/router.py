# (c) Copyright Datacraft, 2026
"""FastAPI router for Questionnaires feature."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from siteqc.core.db.engine import get_db
from siteqc.core.exceptions import ValidationFailed
from siteqc.core.pagination import PageParams, get_page_params
from siteqc.core.schemas import ApiResponse, PaginatedResponse
from siteqc.core.types import EventType

from . import service
from .views import (
	Question,
	QuestionCreate,
	QuestionUpdate,
	Questionnaire,
	QuestionnaireCreate,
	QuestionnaireUpdate,
)

router = APIRouter(tags=["questionnaires"])


# =====================================================
# Questionnaires Endpoints
# =====================================================


@router.get("/questionnaires")
async def list_questionnaires(
	session: Annotated[AsyncSession, Depends(get_db)],
	params: Annotated[PageParams, Depends(get_page_params)],
	event_type: EventType | None = None,
) -> PaginatedResponse[Questionnaire]:
	"""List questionnaires with their questions."""
	items, total = await service.list_questionnaires(session, params, event_type)
	return PaginatedResponse[Questionnaire](data=items, pagination=params.pagination(total))


@router.post("/questionnaires", status_code=status.HTTP_201_CREATED)
async def create_questionnaire(
	data: QuestionnaireCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Questionnaire]:
	questionnaire = await service.create_questionnaire(session, data)
	return ApiResponse[Questionnaire](data=questionnaire, message="Questionnaire created")


@router.get("/questionnaires/{questionnaire_id}")
async def get_questionnaire(
	questionnaire_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Questionnaire]:
	questionnaire = await service.get_questionnaire(session, questionnaire_id)
	if not questionnaire:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Questionnaire not found")
	return ApiResponse[Questionnaire](data=questionnaire)


@router.patch("/questionnaires/{questionnaire_id}")
async def update_questionnaire(
	questionnaire_id: str,
	data: QuestionnaireUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Questionnaire]:
	try:
		questionnaire = await service.update_questionnaire(session, questionnaire_id, data)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	if not questionnaire:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Questionnaire not found")
	return ApiResponse[Questionnaire](data=questionnaire, message="Questionnaire updated")


@router.delete("/questionnaires/{questionnaire_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_questionnaire(
	questionnaire_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> None:
	deleted = await service.delete_questionnaire(session, questionnaire_id)
	if not deleted:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Questionnaire not found")


# =====================================================
# Questions Endpoints
# =====================================================


@router.get("/questionnaires/{questionnaire_id}/questions")
async def list_questions(
	questionnaire_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[Question]]:
	questions = await service.list_questions(session, questionnaire_id)
	if questions is None:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Questionnaire not found")
	return ApiResponse[list[Question]](data=list(questions))


@router.post("/questionnaires/{questionnaire_id}/questions", status_code=status.HTTP_201_CREATED)
async def create_question(
	questionnaire_id: str,
	data: QuestionCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Question]:
	"""Add a question to a questionnaire."""
	try:
		question = await service.create_question(session, questionnaire_id, data)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	if not question:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Questionnaire not found")
	return ApiResponse[Question](data=question, message="Question created")


@router.get("/questions/{question_id}")
async def get_question(
	question_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Question]:
	question = await service.get_question(session, question_id)
	if not question:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
	return ApiResponse[Question](data=question)


@router.patch("/questions/{question_id}")
async def update_question(
	question_id: str,
	data: QuestionUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[Question]:
	try:
		question = await service.update_question(session, question_id, data)
	except ValidationFailed as e:
		raise HTTPException(status_code=422, detail=str(e))
	if not question:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
	return ApiResponse[Question](data=question, message="Question updated")


@router.delete("/questions/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
	question_id: str,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> None:
	deleted = await service.delete_question(session, question_id)
	if not deleted:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
