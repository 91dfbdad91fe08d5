# (c) Copyright Datacraft, 2026
"""
Shared fixtures: a throwaway SQLite database per test, an API client bound
to it and factories for every entity.
"""
from datetime import date, datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from uuid_extensions import uuid7str

from siteqc.app import app
from siteqc.core.db.engine import create_engine, get_db, init_db
from siteqc.core.features.document_types.models import DocumentTypeModel
from siteqc.core.features.documents.models import DocumentModel
from siteqc.core.features.events.models import EventModel
from siteqc.core.features.projects.models import ProjectModel
from siteqc.core.features.questionnaires.models import QuestionModel, QuestionnaireModel
from siteqc.core.types import DocumentStatus, EventType, FileFormat, ProjectStatus, Relation


@pytest.fixture
async def db_engine(tmp_path):
	engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'siteqc-test.db'}")
	await init_db(engine)
	yield engine
	await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
	return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
	async with session_factory() as session:
		yield session


@pytest.fixture
async def api_client(session_factory):
	"""HTTP client for the API; every request gets its own session."""
	async def _get_db():
		async with session_factory() as session:
			yield session

	app.dependency_overrides[get_db] = _get_db
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test/api/v1") as client:
		yield client
	app.dependency_overrides.clear()


@pytest.fixture
async def make_project(db_session: AsyncSession):
	"""Factory fixture for creating projects."""
	async def _make_project(name: str = "Riverside Landfill", **kwargs) -> ProjectModel:
		project = ProjectModel(
			id=uuid7str(),
			name=name,
			client=kwargs.get("client", "Acme Environmental"),
			location=kwargs.get("location", "Riverside, CA"),
			status=kwargs.get("status", ProjectStatus.NOT_STARTED),
			start_date=kwargs.get("start_date", date(2026, 3, 1)),
			end_date=kwargs.get("end_date"),
		)
		db_session.add(project)
		await db_session.commit()
		await db_session.refresh(project)
		return project

	return _make_project


@pytest.fixture
async def make_event(db_session: AsyncSession, make_project):
	"""Factory fixture for creating events."""
	async def _make_event(
		project: ProjectModel | None = None,
		event_types: list[EventType] | None = None,
		**kwargs,
	) -> EventModel:
		if project is None:
			project = await make_project()

		event = EventModel(
			id=uuid7str(),
			project_id=project.id,
			name=kwargs.get("name", "Spring Drilling"),
			start_datetime=kwargs.get("start_datetime", datetime(2026, 3, 2, 8, tzinfo=timezone.utc)),
			end_datetime=kwargs.get("end_datetime", datetime(2026, 3, 6, 17, tzinfo=timezone.utc)),
			event_types=[EventType(t).value for t in (event_types or [EventType.DRILLING])],
		)
		db_session.add(event)
		await db_session.commit()
		await db_session.refresh(event)
		return event

	return _make_event


@pytest.fixture
async def make_document_type(db_session: AsyncSession):
	"""Factory fixture for creating document types."""
	async def _make_document_type(
		name: str = "Drilling Log",
		properties: list[str] | None = None,
		**kwargs,
	) -> DocumentTypeModel:
		document_type = DocumentTypeModel(
			id=uuid7str(),
			name=name,
			properties=properties if properties is not None else ["Depth", "Well ID"],
			organization_id=kwargs.get("organization_id"),
		)
		db_session.add(document_type)
		await db_session.commit()
		await db_session.refresh(document_type)
		return document_type

	return _make_document_type


@pytest.fixture
async def make_document(db_session: AsyncSession):
	"""Factory fixture for creating documents; parsed unless told otherwise."""
	async def _make_document(
		event: EventModel,
		document_type: DocumentTypeModel,
		properties_values: dict | None = None,
		status: DocumentStatus = DocumentStatus.PARSED,
		**kwargs,
	) -> DocumentModel:
		document = DocumentModel(
			id=uuid7str(),
			event_id=event.id,
			document_type_id=document_type.id,
			file_name=kwargs.get("file_name", f"{document_type.name}.pdf"),
			file_format=kwargs.get("file_format", FileFormat.PDF),
			file_path=kwargs.get("file_path"),
			properties_values=properties_values or {},
			status=status,
		)
		if "created_at" in kwargs:
			document.created_at = kwargs["created_at"]
		db_session.add(document)
		await db_session.commit()
		await db_session.refresh(document)
		return document

	return _make_document


@pytest.fixture
async def make_questionnaire(db_session: AsyncSession):
	"""Factory fixture for creating empty questionnaires."""
	async def _make_questionnaire(name: str = "Drilling QA", **kwargs) -> QuestionnaireModel:
		questionnaire = QuestionnaireModel(
			id=uuid7str(),
			name=name,
			description=kwargs.get("description", "Checks for drilling events"),
			event_type=kwargs.get("event_type"),
			organization_id=kwargs.get("organization_id"),
		)
		db_session.add(questionnaire)
		await db_session.commit()
		await db_session.refresh(questionnaire)
		return questionnaire

	return _make_questionnaire


@pytest.fixture
async def make_question(db_session: AsyncSession):
	"""Factory fixture for appending a question to a questionnaire."""
	async def _make_question(
		questionnaire: QuestionnaireModel,
		document_1: DocumentTypeModel,
		property_1: str,
		relation: Relation,
		comparison_value: str | None = None,
		document_2: DocumentTypeModel | None = None,
		property_2: str | None = None,
	) -> QuestionModel:
		last = await db_session.scalar(
			select(func.max(QuestionModel.position)).where(
				QuestionModel.questionnaire_id == questionnaire.id
			)
		)
		question = QuestionModel(
			id=uuid7str(),
			questionnaire_id=questionnaire.id,
			position=(last or 0) + 1,
			document_1_id=document_1.id,
			property_1=property_1,
			relation=relation,
			document_2_id=document_2.id if document_2 else None,
			property_2=property_2,
			comparison_value=comparison_value,
		)
		db_session.add(question)
		await db_session.commit()
		await db_session.refresh(question)
		return question

	return _make_question
