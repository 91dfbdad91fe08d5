# (c) Copyright Datacraft, 2026
"""
Projects router tests.
"""
from datetime import datetime, timedelta

from httpx import AsyncClient

from siteqc.core.types import ProjectStatus


async def test_list_projects_empty(api_client: AsyncClient):
	response = await api_client.get("/projects")

	assert response.status_code == 200, response.json()
	body = response.json()
	assert body["success"] is True
	assert body["data"] == []
	assert body["pagination"] == {"page": 1, "page_size": 50, "total": 0, "total_pages": 0}


async def test_create_project(api_client: AsyncClient):
	"""Test creating a project with the default status."""
	response = await api_client.post(
		"/projects",
		json={
			"name": "Riverside Landfill",
			"client": "Acme Environmental",
			"location": "Riverside, CA",
			"start_date": "2026-03-01",
		},
	)

	assert response.status_code == 201, response.json()
	body = response.json()
	assert body["message"] == "Project created"
	assert body["data"]["status"] == "Not Started"
	assert body["data"]["end_date"] is None


async def test_create_project_rejects_inverted_dates(api_client: AsyncClient):
	response = await api_client.post(
		"/projects",
		json={
			"name": "Riverside Landfill",
			"client": "Acme Environmental",
			"location": "Riverside, CA",
			"start_date": "2026-03-01",
			"end_date": "2026-02-01",
		},
	)

	assert response.status_code == 422
	body = response.json()
	assert body["success"] is False
	assert body["code"] == "validation_error"
	assert "end_date" in body["error"]


async def test_list_projects_filtered_and_paged(api_client: AsyncClient, make_project):
	await make_project(name="A", status=ProjectStatus.IN_PROGRESS)
	await make_project(name="B", status=ProjectStatus.IN_PROGRESS)
	await make_project(name="C", status=ProjectStatus.COMPLETED)

	response = await api_client.get("/projects", params={"status": "In Progress", "page_size": 1})

	assert response.status_code == 200, response.json()
	body = response.json()
	assert len(body["data"]) == 1
	assert body["pagination"]["total"] == 2
	assert body["pagination"]["total_pages"] == 2


async def test_update_project(api_client: AsyncClient, make_project):
	project = await make_project(name="Old Name")

	response = await api_client.patch(
		f"/projects/{project.id}",
		json={"name": "New Name", "status": "In Progress"},
	)

	assert response.status_code == 200, response.json()
	data = response.json()["data"]
	assert data["name"] == "New Name"
	assert data["status"] == "In Progress"
	assert data["client"] == "Acme Environmental"


async def test_update_project_rejects_end_before_start(api_client: AsyncClient, make_project):
	project = await make_project()

	response = await api_client.patch(f"/projects/{project.id}", json={"end_date": "2025-01-01"})

	assert response.status_code == 422
	assert response.json()["code"] == "validation_error"


async def test_get_missing_project(api_client: AsyncClient):
	response = await api_client.get("/projects/does-not-exist")

	assert response.status_code == 404
	assert response.json() == {"success": False, "error": "Project not found", "code": "not_found"}


async def test_delete_project_deletes_its_events(api_client: AsyncClient, make_event):
	event = await make_event()

	response = await api_client.delete(f"/projects/{event.project_id}")
	assert response.status_code == 204

	response = await api_client.get(f"/events/{event.id}")
	assert response.status_code == 404


async def test_project_timestamps_are_utc(api_client: AsyncClient, make_project):
	project = await make_project()

	response = await api_client.get(f"/projects/{project.id}")

	created_at = datetime.fromisoformat(response.json()["data"]["created_at"])
	assert created_at.utcoffset() == timedelta(0)
