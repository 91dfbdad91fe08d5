# (c) Copyright Datacraft, 2026
"""
Document type catalog router tests.
"""
from httpx import AsyncClient

from siteqc.core.types import Relation


async def test_create_document_type(api_client: AsyncClient):
	response = await api_client.post(
		"/document-types",
		json={"name": " Drilling Log ", "properties": [" Depth ", "Well ID"]},
	)

	assert response.status_code == 201, response.json()
	data = response.json()["data"]
	assert data["name"] == "Drilling Log"
	assert data["properties"] == ["Depth", "Well ID"]


async def test_create_document_type_rejects_bad_properties(api_client: AsyncClient):
	response = await api_client.post(
		"/document-types",
		json={"name": "Drilling Log", "properties": ["Depth", "Depth"]},
	)

	assert response.status_code == 422
	assert "Duplicate property names: Depth" in response.json()["error"]


async def test_duplicate_name_conflicts(api_client: AsyncClient, make_document_type):
	await make_document_type(name="Drilling Log")

	response = await api_client.post("/document-types", json={"name": "Drilling Log"})

	assert response.status_code == 409
	assert response.json()["code"] == "conflict"


async def test_list_document_types_by_name(api_client: AsyncClient, make_document_type):
	await make_document_type(name="Drilling Log")
	await make_document_type(name="Soil Sample Analysis")

	response = await api_client.get("/document-types", params={"name": "drill"})

	assert response.status_code == 200, response.json()
	assert [item["name"] for item in response.json()["data"]] == ["Drilling Log"]


async def test_update_document_type(api_client: AsyncClient, make_document_type):
	document_type = await make_document_type()

	response = await api_client.patch(
		f"/document-types/{document_type.id}",
		json={"properties": ["Depth", "Well ID", "Driller"]},
	)

	assert response.status_code == 200, response.json()
	assert response.json()["data"]["properties"] == ["Depth", "Well ID", "Driller"]


async def test_delete_unreferenced_document_type(api_client: AsyncClient, make_document_type):
	document_type = await make_document_type()

	response = await api_client.delete(f"/document-types/{document_type.id}")
	assert response.status_code == 204

	response = await api_client.get(f"/document-types/{document_type.id}")
	assert response.status_code == 404


async def test_delete_referenced_document_type_conflicts(
	api_client: AsyncClient,
	make_document_type,
	make_questionnaire,
	make_question,
):
	document_type = await make_document_type()
	questionnaire = await make_questionnaire()
	await make_question(questionnaire, document_type, "Depth", Relation.GREATER_THAN, "10")

	response = await api_client.delete(f"/document-types/{document_type.id}")

	assert response.status_code == 409
	assert response.json()["success"] is False


async def test_removing_used_property_conflicts(
	api_client: AsyncClient,
	make_event,
	make_document_type,
	make_document,
	make_questionnaire,
	make_question,
):
	log = await make_document_type(name="Drilling Log", properties=["Depth", "Well ID", "Driller"])
	event = await make_event()
	await make_document(event, log, {"Depth": 15, "Well ID": "MW-1"})
	questionnaire = await make_questionnaire()
	await make_question(questionnaire, log, "Depth", Relation.GREATER_THAN, "10")

	response = await api_client.patch(f"/document-types/{log.id}", json={"properties": ["Well ID"]})

	assert response.status_code == 409
	assert response.json()["code"] == "conflict"
	assert "Depth" in response.json()["error"]

	response = await api_client.get(f"/document-types/{log.id}")
	assert response.json()["data"]["properties"] == ["Depth", "Well ID", "Driller"]

	response = await api_client.patch(
		f"/document-types/{log.id}",
		json={"properties": ["Depth", "Well ID"]},
	)
	assert response.status_code == 200, response.json()
	assert response.json()["data"]["properties"] == ["Depth", "Well ID"]
