# (c) Copyright Datacraft, 2026
"""
Questionnaires and questions router tests.
"""
from httpx import AsyncClient

from siteqc.core.types import EventType, Relation


async def test_create_questionnaire(api_client: AsyncClient):
	response = await api_client.post(
		"/questionnaires",
		json={"name": "Drilling QA", "description": "Checks for drilling logs", "event_type": "Drilling"},
	)

	assert response.status_code == 201, response.json()
	data = response.json()["data"]
	assert data["questions"] == []
	assert data["question_count"] == 0


async def test_list_questionnaires_by_event_type(api_client: AsyncClient, make_questionnaire):
	await make_questionnaire(name="Drilling QA", event_type=EventType.DRILLING)
	await make_questionnaire(name="Survey QA", event_type=EventType.SURVEY)

	response = await api_client.get("/questionnaires", params={"event_type": "Survey"})

	assert response.status_code == 200, response.json()
	assert [item["name"] for item in response.json()["data"]] == ["Survey QA"]


async def test_create_question_with_fixed_value(api_client: AsyncClient, make_questionnaire, make_document_type):
	questionnaire = await make_questionnaire()
	document_type = await make_document_type()

	response = await api_client.post(
		f"/questionnaires/{questionnaire.id}/questions",
		json={
			"document_1_id": document_type.id,
			"property_1": "Depth",
			"relation": ">",
			"comparison_value": "10",
		},
	)

	assert response.status_code == 201, response.json()
	data = response.json()["data"]
	assert data["position"] == 1
	assert data["document_2_id"] is None
	assert data["system_value"] == ""

	response = await api_client.get(f"/questionnaires/{questionnaire.id}")
	assert response.json()["data"]["question_count"] == 1


async def test_questions_keep_their_order(api_client: AsyncClient, make_questionnaire, make_document_type):
	questionnaire = await make_questionnaire()
	document_type = await make_document_type()

	for value in ("1", "2", "3"):
		response = await api_client.post(
			f"/questionnaires/{questionnaire.id}/questions",
			json={
				"document_1_id": document_type.id,
				"property_1": "Depth",
				"relation": "Equals",
				"comparison_value": value,
			},
		)
		assert response.status_code == 201, response.json()

	response = await api_client.get(f"/questionnaires/{questionnaire.id}/questions")
	assert [q["comparison_value"] for q in response.json()["data"]] == ["1", "2", "3"]


async def test_question_needs_exactly_one_right_operand(
	api_client: AsyncClient,
	make_questionnaire,
	make_document_type,
):
	questionnaire = await make_questionnaire()
	document_type = await make_document_type()
	base = {"document_1_id": document_type.id, "property_1": "Depth", "relation": "Equals"}

	bodies = [
		base,
		{**base, "comparison_value": "10", "document_2_id": document_type.id, "property_2": "Depth"},
		{**base, "document_2_id": document_type.id},
		{**base, "comparison_value": "   "},
	]
	for body in bodies:
		response = await api_client.post(f"/questionnaires/{questionnaire.id}/questions", json=body)
		assert response.status_code == 422, body


async def test_question_properties_must_be_declared(
	api_client: AsyncClient,
	make_questionnaire,
	make_document_type,
):
	questionnaire = await make_questionnaire()
	document_type = await make_document_type()

	response = await api_client.post(
		f"/questionnaires/{questionnaire.id}/questions",
		json={
			"document_1_id": document_type.id,
			"property_1": "Colour",
			"relation": "Equals",
			"comparison_value": "brown",
		},
	)
	assert response.status_code == 422
	assert "Colour" in response.json()["error"]

	response = await api_client.post(
		f"/questionnaires/{questionnaire.id}/questions",
		json={
			"document_1_id": "nope",
			"property_1": "Depth",
			"relation": "Equals",
			"comparison_value": "1",
		},
	)
	assert response.status_code == 422


async def test_update_question_switches_operand_form(
	api_client: AsyncClient,
	make_questionnaire,
	make_document_type,
	make_question,
):
	questionnaire = await make_questionnaire()
	log = await make_document_type(name="Drilling Log")
	gw = await make_document_type(name="Groundwater Monitoring", properties=["Well ID"])
	question = await make_question(questionnaire, log, "Well ID", Relation.EQUALS, "MW-1")

	response = await api_client.patch(
		f"/questions/{question.id}",
		json={"document_2_id": gw.id, "property_2": "Well ID"},
	)
	assert response.status_code == 422

	response = await api_client.patch(
		f"/questions/{question.id}",
		json={"document_2_id": gw.id, "property_2": "Well ID", "comparison_value": None},
	)
	assert response.status_code == 200, response.json()
	data = response.json()["data"]
	assert data["document_2_id"] == gw.id
	assert data["comparison_value"] is None


async def test_delete_questionnaire_deletes_questions(
	api_client: AsyncClient,
	make_questionnaire,
	make_document_type,
	make_question,
):
	questionnaire = await make_questionnaire()
	question = await make_question(questionnaire, await make_document_type(), "Depth", Relation.LESS_THAN, "100")

	response = await api_client.delete(f"/questionnaires/{questionnaire.id}")
	assert response.status_code == 204

	response = await api_client.get(f"/questions/{question.id}")
	assert response.status_code == 404
