# (c) Copyright Datacraft, 2026
"""
Documents router tests.
"""
import pytest
from httpx import AsyncClient

from siteqc.core.features.documents.lifecycle import can_transition
from siteqc.core.types import DocumentStatus


async def test_register_document(api_client: AsyncClient, make_event, make_document_type):
	event = await make_event()
	document_type = await make_document_type()

	response = await api_client.post(
		f"/events/{event.id}/documents",
		json={
			"document_type_id": document_type.id,
			"file_name": "MW-1_log.pdf",
			"file_format": "PDF",
		},
	)

	assert response.status_code == 201, response.json()
	data = response.json()["data"]
	assert data["status"] == "Not Uploaded"
	assert data["properties_values"] == {}


async def test_register_document_with_unknown_type(api_client: AsyncClient, make_event):
	event = await make_event()

	response = await api_client.post(
		f"/events/{event.id}/documents",
		json={"document_type_id": "nope", "file_name": "x.pdf", "file_format": "PDF"},
	)

	assert response.status_code == 422
	assert response.json()["code"] == "validation_error"


async def test_parse_document(api_client: AsyncClient, make_event, make_document_type, make_document):
	"""Walk a document through processing to parsed with values."""
	event = await make_event()
	document = await make_document(event, await make_document_type(), status=DocumentStatus.NOT_UPLOADED)

	response = await api_client.patch(f"/documents/{document.id}", json={"status": "Processing"})
	assert response.status_code == 200, response.json()

	response = await api_client.patch(
		f"/documents/{document.id}",
		json={"status": "Parsed", "properties_values": {"Depth": 15.5, "Well ID": "MW-1"}},
	)
	assert response.status_code == 200, response.json()
	data = response.json()["data"]
	assert data["status"] == "Parsed"
	assert data["properties_values"] == {"Depth": 15.5, "Well ID": "MW-1"}


async def test_status_cannot_move_backwards(api_client: AsyncClient, make_event, make_document_type, make_document):
	event = await make_event()
	document = await make_document(event, await make_document_type())

	response = await api_client.patch(f"/documents/{document.id}", json={"status": "Processing"})

	assert response.status_code == 422
	assert "from 'Parsed' to 'Processing'" in response.json()["error"]


async def test_unknown_property_rejected(api_client: AsyncClient, make_event, make_document_type, make_document):
	event = await make_event()
	document = await make_document(event, await make_document_type())

	response = await api_client.patch(
		f"/documents/{document.id}",
		json={"properties_values": {"Depth": 10, "Colour": "brown"}},
	)

	assert response.status_code == 422
	assert "Colour" in response.json()["error"]


async def test_list_and_delete_documents(api_client: AsyncClient, make_event, make_document_type, make_document):
	event = await make_event()
	document = await make_document(event, await make_document_type())

	response = await api_client.get(f"/events/{event.id}/documents")
	assert [item["id"] for item in response.json()["data"]] == [document.id]

	response = await api_client.delete(f"/documents/{document.id}")
	assert response.status_code == 204

	response = await api_client.get(f"/documents/{document.id}")
	assert response.status_code == 404


@pytest.mark.parametrize(
	"current, target, allowed",
	[
		(DocumentStatus.NOT_UPLOADED, DocumentStatus.PROCESSING, True),
		(DocumentStatus.NOT_UPLOADED, DocumentStatus.PARSED, True),
		(DocumentStatus.PROCESSING, DocumentStatus.NOT_UPLOADED, False),
		(DocumentStatus.PROCESSING, DocumentStatus.FAILED, True),
		(DocumentStatus.FAILED, DocumentStatus.PROCESSING, True),
		(DocumentStatus.FAILED, DocumentStatus.PARSED, False),
		(DocumentStatus.PARSED, DocumentStatus.FAILED, False),
		(DocumentStatus.PARSED, DocumentStatus.PARSED, True),
	],
)
def test_can_transition(current, target, allowed):
	assert can_transition(current, target) is allowed
