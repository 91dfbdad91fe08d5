# (c) Copyright Datacraft, 2026
from httpx import AsyncClient


async def test_health(api_client: AsyncClient):
	response = await api_client.get("/health")

	assert response.status_code == 200, response.json()
	body = response.json()
	assert body["status"] == "ok"
	assert body["details"] == {"database": "up"}


async def test_unknown_route_uses_error_envelope(api_client: AsyncClient):
	response = await api_client.get("/nothing-here")

	assert response.status_code == 404
	assert response.json() == {"success": False, "error": "Not Found", "code": "not_found"}
