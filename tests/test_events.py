"""
Tests for event CRUD endpoints.
"""

import pytest
from httpx import AsyncClient

FUTURE_DATE = "2999-01-01 20:00"


@pytest.mark.asyncio
async def test_create_event(client: AsyncClient):
    """Created event is returned as stored, with its generated id."""
    response = await client.post(
        "/eventos",
        json={"nombre": "Concierto", "fecha": FUTURE_DATE, "ubicacion": "Auditorio"},
    )
    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["nombre"] == "Concierto"
    assert data["fecha"] == "2999-01-01 20:00:00"
    assert data["ubicacion"] == "Auditorio"


@pytest.mark.asyncio
async def test_create_then_get_returns_same_fields(client: AsyncClient, test_event):
    response = await client.get(f"/eventos/{test_event['id']}")
    assert response.status_code == 200
    assert response.json() == test_event


@pytest.mark.asyncio
async def test_get_event_is_repeatable(client: AsyncClient, test_event):
    first = await client.get(f"/eventos/{test_event['id']}")
    second = await client.get(f"/eventos/{test_event['id']}")
    assert first.json() == second.json()


@pytest.mark.asyncio
async def test_create_event_missing_fields(client: AsyncClient):
    """Every missing field gets its own message and nothing is stored."""
    response = await client.post("/eventos", json={"nombre": "Solo nombre"})
    assert response.status_code == 422
    assert response.json()["detail"] == [
        {"fecha": "Es un campo obligatorio."},
        {"ubicacion": "Es un campo obligatorio."},
    ]

    listing = await client.get("/eventos")
    assert listing.json() == []


@pytest.mark.asyncio
async def test_create_event_without_body(client: AsyncClient):
    response = await client.post("/eventos")
    assert response.status_code == 422
    assert len(response.json()["detail"]) == 3


@pytest.mark.asyncio
async def test_create_event_from_form(client: AsyncClient):
    """Url-encoded bodies are read like JSON ones."""
    response = await client.post(
        "/eventos",
        data={"nombre": "Obra", "fecha": FUTURE_DATE, "ubicacion": "Teatro"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["nombre"] == "Obra"
    assert data["fecha"] == "2999-01-01 20:00:00"


@pytest.mark.asyncio
async def test_create_event_from_incomplete_form(client: AsyncClient):
    response = await client.post("/eventos", data={"nombre": "Obra"})
    assert response.status_code == 422
    assert response.json()["detail"] == [
        {"fecha": "Es un campo obligatorio."},
        {"ubicacion": "Es un campo obligatorio."},
    ]


@pytest.mark.asyncio
async def test_create_event_malformed_json(client: AsyncClient):
    response = await client.post(
        "/eventos",
        content=b"{\"nombre\": ",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["detail"] == [{"body": "JSON inválido."}]


@pytest.mark.asyncio
async def test_create_event_bad_date(client: AsyncClient):
    """Malformed date is rejected before reaching the database."""
    response = await client.post(
        "/eventos",
        json={"nombre": "Concierto", "fecha": "2999/01/01 20:00", "ubicacion": "Auditorio"},
    )
    assert response.status_code == 422
    assert response.json()["detail"] == [
        {"fecha": "Formato de fecha incorrecto [YYYY-MM-DD HH:mm]."},
    ]


@pytest.mark.asyncio
async def test_create_event_wrong_json_type(client: AsyncClient):
    """Non-string values are rejected in the same list shape."""
    response = await client.post(
        "/eventos",
        json={"nombre": 123, "fecha": FUTURE_DATE, "ubicacion": "Auditorio"},
    )
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert list(detail[0].keys()) == ["nombre"]


@pytest.mark.asyncio
async def test_list_events(client: AsyncClient, test_event):
    response = await client.get("/eventos")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == test_event["id"]


@pytest.mark.asyncio
async def test_get_event_not_found(client: AsyncClient):
    response = await client.get("/eventos/99999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Evento no encontrado"}


@pytest.mark.asyncio
async def test_update_event(client: AsyncClient, test_event):
    response = await client.put(
        f"/eventos/{test_event['id']}",
        json={"nombre": "Concierto 2", "fecha": "2998-05-10 18:30", "ubicacion": "Estadio"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == test_event["id"]
    assert data["nombre"] == "Concierto 2"
    assert data["fecha"] == "2998-05-10 18:30:00"
    assert data["ubicacion"] == "Estadio"


@pytest.mark.asyncio
async def test_update_event_not_found(client: AsyncClient):
    """Lookup runs before validation, so an unknown id wins over bad fields."""
    response = await client.put("/eventos/99999", json={})
    assert response.status_code == 404
    assert response.json() == {"detail": "Evento no encontrado"}


@pytest.mark.asyncio
async def test_update_event_invalid(client: AsyncClient, test_event):
    response = await client.put(
        f"/eventos/{test_event['id']}",
        json={"nombre": "", "fecha": FUTURE_DATE, "ubicacion": "Auditorio"},
    )
    assert response.status_code == 422
    assert response.json()["detail"] == [{"nombre": "Es un campo obligatorio."}]

    unchanged = await client.get(f"/eventos/{test_event['id']}")
    assert unchanged.json() == test_event


@pytest.mark.asyncio
async def test_delete_event(client: AsyncClient, test_event):
    """Event without reservations can be deleted."""
    response = await client.delete(f"/eventos/{test_event['id']}")
    assert response.status_code == 200
    assert response.json() == {"detail": "Evento eliminado"}

    gone = await client.get(f"/eventos/{test_event['id']}")
    assert gone.status_code == 404


@pytest.mark.asyncio
async def test_delete_event_with_reservations(client: AsyncClient, test_event, test_reservation):
    """Referenced event returns 409 and stays in place."""
    response = await client.delete(f"/eventos/{test_event['id']}")
    assert response.status_code == 409
    assert response.json() == {"detail": "Este evento tiene reservaciones."}

    still_there = await client.get(f"/eventos/{test_event['id']}")
    assert still_there.status_code == 200


@pytest.mark.asyncio
async def test_delete_event_not_found(client: AsyncClient):
    response = await client.delete("/eventos/99999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Evento no encontrado"}


@pytest.mark.asyncio
async def test_oversized_event_id_not_found(client: AsyncClient):
    oversized = "/eventos/100000000000000000000"
    payload = {"nombre": "Concierto", "fecha": FUTURE_DATE, "ubicacion": "Auditorio"}
    for response in (
        await client.get(oversized),
        await client.put(oversized, json=payload),
        await client.delete(oversized),
    ):
        assert response.status_code == 404
        assert response.json() == {"detail": "Evento no encontrado"}


@pytest.mark.asyncio
async def test_non_integer_event_id(client: AsyncClient):
    response = await client.get("/eventos/abc")
    assert response.status_code == 422
    assert list(response.json()["detail"][0].keys()) == ["event_id"]
