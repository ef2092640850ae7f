"""
Tests de los endpoints de pedidos.
"""
from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from core.repositories import OrderRepository

ORDER_PAYLOAD = {
    "client_name": "María Pérez",
    "phone": "099555444",
    "address": "Av. Italia 4000",
    "locality": "Carrasco",
    "items_json": '[{"producto": "Huevos 24", "cantidad": 2, "precio": 360.0}]',
    "total": 720.0,
    "location": "-34.88,-56.06"
}


def create_order(client, **overrides):
    response = client.post("/api/orders", json={**ORDER_PAYLOAD, **overrides})
    assert response.status_code == 200
    return response.json()


class TestOrderCrud:

    def test_crear_sin_created_usa_fecha_actual(self, client):
        before = datetime.now()

        data = create_order(client)

        created = datetime.fromisoformat(data["created"])
        assert before - timedelta(seconds=1) <= created <= datetime.now() + timedelta(seconds=1)

    def test_crear_con_created_lo_respeta(self, client):
        data = create_order(client, created="2025-02-14T10:30:00")
        assert data["created"] == "2025-02-14T10:30:00"

    def test_total_no_se_reconcilia_con_items(self, client):
        data = create_order(client, total=1.0)

        assert data["total"] == 1.0
        assert data["items_json"] == ORDER_PAYLOAD["items_json"]

    def test_actualizar_conserva_created(self, client):
        original = create_order(client, created="2025-02-14T10:30:00")

        response = client.put(f"/api/orders/{original['id']}", json={**ORDER_PAYLOAD, "total": 900.0})

        data = response.json()
        assert data["id"] == original["id"]
        assert data["total"] == 900.0
        assert data["created"] == "2025-02-14T10:30:00"

    def test_obtener_y_eliminar(self, client):
        data = create_order(client)

        assert client.get(f"/api/orders/{data['id']}").json()["client_name"] == "María Pérez"
        assert client.delete(f"/api/orders/{data['id']}").status_code == 200
        assert client.get(f"/api/orders/{data['id']}").json() is None
        assert client.delete("/api/orders/999").status_code == 200


class TestOrderListing:

    def test_prioridad_de_filtros(self, client):
        create_order(client, client_name="María Pérez", locality="Pocitos")
        create_order(client, client_name="Mario Gómez", locality="Carrasco")
        create_order(client, client_name="Lucía Fernández", locality="Carrasco")

        def names(**params):
            return [o["client_name"] for o in client.get("/api/orders", params=params).json()]

        assert names(clientName="mar", locality="Carrasco") == ["Mario Gómez"]
        assert names(clientName="mar") == ["María Pérez", "Mario Gómez"]
        assert names(locality="Carrasco") == ["Mario Gómez", "Lucía Fernández"]
        assert names(clientName="", locality="") == ["María Pérez", "Mario Gómez", "Lucía Fernández"]

    def test_rango_de_fechas(self, client):
        create_order(client, client_name="Enero", created="2025-01-15T12:00:00")
        create_order(client, client_name="Febrero", created="2025-02-15T12:00:00")
        create_order(client, client_name="Marzo", created="2025-03-15T12:00:00")

        response = client.get(
            "/api/orders/date-range",
            params={"start": "2025-02-01T00:00:00", "end": "2025-03-15T12:00:00"}
        )

        assert response.status_code == 200
        assert [o["client_name"] for o in response.json()] == ["Febrero", "Marzo"]

    def test_rango_de_fechas_mal_formado_retorna_400(self, client):
        response = client.get("/api/orders/date-range", params={"start": "ayer", "end": "2025-03-15T12:00:00"})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_rango_de_fechas_requiere_ambos_extremos(self, client):
        response = client.get("/api/orders/date-range", params={"start": "2025-02-01T00:00:00"})
        assert response.status_code == 400

    def test_total_minimo(self, client):
        create_order(client, client_name="Chico", total=200.0)
        create_order(client, client_name="Justo", total=500.0)
        create_order(client, client_name="Grande", total=1500.0)

        response = client.get("/api/orders/total", params={"minTotal": 500})

        assert [o["client_name"] for o in response.json()] == ["Justo", "Grande"]

    def test_total_minimo_no_numerico_retorna_400(self, client):
        assert client.get("/api/orders/total", params={"minTotal": "mucho"}).status_code == 400


class TestOrderTimestamps:
    """Fechas: solo ISO-8601 con hora"""

    @pytest.mark.parametrize("start, end", [
        ("1700000000", "1800000000"),
        ("2025-01-01", "2025-12-31"),
    ])
    def test_rango_no_iso_retorna_400(self, client, start, end):
        response = client.get("/api/orders/date-range", params={"start": start, "end": end})

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "start"

    @pytest.mark.parametrize("created", [1700000000, "1700000000", "2025-02-14"])
    def test_created_no_iso_retorna_400(self, client, created):
        response = client.post("/api/orders", json={**ORDER_PAYLOAD, "created": created})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_created_con_zona_horaria_se_pasa_a_hora_local(self, client):
        raw = "2025-02-14T10:30:00-03:00"
        expected = datetime.fromisoformat(raw).astimezone().replace(tzinfo=None)

        data = create_order(client, created=raw)

        assert datetime.fromisoformat(data["created"]) == expected

    def test_rango_con_zona_horaria_compara_en_hora_local(self, client):
        raw = "2025-02-14T10:30:00-03:00"
        create_order(client, created=raw)

        response = client.get("/api/orders/date-range", params={"start": raw, "end": raw})

        assert response.status_code == 200
        assert len(response.json()) == 1


def test_error_de_base_de_datos_retorna_500(client, monkeypatch):
    def fail(self):
        raise OperationalError("SELECT * FROM orders", {}, Exception("conexión perdida"))

    monkeypatch.setattr(OrderRepository, "find_all", fail)

    response = client.get("/api/orders")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "status_code": 500,
        "message": "Error al acceder a la base de datos",
        "error": "DATABASE_ERROR"
    }
