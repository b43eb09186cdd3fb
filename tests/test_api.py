"""
Tests for the HTTP/JSON API consumed by the kermesse dashboard.
"""

from unittest.mock import patch

from django.db import OperationalError
from django.urls import reverse

import pytest
from rest_framework import status

from inventory.models import Dish
from sales.models import SaleLine


@pytest.mark.django_db
class TestHealth:
    def test_health_check(self, api_client):
        response = api_client.get("/")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Backend Kermesse Scout funcionando"
        assert "timestamp" in body

    def test_unknown_route_returns_json_404(self, api_client):
        response = api_client.get("/api/mesas")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Ruta no encontrada"}


@pytest.mark.django_db
class TestDishEndpoints:
    """Test GET /api/platos and PUT /api/platos/<id>."""

    def test_list_dishes(self, api_client, dishes):
        response = api_client.get("/api/platos")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert [dish["id"] for dish in body] == [dish.id for dish in dishes]
        assert body[0] == {
            "id": dishes[0].id,
            "nombre": "Pollo al Horno",
            "stock": 65,
            "vendidos": 0,
            "precio_costo": "20.00",
            "precio_venta": "35.00",
        }

    def test_update_units_sold(self, api_client, dishes):
        pollo = dishes[0]
        SaleLine.objects.create(team="pioneros", dish=pollo, quantity=2)

        response = api_client.put(
            reverse("inventory:dish-update-sold", args=[pollo.id]), {"vendidos": 5}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "message": "Pollo al Horno actualizado a 5 vendidos",
        }
        pollo.refresh_from_db()
        assert pollo.units_sold == 5
        assert not SaleLine.objects.filter(dish=pollo).exists()

    def test_update_above_stock_returns_400(self, api_client, dishes):
        response = api_client.put(f"/api/platos/{dishes[0].id}", {"vendidos": 100}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "La cantidad vendida no puede exceder el stock de 65"}

    def test_update_negative_returns_400(self, api_client, dishes):
        response = api_client.put(f"/api/platos/{dishes[0].id}", {"vendidos": -3}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "La cantidad vendida no puede ser negativa"}

    def test_update_unknown_dish_returns_400(self, api_client, dishes):
        response = api_client.put(f"/api/platos/{dishes[-1].id + 100}", {"vendidos": 1}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Plato no encontrado"}

    @pytest.mark.parametrize("dish_id", ["abc", "1.5", "99999999999999999999999"])
    def test_update_with_unusable_id_returns_400(self, api_client, dishes, dish_id):
        response = api_client.put(f"/api/platos/{dish_id}", {"vendidos": 1}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Plato no encontrado"}

    @pytest.mark.parametrize(
        "body, message",
        [
            ({}, "La cantidad vendida es requerida"),
            ({"vendidos": "muchos"}, "La cantidad vendida debe ser un número entero"),
        ],
    )
    def test_update_with_bad_body_returns_400(self, api_client, dishes, body, message):
        response = api_client.put(f"/api/platos/{dishes[0].id}", body, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": message}


@pytest.mark.django_db
class TestSaleEndpoints:
    """Test POST /api/ventas and GET /api/ventas."""

    def test_register_sale(self, api_client, dishes):
        pollo, fricasse, chicharron = dishes
        sale_data = {
            "equipo": "lobatos-rovers",
            "cantidades": {str(pollo.id): 2, str(fricasse.id): 1, str(chicharron.id): 0},
        }

        response = api_client.post("/api/ventas", sale_data, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "message": "Venta registrada correctamente"}
        assert SaleLine.objects.count() == 2
        assert Dish.objects.get(pk=pollo.pk).units_sold == 2

    def test_oversell_returns_400_and_changes_nothing(self, api_client, dishes):
        pollo, fricasse, _ = dishes
        api_client.post("/api/ventas", {"equipo": "pioneros", "cantidades": {pollo.id: 10}}, format="json")

        response = api_client.post(
            "/api/ventas",
            {"equipo": "exploradores", "cantidades": {fricasse.id: 1, pollo.id: 60}},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "No hay suficiente stock de Pollo al Horno"}
        assert Dish.objects.get(pk=pollo.pk).units_sold == 10
        assert Dish.objects.get(pk=fricasse.pk).units_sold == 0

    @pytest.mark.parametrize(
        "sale_data, message",
        [
            ({"cantidades": {"1": 1}}, "Debes seleccionar un equipo"),
            ({"equipo": "", "cantidades": {"1": 1}}, "Debes seleccionar un equipo"),
            ({"equipo": "pioneros"}, "Debes vender al menos un plato"),
            ({"equipo": "pioneros", "cantidades": {"1": 0, "2": 0}}, "Debes vender al menos un plato"),
            ({"equipo": "pioneros", "cantidades": {"1": -2}}, "Las cantidades no pueden ser negativas"),
            ({"equipo": "pioneros", "cantidades": {"1": "dos"}}, "Las cantidades deben ser números enteros"),
            ({"equipo": "pioneros", "cantidades": {"pollo": 1}}, "Identificador de plato no válido: pollo"),
            ({"equipo": "marinos", "cantidades": {"1": 1}}, "Equipo desconocido: marinos"),
        ],
    )
    def test_invalid_sale_returns_400(self, api_client, dishes, sale_data, message):
        response = api_client.post("/api/ventas", sale_data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": message}
        assert SaleLine.objects.count() == 0

    def test_unknown_dish_returns_400(self, api_client, dishes):
        response = api_client.post(
            "/api/ventas",
            {"equipo": "pioneros", "cantidades": {str(dishes[-1].id + 100): 1}},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Plato no encontrado"}

    def test_dish_id_beyond_integer_range_returns_400(self, api_client, dishes):
        response = api_client.post(
            "/api/ventas",
            {"equipo": "pioneros", "cantidades": {"99999999999999999999999": 1}},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Plato no encontrado"}
        assert SaleLine.objects.count() == 0

    def test_malformed_json_returns_400(self, api_client, dishes):
        response = api_client.post("/api/ventas", data="{equipo:", content_type="application/json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.json()

    def test_store_failure_returns_500(self, api_client, dishes):
        with patch("sales.serializers.register_sale", side_effect=OperationalError("connection refused")):
            response = api_client.post(
                "/api/ventas", {"equipo": "pioneros", "cantidades": {dishes[0].id: 1}}, format="json"
            )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "connection refused"}

    def test_list_ledger_filtered_by_team_and_dish(self, api_client, dishes):
        pollo, fricasse, _ = dishes
        api_client.post("/api/ventas", {"equipo": "pioneros", "cantidades": {pollo.id: 1, fricasse.id: 2}}, format="json")
        api_client.post("/api/ventas", {"equipo": "comision", "cantidades": {pollo.id: 3}}, format="json")

        all_lines = api_client.get("/api/ventas").json()
        by_team = api_client.get("/api/ventas", {"equipo": "pioneros"}).json()
        by_dish = api_client.get("/api/ventas", {"plato": pollo.id}).json()

        assert len(all_lines) == 3
        assert {line["equipo"] for line in by_team} == {"pioneros"}
        assert len(by_team) == 2
        assert {line["cantidad"] for line in by_dish} == {1, 3}
        assert set(by_dish[0]) == {"id", "equipo", "plato", "plato_nombre", "cantidad", "fecha"}
        assert by_dish[0]["plato_nombre"] == "Pollo al Horno"


@pytest.mark.django_db
class TestReportingAndReset:
    """Test GET /api/ventas/equipos and POST /api/reset."""

    def test_team_sales(self, api_client, dishes):
        pollo = dishes[0]
        api_client.post("/api/ventas", {"equipo": "lobatos-rovers", "cantidades": {pollo.id: 10}}, format="json")

        response = api_client.get("/api/ventas/equipos")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert list(body) == ["lobatos-rovers", "exploradores", "pioneros", "comision"]
        assert body["lobatos-rovers"] == {
            "nombre": "Lobatos/Rovers",
            "vendidos": 10,
            "total": 350,
            "platos": [{"nombre": "Pollo al Horno", "cantidad": 10}],
            "meta": 70,
        }
        assert body["exploradores"]["vendidos"] == 0

    def test_reset(self, api_client, dishes):
        api_client.post("/api/ventas", {"equipo": "pioneros", "cantidades": {dishes[1].id: 4}}, format="json")

        response = api_client.post("/api/reset")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "message": "Todos los datos han sido reseteados a cero",
        }
        assert SaleLine.objects.count() == 0
        assert all(dish["vendidos"] == 0 for dish in api_client.get("/api/platos").json())
        totals = api_client.get("/api/ventas/equipos").json()
        assert all(team["total"] == 0 for team in totals.values())

    def test_reset_failure_returns_500(self, api_client, dishes):
        with patch("sales.views.reset_sales", side_effect=OperationalError("database is locked")):
            response = api_client.post("/api/reset")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "database is locked"}


@pytest.mark.django_db
class TestCors:
    """Test cross-origin headers for the dashboard."""

    def test_preflight_is_answered(self, api_client):
        response = api_client.options(
            "/api/ventas",
            HTTP_ORIGIN="https://kermesse.example.org",
            HTTP_ACCESS_CONTROL_REQUEST_METHOD="POST",
            HTTP_ACCESS_CONTROL_REQUEST_HEADERS="content-type",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response["Access-Control-Allow-Origin"] == "https://kermesse.example.org"
        assert response["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE"
        assert response["Access-Control-Allow-Headers"] == "content-type"
        assert response["Access-Control-Allow-Credentials"] == "true"

    def test_simple_request_gets_origin_header(self, api_client, dishes):
        response = api_client.get("/api/platos", HTTP_ORIGIN="http://localhost:8080")

        assert response["Access-Control-Allow-Origin"] == "http://localhost:8080"
        assert "Origin" in response["Vary"]

    def test_request_without_origin_gets_wildcard(self, api_client, dishes):
        response = api_client.get("/api/platos")

        assert response["Access-Control-Allow-Origin"] == "*"


@pytest.mark.django_db
class TestApiDocumentation:
    def test_openapi_schema_lists_endpoints(self, api_client):
        response = api_client.get("/swagger/?format=openapi")

        assert response.status_code == status.HTTP_200_OK
        paths = response.json()["paths"]
        assert any(path.endswith("/ventas/equipos") for path in paths)
        assert any(path.endswith("/reset") for path in paths)
