"""API tests for stock movement endpoints."""

from datetime import datetime

import pytest
from httpx import AsyncClient

from estoque.config import reset_settings
from estoque.core.entities.inventory import MovementType, StockMovement
from estoque.core.exceptions import PersistenceError, StockChangedError


def persist(entry) -> StockMovement:
    for number, notification in enumerate(entry.notifications, start=1):
        notification.id = number
    return entry.movement.model_copy(update={"id": 11})


@pytest.fixture
def tomate(mock_inventory_store, make_item):
    item = make_item()
    mock_inventory_store.get_item.return_value = item
    mock_inventory_store.record_movement.side_effect = persist
    return item


class TestRecordMovement:
    async def test_waste_returns_201(self, client: AsyncClient, tomate):
        response = await client.post(
            "/api/stock-movements",
            json={"item_id": 1, "type": "desperdicio", "quantity": 3, "reason": "Vencido"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["new_quantity"] == 7
        assert data["movement"]["cost"] == 15
        assert data["movement"]["item_name"] == "Tomate"
        assert [n["type"] for n in data["notifications"]] == ["low_stock", "waste"]

    async def test_decimal_comma(self, client: AsyncClient, tomate):
        response = await client.post(
            "/api/stock-movements", json={"item_id": 1, "type": "entrada", "quantity": "2,5"}
        )
        assert response.status_code == 201
        assert response.json()["new_quantity"] == 12.5

    async def test_insufficient_stock(self, client: AsyncClient, tomate, mock_inventory_store):
        response = await client.post(
            "/api/stock-movements", json={"item_id": 1, "type": "saida", "quantity": 15}
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "INSUFFICIENT_STOCK"
        assert data["message"] == "Quantidade insuficiente. Estoque disponível: 10.00 kg"
        assert data["errors"][0]["field"] == "quantity"
        mock_inventory_store.record_movement.assert_not_called()

    async def test_every_offending_field_reported(self, client: AsyncClient, tomate):
        response = await client.post(
            "/api/stock-movements",
            json={"item_id": 1, "type": "desperdicio", "quantity": 0, "reason": "ok"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "MOVEMENT_INVALID"
        assert {e["field"] for e in data["errors"]} == {"quantity", "reason"}

    async def test_unknown_item(self, client: AsyncClient, mock_inventory_store):
        mock_inventory_store.get_item.return_value = None

        response = await client.post(
            "/api/stock-movements", json={"item_id": 9, "type": "entrada", "quantity": 1}
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "ITEM_NOT_FOUND"

    async def test_english_locale(self, client: AsyncClient, mock_inventory_store, monkeypatch):
        monkeypatch.setenv("INVENTORY_LOCALE", "en")
        reset_settings()
        mock_inventory_store.get_item.return_value = None

        response = await client.post(
            "/api/stock-movements", json={"item_id": 9, "type": "entrada", "quantity": 1}
        )

        data = response.json()
        assert data["message"] == "Item not found"
        assert data["hint"] == "Check the item ID or list items with GET /api/inventory."

    async def test_replay(self, client: AsyncClient, tomate, mock_inventory_store):
        mock_inventory_store.get_movement_by_key.return_value = StockMovement(
            id=3,
            item_id=1,
            movement_type=MovementType.ENTRADA,
            quantity=5,
            previous_quantity=5,
            new_quantity=10,
            idempotency_key="abc",
            item_name="Tomate",
        )

        response = await client.post(
            "/api/stock-movements",
            json={"item_id": 1, "type": "entrada", "quantity": 5, "idempotency_key": "abc"},
        )

        assert response.status_code == 201
        assert response.json()["replayed"] is True
        assert response.json()["movement"]["id"] == 3

    async def test_key_reused_for_other_item(
        self, client: AsyncClient, mock_inventory_store, make_item
    ):
        mock_inventory_store.get_item.return_value = make_item(id=2, name="Arroz", quantity=20)
        mock_inventory_store.get_movement_by_key.return_value = StockMovement(
            id=1,
            item_id=1,
            movement_type=MovementType.SAIDA,
            quantity=2,
            previous_quantity=10,
            new_quantity=8,
            idempotency_key="k1",
            item_name="Tomate",
        )

        response = await client.post(
            "/api/stock-movements",
            json={"item_id": 2, "type": "entrada", "quantity": 30, "idempotency_key": "k1"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "IDEMPOTENCY_CONFLICT"
        assert data["errors"][0]["field"] == "idempotency_key"
        assert data["hint"] == "Gere uma nova chave para cada movimentação diferente."
        mock_inventory_store.record_movement.assert_not_called()

    async def test_stock_keeps_changing_is_409(
        self, client: AsyncClient, tomate, mock_inventory_store
    ):
        mock_inventory_store.record_movement.side_effect = StockChangedError(1, 10, 9)

        response = await client.post(
            "/api/stock-movements", json={"item_id": 1, "type": "entrada", "quantity": 1}
        )

        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "STOCK_CHANGED"
        assert data["message"] == "O estoque do item mudou durante o registro. Tente novamente"

    async def test_storage_failure_is_generic(
        self, client: AsyncClient, tomate, mock_inventory_store
    ):
        mock_inventory_store.record_movement.side_effect = PersistenceError(
            "record_movement", "disk I/O error"
        )

        response = await client.post(
            "/api/stock-movements", json={"item_id": 1, "type": "entrada", "quantity": 1}
        )

        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "Não foi possível concluir a operação. Tente novamente."
        assert "disk" not in response.text

    async def test_missing_field_is_422(self, client: AsyncClient):
        response = await client.post("/api/stock-movements", json={"type": "entrada"})

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"] == "Requisição inválida"
        assert data["hint"] == "Confira o corpo da requisição de acordo com o esquema da API."

    async def test_requires_user(self, anonymous_client: AsyncClient, tomate):
        response = await anonymous_client.post(
            "/api/stock-movements", json={"item_id": 1, "type": "entrada", "quantity": 1}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"


class TestListMovements:
    async def test_filters_passed_to_store(self, client: AsyncClient, mock_inventory_store):
        response = await client.get(
            "/api/stock-movements",
            params={
                "item_id": 1,
                "type": "saida",
                "date_from": "2024-06-01",
                "date_to": "2024-06-30",
            },
        )

        assert response.status_code == 200
        kwargs = mock_inventory_store.list_movements.call_args.kwargs
        assert kwargs["movement_type"] is MovementType.SAIDA
        assert kwargs["date_from"] == datetime(2024, 6, 1)
        assert kwargs["date_to"] == datetime(2024, 7, 1)

    async def test_orphaned_movement_name(self, client: AsyncClient, mock_inventory_store):
        mock_inventory_store.list_movements.return_value = [
            StockMovement(
                id=1,
                item_id=None,
                movement_type=MovementType.SAIDA,
                quantity=1,
                previous_quantity=3,
                new_quantity=2,
            )
        ]

        response = await client.get("/api/stock-movements")

        assert response.json()[0]["item_name"] == "Item removido"

    async def test_unknown_type_is_422(self, client: AsyncClient):
        response = await client.get("/api/stock-movements", params={"type": "roubo"})
        assert response.status_code == 422
