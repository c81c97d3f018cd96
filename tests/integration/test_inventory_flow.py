"""Integration test for the item → movement → alerts → reports flow."""

from httpx import AsyncClient


async def create_tomate(client: AsyncClient, **overrides) -> dict:
    payload = {
        "name": "Tomate",
        "category": "vegetais",
        "quantity": 10,
        "unit": "kg",
        "min_stock": 20,
        "cost_per_unit": 5,
    }
    payload.update(overrides)
    response = await client.post("/api/inventory", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["item"]


class TestInventoryFlow:
    async def test_waste_flow(self, live_client: AsyncClient):
        item = await create_tomate(live_client)

        response = await live_client.post(
            "/api/stock-movements",
            json={"item_id": item["id"], "type": "desperdicio", "quantity": 3, "reason": "Vencido"},
        )
        assert response.status_code == 201
        assert response.json()["new_quantity"] == 7

        item = (await live_client.get(f"/api/inventory/{item['id']}")).json()
        assert item["quantity"] == 7

        waste = (await live_client.get("/api/waste")).json()
        assert waste[0]["cost"] == 15
        assert waste[0]["item_name"] == "Tomate"

        notifications = (await live_client.get("/api/notifications")).json()
        assert {n["type"] for n in notifications} == {"low_stock", "waste"}
        count = (await live_client.get("/api/notifications/unread-count")).json()
        assert count["count"] == 2

        activity = (await live_client.get("/api/activity")).json()
        assert activity[0]["description"] == "Tomate: 10.00 → 7.00 kg (Vencido)"

        stats = (await live_client.get("/api/stats")).json()
        assert stats["monthly_waste"] == 15
        assert stats["low_stock_count"] == 1

    async def test_rejected_movement_changes_nothing(self, live_client: AsyncClient):
        item = await create_tomate(live_client)

        response = await live_client.post(
            "/api/stock-movements",
            json={"item_id": item["id"], "type": "saida", "quantity": 15},
        )

        assert response.status_code == 400
        assert (await live_client.get(f"/api/inventory/{item['id']}")).json()["quantity"] == 10
        assert (await live_client.get("/api/stock-movements")).json() == []

    async def test_idempotent_resubmission(self, live_client: AsyncClient):
        item = await create_tomate(live_client)
        body = {"item_id": item["id"], "type": "entrada", "quantity": 5, "idempotency_key": "k-1"}

        first = await live_client.post("/api/stock-movements", json=body)
        second = await live_client.post("/api/stock-movements", json=body)

        assert first.json()["replayed"] is False
        assert second.json()["replayed"] is True
        assert second.json()["movement"]["id"] == first.json()["movement"]["id"]
        assert (await live_client.get(f"/api/inventory/{item['id']}")).json()["quantity"] == 15

    async def test_edit_quantity_then_delete_keeps_history(self, live_client: AsyncClient):
        item = await create_tomate(live_client)

        response = await live_client.put(f"/api/inventory/{item['id']}", json={"quantity": 0})
        assert response.status_code == 200
        assert response.json()["notifications"][0]["type"] == "critical_stock"

        response = await live_client.delete(f"/api/inventory/{item['id']}")
        assert response.json()["movements_kept"] == 1

        movements = (await live_client.get("/api/stock-movements")).json()
        assert movements[0]["item_id"] is None
        assert movements[0]["item_name"] == "Item removido"
        assert movements[0]["reason"] == "Ajuste via edição do item"

    async def test_notification_lifecycle(self, live_client: AsyncClient):
        item = await create_tomate(live_client)
        await live_client.post(
            "/api/stock-movements",
            json={"item_id": item["id"], "type": "saida", "quantity": 1},
        )

        assert (await live_client.patch("/api/notifications", json={"id": "all"})).json()[
            "affected"
        ] == 1
        response = await live_client.request("DELETE", "/api/notifications", json={"id": "all"})
        assert response.json()["affected"] == 1
        assert (await live_client.get("/api/notifications")).json() == []

    async def test_charts_and_report(self, live_client: AsyncClient):
        item = await create_tomate(live_client, quantity=40)
        await live_client.post(
            "/api/stock-movements",
            json={"item_id": item["id"], "type": "entrada", "quantity": 10},
        )
        await live_client.post(
            "/api/stock-movements",
            json={"item_id": item["id"], "type": "saida", "quantity": 5},
        )

        chart = (await live_client.get("/api/charts/inventory")).json()
        assert chart["current_total"] == 45
        assert [p["total"] for p in chart["points"]][-2:] == [40, 45]

        report = (await live_client.get("/api/reports/summary")).json()
        assert report["movements"]["entries"] == 10
        assert report["movements"]["exits"] == 5
        assert report["most_used_items"][0]["name"] == "Tomate"

        settings = (await live_client.get("/api/settings")).json()
        assert settings["waste_safe_threshold"] == 100
