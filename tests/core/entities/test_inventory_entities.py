"""Tests for inventory entities."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from estoque.core.entities.inventory import (
    Category,
    InventoryItem,
    MovementType,
    StockMovement,
    Unit,
    WasteRecord,
)


class TestInventoryItem:
    def test_total_value(self, make_item):
        item = make_item(quantity=3.5, cost_per_unit=4.2)
        assert item.total_value == 14.7

    def test_name_key_is_case_insensitive(self, make_item):
        assert make_item(name="  Tomate Italiano ").name_key == "tomate italiano"
        assert make_item(name="TOMATE ITALIANO").name_key == "tomate italiano"

    def test_defaults(self):
        item = InventoryItem(
            name="Arroz", category=Category.GRAOS, unit=Unit.KG, cost_per_unit=6.0
        )
        assert item.quantity == 0.0
        assert item.min_stock == 0.0
        assert item.last_restocked is None

    def test_negative_quantity_rejected(self, make_item):
        with pytest.raises(ValidationError):
            make_item(quantity=-1)

    def test_cost_must_be_positive(self, make_item):
        with pytest.raises(ValidationError):
            make_item(cost_per_unit=0)

    def test_timestamps_are_per_instance(self):
        first = InventoryItem(name="A1", category="outros", unit="unid", cost_per_unit=1)
        second = InventoryItem(name="B1", category="outros", unit="unid", cost_per_unit=1)
        assert first.created_at is not second.created_at


class TestMovementType:
    @pytest.mark.parametrize(
        ("kind", "previous", "quantity", "expected"),
        [
            (MovementType.ENTRADA, 10, 5, 15),
            (MovementType.SAIDA, 10, 4, 6),
            (MovementType.DESPERDICIO, 10, 10, 0),
            (MovementType.AJUSTE, 10, 3, 3),
            (MovementType.AJUSTE, 8, 0, 0),
        ],
    )
    def test_resulting_quantity(self, kind, previous, quantity, expected):
        assert kind.resulting_quantity(previous, quantity) == expected

    def test_outflow_never_goes_negative(self):
        assert MovementType.SAIDA.resulting_quantity(1, 2) == 0

    def test_flags(self):
        assert MovementType.SAIDA.is_outflow
        assert MovementType.DESPERDICIO.is_outflow
        assert not MovementType.ENTRADA.is_outflow
        assert MovementType.AJUSTE.is_absolute
        assert not MovementType.ENTRADA.is_absolute

    def test_rounding_to_cents(self):
        assert MovementType.ENTRADA.resulting_quantity(0.1, 0.2) == 0.3


class TestStockMovement:
    def test_valid_snapshot(self):
        movement = StockMovement(
            item_id=1,
            movement_type=MovementType.SAIDA,
            quantity=3,
            previous_quantity=10,
            new_quantity=7,
            cost=15,
        )
        assert movement.net_change == -3

    def test_inconsistent_snapshot_rejected(self):
        with pytest.raises(ValidationError):
            StockMovement(
                movement_type=MovementType.ENTRADA,
                quantity=3,
                previous_quantity=10,
                new_quantity=12,
            )

    def test_zero_quantity_only_for_ajuste(self):
        StockMovement(
            movement_type=MovementType.AJUSTE,
            quantity=0,
            previous_quantity=8,
            new_quantity=0,
        )
        with pytest.raises(ValidationError):
            StockMovement(
                movement_type=MovementType.ENTRADA,
                quantity=0,
                previous_quantity=8,
                new_quantity=8,
            )

    def test_orphaned_movement(self):
        movement = StockMovement(
            item_id=None,
            movement_type=MovementType.ENTRADA,
            quantity=1,
            previous_quantity=0,
            new_quantity=1,
        )
        assert movement.item_id is None
        assert movement.item_name is None


class TestWasteRecord:
    def test_requires_positive_quantity(self):
        with pytest.raises(ValidationError):
            WasteRecord(quantity=0, reason="Vencido")

    def test_fields(self):
        record = WasteRecord(
            item_id=1, quantity=3, reason="Vencido", cost=15, date=datetime(2024, 6, 1)
        )
        assert record.movement_id is None
        assert record.cost == 15
