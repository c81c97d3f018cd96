"""Tests for item payload validation."""

import pytest

from estoque.core.entities.inventory import Category, Unit
from estoque.core.services.item_validator import validate_inventory_item


def codes(result) -> list[str]:
    return [issue.code for issue in result.issues]


@pytest.fixture
def payload(sample_item_payload) -> dict:
    return dict(sample_item_payload)


def test_valid_payload(payload):
    result = validate_inventory_item(payload)
    assert result.is_valid
    assert result.warnings == []


def test_accepts_enum_members(payload):
    payload["category"] = Category.LATICINIOS
    payload["unit"] = Unit.KG
    assert validate_inventory_item(payload).is_valid


@pytest.mark.parametrize(
    ("name", "code"),
    [
        ("", "name_required"),
        ("   ", "name_required"),
        ("A", "name_too_short"),
        ("x" * 101, "name_too_long"),
        ("Tomate <script>", "name_invalid_chars"),
    ],
)
def test_name_rules(payload, name, code):
    payload["name"] = name
    assert codes(validate_inventory_item(payload)) == [code]


def test_accented_name_allowed(payload):
    payload["name"] = "Pão Francês (unid.) & Cia"
    assert validate_inventory_item(payload).is_valid


def test_unknown_category_and_unit(payload):
    payload["category"] = "brinquedos"
    payload["unit"] = "tonelada"
    assert codes(validate_inventory_item(payload)) == ["category_invalid", "unit_invalid"]


@pytest.mark.parametrize(
    ("quantity", "code"),
    [
        ("muito", "quantity_not_a_number"),
        (-1, "quantity_negative"),
        (1000000, "quantity_too_large"),
        (1.234, "quantity_too_many_decimals"),
    ],
)
def test_quantity_rules(payload, quantity, code):
    payload["quantity"] = quantity
    assert codes(validate_inventory_item(payload)) == [code]


@pytest.mark.parametrize(
    ("cost", "code"),
    [
        ("caro", "cost_not_a_number"),
        (0, "cost_too_small"),
        (1000000, "cost_too_large"),
        (2.555, "cost_too_many_decimals"),
    ],
)
def test_cost_rules(payload, cost, code):
    payload["cost_per_unit"] = cost
    assert codes(validate_inventory_item(payload)) == [code]


def test_cost_message_uses_currency(payload):
    payload["cost_per_unit"] = 0
    result = validate_inventory_item(payload, currency="US$")
    assert "US$" in result.first_error.message


def test_kg_min_stock_limit(payload):
    payload["min_stock"] = 10001
    assert codes(validate_inventory_item(payload)) == ["min_stock_too_high_for_kg"]

    payload["unit"] = "unid"
    assert validate_inventory_item(payload).is_valid


def test_supplier_too_long(payload):
    payload["supplier"] = "S" * 201
    assert codes(validate_inventory_item(payload)) == ["supplier_too_long"]


def test_quantity_below_min_is_a_warning(payload):
    payload["quantity"] = 2
    payload["min_stock"] = 5

    result = validate_inventory_item(payload)

    assert result.is_valid
    assert [w.code for w in result.warnings] == ["quantity_below_min_stock"]


def test_partial_only_checks_present_fields():
    assert validate_inventory_item({"name": "Cebola"}, partial=True).is_valid
    assert codes(validate_inventory_item({"cost_per_unit": 0}, partial=True)) == [
        "cost_too_small"
    ]


def test_full_validation_requires_fields():
    result = validate_inventory_item({})
    assert {"name_required", "category_required", "unit_required"} <= set(codes(result))


def test_english_messages(payload):
    payload["name"] = ""
    result = validate_inventory_item(payload, locale="en")
    assert result.first_error.message != validate_inventory_item(payload).first_error.message
