"""Validation of inventory item payloads."""

import re
from collections.abc import Mapping
from typing import Any

from estoque.core.entities.inventory import Category, Unit
from estoque.core.messages import DEFAULT_LOCALE, format_number, translate
from estoque.core.services.movement_validator import (
    MAX_QUANTITY,
    ValidationResult,
    has_extra_decimals,
    parse_quantity,
)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
NAME_PATTERN = re.compile(r"^[a-zA-ZÀ-ÿ0-9\s\-_.(),&]+$")
COST_MIN = 0.01
COST_MAX = 999999.99
SUPPLIER_MAX_LENGTH = 200
KG_MIN_STOCK_LIMIT = 10000

_CATEGORIES = {c.value for c in Category}
_UNITS = {u.value for u in Unit}


def _enum_value(raw: Any) -> str:
    return raw.value if isinstance(raw, (Category, Unit)) else str(raw or "").strip()


def validate_inventory_item(
    payload: Mapping[str, Any],
    locale: str = DEFAULT_LOCALE,
    partial: bool = False,
    currency: str = "R$",
    max_quantity: float = MAX_QUANTITY,
) -> ValidationResult:
    """
    Validate an item payload field by field.

    With ``partial`` only the keys present in the payload are checked, which
    is how updates are validated. A quantity below the minimum stock is
    reported as a warning and does not make the payload invalid.
    """
    result = ValidationResult()

    def t(key: str, **params: Any) -> str:
        return translate(key, locale, **params)

    def present(key: str) -> bool:
        return not partial or key in payload

    if present("name"):
        name = str(payload.get("name") or "").strip()
        if not name:
            result.add("name", "name_required", t("name_required"))
        elif len(name) < NAME_MIN_LENGTH:
            result.add("name", "name_too_short", t("name_too_short", min=NAME_MIN_LENGTH))
        elif len(name) > NAME_MAX_LENGTH:
            result.add("name", "name_too_long", t("name_too_long", max=NAME_MAX_LENGTH))
        elif not NAME_PATTERN.match(name):
            result.add("name", "name_invalid_chars", t("name_invalid_chars"))

    if present("category"):
        category = _enum_value(payload.get("category"))
        if not category:
            result.add("category", "category_required", t("category_required"))
        elif category not in _CATEGORIES:
            result.add("category", "category_invalid", t("category_invalid"))

    unit = _enum_value(payload.get("unit"))
    if present("unit"):
        if not unit:
            result.add("unit", "unit_required", t("unit_required"))
        elif unit not in _UNITS:
            result.add("unit", "unit_invalid", t("unit_invalid"))

    quantity: float | None = None
    if "quantity" in payload and payload.get("quantity") is not None:
        quantity = parse_quantity(payload.get("quantity"))
        if quantity is None:
            result.add("quantity", "quantity_not_a_number", t("quantity_not_a_number"))
        elif quantity < 0:
            result.add("quantity", "quantity_negative", t("quantity_negative"))
        elif quantity > max_quantity:
            result.add(
                "quantity",
                "quantity_too_large",
                t("quantity_too_large", max=format_number(max_quantity, locale)),
            )
        elif has_extra_decimals(quantity):
            result.add("quantity", "quantity_too_many_decimals", t("quantity_too_many_decimals"))

    min_stock: float | None = None
    if "min_stock" in payload and payload.get("min_stock") is not None:
        min_stock = parse_quantity(payload.get("min_stock"))
        if min_stock is None:
            result.add("min_stock", "min_stock_not_a_number", t("min_stock_not_a_number"))
        elif min_stock < 0:
            result.add("min_stock", "min_stock_negative", t("min_stock_negative"))
        elif min_stock > max_quantity:
            result.add(
                "min_stock",
                "min_stock_too_large",
                t("min_stock_too_large", max=format_number(max_quantity, locale)),
            )
        elif has_extra_decimals(min_stock):
            result.add(
                "min_stock", "min_stock_too_many_decimals", t("min_stock_too_many_decimals")
            )
        elif unit == Unit.KG.value and min_stock > KG_MIN_STOCK_LIMIT:
            result.add("min_stock", "min_stock_too_high_for_kg", t("min_stock_too_high_for_kg"))

    if present("cost_per_unit"):
        cost = parse_quantity(payload.get("cost_per_unit"))
        if cost is None:
            result.add("cost_per_unit", "cost_not_a_number", t("cost_not_a_number"))
        elif cost < COST_MIN:
            result.add(
                "cost_per_unit",
                "cost_too_small",
                t("cost_too_small", currency=currency, min=format_number(COST_MIN, locale)),
            )
        elif cost > COST_MAX:
            result.add(
                "cost_per_unit",
                "cost_too_large",
                t("cost_too_large", currency=currency, max=format_number(COST_MAX, locale)),
            )
        elif has_extra_decimals(cost):
            result.add("cost_per_unit", "cost_too_many_decimals", t("cost_too_many_decimals"))

    supplier = payload.get("supplier")
    if supplier and len(str(supplier).strip()) > SUPPLIER_MAX_LENGTH:
        result.add(
            "supplier", "supplier_too_long", t("supplier_too_long", max=SUPPLIER_MAX_LENGTH)
        )

    if (
        quantity is not None
        and min_stock is not None
        and result.is_valid
        and quantity < min_stock
    ):
        result.warn("quantity", "quantity_below_min_stock", t("quantity_below_min_stock"))

    return result
