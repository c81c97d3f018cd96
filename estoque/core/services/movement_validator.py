"""
Movement Validator.

Checks a proposed stock movement against the business rules before the
ledger touches anything. Every rule runs so the caller can highlight all
offending fields at once; the first issue is the one shown in summaries.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from estoque.core.entities.inventory import MovementType
from estoque.core.messages import DEFAULT_LOCALE, format_number, translate

MAX_QUANTITY = 999999.99
WASTE_REASON_MIN_LENGTH = 5
REASON_MAX_LENGTH = 500


@dataclass(frozen=True)
class ValidationIssue:
    """A single field-level violation."""

    field: str
    message: str
    code: str


@dataclass
class ValidationResult:
    """Outcome of a validation pass."""

    issues: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)
    movement_type: MovementType | None = None
    quantity: float | None = None

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def first_error(self) -> ValidationIssue | None:
        return self.issues[0] if self.issues else None

    def add(self, field_name: str, code: str, message: str) -> None:
        self.issues.append(ValidationIssue(field=field_name, message=message, code=code))

    def warn(self, field_name: str, code: str, message: str) -> None:
        self.warnings.append(ValidationIssue(field=field_name, message=message, code=code))

    def has_code(self, code: str) -> bool:
        return any(issue.code == code for issue in self.issues)


@dataclass(frozen=True)
class MovementRule:
    """What a movement kind demands of its input."""

    allows_zero: bool = False
    limited_by_stock: bool = False
    requires_reason: bool = False


# One rule per movement kind
MOVEMENT_RULES: dict[MovementType, MovementRule] = {
    MovementType.ENTRADA: MovementRule(),
    MovementType.SAIDA: MovementRule(limited_by_stock=True),
    MovementType.DESPERDICIO: MovementRule(limited_by_stock=True, requires_reason=True),
    MovementType.AJUSTE: MovementRule(allows_zero=True),
}


def parse_quantity(raw: Any) -> float | None:
    """
    Parse a user-supplied quantity.

    Accepts numbers and numeric strings, with either "." or "," as the
    decimal separator. Returns None for anything that is not a finite number.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        if "," in text and "." not in text:
            text = text.replace(",", ".")
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


def has_extra_decimals(value: float, places: int = 2) -> bool:
    """True when the value carries more than ``places`` decimal places."""
    return abs(round(value, places) - value) > 1e-9


def parse_movement_type(raw: Any) -> MovementType | None:
    if isinstance(raw, MovementType):
        return raw
    try:
        return MovementType(str(raw).strip().lower())
    except ValueError:
        return None


class MovementValidator:
    """Validates movements for every kind in ``MOVEMENT_RULES``."""

    def __init__(
        self,
        max_quantity: float = MAX_QUANTITY,
        reason_min_length: int = WASTE_REASON_MIN_LENGTH,
        reason_max_length: int = REASON_MAX_LENGTH,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.max_quantity = max_quantity
        self.reason_min_length = reason_min_length
        self.reason_max_length = reason_max_length
        self.locale = locale

    @classmethod
    def from_settings(cls) -> "MovementValidator":
        from estoque.config import get_settings

        inventory = get_settings().inventory
        return cls(
            max_quantity=inventory.max_quantity,
            reason_min_length=inventory.waste_reason_min_length,
            reason_max_length=inventory.reason_max_length,
            locale=inventory.locale,
        )

    def _t(self, key: str, **params: Any) -> str:
        return translate(key, self.locale, **params)

    def validate(
        self,
        movement_type: Any,
        quantity: Any,
        current_stock: float,
        reason: str | None = None,
        unit: str = "",
    ) -> ValidationResult:
        """
        Validate a proposed movement.

        Args:
            movement_type: Movement kind, as enum or raw string.
            quantity: Raw quantity (number or string).
            current_stock: Quantity on hand before the movement.
            reason: Optional free-text reason.
            unit: Item unit, quoted in the insufficient stock message.

        Returns:
            ValidationResult with every violation found, plus the parsed
            kind and quantity when they could be read.
        """
        result = ValidationResult()

        kind = parse_movement_type(movement_type)
        result.movement_type = kind
        if kind is None:
            result.add("type", "invalid_movement_type", self._t("invalid_movement_type"))
        rule = MOVEMENT_RULES[kind] if kind is not None else MovementRule()

        value = parse_quantity(quantity)
        result.quantity = value
        if value is None:
            result.add("quantity", "quantity_not_a_number", self._t("quantity_not_a_number"))
        else:
            self._check_quantity(result, value, rule)
            if rule.limited_by_stock and round(value, 2) > round(current_stock, 2):
                result.add(
                    "quantity",
                    "insufficient_stock",
                    self._t(
                        "insufficient_stock",
                        available=f"{current_stock:.2f}",
                        unit=unit,
                    ),
                )
            if kind is not None and 0 <= value <= self.max_quantity:
                resulting = kind.resulting_quantity(current_stock, value)
                if resulting > self.max_quantity:
                    result.add(
                        "quantity",
                        "result_exceeds_max",
                        self._t(
                            "result_exceeds_max",
                            max=format_number(self.max_quantity, self.locale),
                        ),
                    )

        self._check_reason(result, reason, rule)
        return result

    def _check_quantity(
        self, result: ValidationResult, value: float, rule: MovementRule
    ) -> None:
        if rule.allows_zero:
            if value < 0:
                result.add("quantity", "quantity_negative", self._t("quantity_negative"))
        elif value <= 0:
            result.add(
                "quantity", "quantity_must_be_positive", self._t("quantity_must_be_positive")
            )

        if value > self.max_quantity:
            result.add(
                "quantity",
                "quantity_too_large",
                self._t("quantity_too_large", max=format_number(self.max_quantity, self.locale)),
            )

        if has_extra_decimals(value):
            result.add(
                "quantity",
                "quantity_too_many_decimals",
                self._t("quantity_too_many_decimals"),
            )

    def _check_reason(
        self, result: ValidationResult, reason: str | None, rule: MovementRule
    ) -> None:
        text = (reason or "").strip()

        if rule.requires_reason:
            if not text:
                result.add("reason", "reason_required", self._t("reason_required"))
            elif len(text) < self.reason_min_length:
                result.add(
                    "reason",
                    "reason_too_short",
                    self._t("reason_too_short", min=self.reason_min_length),
                )

        if len(text) > self.reason_max_length:
            result.add(
                "reason",
                "reason_too_long",
                self._t("reason_too_long", max=self.reason_max_length),
            )
