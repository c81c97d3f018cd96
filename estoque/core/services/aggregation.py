"""
Aggregation Engine.

Reconstructs monthly series from the ledger. Both series cover a trailing
window of calendar months that includes the current one, oldest first, with
empty months zero-filled.

The inventory level series only knows the present total exactly, so it
walks backward: each month's net change (taken from the movement snapshots,
which also covers ajuste) is undone to get the month before. Callers pass a
point-in-time snapshot so the total and the movements agree.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from estoque.core.entities.inventory import MovementType, StockMovement, WasteRecord
from estoque.core.entities.preferences import WasteThresholds, WasteZone
from estoque.core.entities.report import InventoryLevelPoint, WastePoint
from estoque.core.messages import DEFAULT_LOCALE, month_label

DEFAULT_MONTHS = 6


def month_start(value: date | datetime) -> date:
    return date(value.year, value.month, 1)


def trailing_months(today: date, count: int = DEFAULT_MONTHS) -> list[date]:
    """First day of each of the last ``count`` months, oldest first."""
    year, month = today.year, today.month
    months: list[date] = []
    for _ in range(count):
        months.append(date(year, month, 1))
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    months.reverse()
    return months


@dataclass
class _MonthTotals:
    net: float = 0.0
    entradas: float = 0.0
    saidas: float = 0.0
    desperdicio: float = 0.0


def inventory_level_series(
    current_total: float,
    movements: Iterable[StockMovement],
    today: date,
    months: int = DEFAULT_MONTHS,
    locale: str = DEFAULT_LOCALE,
) -> list[InventoryLevelPoint]:
    """
    Quantity on hand at the end of each month.

    ``total[i-1] = total[i] - net[i]``, starting from the current total.
    Reported totals are clamped at zero; the recursion itself is not.
    """
    buckets = trailing_months(today, months)
    totals = {m: _MonthTotals() for m in buckets}

    for movement in movements:
        bucket = totals.get(month_start(movement.created_at))
        if bucket is None:
            continue
        bucket.net += movement.new_quantity - movement.previous_quantity
        if movement.movement_type is MovementType.ENTRADA:
            bucket.entradas += movement.quantity
        elif movement.movement_type is MovementType.SAIDA:
            bucket.saidas += movement.quantity
        elif movement.movement_type is MovementType.DESPERDICIO:
            bucket.desperdicio += movement.quantity

    points: list[InventoryLevelPoint] = []
    running = current_total
    for month in reversed(buckets):
        bucket = totals[month]
        points.append(
            InventoryLevelPoint(
                month=month,
                label=month_label(month.month, locale),
                total=round(max(running, 0.0), 2),
                entradas=round(bucket.entradas, 2),
                saidas=round(bucket.saidas, 2),
                desperdicio=round(bucket.desperdicio, 2),
            )
        )
        running -= bucket.net

    points.reverse()
    return points


def classify_waste(value: float, thresholds: WasteThresholds) -> WasteZone:
    return thresholds.classify(value)


def waste_series(
    waste_records: Iterable[WasteRecord],
    today: date,
    thresholds: WasteThresholds | None = None,
    months: int = DEFAULT_MONTHS,
    locale: str = DEFAULT_LOCALE,
) -> list[WastePoint]:
    """Waste cost per month, independent per month."""
    thresholds = thresholds or WasteThresholds()
    buckets = trailing_months(today, months)
    costs = {m: 0.0 for m in buckets}
    quantities = {m: 0.0 for m in buckets}

    for record in waste_records:
        key = month_start(record.date)
        if key not in costs:
            continue
        costs[key] += record.cost
        quantities[key] += record.quantity

    return [
        WastePoint(
            month=month,
            label=month_label(month.month, locale),
            value=round(costs[month], 2),
            quantity=round(quantities[month], 2),
            zone=classify_waste(round(costs[month], 2), thresholds),
        )
        for month in buckets
    ]
