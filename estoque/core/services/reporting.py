"""Dashboard stats and report summary."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date

from estoque.core.entities.inventory import (
    Category,
    InventoryItem,
    MovementType,
    StockLevel,
    StockMovement,
    WasteRecord,
)
from estoque.core.entities.preferences import WasteThresholds
from estoque.core.entities.report import (
    CategoryCost,
    DashboardStats,
    InventorySummary,
    MovementSummary,
    RankedItem,
    ReportSummary,
    WasteSummary,
)
from estoque.core.messages import DEFAULT_LOCALE, translate
from estoque.core.services.stock_status import classify_stock, is_low_stock

TOP_ITEMS = 5


def compute_dashboard_stats(
    items: Sequence[InventoryItem], recent_waste: Iterable[WasteRecord]
) -> DashboardStats:
    """Headline numbers: item count, low stock, stock value and recent waste cost."""
    return DashboardStats(
        total_items=len(items),
        low_stock_count=sum(1 for i in items if is_low_stock(i.quantity, i.min_stock)),
        monthly_waste=round(sum(w.cost for w in recent_waste), 2),
        total_value=round(sum(i.total_value for i in items), 2),
    )


def _rank(
    totals: dict[int | None, list[float]],
    items_by_id: dict[int, InventoryItem],
    fallback_name: str,
) -> list[RankedItem]:
    ranked = [
        RankedItem(
            item_id=item_id,
            name=items_by_id[item_id].name if item_id in items_by_id else fallback_name,
            quantity=round(quantity, 2),
            cost=round(cost, 2),
        )
        for item_id, (quantity, cost) in totals.items()
    ]
    ranked.sort(key=lambda r: r.quantity, reverse=True)
    return ranked[:TOP_ITEMS]


def build_report_summary(
    items: Sequence[InventoryItem],
    movements: Iterable[StockMovement],
    waste_records: Iterable[WasteRecord],
    restaurant_name: str,
    period_start: date,
    period_end: date,
    thresholds: WasteThresholds | None = None,
    locale: str = DEFAULT_LOCALE,
) -> ReportSummary:
    """
    Summarize a reporting period.

    Orphaned movements and waste (item since deleted) still count toward the
    totals; their cost is attributed to the ``outros`` category.
    """
    items_by_id = {i.id: i for i in items if i.id is not None}
    removed = translate("removed_item", locale)

    inventory = InventorySummary(total_items=len(items))
    for item in items:
        inventory.total_value += item.total_value
        status = classify_stock(item.quantity, item.min_stock, locale).status
        if status is StockLevel.CRITICAL:
            inventory.critical_items += 1
        elif is_low_stock(item.quantity, item.min_stock):
            inventory.low_stock_items += 1
    inventory.total_value = round(inventory.total_value, 2)

    summary = MovementSummary()
    used: dict[int | None, list[float]] = defaultdict(lambda: [0.0, 0.0])
    for movement in movements:
        if movement.movement_type is MovementType.ENTRADA:
            summary.entries += movement.quantity
        elif movement.movement_type is MovementType.SAIDA:
            summary.exits += movement.quantity
            used[movement.item_id][0] += movement.quantity
            used[movement.item_id][1] += movement.cost
        elif movement.movement_type is MovementType.DESPERDICIO:
            summary.waste += movement.quantity
        else:
            summary.adjustments += 1
    summary.entries = round(summary.entries, 2)
    summary.exits = round(summary.exits, 2)
    summary.waste = round(summary.waste, 2)

    waste = WasteSummary()
    wasted: dict[int | None, list[float]] = defaultdict(lambda: [0.0, 0.0])
    by_category: dict[str, float] = defaultdict(float)
    for record in waste_records:
        waste.total_quantity += record.quantity
        waste.total_cost += record.cost
        wasted[record.item_id][0] += record.quantity
        wasted[record.item_id][1] += record.cost
        item = items_by_id.get(record.item_id) if record.item_id is not None else None
        category = item.category.value if item else Category.OUTROS.value
        by_category[category] += record.cost
    waste.total_quantity = round(waste.total_quantity, 2)
    waste.total_cost = round(waste.total_cost, 2)
    waste.by_category = sorted(
        (CategoryCost(category=c, value=round(v, 2)) for c, v in by_category.items()),
        key=lambda c: c.value,
        reverse=True,
    )

    return ReportSummary(
        restaurant_name=restaurant_name,
        period_start=period_start,
        period_end=period_end,
        inventory=inventory,
        waste=waste,
        movements=summary,
        most_used_items=_rank(used, items_by_id, removed),
        most_wasted_items=_rank(wasted, items_by_id, removed),
        thresholds=thresholds or WasteThresholds(),
    )
