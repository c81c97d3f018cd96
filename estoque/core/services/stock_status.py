"""Stock health classification."""

from estoque.core.entities.inventory import StockLevel, StockStatus
from estoque.core.messages import DEFAULT_LOCALE, translate

CRITICAL_RATIO = 0.3
LOW_RATIO = 0.6
MEDIUM_RATIO = 1.0


def classify_stock(
    quantity: float, min_stock: float, locale: str = DEFAULT_LOCALE
) -> StockStatus:
    """
    Classify a quantity against its minimum stock.

    A zero minimum can never be breached, so it is always ``good``. Each
    threshold is inclusive on the lower classification: a ratio of exactly
    0.3 is critical, 0.6 is low and 1.0 is medium.
    """
    if min_stock <= 0:
        return StockStatus(
            status=StockLevel.GOOD,
            label=translate("status_good", locale),
            percentage=100.0,
        )

    ratio = quantity / min_stock
    percentage = min(ratio * 100, 100.0)

    if ratio <= CRITICAL_RATIO:
        level = StockLevel.CRITICAL
    elif ratio <= LOW_RATIO:
        level = StockLevel.LOW
    elif ratio <= MEDIUM_RATIO:
        level = StockLevel.MEDIUM
    else:
        level = StockLevel.GOOD

    return StockStatus(
        status=level,
        label=translate(f"status_{level.value}", locale),
        percentage=round(percentage, 2),
    )


def is_low_stock(quantity: float, min_stock: float) -> bool:
    """At or below a configured minimum."""
    return min_stock > 0 and quantity <= min_stock
