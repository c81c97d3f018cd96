"""Create Item Use Case."""

from dataclasses import dataclass, field

from estoque.application.dto.mappers import issues_to_response, item_to_response
from estoque.application.dto.requests import CreateItemRequest
from estoque.application.dto.responses import ItemMutationResponse
from estoque.config import get_logger, get_settings
from estoque.core.entities.activity import ACTION_ADD, ActivityLog
from estoque.core.entities.inventory import Category, InventoryItem, Unit
from estoque.core.exceptions import DuplicateItemError, ItemValidationError
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.messages import translate
from estoque.core.services.item_validator import validate_inventory_item
from estoque.core.services.movement_validator import ValidationIssue, parse_quantity

logger = get_logger(__name__)


@dataclass
class CreateItemResult:
    item: InventoryItem
    warnings: list[ValidationIssue] = field(default_factory=list)


class CreateItemUseCase:
    """Validate and insert a new inventory item."""

    def __init__(self, inventory_store: IInventoryStore | None = None):
        self._inventory_store = inventory_store
        self.settings = get_settings().inventory

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from estoque.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(self, request: CreateItemRequest) -> CreateItemResult:
        locale = self.settings.locale
        validation = validate_inventory_item(
            request.model_dump(),
            locale=locale,
            currency=self.settings.currency_symbol,
            max_quantity=self.settings.max_quantity,
        )
        if not validation.is_valid:
            logger.info(
                "item_rejected",
                name=request.name,
                codes=[i.code for i in validation.issues],
            )
            raise ItemValidationError(validation.issues)

        store = await self._get_inventory_store()
        name = request.name.strip()
        duplicate_message = translate("duplicate_item_name", locale)

        if await store.get_item_by_name(name) is not None:
            raise DuplicateItemError(name, message=duplicate_message)

        item = InventoryItem(
            name=name,
            category=Category(request.category.strip()),
            quantity=round(parse_quantity(request.quantity) or 0.0, 2),
            unit=Unit(request.unit.strip()),
            min_stock=round(parse_quantity(request.min_stock) or 0.0, 2),
            cost_per_unit=round(parse_quantity(request.cost_per_unit) or 0.0, 2),
            supplier=(request.supplier or "").strip() or None,
            image_url=request.image_url or None,
        )
        activity = ActivityLog(
            action=ACTION_ADD,
            quantity=item.quantity,
            description=translate("activity_item_added", locale, name=item.name),
        )

        try:
            item = await store.create_item(item, activity)
        except DuplicateItemError as e:
            raise DuplicateItemError(name, message=duplicate_message) from e

        return CreateItemResult(item=item, warnings=validation.warnings)

    def to_response(self, result: CreateItemResult) -> ItemMutationResponse:
        return ItemMutationResponse(
            item=item_to_response(result.item, self.settings.locale),
            warnings=issues_to_response(result.warnings),
        )
