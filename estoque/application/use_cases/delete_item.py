"""Delete Item Use Case."""

from dataclasses import dataclass

from estoque.application.dto.responses import DeleteItemResponse
from estoque.config import get_logger, get_settings
from estoque.core.entities.activity import ACTION_DELETE, ActivityLog
from estoque.core.exceptions import ItemNotFoundError
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.messages import translate

logger = get_logger(__name__)


@dataclass
class DeleteItemResult:
    item_id: int
    movements_kept: int


class DeleteItemUseCase:
    """
    Delete an item while keeping its history.

    Movements, waste records, notifications and activity entries stay, with
    their item reference cleared.
    """

    def __init__(self, inventory_store: IInventoryStore | None = None):
        self._inventory_store = inventory_store
        self.locale = get_settings().inventory.locale

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from estoque.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(self, item_id: int) -> DeleteItemResult:
        store = await self._get_inventory_store()

        item = await store.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id, message=translate("item_not_found", self.locale))

        movements = await store.count_movements(item_id)
        activity = ActivityLog(
            action=ACTION_DELETE,
            quantity=item.quantity,
            description=translate(
                "activity_item_removed", self.locale, name=item.name, count=movements
            ),
        )

        if not await store.delete_item(item_id, activity):
            raise ItemNotFoundError(item_id, message=translate("item_not_found", self.locale))

        logger.info("item_deleted", item_id=item_id, movements_kept=movements)
        return DeleteItemResult(item_id=item_id, movements_kept=movements)

    def to_response(self, result: DeleteItemResult) -> DeleteItemResponse:
        return DeleteItemResponse(id=result.item_id, movements_kept=result.movements_kept)
