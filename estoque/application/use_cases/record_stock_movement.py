"""Record Stock Movement Use Case: the movement submission contract."""

from dataclasses import dataclass, field

from estoque.application.dto.mappers import movement_to_response, notification_to_response
from estoque.application.dto.requests import RecordMovementRequest
from estoque.application.dto.responses import RecordMovementResponse
from estoque.config import get_logger, get_settings
from estoque.core.entities.inventory import InventoryItem, StockMovement
from estoque.core.entities.notification import Notification
from estoque.core.exceptions import (
    DuplicateSubmissionError,
    IdempotencyConflictError,
    ItemNotFoundError,
    StockChangedError,
)
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.messages import translate
from estoque.core.services.ledger import MAX_WRITE_ATTEMPTS, LedgerEngine
from estoque.core.services.movement_validator import parse_movement_type, parse_quantity

logger = get_logger(__name__)


@dataclass
class RecordMovementResult:
    """Result of a movement submission."""

    movement: StockMovement
    item: InventoryItem | None = None
    notifications: list[Notification] = field(default_factory=list)
    replayed: bool = False

    @property
    def new_quantity(self) -> float:
        return self.movement.new_quantity


class RecordStockMovementUseCase:
    """
    Apply a movement to an item through the ledger.

    The item is resolved before anything else. A submission carrying an
    idempotency key that was already recorded returns the original movement
    and applies nothing; reusing the key for a different movement is an
    error. When another movement lands between reading the item and writing,
    the item is read again and the movement revalidated.
    """

    def __init__(
        self,
        inventory_store: IInventoryStore | None = None,
        ledger: LedgerEngine | None = None,
    ):
        self._inventory_store = inventory_store
        self._ledger = ledger
        self.locale = get_settings().inventory.locale

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from estoque.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    def _get_ledger(self) -> LedgerEngine:
        if self._ledger is None:
            self._ledger = LedgerEngine.from_settings()
        return self._ledger

    async def _get_item(self, store: IInventoryStore, item_id: int) -> InventoryItem:
        item = await store.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id, message=translate("item_not_found", self.locale))
        return item

    def _replay(
        self, existing: StockMovement, request: RecordMovementRequest, race: bool = False
    ) -> RecordMovementResult:
        """Return the recorded movement, provided the key was used for this very movement."""
        value = parse_quantity(request.quantity)
        same_movement = (
            existing.item_id == request.item_id
            and existing.movement_type is parse_movement_type(request.type)
            and value is not None
            and round(value, 2) == round(existing.quantity, 2)
        )
        if not same_movement:
            logger.info(
                "idempotency_conflict",
                movement_id=existing.id,
                idempotency_key=request.idempotency_key,
                item_id=request.item_id,
            )
            raise IdempotencyConflictError(
                request.idempotency_key or "",
                message=translate("idempotency_conflict", self.locale),
            )

        logger.info(
            "stock_movement_replayed",
            movement_id=existing.id,
            idempotency_key=request.idempotency_key,
            race=race,
        )
        return RecordMovementResult(movement=existing, replayed=True)

    async def execute(self, request: RecordMovementRequest) -> RecordMovementResult:
        """Execute the movement submission."""
        logger.info(
            "stock_movement_started",
            item_id=request.item_id,
            movement_type=request.type,
            quantity=str(request.quantity),
        )

        store = await self._get_inventory_store()

        # 1. Resolve the item before any mutation
        item = await self._get_item(store, request.item_id)

        # 2. Replay a submission that was already recorded
        if request.idempotency_key:
            existing = await store.get_movement_by_key(request.idempotency_key)
            if existing is not None:
                return self._replay(existing, request)

        attempt = 1
        while True:
            # 3. Validate and build the ledger entry (raises, never mutates)
            entry = self._get_ledger().prepare(
                item,
                request.type,
                request.quantity,
                reason=request.reason,
                idempotency_key=request.idempotency_key,
            )

            # 4. Persist atomically; the store refuses a stale previous quantity
            try:
                movement = await store.record_movement(entry)
                break
            except StockChangedError as e:
                if attempt >= MAX_WRITE_ATTEMPTS:
                    raise StockChangedError(
                        request.item_id,
                        e.details["expected"],
                        e.details["actual"],
                        message=translate("stock_changed", self.locale),
                    ) from e
                logger.info("stock_movement_retry", item_id=request.item_id, attempt=attempt)
                attempt += 1
                item = await self._get_item(store, request.item_id)
            except DuplicateSubmissionError:
                # A concurrent request with the same key won the race
                existing = await store.get_movement_by_key(request.idempotency_key or "")
                if existing is None:
                    raise
                return self._replay(existing, request, race=True)
            except ItemNotFoundError as e:
                raise ItemNotFoundError(
                    request.item_id, message=translate("item_not_found", self.locale)
                ) from e

        logger.info(
            "stock_movement_complete",
            item_id=item.id,
            movement_id=movement.id,
            new_quantity=movement.new_quantity,
        )

        return RecordMovementResult(
            movement=movement,
            item=entry.item,
            notifications=entry.notifications,
        )

    def to_response(self, result: RecordMovementResult) -> RecordMovementResponse:
        """Convert result to API response."""
        return RecordMovementResponse(
            new_quantity=result.new_quantity,
            movement=movement_to_response(result.movement, self.locale),
            notifications=[notification_to_response(n) for n in result.notifications],
            replayed=result.replayed,
        )
