"""API route modules."""

from estoque.api.routes.activity import router as activity_router
from estoque.api.routes.dashboard import router as dashboard_router
from estoque.api.routes.health import router as health_router
from estoque.api.routes.inventory import router as inventory_router
from estoque.api.routes.notifications import router as notifications_router
from estoque.api.routes.settings import router as settings_router
from estoque.api.routes.stock_movements import router as stock_movements_router
from estoque.api.routes.waste import router as waste_router

__all__ = [
    "health_router",
    "inventory_router",
    "stock_movements_router",
    "waste_router",
    "notifications_router",
    "activity_router",
    "dashboard_router",
    "settings_router",
]
