"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and stores

Use cases are the only entry point for API handlers that change state.
"""

from estoque.application.dto import ErrorResponse, HealthResponse
from estoque.application.use_cases import (
    BuildChartsUseCase,
    CreateItemUseCase,
    DeleteItemUseCase,
    GenerateReportUseCase,
    GetDashboardStatsUseCase,
    ManageNotificationsUseCase,
    ManagePreferencesUseCase,
    RecordStockMovementUseCase,
    UpdateItemUseCase,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "RecordStockMovementUseCase",
    "CreateItemUseCase",
    "UpdateItemUseCase",
    "DeleteItemUseCase",
    "BuildChartsUseCase",
    "GetDashboardStatsUseCase",
    "GenerateReportUseCase",
    "ManagePreferencesUseCase",
    "ManageNotificationsUseCase",
]
