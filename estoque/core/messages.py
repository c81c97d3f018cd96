"""
User-facing message catalog.

Every message shown to an operator (validation feedback, notification text,
activity descriptions, status labels) is looked up here so a deployment can
switch its language through ``INVENTORY_LOCALE``.
"""

from typing import Any

DEFAULT_LOCALE = "pt-BR"

MESSAGES: dict[str, dict[str, str]] = {
    "pt-BR": {
        # Movement validation
        "invalid_movement_type": "Tipo de movimentação inválido",
        "quantity_not_a_number": "Quantidade deve ser um número válido",
        "quantity_must_be_positive": "Quantidade deve ser maior que zero",
        "quantity_negative": "Quantidade não pode ser negativa",
        "quantity_too_large": "Quantidade máxima permitida: {max}",
        "quantity_too_many_decimals": "Quantidade pode ter no máximo 2 casas decimais",
        "insufficient_stock": "Quantidade insuficiente. Estoque disponível: {available} {unit}",
        "reason_required": "Motivo é obrigatório para registro de desperdício",
        "reason_too_short": "Descreva o motivo com mais detalhes (mínimo {min} caracteres)",
        "reason_too_long": "Motivo deve ter no máximo {max} caracteres",
        "result_exceeds_max": "Quantidade final excede o limite máximo de {max}",
        # Item validation
        "name_required": "Nome do item é obrigatório",
        "name_too_short": "Nome deve ter pelo menos {min} caracteres",
        "name_too_long": "Nome deve ter no máximo {max} caracteres",
        "name_invalid_chars": "Nome contém caracteres inválidos",
        "category_required": "Categoria é obrigatória",
        "category_invalid": "Categoria inválida",
        "unit_required": "Unidade é obrigatória",
        "unit_invalid": "Unidade inválida. Selecione uma das opções disponíveis",
        "min_stock_not_a_number": "Estoque mínimo deve ser um número válido",
        "min_stock_negative": "Estoque mínimo não pode ser negativo",
        "min_stock_too_large": "Estoque mínimo máximo: {max}",
        "min_stock_too_many_decimals": "Estoque mínimo pode ter no máximo 2 casas decimais",
        "min_stock_too_high_for_kg": "Estoque mínimo parece muito alto para kg. Verifique o valor",
        "cost_not_a_number": "Custo unitário deve ser um número válido",
        "cost_too_small": "Custo mínimo: {currency} {min}",
        "cost_too_large": "Custo máximo: {currency} {max}",
        "cost_too_many_decimals": "Custo pode ter no máximo 2 casas decimais",
        "supplier_too_long": "Nome do fornecedor deve ter no máximo {max} caracteres",
        "quantity_below_min_stock": (
            "Quantidade inicial está abaixo do estoque mínimo. Considere ajustar os valores"
        ),
        "duplicate_item_name": "Já existe um item com este nome",
        # Preferences
        "thresholds_order": "O limite seguro deve ser menor que o limite crítico",
        "thresholds_negative": "Os limites devem ser valores positivos",
        # Lookups and generic failures
        "item_not_found": "Item não encontrado",
        "notification_not_found": "Notificação não encontrada",
        "operation_failed": "Não foi possível concluir a operação. Tente novamente.",
        "unauthorized": "Usuário não autenticado",
        "removed_item": "Item removido",
        "invalid_period": "A data inicial deve ser anterior à data final",
        # Stock status labels
        "status_critical": "Crítico",
        "status_low": "Baixo",
        "status_medium": "Médio",
        "status_good": "OK",
        # Notifications
        "notification_low_title": "Estoque Baixo",
        "notification_critical_title": "Estoque Crítico!",
        "notification_stock_message": "{name}: {quantity} {unit} (mínimo: {min_stock} {unit})",
        "notification_waste_title": "Desperdício Registrado",
        "notification_waste_message": "{name}: {quantity} {unit} - {currency} {cost} ({reason})",
        "no_reason": "Sem motivo",
        # Activity log
        "activity_entrada": "Reabastecimento",
        "activity_saida": "Saída",
        "activity_desperdicio": "Desperdício",
        "activity_ajuste": "Ajuste",
        "activity_item_added": "Novo item adicionado: {name}",
        "activity_item_updated": "Item atualizado: {name}",
        "activity_item_removed": "Item removido: {name} ({count} movimentações no histórico)",
        "item_edit_adjustment": "Ajuste via edição do item",
        # Conflicts
        "idempotency_conflict": "Esta chave de envio já foi usada para outra movimentação",
        "stock_changed": "O estoque do item mudou durante o registro. Tente novamente",
        # API errors
        "request_invalid": "Requisição inválida",
        "hint_item_not_found": "Confira o ID do item ou consulte GET /api/inventory.",
        "hint_notification_not_found": "A notificação pode ter sido removida. Atualize a lista.",
        "hint_insufficient_stock": "Informe no máximo a quantidade disponível em estoque.",
        "hint_movement_invalid": "Corrija os campos indicados e envie a movimentação novamente.",
        "hint_item_invalid": "Corrija os campos indicados e salve o item novamente.",
        "hint_duplicate_item": "Escolha outro nome ou edite o item existente.",
        "hint_preferences_invalid": "O limite seguro deve ser menor que o limite crítico.",
        "hint_idempotency_conflict": "Gere uma nova chave para cada movimentação diferente.",
        "hint_stock_changed": "Atualize o item e envie a movimentação novamente.",
        "hint_unauthorized": "Entre novamente; a requisição não identifica o usuário.",
        "hint_validation_error": "Confira o corpo da requisição de acordo com o esquema da API.",
        "hint_persistence_error": "Nada foi salvo. Envie a operação novamente.",
        "hint_status_400": "Confira os parâmetros e o corpo da requisição.",
        "hint_status_401": "É necessário estar autenticado.",
        "hint_status_404": "O recurso solicitado não foi encontrado. Confira o ID.",
        "hint_status_409": "O registro mudou durante a requisição. Tente novamente.",
        "hint_status_422": "A requisição não pôde ser processada. Confira o formato dos dados.",
        "hint_status_500": "Ocorreu um erro interno. Consulte os logs do servidor.",
    },
    "en": {
        "invalid_movement_type": "Invalid movement type",
        "quantity_not_a_number": "Quantity must be a valid number",
        "quantity_must_be_positive": "Quantity must be greater than zero",
        "quantity_negative": "Quantity cannot be negative",
        "quantity_too_large": "Maximum allowed quantity: {max}",
        "quantity_too_many_decimals": "Quantity can have at most 2 decimal places",
        "insufficient_stock": "Insufficient quantity. Available stock: {available} {unit}",
        "reason_required": "A reason is required to record waste",
        "reason_too_short": "Describe the reason in more detail (minimum {min} characters)",
        "reason_too_long": "Reason must have at most {max} characters",
        "result_exceeds_max": "Resulting quantity exceeds the maximum of {max}",
        "name_required": "Item name is required",
        "name_too_short": "Name must have at least {min} characters",
        "name_too_long": "Name must have at most {max} characters",
        "name_invalid_chars": "Name contains invalid characters",
        "category_required": "Category is required",
        "category_invalid": "Invalid category",
        "unit_required": "Unit is required",
        "unit_invalid": "Invalid unit. Pick one of the available options",
        "min_stock_not_a_number": "Minimum stock must be a valid number",
        "min_stock_negative": "Minimum stock cannot be negative",
        "min_stock_too_large": "Maximum minimum stock: {max}",
        "min_stock_too_many_decimals": "Minimum stock can have at most 2 decimal places",
        "min_stock_too_high_for_kg": "Minimum stock looks too high for kg. Check the value",
        "cost_not_a_number": "Unit cost must be a valid number",
        "cost_too_small": "Minimum cost: {currency} {min}",
        "cost_too_large": "Maximum cost: {currency} {max}",
        "cost_too_many_decimals": "Cost can have at most 2 decimal places",
        "supplier_too_long": "Supplier name must have at most {max} characters",
        "quantity_below_min_stock": (
            "Initial quantity is below the minimum stock. Consider adjusting"
        ),
        "duplicate_item_name": "An item with this name already exists",
        "thresholds_order": "The safe threshold must be lower than the critical threshold",
        "thresholds_negative": "Thresholds must be positive values",
        "item_not_found": "Item not found",
        "notification_not_found": "Notification not found",
        "operation_failed": "The operation could not be completed. Please try again.",
        "unauthorized": "User not authenticated",
        "removed_item": "Removed item",
        "invalid_period": "The start date must not be after the end date",
        "status_critical": "Critical",
        "status_low": "Low",
        "status_medium": "Medium",
        "status_good": "OK",
        "notification_low_title": "Low Stock",
        "notification_critical_title": "Critical Stock!",
        "notification_stock_message": "{name}: {quantity} {unit} (minimum: {min_stock} {unit})",
        "notification_waste_title": "Waste Recorded",
        "notification_waste_message": "{name}: {quantity} {unit} - {currency} {cost} ({reason})",
        "no_reason": "No reason",
        "activity_entrada": "Restock",
        "activity_saida": "Outflow",
        "activity_desperdicio": "Waste",
        "activity_ajuste": "Adjustment",
        "activity_item_added": "New item added: {name}",
        "activity_item_updated": "Item updated: {name}",
        "activity_item_removed": "Item removed: {name} ({count} movements kept in history)",
        "item_edit_adjustment": "Adjustment from item edit",
        "idempotency_conflict": "This submission key was already used for another movement",
        "stock_changed": "The item stock changed while recording. Please try again",
        "request_invalid": "Request validation failed",
        "hint_item_not_found": "Check the item ID or list items with GET /api/inventory.",
        "hint_notification_not_found": "The notification may have been deleted. Refresh the list.",
        "hint_insufficient_stock": "Reduce the quantity to at most the available stock.",
        "hint_movement_invalid": "Fix the highlighted fields and submit the movement again.",
        "hint_item_invalid": "Fix the highlighted fields and save the item again.",
        "hint_duplicate_item": "Pick another name or edit the existing item.",
        "hint_preferences_invalid": "The safe threshold must be lower than the critical threshold.",
        "hint_idempotency_conflict": "Generate a new key for each distinct movement.",
        "hint_stock_changed": "Reload the item and submit the movement again.",
        "hint_unauthorized": "Sign in again; the request carries no user identity.",
        "hint_validation_error": "Check the request body against the API schema.",
        "hint_persistence_error": "Nothing was saved. Submit the operation again.",
        "hint_status_400": "Check the request parameters and body.",
        "hint_status_401": "Authentication is required.",
        "hint_status_404": "The requested resource was not found. Verify the ID.",
        "hint_status_409": "The record changed during the request. Please try again.",
        "hint_status_422": "The request could not be processed. Check the input format.",
        "hint_status_500": "An internal error occurred. Check server logs.",
    },
}

MONTH_ABBREVIATIONS: dict[str, list[str]] = {
    "pt-BR": ["Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
}


def translate(key: str, locale: str = DEFAULT_LOCALE, **params: Any) -> str:
    """Resolve a message for the locale, falling back to pt-BR."""
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    template = catalog.get(key) or MESSAGES[DEFAULT_LOCALE][key]
    return template.format(**params) if params else template


def format_number(value: float, locale: str = DEFAULT_LOCALE) -> str:
    """Format a number with grouping, e.g. 999.999,99 in pt-BR."""
    formatted = f"{value:,.2f}"
    if locale == "pt-BR":
        formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
    return formatted


def month_label(month: int, locale: str = DEFAULT_LOCALE) -> str:
    """Abbreviated month name (1-12)."""
    names = MONTH_ABBREVIATIONS.get(locale, MONTH_ABBREVIATIONS[DEFAULT_LOCALE])
    return names[month - 1]
