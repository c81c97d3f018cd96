"""Tests for the message catalog."""

import pytest

from estoque.api.middleware.error_handler import HINTED_CODES, HINTED_STATUSES
from estoque.core.messages import MESSAGES, format_number, month_label, translate


class TestTranslate:
    def test_default_locale_is_portuguese(self):
        assert translate("status_critical") == "Crítico"

    def test_english(self):
        assert translate("status_critical", "en") == "Critical"

    def test_params_are_formatted(self):
        message = translate("insufficient_stock", available="10.00", unit="kg")
        assert message == "Quantidade insuficiente. Estoque disponível: 10.00 kg"

    def test_unknown_locale_falls_back(self):
        assert translate("removed_item", "fr") == "Item removido"

    def test_catalogs_have_same_keys(self):
        assert set(MESSAGES["pt-BR"]) == set(MESSAGES["en"])

    def test_error_hints_are_in_catalog(self):
        keys = {f"hint_{code.lower()}" for code in HINTED_CODES}
        keys |= {f"hint_status_{status}" for status in HINTED_STATUSES}
        assert keys <= set(MESSAGES["pt-BR"])


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("locale", "expected"),
        [("pt-BR", "999.999,99"), ("en", "999,999.99")],
    )
    def test_grouping(self, locale, expected):
        assert format_number(999999.99, locale) == expected

    def test_small_value(self):
        assert format_number(0.01) == "0,01"


class TestMonthLabel:
    def test_labels(self):
        assert month_label(2) == "Fev"
        assert month_label(2, "en") == "Feb"
        assert month_label(12) == "Dez"
