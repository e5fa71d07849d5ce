"""Filter evaluation and pagination rules shared by both listings."""

from __future__ import annotations

import pytest

from bankbridge.core.data_models import BankModel
from bankbridge.core.filters import BankFilter, paginate, parse_page_params

DARIATUR = BankModel(
    bic="DODEU8XXX",
    name="Bank Dariatur",
    countryCode="CH",
    auth="open-id",
    products=["accounts", "payments"],
)
FUN = BankModel(bic="DOLORENOR2XXX", name="Royal Bank of Fun", countryCode="GB", auth="oauth")


# ── BankFilter ─────────────────────────────────────────────────────────────

class TestBankFilter:
    def test_empty_filter_matches_everything(self) -> None:
        assert BankFilter().matches(DARIATUR)
        assert BankFilter().matches(FUN)

    def test_blank_values_do_not_constrain(self) -> None:
        bank_filter = BankFilter(country_code="", name="   ", bic=None, product="", auth=" ")
        assert bank_filter.matches(DARIATUR)

    def test_country_code_is_exact(self) -> None:
        assert BankFilter(country_code="CH").matches(DARIATUR)
        assert not BankFilter(country_code="ch").matches(DARIATUR)
        assert not BankFilter(country_code="C").matches(DARIATUR)

    def test_bic_is_exact(self) -> None:
        assert BankFilter(bic="DODEU8XXX").matches(DARIATUR)
        assert not BankFilter(bic="DODEU8").matches(DARIATUR)

    def test_auth_is_exact(self) -> None:
        assert BankFilter(auth="open-id").matches(DARIATUR)
        assert not BankFilter(auth="open").matches(DARIATUR)

    def test_name_is_substring(self) -> None:
        assert BankFilter(name="Dariatur").matches(DARIATUR)
        assert BankFilter(name="Bank Dariatur").matches(DARIATUR)
        assert not BankFilter(name="dariatur").matches(DARIATUR)

    def test_product_is_list_membership(self) -> None:
        assert BankFilter(product="payments").matches(DARIATUR)
        assert not BankFilter(product="pay").matches(DARIATUR)

    def test_product_never_matches_record_without_products(self) -> None:
        assert not BankFilter(product="accounts").matches(FUN)

    def test_all_supplied_constraints_must_hold(self) -> None:
        assert BankFilter(country_code="CH", auth="open-id", product="accounts").matches(DARIATUR)
        assert not BankFilter(country_code="CH", auth="oauth").matches(DARIATUR)

    def test_apply_keeps_input_order(self) -> None:
        banks = [FUN, DARIATUR, FUN]
        assert BankFilter(name="Bank").apply(banks) == [FUN, DARIATUR, FUN]
        assert BankFilter(country_code="GB").apply(banks) == [FUN, FUN]


# ── Pagination ─────────────────────────────────────────────────────────────

class TestParsePageParams:
    def test_defaults(self) -> None:
        assert parse_page_params(None, None) == (0, 5)
        assert parse_page_params("", "  ", default_size=7) == (0, 7)

    def test_numeric_values(self) -> None:
        assert parse_page_params("2", "3") == (2, 3)

    @pytest.mark.parametrize("page,size", [("two", None), (None, "x"), ("1.5", "2")])
    def test_non_numeric_values_raise(self, page, size) -> None:
        with pytest.raises(ValueError):
            parse_page_params(page, size)


class TestPaginate:
    items = list(range(10))

    def test_page_zero_returns_everything(self) -> None:
        assert paginate(self.items, 0, 5) == self.items

    def test_negative_page_returns_everything(self) -> None:
        assert paginate(self.items, -3, 2) == self.items

    def test_window(self) -> None:
        assert paginate(self.items, 1, 3) == [0, 1, 2]
        assert paginate(self.items, 2, 2) == [2, 3]

    def test_last_page_is_clamped(self) -> None:
        assert paginate(self.items, 4, 3) == [9]

    def test_start_past_end_is_empty(self) -> None:
        assert paginate(self.items, 6, 2) == []
        assert paginate([], 1, 5) == []

    def test_non_positive_size_returns_everything(self) -> None:
        assert paginate(self.items, 2, 0) == self.items
        assert paginate(self.items, 1, -1) == self.items

    def test_returns_a_new_list(self) -> None:
        result = paginate(self.items, 0, 5)
        result.append(99)
        assert len(self.items) == 10
