from decimal import Decimal

import pytest

from app.transaksi.totals import Line, compute_totals, line_subtotal, round_rupiah


def test_line_subtotal_subtracts_flat_discount():
    assert line_subtotal(10, Decimal("15000"), Decimal("500")) == Decimal("149500")


def test_line_subtotal_can_go_negative():
    assert line_subtotal(1, Decimal("100"), Decimal("500")) == Decimal("-400")


def test_empty_items_gives_zero_totals():
    totals = compute_totals([], ppn_enabled=True, pph22_enabled=True)

    assert totals.subtotal == 0
    assert totals.ppn_amount == 0
    assert totals.pph22_amount == 0
    assert totals.total_amount == 0
    assert totals.materai_required is False


def test_subtotal_is_sum_of_lines():
    items = [Line(2, Decimal("1000"), Decimal("0")), Line(3, Decimal("2500.50"), Decimal("1.50"))]

    assert compute_totals(items).subtotal == Decimal("9500")


def test_ppn_and_pph22_are_rounded_independently():
    totals = compute_totals([Line(10, Decimal("15000"), Decimal("500"))], ppn_enabled=True, pph22_enabled=True)

    assert totals.ppn_amount == Decimal("16445")
    # 2242.5 dibulatkan ke atas
    assert totals.pph22_amount == Decimal("2243")
    assert totals.total_amount == Decimal("163702")


def test_pph23_uses_service_value_not_subtotal():
    items = [Line(1, Decimal("10000000"), Decimal("0"))]

    totals = compute_totals(items, pph23_enabled=True, service_value=Decimal("1000000"))

    assert totals.pph23_amount == Decimal("20000")
    assert totals.total_amount == Decimal("10000000") - Decimal("20000") + Decimal("1000000")


def test_service_value_is_added_even_without_pph23():
    totals = compute_totals([], service_value=Decimal("5.00"))

    assert totals.pph23_amount == 0
    assert totals.total_amount == Decimal("5.00")


def test_pph23_without_service_value_is_zero():
    assert compute_totals([], pph23_enabled=True).pph23_amount == 0


@pytest.mark.parametrize("price, expected", [
    (Decimal("4999999"), False),
    (Decimal("5000000"), True),
])
def test_materai_threshold_is_inclusive(price, expected):
    assert compute_totals([Line(1, price, Decimal("0"))]).materai_required is expected


def test_negative_subtotal_propagates_without_clamping():
    totals = compute_totals([Line(1, Decimal("100"), Decimal("500"))], ppn_enabled=True)

    assert totals.subtotal == Decimal("-400")
    assert totals.ppn_amount == Decimal("-44")
    assert totals.total_amount == Decimal("-444")


def test_round_rupiah_half_away_from_zero():
    assert round_rupiah(Decimal("2.5")) == Decimal("3")
    assert round_rupiah(Decimal("-2.5")) == Decimal("-3")
    assert round_rupiah(Decimal("2.49")) == Decimal("2")


def test_plain_numbers_are_accepted():
    totals = compute_totals([Line(4, 2500, 0.5)], ppn_enabled=True)

    assert totals.subtotal == Decimal("9999.5")
    assert totals.ppn_amount == Decimal("1100")
