import math

import pytest

from core.engine import ForwardCalculator, ReverseCalculator
from mortcalc.models import DownPaymentDriver, ForwardInputs, ReverseInputs


def _payment_calc(**kw):
    base = {"house_price": 500000.0, "down_payment_percent": 20.0, "interest_rate_pct": 7.0, "term_years": 30}
    base.update(kw)
    return ForwardCalculator(ForwardInputs(**base))


def test_initial_amount_follows_percent():
    calc = _payment_calc()
    assert calc.down_payment_amount == 100000
    assert calc.loan_amount == 400000
    assert calc.driver == DownPaymentDriver.PERCENT
    assert abs(calc.monthly_payment - 2661.21) < 0.01


def test_percent_edit_recomputes_amount():
    calc = _payment_calc()
    calc.commit("down_payment_percent", 25)
    assert calc.driver == DownPaymentDriver.PERCENT
    assert calc.down_payment_amount == 125000
    assert calc.loan_amount == 375000


def test_amount_edit_recomputes_percent():
    calc = _payment_calc()
    calc.commit("down_payment_amount", 50000)
    assert calc.driver == DownPaymentDriver.AMOUNT
    assert abs(calc.down_payment_percent - 10.0) < 1e-9
    assert calc.down_payment_amount == 50000


def test_house_price_edit_keeps_percent_sticky():
    calc = _payment_calc()
    calc.commit("down_payment_amount", 50000)
    calc.commit("house_price", 600000)
    assert abs(calc.down_payment_percent - 10.0) < 1e-9
    assert abs(calc.down_payment_amount - 60000) < 1e-6
    assert abs(calc.loan_amount - 540000) < 1e-6


def test_rate_and_term_edits_leave_down_payment_alone():
    calc = _payment_calc()
    before = calc.monthly_payment
    calc.commit("interest_rate_pct", 6.0)
    calc.commit("term_years", 15)
    assert calc.down_payment_amount == 100000
    assert calc.payment_count == 180
    assert calc.monthly_payment != before


def test_derived_values_reflect_latest_edit():
    calc = _payment_calc()
    first = calc.result()
    calc.commit("house_price", 250000)
    second = calc.result()
    assert second.loan_amount == 200000
    assert second.monthly_payment < first.monthly_payment
    assert abs(second.total_paid - second.monthly_payment * 360) < 1e-6
    assert abs(second.total_interest - (second.total_paid - second.loan_amount)) < 1e-6


def test_negative_and_unparsable_edits_clamp_to_zero():
    calc = _payment_calc()
    calc.commit("house_price", -1)
    assert calc.house_price == 0
    assert calc.down_payment_amount == 0
    calc.commit("interest_rate_pct", "abc")
    assert calc.inputs.interest_rate_pct == 0
    calc.commit("down_payment_amount", None)
    assert calc.down_payment_amount == 0


def test_amount_edit_with_zero_price_is_overfunded():
    calc = _payment_calc(house_price=0.0)
    calc.commit("down_payment_amount", 20000)
    res = calc.result()
    assert res.down_payment_percent == 0
    assert res.loan_amount == -20000
    assert res.monthly_payment == 0
    assert res.total_interest == res.total_paid - res.loan_amount


def test_overfunded_loan_surfaces_negative():
    calc = _payment_calc(house_price=300000.0, interest_rate_pct=0.0, term_years=10)
    calc.commit("down_payment_amount", 350000)
    res = calc.result()
    assert res.loan_amount == -50000
    assert res.down_payment_percent > 100
    assert res.monthly_payment < 0
    assert res.total_interest == res.total_paid - res.loan_amount


def test_unknown_field_rejected():
    calc = _payment_calc()
    with pytest.raises(KeyError):
        calc.commit("loan_amount", 1)
    with pytest.raises(KeyError):
        ReverseCalculator().commit("house_price", 1)


def _affordability_calc(**kw):
    base = {
        "monthly_payment": 1600.0,
        "down_payment": 300000.0,
        "additional_down_payment": 13000.0,
        "interest_rate_pct": 7.0,
        "term_years": 30,
    }
    base.update(kw)
    return ReverseCalculator(ReverseInputs(**base))


def test_affordability_figures():
    calc = _affordability_calc()
    res = calc.result()
    assert res.total_down_payment == 313000
    assert abs(res.house_price - (res.loan_amount + 313000)) < 1e-6
    assert abs(res.down_payment_percentage - 313000 / res.house_price * 100) < 1e-9
    assert res.total_amount_paid == 1600 * 30 * 12
    assert abs(res.total_interest_paid - (res.total_amount_paid - res.loan_amount)) < 1e-6


def test_affordability_matches_payment_engine():
    res = _affordability_calc().result()
    fwd = ForwardCalculator(
        ForwardInputs(house_price=res.house_price, interest_rate_pct=7.0, term_years=30)
    )
    fwd.commit("down_payment_amount", res.total_down_payment)
    assert abs(fwd.monthly_payment - 1600) < 0.01


def test_affordability_zero_rate_returns_no_loan():
    res = _affordability_calc(interest_rate_pct=0.0).result()
    assert res.loan_amount == 0
    assert res.house_price == 313000
    assert res.total_interest_paid == res.total_amount_paid


def test_affordability_zero_house_price_percentage():
    res = _affordability_calc(monthly_payment=0.0, down_payment=0.0, additional_down_payment=0.0).result()
    assert res.house_price == 0
    assert res.down_payment_percentage == 0
    assert not math.isnan(res.down_payment_percentage)


def test_affordability_edits_recompute():
    calc = _affordability_calc()
    before = calc.house_price
    calc.commit("monthly_payment", 2000)
    assert calc.house_price > before
    calc.commit("additional_down_payment", -500)
    assert calc.total_down_payment == 300000
    calc.commit("term_years", 15)
    assert calc.total_amount_paid == 2000 * 15 * 12


def test_amount_follows_inputs_assigned_directly():
    calc = _payment_calc()
    calc.inputs.house_price = 600000
    assert calc.down_payment_amount == 120000
    assert calc.loan_amount == 480000


def test_typed_amount_keeps_percent_consistent_with_price():
    calc = _payment_calc()
    calc.commit("down_payment_amount", 50000)
    calc.inputs.house_price = 250000
    assert calc.down_payment_amount == 50000
    assert abs(calc.down_payment_percent - 20.0) < 1e-9
    assert calc.loan_amount == 200000
