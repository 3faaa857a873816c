"""Bind the calculation engines to ``st.session_state``.

An engine lives for one browser session.  Widgets are keyed so Streamlit
keeps their values between reruns; each widget's ``on_change`` callback
commits the raw value into the engine and then writes the recomputed half
of the down payment pair back to its widget key.  Callbacks run before the
script body, so the synced pair is in place before any widget renders.
"""
import logging

import streamlit as st

from core.engine import ForwardCalculator, ReverseCalculator
from core.presets import AFFORDABILITY_DEFAULTS, PAYMENT_DEFAULTS
from mortcalc.models import ForwardInputs, ReverseInputs

logger = logging.getLogger(__name__)

PAYMENT_CALC_KEY = "payment_calc"
AFFORDABILITY_CALC_KEY = "affordability_calc"

# engine field -> widget key
PAYMENT_WIDGETS = {
    "house_price": "pay_house_price",
    "down_payment_percent": "pay_down_payment_percent",
    "down_payment_amount": "pay_down_payment_amount",
    "interest_rate_pct": "pay_interest_rate_pct",
    "term_years": "pay_term_years",
}
AFFORDABILITY_WIDGETS = {
    "monthly_payment": "aff_monthly_payment",
    "down_payment": "aff_down_payment",
    "additional_down_payment": "aff_additional_down_payment",
    "interest_rate_pct": "aff_interest_rate_pct",
    "term_years": "aff_term_years",
}

# A payment edit only rewrites the half of the down payment pair it
# recomputes.  Other widgets may still hold edits whose callbacks run later
# in the same rerun.
PAYMENT_SYNCED = {
    "house_price": "down_payment_amount",
    "down_payment_percent": "down_payment_amount",
    "down_payment_amount": "down_payment_percent",
}


def _widget_values(calc, widgets: dict) -> dict:
    out = {}
    for field, key in widgets.items():
        source = calc if isinstance(getattr(type(calc), field, None), property) else calc.inputs
        value = getattr(source, field)
        out[key] = int(value) if field == "term_years" else float(value)
    return out


def _push_widgets(calc, widgets: dict, only_missing: bool = False) -> None:
    for key, value in _widget_values(calc, widgets).items():
        if only_missing:
            st.session_state.setdefault(key, value)
        else:
            st.session_state[key] = value


def get_payment_calc() -> ForwardCalculator:
    """Return the session's payment engine, creating it on first use."""
    ss = st.session_state
    if PAYMENT_CALC_KEY not in ss:
        ss[PAYMENT_CALC_KEY] = ForwardCalculator(ForwardInputs(**PAYMENT_DEFAULTS))
        logger.info("payment calculator started with %s", PAYMENT_DEFAULTS)
    calc = ss[PAYMENT_CALC_KEY]
    _push_widgets(calc, PAYMENT_WIDGETS, only_missing=True)
    return calc


def get_affordability_calc() -> ReverseCalculator:
    """Return the session's affordability engine, creating it on first use."""
    ss = st.session_state
    if AFFORDABILITY_CALC_KEY not in ss:
        ss[AFFORDABILITY_CALC_KEY] = ReverseCalculator(ReverseInputs(**AFFORDABILITY_DEFAULTS))
        logger.info("affordability calculator started with %s", AFFORDABILITY_DEFAULTS)
    calc = ss[AFFORDABILITY_CALC_KEY]
    _push_widgets(calc, AFFORDABILITY_WIDGETS, only_missing=True)
    return calc


def commit_payment_edit(field: str) -> None:
    """``on_change`` callback for the payment calculator widgets."""
    calc = get_payment_calc()
    calc.commit(field, st.session_state.get(PAYMENT_WIDGETS[field]))
    synced = PAYMENT_SYNCED.get(field)
    if synced is not None:
        _push_widgets(calc, {synced: PAYMENT_WIDGETS[synced]})


def commit_affordability_edit(field: str) -> None:
    """``on_change`` callback for the affordability calculator widgets."""
    calc = get_affordability_calc()
    calc.commit(field, st.session_state.get(AFFORDABILITY_WIDGETS[field]))


def reset_calculators() -> None:
    """``on_click`` callback: replace both engines with the default scenarios."""
    ss = st.session_state
    ss[PAYMENT_CALC_KEY] = ForwardCalculator(ForwardInputs(**PAYMENT_DEFAULTS))
    ss[AFFORDABILITY_CALC_KEY] = ReverseCalculator(ReverseInputs(**AFFORDABILITY_DEFAULTS))
    _push_widgets(ss[PAYMENT_CALC_KEY], PAYMENT_WIDGETS)
    _push_widgets(ss[AFFORDABILITY_CALC_KEY], AFFORDABILITY_WIDGETS)
    logger.info("calculators reset to defaults")
