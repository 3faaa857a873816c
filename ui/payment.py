import streamlit as st

from core.formatting import format_currency, format_percent
from core.rules import evaluate_rules
from core.state import PAYMENT_WIDGETS, commit_payment_edit, get_payment_calc
from ui.components import render_rule_results, summary_frame


def render_payment_calculator():
    """House price and down payment in, monthly payment out."""
    calc = get_payment_calc()
    st.header("Payment Calculator")
    c1, c2, c3 = st.columns(3)
    c1.number_input(
        "House Price ($)",
        min_value=0.0,
        step=1000.0,
        key=PAYMENT_WIDGETS["house_price"],
        on_change=commit_payment_edit,
        args=("house_price",),
    )
    c2.number_input(
        "Down Payment (%)",
        min_value=0.0,
        step=0.5,
        format="%.2f",
        key=PAYMENT_WIDGETS["down_payment_percent"],
        on_change=commit_payment_edit,
        args=("down_payment_percent",),
    )
    c3.number_input(
        "Down Payment ($)",
        min_value=0.0,
        step=1000.0,
        key=PAYMENT_WIDGETS["down_payment_amount"],
        on_change=commit_payment_edit,
        args=("down_payment_amount",),
    )
    c4, c5 = st.columns(2)
    c4.number_input(
        "Interest Rate (%)",
        min_value=0.0,
        step=0.125,
        format="%.3f",
        key=PAYMENT_WIDGETS["interest_rate_pct"],
        on_change=commit_payment_edit,
        args=("interest_rate_pct",),
    )
    c5.number_input(
        "Term (years)",
        min_value=1,
        step=1,
        key=PAYMENT_WIDGETS["term_years"],
        on_change=commit_payment_edit,
        args=("term_years",),
    )

    res = calc.result()
    st.session_state["payment_result"] = res.model_dump()
    cols = st.columns(4)
    cols[0].metric("Monthly Payment", format_currency(res.monthly_payment))
    cols[1].metric("Loan Amount", format_currency(res.loan_amount))
    cols[2].metric("Total Paid", format_currency(res.total_paid))
    cols[3].metric("Total Interest", format_currency(res.total_interest))
    st.caption(
        f"Down payment: {format_currency(res.down_payment_amount)} "
        f"({format_percent(res.down_payment_percent)}) • {res.payment_count} payments"
    )
    render_rule_results(evaluate_rules({"mode": "payment", **res.model_dump()}))
    st.table(
        summary_frame(
            [
                ("House Price", format_currency(res.house_price)),
                ("Down Payment", format_currency(res.down_payment_amount)),
                ("Down Payment %", format_percent(res.down_payment_percent)),
                ("Loan Amount", format_currency(res.loan_amount)),
                ("Interest Rate", format_percent(res.interest_rate_pct)),
                ("Monthly Payment", format_currency(res.monthly_payment)),
                ("Total Paid", format_currency(res.total_paid)),
                ("Total Interest", format_currency(res.total_interest)),
            ]
        )
    )
    return res
