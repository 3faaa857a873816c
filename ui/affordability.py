import streamlit as st

from core.formatting import format_currency, format_percent
from core.rules import evaluate_rules
from core.state import AFFORDABILITY_WIDGETS, commit_affordability_edit, get_affordability_calc
from ui.components import render_rule_results, summary_frame


def render_affordability_calculator():
    """Target monthly payment in, affordable house price out."""
    calc = get_affordability_calc()
    st.header("Affordability Calculator")
    c1, c2, c3 = st.columns(3)
    c1.number_input(
        "Monthly Payment ($)",
        min_value=0.0,
        step=50.0,
        key=AFFORDABILITY_WIDGETS["monthly_payment"],
        on_change=commit_affordability_edit,
        args=("monthly_payment",),
    )
    c2.number_input(
        "Down Payment ($)",
        min_value=0.0,
        step=1000.0,
        key=AFFORDABILITY_WIDGETS["down_payment"],
        on_change=commit_affordability_edit,
        args=("down_payment",),
    )
    c3.number_input(
        "Additional Down Payment ($)",
        min_value=0.0,
        step=1000.0,
        key=AFFORDABILITY_WIDGETS["additional_down_payment"],
        on_change=commit_affordability_edit,
        args=("additional_down_payment",),
        help="Gifts, sale proceeds or other cash added to the down payment.",
    )
    c4, c5 = st.columns(2)
    c4.number_input(
        "Interest Rate (%)",
        min_value=0.0,
        step=0.125,
        format="%.3f",
        key=AFFORDABILITY_WIDGETS["interest_rate_pct"],
        on_change=commit_affordability_edit,
        args=("interest_rate_pct",),
    )
    c5.number_input(
        "Term (years)",
        min_value=1,
        step=1,
        key=AFFORDABILITY_WIDGETS["term_years"],
        on_change=commit_affordability_edit,
        args=("term_years",),
    )

    res = calc.result()
    st.session_state["affordability_result"] = res.model_dump()
    cols = st.columns(4)
    cols[0].metric("Affordable House Price", format_currency(res.house_price))
    cols[1].metric("Loan Amount", format_currency(res.loan_amount))
    cols[2].metric("Total Down Payment", format_currency(res.total_down_payment))
    cols[3].metric("Down Payment %", format_percent(res.down_payment_percentage))
    render_rule_results(evaluate_rules({"mode": "affordability", **res.model_dump()}))
    st.table(
        summary_frame(
            [
                ("Monthly Payment", format_currency(res.monthly_payment)),
                ("Loan Amount", format_currency(res.loan_amount)),
                ("Total Down Payment", format_currency(res.total_down_payment)),
                ("House Price", format_currency(res.house_price)),
                ("Down Payment %", format_percent(res.down_payment_percentage)),
                ("Total Amount Paid", format_currency(res.total_amount_paid)),
                ("Total Interest Paid", format_currency(res.total_interest_paid)),
            ]
        )
    )
    return res
