from __future__ import annotations
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def evaluate_rules(state: dict) -> List[RuleResult]:
    """Flag input combinations the numbers alone don't explain.

    ``state`` is a calculator result dumped to a dict plus a ``mode`` key of
    ``"payment"`` or ``"affordability"``.  Rules never change any figure.
    """
    res: List[RuleResult] = []

    mode = state.get("mode", "payment")
    house_price = float(state.get("house_price", 0.0))
    loan = float(state.get("loan_amount", 0.0))
    rate = float(state.get("interest_rate_pct", 0.0))
    if mode == "affordability":
        dp_pct = float(state.get("down_payment_percentage", 0.0))
    else:
        dp_pct = float(state.get("down_payment_percent", 0.0))

    if loan < 0:
        res.append(
            RuleResult(
                code="LOAN_OVERFUNDED",
                severity="warn",
                message="Down payment exceeds the house price; there is nothing to finance.",
                context={"loan_amount": loan},
            )
        )

    if dp_pct > 100:
        res.append(
            RuleResult(
                code="DOWN_PAYMENT_OVER_100",
                severity="warn",
                message="Down payment is more than 100% of the house price.",
                context={"down_payment_percent": dp_pct},
            )
        )

    if house_price <= 0:
        res.append(
            RuleResult(
                code="HOUSE_PRICE_MISSING",
                severity="info",
                message="Enter a house price to see the down payment percentage.",
            )
        )

    if mode == "payment":
        if rate <= 0 and loan > 0:
            res.append(
                RuleResult(
                    code="ZERO_RATE_STRAIGHT_LINE",
                    severity="info",
                    message="At 0% the loan is repaid in equal principal-only installments.",
                )
            )
    else:
        payment = float(state.get("monthly_payment", 0.0))
        if payment <= 0:
            res.append(
                RuleResult(
                    code="NO_TARGET_PAYMENT",
                    severity="info",
                    message="Enter a monthly payment to estimate an affordable loan.",
                )
            )
        elif rate <= 0:
            res.append(
                RuleResult(
                    code="ZERO_RATE_NOT_SOLVED",
                    severity="warn",
                    message="Affordability is not estimated at a 0% rate; the loan amount is shown as $0.",
                )
            )

    return res
