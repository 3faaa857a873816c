"""Reactive calculation engines behind the payment and affordability views.

Each engine owns a small set of user-editable inputs.  Every derived figure
is a property recomputed from the current inputs when it is read, so a value
can never lag behind the last committed edit.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from mortcalc.calculators import (
    clamp_non_negative,
    down_payment_amount,
    down_payment_percent,
    house_price_from_principal,
    loan_amount,
    monthly_payment,
    payment_count,
    payment_totals,
    principal_from_payment,
)
from mortcalc.models import (
    DownPaymentDriver,
    ForwardInputs,
    ForwardResult,
    ReverseInputs,
    ReverseResult,
)

logger = logging.getLogger(__name__)


class ForwardCalculator:
    """House price and down payment in, monthly payment and totals out.

    The down payment is held both as a dollar amount and as a percentage of
    the house price.  Whichever half the user edits is authoritative and the
    other is recomputed from it.  A house price edit keeps the percentage and
    recomputes the amount.
    """

    FIELDS = (
        "house_price",
        "down_payment_percent",
        "down_payment_amount",
        "interest_rate_pct",
        "term_years",
    )

    def __init__(self, inputs: Optional[ForwardInputs] = None) -> None:
        self.inputs = inputs if inputs is not None else ForwardInputs()
        self.driver = DownPaymentDriver.PERCENT
        # only meaningful while the amount drives
        self._typed_amount = 0.0

    def commit(self, field: str, raw: Any) -> None:
        """Apply one raw edit from the presentation layer."""
        if field not in self.FIELDS:
            raise KeyError(field)
        if field == "down_payment_amount":
            self.driver = DownPaymentDriver.AMOUNT
            self._typed_amount = clamp_non_negative(raw)
            self.inputs.down_payment_percent = self.down_payment_percent
        else:
            if field == "house_price" and self.driver is DownPaymentDriver.AMOUNT:
                # percent is sticky across price edits
                self.inputs.down_payment_percent = self.down_payment_percent
                self.driver = DownPaymentDriver.PERCENT
            setattr(self.inputs, field, raw)
            if field == "down_payment_percent":
                self.driver = DownPaymentDriver.PERCENT
        logger.debug(
            "payment edit %s=%r driver=%s amount=%.2f percent=%.4f",
            field,
            raw,
            self.driver.value,
            self.down_payment_amount,
            self.down_payment_percent,
        )

    @property
    def house_price(self) -> float:
        return self.inputs.house_price

    @property
    def down_payment_percent(self) -> float:
        if self.driver is DownPaymentDriver.AMOUNT:
            return down_payment_percent(self.inputs.house_price, self._typed_amount)
        return self.inputs.down_payment_percent

    @property
    def down_payment_amount(self) -> float:
        if self.driver is DownPaymentDriver.AMOUNT:
            return self._typed_amount
        return down_payment_amount(self.inputs.house_price, self.inputs.down_payment_percent)

    @property
    def loan_amount(self) -> float:
        return loan_amount(self.inputs.house_price, self.down_payment_amount)

    @property
    def payment_count(self) -> int:
        return payment_count(self.inputs.term_years)

    @property
    def monthly_payment(self) -> float:
        return monthly_payment(
            self.loan_amount, self.inputs.interest_rate_pct, self.inputs.term_years
        )

    @property
    def totals(self) -> dict:
        return payment_totals(self.monthly_payment, self.payment_count, self.loan_amount)

    def result(self) -> ForwardResult:
        totals = self.totals
        return ForwardResult(
            house_price=self.house_price,
            down_payment_amount=self.down_payment_amount,
            down_payment_percent=self.down_payment_percent,
            interest_rate_pct=self.inputs.interest_rate_pct,
            term_years=self.inputs.term_years,
            loan_amount=self.loan_amount,
            monthly_payment=self.monthly_payment,
            payment_count=self.payment_count,
            total_paid=totals["total_paid"],
            total_interest=totals["total_interest"],
            driver=self.driver,
        )


class ReverseCalculator:
    """Target monthly payment in, affordable house price out."""

    FIELDS = (
        "monthly_payment",
        "down_payment",
        "additional_down_payment",
        "interest_rate_pct",
        "term_years",
    )

    def __init__(self, inputs: Optional[ReverseInputs] = None) -> None:
        self.inputs = inputs if inputs is not None else ReverseInputs()

    def commit(self, field: str, raw: Any) -> None:
        """Apply one raw edit from the presentation layer."""
        if field not in self.FIELDS:
            raise KeyError(field)
        setattr(self.inputs, field, raw)
        logger.debug("affordability edit %s=%r", field, raw)

    @property
    def total_down_payment(self) -> float:
        return self.inputs.down_payment + self.inputs.additional_down_payment

    @property
    def loan_amount(self) -> float:
        return principal_from_payment(
            self.inputs.monthly_payment,
            self.inputs.interest_rate_pct,
            self.inputs.term_years,
        )

    @property
    def house_price(self) -> float:
        return house_price_from_principal(self.loan_amount, self.total_down_payment)

    @property
    def down_payment_percentage(self) -> float:
        return down_payment_percent(self.house_price, self.total_down_payment)

    @property
    def total_amount_paid(self) -> float:
        return self.inputs.monthly_payment * self.inputs.term_years * 12

    @property
    def total_interest_paid(self) -> float:
        return self.total_amount_paid - self.loan_amount

    def result(self) -> ReverseResult:
        return ReverseResult(
            monthly_payment=self.inputs.monthly_payment,
            interest_rate_pct=self.inputs.interest_rate_pct,
            term_years=self.inputs.term_years,
            total_down_payment=self.total_down_payment,
            loan_amount=self.loan_amount,
            house_price=self.house_price,
            down_payment_percentage=self.down_payment_percentage,
            total_amount_paid=self.total_amount_paid,
            total_interest_paid=self.total_interest_paid,
        )
