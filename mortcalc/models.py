from enum import Enum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict

from mortcalc.calculators import clamp_non_negative, clamp_term_years

NonNegative = Annotated[float, BeforeValidator(clamp_non_negative)]
TermYears = Annotated[int, BeforeValidator(clamp_term_years)]


class DownPaymentDriver(str, Enum):
    """Which half of the amount/percent pair the user edited last."""

    PERCENT = "percent"
    AMOUNT = "amount"


class ForwardInputs(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    house_price: NonNegative = 0.0
    down_payment_percent: NonNegative = 0.0
    interest_rate_pct: NonNegative = 0.0
    term_years: TermYears = 30


class ReverseInputs(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    monthly_payment: NonNegative = 0.0
    down_payment: NonNegative = 0.0
    additional_down_payment: NonNegative = 0.0
    interest_rate_pct: NonNegative = 0.0
    term_years: TermYears = 30


class ForwardResult(BaseModel):
    house_price: float
    down_payment_amount: float
    down_payment_percent: float
    interest_rate_pct: float
    term_years: int
    loan_amount: float
    monthly_payment: float
    payment_count: int
    total_paid: float
    total_interest: float
    driver: DownPaymentDriver


class ReverseResult(BaseModel):
    monthly_payment: float
    interest_rate_pct: float
    term_years: int
    total_down_payment: float
    loan_amount: float
    house_price: float
    down_payment_percentage: float
    total_amount_paid: float
    total_interest_paid: float
