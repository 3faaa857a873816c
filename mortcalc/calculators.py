from __future__ import annotations
import math

# Below this, (1 + r) ** n - 1 is treated as zero and the linear formula is used.
GROWTH_EPSILON = 1e-12


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Form widgets and pasted values can arrive as ``None``, ``NaN``, infinite
    or as text that doesn't parse.  This helper mirrors the spreadsheet
    ``NZ()`` function so that later math never sees a non-finite number.
    """

    if x is None:
        return default
    try:
        value = float(x)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value):
        return default
    return value


def clamp_non_negative(x):
    """Input boundary for money, percent and rate fields."""

    return max(0.0, nz(x))


def clamp_term_years(x):
    """Input boundary for the loan term: a non-negative whole number of years."""

    return int(clamp_non_negative(x))


def payment_count(term_years):
    """Number of monthly payments in ``term_years``."""

    n = int(nz(term_years) * 12)
    return n if n > 0 else 0


def _growth_minus_one(r, n):
    # (1 + r) ** n - 1 without the cancellation error of the naive form
    return math.expm1(n * math.log1p(r))


def down_payment_amount(house_price, down_payment_percent):
    """Dollar down payment for a percentage of the house price."""

    return nz(house_price) * nz(down_payment_percent) / 100


def down_payment_percent(house_price, down_payment_amt):
    """Down payment as a percentage of the house price.

    A zero house price has no meaningful percentage, so ``0`` is returned
    rather than dividing by zero.
    """

    price = nz(house_price)
    if price <= 0:
        return 0.0
    return nz(down_payment_amt) / price * 100


def loan_amount(house_price, down_payment_amt):
    """Financed principal.

    Negative when the down payment exceeds the price; the value is not
    clamped so callers can flag the over-funded scenario.
    """

    return nz(house_price) - nz(down_payment_amt)


def monthly_payment(principal, annual_rate_pct, term_years):
    """Calculate the fully amortizing monthly payment for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``6.5`` for 6.5%), and ``term_years`` is
    the amortization period in years.  A zero rate repays the principal in
    equal straight-line installments.
    """

    L = nz(principal)
    rate = nz(annual_rate_pct)
    r = rate / 100 / 12
    n = payment_count(term_years)
    if rate <= 0 or L <= 0 or n <= 0:
        if n > 0 and rate == 0:
            return L / n
        return 0.0
    growth_m1 = _growth_minus_one(r, n)
    if growth_m1 <= GROWTH_EPSILON:
        return L / n
    return L * r * (1 + growth_m1) / growth_m1


def payment_totals(payment, n, principal):
    """Total of all payments and the interest portion of it."""

    total_paid = nz(payment) * int(nz(n))
    return {"total_paid": total_paid, "total_interest": total_paid - nz(principal)}


def principal_from_payment(payment, annual_rate_pct, term_years):
    """Reverse amortization to find the loan amount for a given payment.

    Given a payment target, rate and term, determine the principal that the
    payment fully amortizes.  Unlike :func:`monthly_payment` a zero rate is
    not solved: the principal is reported as ``0``.
    """

    P = nz(payment)
    rate = nz(annual_rate_pct)
    n = payment_count(term_years)
    if P <= 0 or rate <= 0 or n <= 0:
        return 0.0
    r = rate / 100 / 12
    growth_m1 = _growth_minus_one(r, n)
    return P * growth_m1 / (r * (1 + growth_m1))


def house_price_from_principal(principal, total_down_payment):
    """Purchase price supported by a loan plus the cash put down."""

    return nz(principal) + nz(total_down_payment)
