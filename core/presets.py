DISCLAIMER = (
    "Estimates only. Figures cover principal and interest on a fixed-rate, fully amortizing loan "
    "and leave out property taxes, insurance, HOA dues and mortgage insurance. "
    "Lender pricing, fees and underwriting will change the actual payment."
)

# Starting scenario for the payment calculator.
PAYMENT_DEFAULTS = {
    "house_price": 500000.0,
    "down_payment_percent": 20.0,
    "interest_rate_pct": 7.0,
    "term_years": 30,
}

# Starting scenario for the affordability calculator.
AFFORDABILITY_DEFAULTS = {
    "monthly_payment": 1600.0,
    "down_payment": 300000.0,
    "additional_down_payment": 13000.0,
    "interest_rate_pct": 7.0,
    "term_years": 30,
}

LOG_LEVEL_ENV = "MORTCALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
