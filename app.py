import logging
import os

import streamlit as st

from core.presets import DEFAULT_LOG_LEVEL, DISCLAIMER, LOG_LEVEL_ENV
from core.state import reset_calculators
from core.version import __version__
from ui.affordability import render_affordability_calculator
from ui.payment import render_payment_calculator

logging.basicConfig(
    level=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("mortcalc")

VIEWS = {
    "Payment": render_payment_calculator,
    "Affordability": render_affordability_calculator,
}

nav = st.sidebar.radio("Calculator", list(VIEWS), key="view_mode")
st.sidebar.button("Reset to defaults", on_click=reset_calculators)
st.sidebar.caption(f"v{__version__}")

st.title("MORTGAGE CALCULATOR")
st.caption("Monthly payment from a house price • Affordable house price from a monthly payment")

logger.debug("rendering %s view", nav)
VIEWS[nav]()

st.divider()
st.caption(DISCLAIMER)
