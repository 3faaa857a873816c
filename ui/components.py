from typing import Iterable, List, Tuple

import pandas as pd
import streamlit as st

from core.rules import RuleResult


def summary_frame(rows: Iterable[Tuple[str, str]]) -> pd.DataFrame:
    """Two-column breakdown table indexed by line item."""
    return pd.DataFrame(list(rows), columns=["Item", "Value"]).set_index("Item")


def render_rule_results(results: List[RuleResult]) -> None:
    for r in results:
        if r.severity == "critical":
            st.error(f"[{r.code}] {r.message}")
        elif r.severity == "warn":
            st.warning(f"[{r.code}] {r.message}")
        else:
            st.info(f"[{r.code}] {r.message}")
