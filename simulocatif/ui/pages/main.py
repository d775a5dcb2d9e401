"""Main page layout.

Recomputes everything from the current form parameters on each rerun.
"""

from __future__ import annotations

from typing import Any

import streamlit as st
from pydantic import ValidationError

from simulocatif.core.exceptions import InvalidParameterError
from simulocatif.core.logging import get_logger
from simulocatif.core.settings import get_settings
from simulocatif.domain.calculator import compute_results, loan_amortization
from simulocatif.domain.models import InvestmentParams
from simulocatif.ui.components.charts import render_charts
from simulocatif.ui.components.results import render_results_section

log = get_logger(__name__)


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def render_main_page(raw_params: dict[str, Any]) -> None:
    """Validate the parameters, compute and render results and charts."""
    st.title("🏢 Simulateur d'investissement locatif")
    st.caption("Modifiez les paramètres pour voir les résultats en temps réel.")

    try:
        params = InvestmentParams(**raw_params)
        results = compute_results(params)
        loan = loan_amortization(params)
    except ValidationError as exc:
        log.warning("invalid_parameters", errors=exc.error_count())
        st.error(f"Paramètres invalides : {_validation_message(exc)}")
        return
    except InvalidParameterError as exc:
        log.warning("invalid_parameters", param=exc.param_name, value=exc.value, reason=exc.reason)
        st.error(f"Calcul impossible : {exc}")
        return

    render_results_section(results)
    st.divider()
    render_charts(params, results, loan)

    if get_settings().debug_mode:
        with st.expander("🔧 Debug"):
            st.json({"params": params.model_dump(mode="json"), "results": results.model_dump()})
