"""Parameter form rendered in the sidebar.

Each section mirrors one group of InvestmentParams fields.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from config import DOWN_PAYMENT_STEP, SLIDER_BOUNDS, TAX_SYSTEM_LABELS


def _slider(label: str, key: str, current: dict[str, Any], help: str | None = None) -> Any:
    lo, hi, step = SLIDER_BOUNDS[key]
    value = type(lo)(min(max(current[key], lo), hi))
    return st.slider(label, min_value=lo, max_value=hi, value=value, step=step, help=help, key=f"in_{key}")


def render_acquisition_section(current: dict[str, Any]) -> dict[str, Any]:
    """Purchase price, notary fees, down payment and works."""
    st.markdown("### 🏠 Informations de l'acquisition")
    purchase_price = _slider("Prix d'achat (€)", "purchase_price", current)
    notary_fees = _slider("Frais de notaire (%)", "notary_fees", current,
                          help="Environ 7 à 8 % dans l'ancien, 2 à 3 % dans le neuf.")
    renovation_costs = _slider("Travaux (€)", "renovation_costs", current)
    down_payment = st.slider(
        "Apport personnel (€)",
        min_value=DOWN_PAYMENT_STEP,
        max_value=int(purchase_price),
        value=int(min(max(current["down_payment"], DOWN_PAYMENT_STEP), purchase_price)),
        step=DOWN_PAYMENT_STEP,
        key="in_down_payment",
    )
    return {
        "purchase_price": purchase_price,
        "notary_fees": notary_fees,
        "renovation_costs": renovation_costs,
        "down_payment": down_payment,
    }


def render_financing_section(current: dict[str, Any]) -> dict[str, Any]:
    """Loan rate and term."""
    st.markdown("### 🏦 Financement")
    return {
        "interest_rate": _slider("Taux d'intérêt (%)", "interest_rate", current),
        "loan_term": int(_slider("Durée du prêt (années)", "loan_term", current)),
    }


def render_rental_section(current: dict[str, Any]) -> dict[str, Any]:
    """Rent, charges, property tax and vacancy."""
    st.markdown("### 💶 Revenus locatifs")
    return {
        "monthly_rent": _slider("Loyer mensuel (€)", "monthly_rent", current),
        "monthly_non_recoverable_expenses": _slider(
            "Charges non récupérables (€/mois)", "monthly_non_recoverable_expenses", current
        ),
        "annual_property_tax": _slider("Taxe foncière (€/an)", "annual_property_tax", current),
        "vacancy_rate": _slider("Vacance locative (%)", "vacancy_rate", current),
    }


def render_tax_section(current: dict[str, Any]) -> dict[str, Any]:
    """Tax regime and marginal rate. Informative only."""
    st.markdown("### ⚖️ Fiscalité")
    options = list(TAX_SYSTEM_LABELS)
    tax_system = st.radio(
        "Mode d'imposition",
        options,
        index=options.index(current["tax_system"]),
        format_func=TAX_SYSTEM_LABELS.get,
        horizontal=True,
        key="in_tax_system",
    )
    tax_rate = _slider("Taux marginal d'imposition (%)", "tax_rate", current,
                       help="Non pris en compte dans les calculs de rendement.")
    return {"tax_system": tax_system, "tax_rate": tax_rate}


def render_projection_section(current: dict[str, Any]) -> dict[str, Any]:
    """Annual appreciation of the property."""
    st.markdown("### 📈 Projection patrimoniale")
    return {
        "annual_appreciation": _slider("Valorisation annuelle du bien (%)", "annual_appreciation", current),
    }


def render_parameter_form(current: dict[str, Any]) -> dict[str, Any]:
    """Render the whole form and return the raw parameters."""
    with st.sidebar:
        st.title("⚙️ Paramètres")
        params: dict[str, Any] = {}
        for section in (
            render_acquisition_section,
            render_financing_section,
            render_rental_section,
            render_tax_section,
            render_projection_section,
        ):
            params.update(section(current))
            st.divider()
    return params
