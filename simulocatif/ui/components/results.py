"""Result cards and summary tables."""

from __future__ import annotations

import streamlit as st

from simulocatif.domain.calculator.rating import Rating, rate_cash_flow, rate_yield
from simulocatif.domain.models import InvestmentResults
from simulocatif.ui.helpers import colorize_badge, format_euro, format_pct


def render_result_card(title: str, value: str, rating: Rating | None = None) -> None:
    """Render one headline metric with its rating badge."""
    with st.container(border=True):
        st.markdown(f"<div style='font-size:0.9em;color:gray'>{title}</div>", unsafe_allow_html=True)
        st.markdown(f"<div style='font-size:1.8em;font-weight:bold'>{value}</div>", unsafe_allow_html=True)
        if rating is not None:
            st.markdown(colorize_badge(rating.label, rating.variant), unsafe_allow_html=True)


def _render_rows(rows: list[tuple[str, str]]) -> None:
    for label, value in rows:
        c_label, c_value = st.columns([0.6, 0.4])
        c_label.caption(label)
        c_value.markdown(f"**{value}**")


def render_results_section(results: InvestmentResults) -> None:
    """Render headline cards, financing summary and 20-year performance."""
    st.subheader("Résultats de l'investissement")

    c1, c2 = st.columns(2)
    with c1:
        render_result_card("Rendement brut", format_pct(results.gross_yield), rate_yield(results.gross_yield))
    with c2:
        render_result_card("Rendement net", format_pct(results.net_yield), rate_yield(results.net_yield))

    cf_rating = rate_cash_flow(results.monthly_cash_flow)
    c3, c4 = st.columns(2)
    with c3:
        render_result_card("Cash-flow mensuel", format_euro(results.monthly_cash_flow), cf_rating)
    with c4:
        render_result_card("Cash-flow annuel", format_euro(results.annual_cash_flow), cf_rating)

    st.markdown("#### Financement")
    _render_rows([
        ("Investissement total", format_euro(results.total_investment)),
        ("Frais de notaire", format_euro(results.actual_notary_fees)),
        ("Montant du prêt", format_euro(results.loan_amount)),
        ("Mensualité du prêt", format_euro(results.monthly_payment)),
        ("Effort d'épargne mensuel", format_euro(results.monthly_savings_effort)),
    ])

    st.markdown("#### Performance sur 20 ans")
    _render_rows([
        ("Loyers perçus", format_euro(results.twenty_year_total_rent)),
        ("Charges totales", format_euro(results.twenty_year_total_expenses)),
        ("Revenus nets", format_euro(results.twenty_year_net_income)),
        ("Rentabilité globale", format_pct(results.twenty_year_return)),
    ])

    st.markdown("#### Projection patrimoniale")
    _render_rows([
        ("Valeur du bien après 20 ans", format_euro(results.property_value_after_20_years)),
        ("Capital restant dû après 20 ans", format_euro(results.remaining_loan_after_20_years)),
        ("Valorisation nette", format_euro(results.net_equity_after_20_years)),
        ("Rendement patrimonial total", format_pct(results.total_patrimonial_return)),
    ])
