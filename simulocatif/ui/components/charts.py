"""Chart components for visualization."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import CHART_COLORS
from simulocatif.application.services import projection
from simulocatif.core.settings import get_settings
from simulocatif.domain.models import AmortizationResult, InvestmentParams, InvestmentResults

LEGEND_TOP = dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)


def render_cost_chart(df: pd.DataFrame) -> None:
    """Pie chart of the total investment."""
    fig = px.pie(
        df,
        names="Poste",
        values="Montant",
        title="Répartition des coûts",
        color_discrete_sequence=CHART_COLORS,
    )
    fig.update_traces(textinfo="label+percent")
    st.plotly_chart(fig, use_container_width=True, key="costs")


def render_cash_flow_chart(df: pd.DataFrame) -> None:
    """Grouped bars of yearly income, charges, repayment and cash flow."""
    series = ["Revenus locatifs", "Charges", "Remboursement prêt", "Cash flow"]
    fig = px.bar(
        df,
        x="Année",
        y=series,
        barmode="group",
        title="Cash flow annuel",
        labels={"value": "Montant (€)", "variable": "Poste"},
        color_discrete_sequence=[CHART_COLORS[1], CHART_COLORS[0], CHART_COLORS[2], CHART_COLORS[3]],
    )
    fig.update_layout(hovermode="x unified", legend=LEGEND_TOP)
    st.plotly_chart(fig, use_container_width=True, key="cashflow")


def render_loan_chart(df: pd.DataFrame) -> None:
    """Stacked bars of interest and principal per loan year."""
    if df.empty:
        st.info("Aucun prêt à rembourser.")
        return

    fig = px.bar(
        df,
        x="Année",
        y=["Intérêts", "Capital"],
        title="Amortissement du prêt",
        labels={"value": "Montant (€)", "variable": "Part"},
        color_discrete_map={"Intérêts": CHART_COLORS[0], "Capital": CHART_COLORS[1]},
    )
    fig.update_layout(barmode="stack", hovermode="x unified", legend=LEGEND_TOP)
    st.plotly_chart(fig, use_container_width=True, key="loan")


def render_return_chart(df_cumul: pd.DataFrame, df_patrimony: pd.DataFrame) -> None:
    """Cumulated investment and income, with net equity over 20 years."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df_cumul["Année"],
        y=df_cumul["Investissement cumulé"],
        name="Investissement cumulé",
        line=dict(color=CHART_COLORS[0], width=2),
        mode="lines",
    ))
    fig.add_trace(go.Scatter(
        x=df_cumul["Année"],
        y=df_cumul["Revenus cumulés"],
        name="Revenus cumulés",
        line=dict(color=CHART_COLORS[1], width=2),
        mode="lines",
    ))
    fig.add_trace(go.Scatter(
        x=df_patrimony["Année"],
        y=df_patrimony["Valorisation nette"],
        name="Valorisation nette",
        fill="tozeroy",
        line=dict(color="#28a745"),
        mode="lines",
    ))
    fig.update_layout(
        title="Rendement sur 20 ans",
        xaxis_title="Année",
        yaxis_title="Montant (€)",
        hovermode="x unified",
        legend=LEGEND_TOP,
    )
    st.plotly_chart(fig, use_container_width=True, key="return")


def render_charts(
    params: InvestmentParams,
    results: InvestmentResults,
    loan: AmortizationResult,
) -> None:
    """Render the chart tabs."""
    settings = get_settings()
    st.subheader("Analyse graphique")
    st.caption("Visualisation des données clés de votre investissement")

    tab_costs, tab_cf, tab_loan, tab_return = st.tabs(["Coûts", "Cash flow", "Prêt", "Rendement"])
    with tab_costs:
        render_cost_chart(projection.cost_breakdown(params, results))
    with tab_cf:
        render_cash_flow_chart(
            projection.cash_flow_projection(params, results, years=settings.cash_flow_chart_years)
        )
    with tab_loan:
        render_loan_chart(
            projection.yearly_amortization(loan, max_years=settings.amortization_chart_max_years)
        )
    with tab_return:
        render_return_chart(
            projection.cumulative_return(params, results),
            projection.patrimony_projection(params, loan),
        )
