"""Investment parameter data model.

One record per calculation, built from the form inputs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_ANNUAL_APPRECIATION_PCT = 1.5


class TaxSystem(str, Enum):
    """Income tax regime for the rental income."""

    REAL = "real"
    MICRO = "micro"


class InvestmentParams(BaseModel):
    """Acquisition, financing, rental and tax parameters.

    Immutable: any change in the form produces a new record. Tax fields are
    collected but do not enter the computation.
    """

    # Acquisition
    purchase_price: float = Field(..., gt=0, description="Purchase price in €")
    notary_fees: float = Field(default=7.5, ge=0, le=100, description="Notary fees as % of price")
    down_payment: float = Field(default=0.0, ge=0, description="Down payment in €")
    renovation_costs: float = Field(default=0.0, ge=0, description="Renovation budget in €")

    # Rental income & expenses
    monthly_rent: float = Field(default=0.0, ge=0, description="Gross monthly rent in €")
    monthly_non_recoverable_expenses: float = Field(
        default=0.0, ge=0, description="Monthly non-recoverable charges in €"
    )
    annual_property_tax: float = Field(default=0.0, ge=0, description="Yearly property tax in €")
    vacancy_rate: float = Field(default=0.0, ge=0, le=100, description="Expected vacancy %")

    # Financing
    interest_rate: float = Field(default=3.5, ge=0, le=100, description="Annual nominal rate %")
    loan_term: int = Field(default=20, gt=0, le=50, description="Loan term in years")

    # Tax
    tax_rate: float = Field(default=30.0, ge=0, le=100, description="Marginal tax rate %")
    tax_system: TaxSystem = Field(default=TaxSystem.REAL, description="Tax regime")

    # Projection
    annual_appreciation: float = Field(
        default=DEFAULT_ANNUAL_APPRECIATION_PCT,
        gt=-100,
        le=100,
        description="Annual property appreciation %",
    )

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )
