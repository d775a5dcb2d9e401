"""
simulocatif - Simulateur d'investissement locatif

Estimates the financial performance of a rental-property investment.

Modules:
    - core: Loan amortization, exceptions, logging and settings
    - domain: Pydantic data models and the investment calculator
    - application: Chart-oriented projections built on the calculator
    - ui: Streamlit pages and UI components
"""

__version__ = "1.2.0"
