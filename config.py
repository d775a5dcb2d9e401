# Fichier: config.py
# Scénario par défaut du formulaire
DEFAULT_PARAMS = {
    "purchase_price": 200000,
    "notary_fees": 7.5,
    "down_payment": 40000,
    "renovation_costs": 15000,
    "monthly_rent": 800,
    "monthly_non_recoverable_expenses": 50,
    "annual_property_tax": 1200,
    "interest_rate": 3.5,
    "loan_term": 20,
    "vacancy_rate": 5,
    "tax_rate": 30,
    "tax_system": "real",
    "annual_appreciation": 1.5,
}

# Bornes des curseurs: (min, max, pas)
SLIDER_BOUNDS = {
    "purchase_price": (50000, 1000000, 5000),
    "notary_fees": (1.0, 10.0, 0.1),
    "renovation_costs": (0, 200000, 1000),
    "interest_rate": (0.0, 7.0, 0.05),
    "loan_term": (5, 30, 1),
    "monthly_rent": (300, 5000, 50),
    "monthly_non_recoverable_expenses": (0, 500, 10),
    "annual_property_tax": (0, 5000, 100),
    "vacancy_rate": (0.0, 20.0, 0.5),
    "tax_rate": (0, 45, 1),
    "annual_appreciation": (-2.0, 5.0, 0.1),
}
DOWN_PAYMENT_STEP = 5000

TAX_SYSTEM_LABELS = {"real": "Régime réel", "micro": "Micro-foncier (abattement 30 %)"}

# Couleurs des cartes de résultat
VARIANT_COLORS = {
    "success": "#28a745",
    "default": "#17a2b8",
    "caution": "#ffc107",
    "danger": "#dc3545",
}
CHART_COLORS = ["#a8a29e", "#292524", "#d6d3d1", "#57534e", "#78716c"]
