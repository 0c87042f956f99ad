"""Scoring weight constants for the sustainability assessment.

Sub-score weights must sum to 1.0, as must the three MCI components.
"""

# ---------------------------------------------------------------------------
# Overall score weights (must sum to 1.0)
# ---------------------------------------------------------------------------
GWP_WEIGHT = 0.30
ENERGY_WEIGHT = 0.25
WATER_WEIGHT = 0.15
WASTE_WEIGHT = 0.15
MCI_WEIGHT = 0.15

# ---------------------------------------------------------------------------
# Material Circularity Index component weights (must sum to 1.0)
# ---------------------------------------------------------------------------
MCI_WATER_WEIGHT = 0.3
MCI_RENEWABLE_WEIGHT = 0.3
MCI_WASTE_WEIGHT = 0.4

# ---------------------------------------------------------------------------
# Linear decay scales: the raw value at which a sub-score reaches 0
# ---------------------------------------------------------------------------
GWP_ZERO_AT_KG_PER_TONNE = 2000.0    # kg CO2e / tonne
ENERGY_ZERO_AT_MJ_PER_KG = 100.0     # MJ / kg
WATER_ZERO_AT_M3_PER_TONNE = 10.0    # m³ / tonne
