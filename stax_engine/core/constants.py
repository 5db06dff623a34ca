"""
Core constants and fixed design thresholds.

Defines the fallback FX table and the concentration thresholds used by
the statistics and diversification components.
"""

# FX fallback, rates relative to USD. Unknown currencies are treated as parity.
FALLBACK_FX_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 1.05,
    "GBP": 1.27,
}
FX_ANCHOR_CURRENCY = "USD"

# HHI diversification bands (HHI on the 0-10000 scale)
HHI_SCALE = 10000.0
HHI_WELL_DIVERSIFIED_BELOW = 1500.0
HHI_MODERATELY_CONCENTRATED_BELOW = 2500.0

# Number of holdings summed into top3_weight
TOP_N_CONCENTRATION = 3

# Diversification score thresholds (percent of portfolio)
SCORE_START = 100
SCORE_TOP_HOLDING_THRESHOLD = 25.0
SCORE_TOP3_THRESHOLD = 60.0
SCORE_COUNTRY_THRESHOLD = 70.0
SCORE_SECTOR_THRESHOLD = 40.0
SCORE_CRYPTO_THRESHOLD = 30.0

# Diversification score penalties
SCORE_TOP_HOLDING_PENALTY = 15
SCORE_TOP3_PENALTY = 15
SCORE_COUNTRY_PENALTY = 15
SCORE_SECTOR_PENALTY = 10
SCORE_CRYPTO_PENALTY = 10

# Score bands for the closing insight
SCORE_HEALTHY_MIN = 80
SCORE_MODERATE_MIN = 50
MAX_INSIGHTS = 5

# Display
PRICE_UNAVAILABLE = "Price unavailable"

# FX cache defaults
DEFAULT_FX_CACHE_TTL_SECONDS = 4 * 60 * 60  # 4 hours
DEFAULT_DIVIDEND_MONTHS_BACK = 12
