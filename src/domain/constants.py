"""Domain constants for patrimony projections and reports."""

DEFAULT_GROWTH_RATE = 0.05
DEFAULT_DEBT_INFLATION_RATE = 0.02
DEFAULT_CAPITAL_GAINS_TAX_RATE = 0.30
DEFAULT_TAX_IMPACT_RATE = 0.30
DEFAULT_RISK_FREE_RATE = 0.02
DEFAULT_LIQUID_SHARE = 0.20
DEFAULT_LOAN_INTEREST_RATE = 0.03
DEFAULT_LOAN_DURATION_MONTHS = 240

MONTHS_PER_YEAR = 12

DEFAULT_CACHE_TTL_SECONDS = 5 * 60
DEFAULT_CACHE_MAX_SIZE = 100
CACHE_EVICTION_MARGIN = 10

UNDEFINED_ASSET_TYPE = "Undefined"


__all__ = [
    "DEFAULT_GROWTH_RATE",
    "DEFAULT_DEBT_INFLATION_RATE",
    "DEFAULT_CAPITAL_GAINS_TAX_RATE",
    "DEFAULT_TAX_IMPACT_RATE",
    "DEFAULT_RISK_FREE_RATE",
    "DEFAULT_LIQUID_SHARE",
    "DEFAULT_LOAN_INTEREST_RATE",
    "DEFAULT_LOAN_DURATION_MONTHS",
    "MONTHS_PER_YEAR",
    "DEFAULT_CACHE_TTL_SECONDS",
    "DEFAULT_CACHE_MAX_SIZE",
    "CACHE_EVICTION_MARGIN",
    "UNDEFINED_ASSET_TYPE",
]
