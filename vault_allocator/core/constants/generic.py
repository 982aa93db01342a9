"""Generic constants for vault allocation.

These constants are protocol-agnostic and shared by the planner, the risk
classifier and the listing helpers.
"""

# Percentage schedule by selection order: 1st, 2nd, then every further vault
LEADING_PERCENTAGES = (50, 30)
TAIL_PERCENTAGE = 20

# External risk score bands (0-10, higher is safer)
LOW_RISK_MIN_SCORE = 8
HIGH_RISK_MAX_SCORE = 4

# APY bands (percent) used when no risk score is available
LOW_RISK_MAX_APY = 5.0
HIGH_RISK_MIN_APY = 15.0

# Listing defaults
DEFAULT_NUM_VAULTS = 3
DEFAULT_PAGE_SIZE = 10
