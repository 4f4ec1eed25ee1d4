"""elprisetjustnu.se API configuration."""

ELPRISER_BASE_URL = "https://www.elprisetjustnu.se/api/v1/prices"

# Seconds before an unanswered request is abandoned
REQUEST_TIMEOUT = 30

# Price column used from the API payload (EUR_per_kWh and EXR are ignored)
PRICE_FIELD = "SEK_per_kWh"
