import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# =============================================================================
# Market
# =============================================================================

# Swedish bidding areas served by the price API
VALID_ZONES = ("SE1", "SE2", "SE3", "SE4")
DEFAULT_ZONE = os.getenv("SPOTPRIS_ZONE", "SE3").upper()

# Timestamps are reported and days are cut in the market's local time
MARKET_TIMEZONE = "Europe/Stockholm"

# =============================================================================
# Analysis and display
# =============================================================================

# Charging windows reported when --charging is not given
DEFAULT_WINDOW_HOURS = (2, 4, 8)

# SEK/kWh -> öre/kWh
DISPLAY_SCALE = 100
DISPLAY_UNIT = "öre/kWh"
TOTAL_UNIT = "öre"
DECIMAL_SEPARATOR = os.getenv("SPOTPRIS_DECIMAL_SEPARATOR", ",")

TIME_FORMAT = "%H:%M"
