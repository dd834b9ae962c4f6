# src/config/settings.py

import os

from src.config.env import APP_ENV

# --- Tokens ---
# Reward paid out to the user: Canton (CC). Position held in the farm: SEND on Base.
EARNED_TOKEN_SYMBOL = "CC"
EARNED_TOKEN_LABEL = "Canton"
EARNED_TOKEN_NAME = f"{EARNED_TOKEN_LABEL} ({EARNED_TOKEN_SYMBOL})"
HOLDING_TOKEN_SYMBOL = "SEND"

# --- Live price sources ---
# DexScreener - pair list for a token contract, first pair's priceUsd is used
SEND_TOKEN_CONTRACT = os.getenv(
    "SEND_TOKEN_CONTRACT", "0xEab49138BA2Ea6dd776220fE26b7b8E446638956"
)
DEXSCREENER_TOKENS_URL = "https://api.dexscreener.com/latest/dex/tokens"
# CoinGecko - simple price endpoint, {"<id>": {"usd": <price>}}
COINGECKO_SIMPLE_PRICE_URL = "https://api.coingecko.com/api/v3/simple/price"
CANTON_COINGECKO_ID = os.getenv("CANTON_COINGECKO_ID", "canton-network")

# Requests config
LIVE_DATA_REQUEST_TIMEOUT_S = float(os.getenv("LIVE_DATA_REQUEST_TIMEOUT_S", "10"))
LIVE_DATA_USER_AGENT = "SendRewardsCalculator/0.1"

# Shown once when either price could not be loaded
PRICE_ERROR_MESSAGE = (
    "Could not load live prices. You can still calculate in "
    f"{EARNED_TOKEN_SYMBOL} only."
)

# --- Projection calendar ---
# Fixed approximation, not calendar-accurate
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

# --- UI defaults ---
DEFAULT_FREQUENCY_MINUTES = 11
AMOUNT_STEP = 0.0001

DEV_DEFAULT_REWARD_AMOUNT = 3.5
DEV_DEFAULT_HOLDINGS = 500000

# Seconds between re-checks of the price pills while the one-shot fetch is pending
PRICE_PILL_REFRESH_S = 1.0

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if APP_ENV == "dev" else "INFO").upper()

# --- Footer credit ---
DEVELOPER_HANDLE = "/ocebot"
DEVELOPER_URL = "https://x.com/ocebotSend"
REFERRAL_URL = "https://send.app?referral=ocebot"
