# src/core/live_data.py
from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import requests

from src.config import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# Data model
# ---------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PriceSnapshot:
    """
    USD prices used for every fiat derivation, fetched once per session.

    - reward_token_price_usd: SEND quote from the DexScreener pair list,
      used to value the user's holdings for APR.
    - held_token_price_usd: CC quote from CoinGecko, used to convert the
      projected CC output to USD.

    Each value is either a positive finite float or None (unknown).
    """

    reward_token_price_usd: Optional[float] = None
    held_token_price_usd: Optional[float] = None


@dataclass(frozen=True, slots=True)
class PriceFetchResult:
    snapshot: PriceSnapshot
    error: Optional[str] = None
    as_of_utc: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class LiveDataError(RuntimeError):
    """Raised when a single live price cannot be fetched."""


def positive_number(value) -> Optional[float]:
    """Return value as a float if it is a positive finite number, else None."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def _get_json(url: str, params: Optional[dict] = None):
    try:
        resp = requests.get(
            url,
            params=params,
            headers={"User-Agent": settings.LIVE_DATA_USER_AGENT},
            timeout=settings.LIVE_DATA_REQUEST_TIMEOUT_S,
        )
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise LiveDataError(f"Request to {url} failed: {exc}") from exc


def _fetch_send_price_usd() -> Optional[float]:
    """
    Fetch the SEND price in USD from DexScreener.

    The payload lists trading pairs for the token contract; the first pair's
    priceUsd is taken as the current price. An empty list or a non-positive
    quote leaves the price unknown without counting as a failure.
    """
    data = _get_json(
        f"{settings.DEXSCREENER_TOKENS_URL}/{settings.SEND_TOKEN_CONTRACT}"
    )
    if not isinstance(data, dict):
        raise LiveDataError(f"Unexpected payload from DexScreener: {data!r}")

    pairs = data.get("pairs") or []
    if not isinstance(pairs, list):
        raise LiveDataError(f"Unexpected pairs field from DexScreener: {pairs!r}")
    if not pairs or not isinstance(pairs[0], dict):
        return None
    return positive_number(pairs[0].get("priceUsd"))


def _fetch_canton_price_usd() -> Optional[float]:
    """Fetch the Canton (CC) price in USD from CoinGecko's simple price API."""
    coin_id = settings.CANTON_COINGECKO_ID
    data = _get_json(
        settings.COINGECKO_SIMPLE_PRICE_URL,
        params={"ids": coin_id, "vs_currencies": "usd"},
    )
    try:
        quote = data[coin_id]["usd"]
    except (KeyError, TypeError) as exc:
        raise LiveDataError(
            f"Unexpected price payload from CoinGecko: {data!r}"
        ) from exc
    return positive_number(quote)


def _run_fetcher(name: str, fetcher) -> tuple[Optional[float], bool]:
    """Run one fetcher, returning (price, failed)."""
    try:
        price = fetcher()
    except LiveDataError as exc:
        logger.warning("Could not load %s price: %s", name, exc)
        return None, True

    if price is None:
        logger.info("%s price unavailable from source", name)
    else:
        logger.info("%s price: $%.6f", name, price)
    return price, False


# ---------------------------------------------------------
# Public API
# ---------------------------------------------------------


def fetch_prices() -> PriceFetchResult:
    """
    Fetch both USD prices in a single best-effort pass.

    The two sources are independent: one failing leaves only its own price
    unknown. Any failure sets a single human-readable advisory on the result.
    Never raises for network or payload problems.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        send_future = pool.submit(
            _run_fetcher, settings.HOLDING_TOKEN_SYMBOL, _fetch_send_price_usd
        )
        canton_future = pool.submit(
            _run_fetcher, settings.EARNED_TOKEN_SYMBOL, _fetch_canton_price_usd
        )
        send_price, send_failed = send_future.result()
        canton_price, canton_failed = canton_future.result()

    error = settings.PRICE_ERROR_MESSAGE if (send_failed or canton_failed) else None

    return PriceFetchResult(
        snapshot=PriceSnapshot(
            reward_token_price_usd=send_price,
            held_token_price_usd=canton_price,
        ),
        error=error,
    )
