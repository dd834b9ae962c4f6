# src/core/price_feed.py
"""
One-shot live price feed.

The price fetch runs exactly once, on a background worker, so the calculator
stays usable while prices load (or after they fail). Once the fetch finishes
its PriceFetchResult is published and never changes again.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Callable, Optional

from src.config import settings
from src.core.live_data import PriceFetchResult, PriceSnapshot, fetch_prices

logger = logging.getLogger(__name__)


class PriceState(str, Enum):
    LOADING = "loading"
    UNAVAILABLE = "unavailable"
    AVAILABLE = "available"


class PriceFeed:
    """Holds the single in-flight (or finished) price fetch for a session."""

    def __init__(self, fetcher: Callable[[], PriceFetchResult] = fetch_prices):
        self._fetcher = fetcher
        self._executor: Optional[ThreadPoolExecutor] = None
        self._future: Optional[Future] = None

    def start(self) -> None:
        """Kick off the fetch; calling again after the first time is a no-op."""
        if self._future is not None:
            return
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="price-feed"
        )
        self._future = self._executor.submit(self._fetcher)
        # Worker thread exits once the single task is done
        self._executor.shutdown(wait=False)
        logger.debug("Live price fetch started")

    @property
    def is_loading(self) -> bool:
        return self._future is not None and not self._future.done()

    def result(self) -> Optional[PriceFetchResult]:
        """Return the published result, or None while the fetch is pending."""
        if self._future is None or not self._future.done():
            return None
        try:
            return self._future.result()
        except Exception as exc:  # noqa: BLE001
            # fetch_prices() handles its own failures; this covers a bad fetcher
            logger.error("Unexpected error while loading prices: %s", exc)
            return PriceFetchResult(
                snapshot=PriceSnapshot(), error=settings.PRICE_ERROR_MESSAGE
            )

    def snapshot(self) -> PriceSnapshot:
        """Latest known prices; empty until the fetch has finished."""
        result = self.result()
        return result.snapshot if result is not None else PriceSnapshot()

    def error(self) -> Optional[str]:
        result = self.result()
        return result.error if result is not None else None

    def state_of(self, price: Optional[float]) -> PriceState:
        """Tri-state for one price: loading, unavailable, or a known value."""
        if price is not None:
            return PriceState.AVAILABLE
        if self.is_loading:
            return PriceState.LOADING
        return PriceState.UNAVAILABLE
