# src/core/projection.py
"""
Reward projection engine

- Native output scales a per-minute rate (reward / payout frequency) to an
  hour, a day, a 30-day month and a 365-day year.
- USD figures are attached as a group only when the CC price is known.
- APR compares projected USD per year with the USD value of the SEND
  position, and is attached only when every input it needs is known.

Everything here is pure: no I/O, no state.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from src.config import settings
from src.core.live_data import PriceSnapshot, positive_number


class InputValidationError(ValueError):
    """Raised when raw form input cannot produce a projection."""


@dataclass(frozen=True)
class CalculationInput:
    reward_amount_per_payout: float  # tokens per payout, >= 0
    payout_frequency_minutes: float  # > 0
    held_token_holdings: Optional[float] = None  # None when absent


@dataclass(frozen=True)
class UsdProjection:
    per_hour: float
    per_day: float
    per_month: float
    per_year: float


@dataclass(frozen=True)
class AprEstimate:
    apr_percent: float
    position_value_usd: float


@dataclass(frozen=True)
class ProjectionResult:
    """
    Native-unit projection plus the optional USD and APR groups.

    A group that could not be derived is None, never zero, so callers can
    tell "unknown" apart from "zero".
    """

    per_hour: float
    per_day: float
    per_month: float
    per_year: float
    usd: Optional[UsdProjection] = None
    apr: Optional[AprEstimate] = None

    @property
    def usd_per_hour(self) -> Optional[float]:
        return self.usd.per_hour if self.usd else None

    @property
    def usd_per_day(self) -> Optional[float]:
        return self.usd.per_day if self.usd else None

    @property
    def usd_per_month(self) -> Optional[float]:
        return self.usd.per_month if self.usd else None

    @property
    def usd_per_year(self) -> Optional[float]:
        return self.usd.per_year if self.usd else None

    @property
    def apr_percent(self) -> Optional[float]:
        return self.apr.apr_percent if self.apr else None

    @property
    def position_value_usd(self) -> Optional[float]:
        return self.apr.position_value_usd if self.apr else None


# ---------------------------------------------------------
# Input parsing
# ---------------------------------------------------------


def _parse_number(raw) -> Optional[float]:
    """Locale-neutral decimal parse ("3.5" ok, "3,5" not); None if malformed."""
    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = float(raw)
    else:
        text = str(raw).strip()
        # float() accepts digit separators ("1_000"); user input may not use them
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def parse_input(raw_amount, raw_frequency, raw_holdings=None) -> CalculationInput:
    """
    Turn raw form values into a validated CalculationInput.

    Raises InputValidationError if the amount or frequency is not a number,
    if the frequency is <= 0, or if the amount is negative. Holdings that are
    blank, malformed or not positive are treated as absent.
    """
    amount = _parse_number(raw_amount)
    frequency = _parse_number(raw_frequency)

    if amount is None:
        raise InputValidationError(f"Reward amount is not a number: {raw_amount!r}")
    if frequency is None:
        raise InputValidationError(f"Frequency is not a number: {raw_frequency!r}")
    if frequency <= 0:
        raise InputValidationError("Frequency must be greater than zero")
    if amount < 0:
        raise InputValidationError("Reward amount cannot be negative")

    holdings = _parse_number(raw_holdings)
    if holdings is not None and holdings <= 0:
        holdings = None

    return CalculationInput(
        reward_amount_per_payout=amount,
        payout_frequency_minutes=frequency,
        held_token_holdings=holdings,
    )


# ---------------------------------------------------------
# Projection
# ---------------------------------------------------------


def project(inputs: CalculationInput, prices: PriceSnapshot) -> ProjectionResult:
    """
    Project native output over fixed periods and attach USD / APR when possible.

    Requires payout_frequency_minutes > 0 (enforced by parse_input).
    """
    per_minute = inputs.reward_amount_per_payout / inputs.payout_frequency_minutes
    per_hour = per_minute * settings.MINUTES_PER_HOUR
    per_day = per_hour * settings.HOURS_PER_DAY
    per_month = per_day * settings.DAYS_PER_MONTH
    per_year = per_day * settings.DAYS_PER_YEAR

    usd: Optional[UsdProjection] = None
    cc_price = positive_number(prices.held_token_price_usd)
    if cc_price is not None:
        usd = UsdProjection(
            per_hour=per_hour * cc_price,
            per_day=per_day * cc_price,
            per_month=per_month * cc_price,
            per_year=per_year * cc_price,
        )

    apr: Optional[AprEstimate] = None
    holdings = positive_number(inputs.held_token_holdings)
    send_price = positive_number(prices.reward_token_price_usd)
    if holdings is not None and send_price is not None and usd is not None:
        position_value_usd = holdings * send_price
        if position_value_usd > 0:
            apr = AprEstimate(
                apr_percent=(usd.per_year / position_value_usd) * 100,
                position_value_usd=position_value_usd,
            )

    return ProjectionResult(
        per_hour=per_hour,
        per_day=per_day,
        per_month=per_month,
        per_year=per_year,
        usd=usd,
        apr=apr,
    )


def projection_to_dataframe(result: ProjectionResult) -> pd.DataFrame:
    """
    One row per period. The USD column only exists when the USD group does.
    """
    token = settings.EARNED_TOKEN_SYMBOL
    data = {
        "Period": [
            "Per hour",
            "Per day",
            f"Per month ({settings.DAYS_PER_MONTH} days)",
            f"Per year ({settings.DAYS_PER_YEAR} days)",
        ],
        token: [result.per_hour, result.per_day, result.per_month, result.per_year],
    }
    if result.usd is not None:
        data["USD"] = [
            result.usd.per_hour,
            result.usd.per_day,
            result.usd.per_month,
            result.usd.per_year,
        ]
    return pd.DataFrame(data)
