import pytest

from src.core.live_data import PriceSnapshot
from src.core.projection import (
    CalculationInput,
    parse_input,
    project,
    projection_to_dataframe,
)


@pytest.fixture()
def base_input() -> CalculationInput:
    return CalculationInput(reward_amount_per_payout=3.5, payout_frequency_minutes=11)


@pytest.fixture()
def full_prices() -> PriceSnapshot:
    return PriceSnapshot(reward_token_price_usd=0.01, held_token_price_usd=0.05)


# --- native projection --------------------------------------------------------


def test_native_projection_without_prices(base_input: CalculationInput):
    result = project(base_input, PriceSnapshot())

    assert result.per_hour == pytest.approx(19.0909, rel=1e-5)
    assert result.per_day == pytest.approx(458.1818, rel=1e-5)
    assert result.per_month == pytest.approx(13745.45, rel=1e-5)
    assert result.per_year == pytest.approx(167236.36, rel=1e-5)
    assert result.usd is None
    assert result.apr is None
    assert result.usd_per_year is None
    assert result.apr_percent is None


@pytest.mark.parametrize(
    "amount, frequency",
    [(3.5, 11), (0.0, 1), (1.0, 0.5), (12345.6789, 60), (0.0001, 1440)],
)
def test_calendar_scaling_is_fixed(amount: float, frequency: float):
    result = project(
        CalculationInput(amount, frequency), PriceSnapshot(held_token_price_usd=2.0)
    )

    assert result.per_hour == pytest.approx(amount / frequency * 60)
    assert result.per_day == pytest.approx(result.per_hour * 24)
    assert result.per_month == pytest.approx(result.per_day * 30)
    assert result.per_year == pytest.approx(result.per_day * 365)


def test_zero_amount_is_zero_not_absent():
    result = project(
        CalculationInput(0.0, 11), PriceSnapshot(held_token_price_usd=0.05)
    )
    assert result.per_year == 0.0
    assert result.usd is not None
    assert result.usd.per_year == 0.0


# --- USD group ----------------------------------------------------------------


def test_usd_projection_with_cc_price(base_input: CalculationInput):
    result = project(base_input, PriceSnapshot(held_token_price_usd=0.05))

    assert result.usd is not None
    assert result.usd_per_hour == pytest.approx(result.per_hour * 0.05)
    assert result.usd_per_day == pytest.approx(result.per_day * 0.05)
    assert result.usd_per_month == pytest.approx(result.per_month * 0.05)
    assert result.usd_per_year == pytest.approx(8361.82, rel=1e-5)
    # no SEND price, no holdings
    assert result.apr is None


@pytest.mark.parametrize("cc_price", [None, 0.0, -0.05, float("nan"), float("inf")])
def test_usd_group_absent_for_unusable_cc_price(
    base_input: CalculationInput, cc_price
):
    result = project(base_input, PriceSnapshot(held_token_price_usd=cc_price))

    assert result.usd is None
    assert [
        result.usd_per_hour,
        result.usd_per_day,
        result.usd_per_month,
        result.usd_per_year,
    ] == [None, None, None, None]


def test_send_price_alone_does_not_produce_usd(base_input: CalculationInput):
    result = project(base_input, PriceSnapshot(reward_token_price_usd=0.01))
    assert result.usd is None


# --- APR group ----------------------------------------------------------------


def test_apr_with_holdings_and_both_prices(full_prices: PriceSnapshot):
    inputs = CalculationInput(3.5, 11, held_token_holdings=500_000)
    result = project(inputs, full_prices)

    assert result.apr is not None
    assert result.position_value_usd == pytest.approx(5000.0)
    assert result.apr_percent == pytest.approx(167.2364, rel=1e-5)
    assert result.apr_percent == pytest.approx(result.usd_per_year / 5000.0 * 100)


def test_apr_absent_without_holdings(
    base_input: CalculationInput, full_prices: PriceSnapshot
):
    result = project(base_input, full_prices)
    assert result.usd is not None
    assert result.apr is None
    assert result.position_value_usd is None


def test_apr_absent_without_send_price():
    inputs = CalculationInput(3.5, 11, held_token_holdings=500_000)
    result = project(inputs, PriceSnapshot(held_token_price_usd=0.05))
    assert result.usd is not None
    assert result.apr is None


def test_apr_absent_without_usd_projection():
    inputs = CalculationInput(3.5, 11, held_token_holdings=500_000)
    result = project(inputs, PriceSnapshot(reward_token_price_usd=0.01))
    assert result.usd is None
    assert result.apr is None


def test_apr_with_zero_reward_is_zero_percent(full_prices: PriceSnapshot):
    inputs = CalculationInput(0.0, 11, held_token_holdings=1000)
    result = project(inputs, full_prices)
    assert result.apr is not None
    assert result.apr_percent == 0.0


# --- end to end from raw form values -------------------------------------------


def test_zero_holdings_keeps_usd_but_drops_apr(full_prices: PriceSnapshot):
    inputs = parse_input("3.5", "11", "0")
    result = project(inputs, full_prices)

    assert result.usd is not None
    assert result.usd_per_year == pytest.approx(8361.82, rel=1e-5)
    assert result.apr is None


def test_raw_form_values_full_scenario(full_prices: PriceSnapshot):
    result = project(parse_input("3.5", "11", "500000"), full_prices)
    assert result.apr_percent == pytest.approx(167.24, abs=0.01)


# --- table view -----------------------------------------------------------------


def test_projection_table_with_usd(full_prices: PriceSnapshot):
    result = project(CalculationInput(3.5, 11), full_prices)
    df = projection_to_dataframe(result)

    assert list(df.columns) == ["Period", "CC", "USD"]
    assert list(df["Period"]) == [
        "Per hour",
        "Per day",
        "Per month (30 days)",
        "Per year (365 days)",
    ]
    assert df["CC"].iloc[3] == pytest.approx(result.per_year)
    assert df["USD"].iloc[3] == pytest.approx(result.usd_per_year)


def test_projection_table_without_usd():
    result = project(CalculationInput(3.5, 11), PriceSnapshot())
    df = projection_to_dataframe(result)
    assert list(df.columns) == ["Period", "CC"]
