import pytest

from src.config import settings
from src.config.env import ENV_DEV, ENV_PROD
from src.core.projection import parse_input
from src.ui.calculator_form import FIELD_RULES, form_defaults


def test_amount_field_is_a_non_negative_four_decimal_number():
    rules = FIELD_RULES["reward_amount"]

    assert rules["min_value"] == 0.0
    assert rules["step"] == pytest.approx(0.0001)
    assert rules["format"] == "%.4f"


def test_frequency_field_is_a_whole_number_of_at_least_one_minute():
    assert FIELD_RULES["frequency_minutes"] == {"min_value": 1, "step": 1}


def test_holdings_field_is_a_non_negative_whole_number():
    assert FIELD_RULES["holdings"] == {"min_value": 0, "step": 1}


def test_prod_defaults_leave_amount_and_holdings_empty():
    defaults = form_defaults(ENV_PROD)

    assert defaults["reward_amount"] is None
    assert defaults["holdings"] is None
    assert defaults["frequency_minutes"] == settings.DEFAULT_FREQUENCY_MINUTES


def test_dev_defaults_prefill_the_form():
    defaults = form_defaults(ENV_DEV)

    assert defaults["reward_amount"] == settings.DEV_DEFAULT_REWARD_AMOUNT
    assert defaults["holdings"] == settings.DEV_DEFAULT_HOLDINGS


def test_dev_defaults_parse_into_a_full_input():
    defaults = form_defaults(ENV_DEV)
    inputs = parse_input(
        defaults["reward_amount"],
        defaults["frequency_minutes"],
        defaults["holdings"],
    )

    assert inputs.reward_amount_per_payout == 3.5
    assert inputs.payout_frequency_minutes == 11.0
    assert inputs.held_token_holdings == 500000.0
