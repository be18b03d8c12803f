"""Card field rules: required-field order, blank detection, update picking, id parsing."""

import pytest

from card_assistant.core.card_fields import (
    REQUIRED_CARD_FIELDS, find_blanked_field, find_missing_field, is_blank, normalize_term,
    parse_card_id, pick_updates,
)

COMPLETE = {
    "issuer": "HSBC", "card_name": "Red", "spend_category": "Online", "reward_value": "4%",
}


def test_required_fields_order():
    assert REQUIRED_CARD_FIELDS == ("issuer", "card_name", "spend_category", "reward_value")


def test_complete_payload_has_no_missing_field():
    assert find_missing_field(COMPLETE) is None


def test_first_missing_field_is_reported():
    assert find_missing_field({"reward_value": "1%"}) == "issuer"
    assert find_missing_field({**COMPLETE, "spend_category": "", "reward_value": None}) == "spend_category"


@pytest.mark.parametrize("value", [None, "", "   ", "\n"])
def test_blank_values(value):
    assert is_blank(value)


@pytest.mark.parametrize("value", [0, 0.0, False, "0", "x"])
def test_non_blank_values(value):
    assert not is_blank(value)


def test_zero_reward_value_is_present():
    assert find_missing_field({**COMPLETE, "reward_value": 0}) is None


def test_pick_updates_keeps_only_card_columns():
    picked = pick_updates({"region": "Local", "id": 3, "created_at": "x", "issuer": "BOC"})
    assert picked == {"region": "Local", "issuer": "BOC"}


def test_normalize_term():
    assert normalize_term(None) is None
    assert normalize_term("   ") is None
    assert normalize_term(" Dining ") == "Dining"


@pytest.mark.parametrize(
    "raw, expected",
    [("12", 12), (" 7 ", 7), ("abc", None), ("-1", None), ("1.5", None), ("", None), ("²", None), ("0", None), ("2147483647", 2147483647), ("2147483648", None), ("99999999999999999999", None)],
)
def test_parse_card_id(raw, expected):
    assert parse_card_id(raw) == expected


def test_blanked_field_only_checks_fields_sent():
    assert find_blanked_field({"reward_value": "8%"}) is None
    assert find_blanked_field({"region": None}) is None
    assert find_blanked_field({"card_name": " ", "issuer": None}) == "issuer"
