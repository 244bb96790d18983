import math

import pytest

from app.models.enums import FeeModel
from app.services.fee_calculator import validate_fee_input

ALL_ERRORS = [
    "Car price must be greater than 0",
    "VAT rate must be between 0 and 100",
    "Currency must be a valid 3-letter code",
    "Please select a valid fee model",
]


def _valid(**overrides):
    data = {"car_price": 100_000, "vat_rate": 25, "currency": "EUR", "fee_model": "tiered"}
    data.update(overrides)
    return data


def test_empty_input_reports_every_field():
    assert validate_fee_input({}) == ALL_ERRORS


def test_complete_input_has_no_errors():
    assert validate_fee_input(_valid()) == []


def test_enum_fee_model_is_accepted():
    assert validate_fee_input(_valid(fee_model=FeeModel.FLAT_MINIMUM)) == []


@pytest.mark.parametrize("car_price", [0, -1, None, "250000", math.nan, math.inf, -math.inf, True])
def test_bad_car_price(car_price):
    assert validate_fee_input(_valid(car_price=car_price)) == ["Car price must be greater than 0"]


@pytest.mark.parametrize("vat_rate", [0, 100, 7.7])
def test_vat_rate_bounds_are_inclusive(vat_rate):
    assert validate_fee_input(_valid(vat_rate=vat_rate)) == []


@pytest.mark.parametrize("vat_rate", [-0.5, 100.01, None, "25", math.nan, math.inf])
def test_bad_vat_rate(vat_rate):
    assert validate_fee_input(_valid(vat_rate=vat_rate)) == ["VAT rate must be between 0 and 100"]


@pytest.mark.parametrize("currency", ["EU", "EURO", "", None, 978])
def test_bad_currency(currency):
    assert validate_fee_input(_valid(currency=currency)) == ["Currency must be a valid 3-letter code"]


def test_currency_is_not_checked_against_iso_list():
    assert validate_fee_input(_valid(currency="QQQ")) == []


@pytest.mark.parametrize("fee_model", ["premium", "", None, "TIERED"])
def test_bad_fee_model(fee_model):
    assert validate_fee_input(_valid(fee_model=fee_model)) == ["Please select a valid fee model"]
