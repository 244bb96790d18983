from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping

from app.models.catalog import FEE_MODELS
from app.models.enums import FeeModel

BASE_RATE = 0.01
HIGHER_VAT_THRESHOLD = 25
HIGHER_VAT_LOW_RATE = 0.0125
HIGHER_VAT_HIGH_RATE = 0.015
FLAT_MINIMUM_FEE = 30000
TIER_LOWER_BOUND = 1_000_000
TIER_UPPER_BOUND = 3_000_000
TIER_RATES = (0.015, 0.0125, 0.01)

UNKNOWN_MODEL_DESCRIPTION = "Unknown model"


@dataclass(frozen=True)
class FeeCalculationInput:
    car_price: float
    vat_rate: float
    currency: str
    fee_model: FeeModel | str


@dataclass(frozen=True)
class FeeCalculationResult:
    car_price: float
    vat_rate: float
    currency: str
    fee_model: FeeModel | str
    net_fee: float
    vat_on_fee: float
    total_customer_pays: float
    business_keeps: float
    fee_model_description: str


def parse_fee_model(value: Any) -> FeeModel | None:
    if isinstance(value, FeeModel):
        return value
    if not isinstance(value, str):
        return None
    try:
        return FeeModel(value)
    except ValueError:
        return None


def _tier_rate(car_price: float) -> tuple[float, str]:
    if car_price < TIER_LOWER_BOUND:
        return TIER_RATES[0], "<1M"
    if car_price <= TIER_UPPER_BOUND:
        return TIER_RATES[1], "1-3M"
    return TIER_RATES[2], ">3M"


def _net_fee(model: FeeModel | None, car_price: float, vat_rate: float) -> tuple[float, str]:
    if model is FeeModel.VAT_ON_TOP:
        return car_price * BASE_RATE, "1% of car price + VAT"
    if model is FeeModel.HIGHER_VAT_INCLUDED:
        low = vat_rate <= HIGHER_VAT_THRESHOLD
        rate = HIGHER_VAT_LOW_RATE if low else HIGHER_VAT_HIGH_RATE
        return car_price * rate, f"{rate * 100:.2f}% of car price (VAT {'≤' if low else '>'}25%)"
    if model is FeeModel.FLAT_MINIMUM:
        return float(max(car_price * BASE_RATE, FLAT_MINIMUM_FEE)), "1% of price, minimum €30,000"
    if model is FeeModel.TIERED:
        rate, bracket = _tier_rate(car_price)
        return car_price * rate, f"{rate * 100:.2f}% ({bracket})"
    return 0.0, UNKNOWN_MODEL_DESCRIPTION


def calculate_service_fee(fee_input: FeeCalculationInput) -> FeeCalculationResult:
    """Compute the service fee breakdown for a single listing.

    Never raises for numeric input: validation is a separate step
    (see ``validate_fee_input``), and an unrecognised fee model yields a
    zero fee described as ``"Unknown model"``. No currency conversion or
    rounding is applied; the flat minimum is in the listing's own unit.
    """
    net_fee, description = _net_fee(
        parse_fee_model(fee_input.fee_model),
        fee_input.car_price,
        fee_input.vat_rate,
    )
    vat_on_fee = net_fee * fee_input.vat_rate / 100
    return FeeCalculationResult(
        car_price=fee_input.car_price,
        vat_rate=fee_input.vat_rate,
        currency=fee_input.currency,
        fee_model=fee_input.fee_model,
        net_fee=net_fee,
        vat_on_fee=vat_on_fee,
        total_customer_pays=net_fee + vat_on_fee,
        business_keeps=net_fee,
        fee_model_description=description,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_fee_input(partial: Mapping[str, Any]) -> list[str]:
    """Return human readable problems with a (possibly partial) fee input.

    Keys are ``car_price``, ``vat_rate``, ``currency`` and ``fee_model``.
    An empty list means the input is complete and in range.
    """
    errors: list[str] = []

    car_price = partial.get("car_price")
    if not _is_number(car_price) or car_price <= 0:
        errors.append("Car price must be greater than 0")

    vat_rate = partial.get("vat_rate")
    if not _is_number(vat_rate) or vat_rate < 0 or vat_rate > 100:
        errors.append("VAT rate must be between 0 and 100")

    currency = partial.get("currency")
    if not isinstance(currency, str) or len(currency) != 3:
        errors.append("Currency must be a valid 3-letter code")

    if parse_fee_model(partial.get("fee_model")) not in FEE_MODELS:
        errors.append("Please select a valid fee model")

    return errors
