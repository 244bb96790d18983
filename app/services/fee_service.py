from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from babel.numbers import UnknownCurrencyError

from app.core.config import Settings, get_settings
from app.core.logging import get_logger
from app.models.catalog import FEE_MODELS, get_country
from app.models.enums import FeeModel, QuoteStatus
from app.services.currency import format_currency
from app.services.fee_calculator import (
    FeeCalculationInput,
    FeeCalculationResult,
    calculate_service_fee,
    validate_fee_input,
)

logger = get_logger()

FORMATTED_FIELDS = ("car_price", "net_fee", "vat_on_fee", "total_customer_pays", "business_keeps")


@dataclass
class FeeQuote:
    status: QuoteStatus
    errors: list[str]
    result: FeeCalculationResult | None
    formatted: dict[str, str] | None = None
    warnings: list[str] = field(default_factory=list)


class FeeService:
    """Validate-then-calculate flow used by the seller dashboard.

    The engine functions stay independent; this class only decides when to
    call them and adds display formatting.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def resolve_vat_rate(self, vat_rate: Any, country: str | None) -> Any:
        if vat_rate is not None:
            return vat_rate
        if country is None:
            country = self.settings.default_country
        entry = get_country(country)
        return entry.vat_rate if entry else None

    def quote(
        self,
        car_price: Any = None,
        vat_rate: Any = None,
        currency: Any = None,
        fee_model: Any = None,
        country: str | None = None,
    ) -> FeeQuote:
        partial = {
            "car_price": car_price,
            "vat_rate": self.resolve_vat_rate(vat_rate, country),
            "currency": currency,
            "fee_model": fee_model,
        }
        errors = validate_fee_input(partial)
        if errors:
            logger.info("fee_input_invalid", errors=errors, fee_model=fee_model)
            return FeeQuote(status=QuoteStatus.INVALID, errors=errors, result=None)

        result = calculate_service_fee(
            FeeCalculationInput(
                car_price=partial["car_price"],
                vat_rate=partial["vat_rate"],
                currency=partial["currency"],
                fee_model=FeeModel(partial["fee_model"]),
            )
        )
        formatted, warnings = self._format(result)
        logger.info(
            "fee_calculated",
            fee_model=result.fee_model.value,
            currency=result.currency,
            net_fee=result.net_fee,
            total_customer_pays=result.total_customer_pays,
        )
        return FeeQuote(
            status=QuoteStatus.OK,
            errors=[],
            result=result,
            formatted=formatted,
            warnings=warnings,
        )

    def compare(
        self,
        car_price: Any = None,
        vat_rate: Any = None,
        currency: Any = None,
        country: str | None = None,
    ) -> list[FeeQuote]:
        return [
            self.quote(
                car_price=car_price,
                vat_rate=vat_rate,
                currency=currency,
                fee_model=model,
                country=country,
            )
            for model in FEE_MODELS
        ]

    def _format(self, result: FeeCalculationResult) -> tuple[dict[str, str] | None, list[str]]:
        try:
            formatted = {
                name: format_currency(getattr(result, name), result.currency, self.settings.display_locale)
                for name in FORMATTED_FIELDS
            }
        except UnknownCurrencyError:
            logger.warning("fee_format_failed", currency=result.currency)
            return None, [f"Currency {result.currency} is not recognised; amounts are not formatted."]
        return formatted, []
