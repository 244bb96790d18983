from __future__ import annotations

import math

from babel.numbers import UnknownCurrencyError
from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import Settings, get_settings
from app.core.deps import get_fee_service
from app.models.catalog import FEE_MODELS, LISTING_CURRENCIES
from app.schemas.fee import (
    CurrencyList,
    FeeCompareInput,
    FeeCompareResponse,
    FeeInput,
    FeeModelList,
    FeeModelRead,
    FeeQuoteResponse,
    FeeResultRead,
    FeeValidationResponse,
    FormattedAmount,
)
from app.services.currency import format_currency
from app.services.fee_calculator import validate_fee_input
from app.services.fee_service import FeeQuote, FeeService

router = APIRouter(prefix="/fees", tags=["fees"])


def _quote_response(quote: FeeQuote) -> FeeQuoteResponse:
    return FeeQuoteResponse(
        status=quote.status,
        errors=quote.errors,
        result=FeeResultRead.model_validate(quote.result) if quote.result else None,
        formatted=quote.formatted,
        warnings=quote.warnings,
    )


@router.get("/models", response_model=FeeModelList)
async def list_fee_models():
    return FeeModelList(models=[FeeModelRead.model_validate(info) for info in FEE_MODELS.values()])


@router.get("/currencies", response_model=CurrencyList)
async def list_currencies():
    return CurrencyList(currencies=list(LISTING_CURRENCIES))


@router.post("/validate", response_model=FeeValidationResponse)
async def validate(payload: FeeInput, service: FeeService = Depends(get_fee_service)):
    partial = payload.model_dump(exclude={"country"})
    partial["vat_rate"] = service.resolve_vat_rate(payload.vat_rate, payload.country)
    return FeeValidationResponse(errors=validate_fee_input(partial))


@router.post("/calculate", response_model=FeeQuoteResponse)
async def calculate(payload: FeeInput, service: FeeService = Depends(get_fee_service)):
    quote = service.quote(
        car_price=payload.car_price,
        vat_rate=payload.vat_rate,
        currency=payload.currency,
        fee_model=payload.fee_model,
        country=payload.country,
    )
    return _quote_response(quote)


@router.post("/compare", response_model=FeeCompareResponse)
async def compare(payload: FeeCompareInput, service: FeeService = Depends(get_fee_service)):
    quotes = service.compare(
        car_price=payload.car_price,
        vat_rate=payload.vat_rate,
        currency=payload.currency,
        country=payload.country,
    )
    return FeeCompareResponse(quotes=[_quote_response(q) for q in quotes])


@router.get("/format", response_model=FormattedAmount)
async def format_amount(amount: float, currency: str, settings: Settings = Depends(get_settings)):
    if not math.isfinite(amount):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Amount must be a finite number")
    try:
        formatted = format_currency(amount, currency, settings.display_locale)
    except UnknownCurrencyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown currency: {currency}") from exc
    return FormattedAmount(amount=amount, currency=currency.strip().upper(), formatted=formatted)
