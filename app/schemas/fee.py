from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.enums import FeeModel, QuoteStatus
from app.schemas.common import BaseSchema


class FeeInput(BaseModel):
    car_price: float | None = None
    vat_rate: float | None = None
    currency: str | None = None
    fee_model: str | None = None
    country: str | None = Field(default=None, description="Used for the VAT rate when vat_rate is omitted.")


class FeeCompareInput(BaseModel):
    car_price: float | None = None
    vat_rate: float | None = None
    currency: str | None = None
    country: str | None = None


class FeeResultRead(BaseSchema):
    car_price: float
    vat_rate: float
    currency: str
    fee_model: FeeModel
    net_fee: float
    vat_on_fee: float
    total_customer_pays: float
    business_keeps: float
    fee_model_description: str


class FeeQuoteResponse(BaseModel):
    status: QuoteStatus
    errors: list[str] = Field(default_factory=list)
    result: FeeResultRead | None = None
    formatted: dict[str, str] | None = None
    warnings: list[str] = Field(default_factory=list)


class FeeCompareResponse(BaseModel):
    quotes: list[FeeQuoteResponse]


class FeeValidationResponse(BaseModel):
    errors: list[str]


class FeeModelRead(BaseSchema):
    id: FeeModel
    name: str
    description: str
    icon: str


class FeeModelList(BaseModel):
    models: list[FeeModelRead]


class CurrencyList(BaseModel):
    currencies: list[str]


class FormattedAmount(BaseModel):
    amount: float
    currency: str
    formatted: str
