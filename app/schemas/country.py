from __future__ import annotations

from pydantic import BaseModel

from app.schemas.common import BaseSchema


class CountryRead(BaseSchema):
    code: str
    name: str
    vat_rate: float


class CountryList(BaseModel):
    countries: list[CountryRead]
