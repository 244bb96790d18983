from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.models.catalog import EU_COUNTRIES, get_country
from app.schemas.country import CountryList, CountryRead

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=CountryList)
async def list_countries():
    return CountryList(countries=[CountryRead.model_validate(c) for c in EU_COUNTRIES])


@router.get("/{code}", response_model=CountryRead)
async def get_country_vat(code: str):
    country = get_country(code)
    if not country:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Country not found")
    return CountryRead.model_validate(country)
