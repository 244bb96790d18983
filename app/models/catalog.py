from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from app.models.enums import FeeModel


@dataclass(frozen=True)
class FeeModelInfo:
    id: FeeModel
    name: str
    description: str
    icon: str


@dataclass(frozen=True)
class CountryVat:
    code: str
    name: str
    vat_rate: float


FEE_MODELS: MappingProxyType[FeeModel, FeeModelInfo] = MappingProxyType(
    {
        FeeModel.VAT_ON_TOP: FeeModelInfo(
            id=FeeModel.VAT_ON_TOP,
            name="Add VAT on Top",
            description="1% of car price + VAT",
            icon="📊",
        ),
        FeeModel.HIGHER_VAT_INCLUDED: FeeModelInfo(
            id=FeeModel.HIGHER_VAT_INCLUDED,
            name="Higher % VAT-Included",
            description="1.25% if VAT ≤25%, 1.50% if VAT >25%",
            icon="📈",
        ),
        FeeModel.FLAT_MINIMUM: FeeModelInfo(
            id=FeeModel.FLAT_MINIMUM,
            name="Flat Minimum",
            description="1% of price, minimum €30,000",
            icon="💰",
        ),
        FeeModel.TIERED: FeeModelInfo(
            id=FeeModel.TIERED,
            name="Tiered System",
            description="1.5% for <1M, 1.25% for 1–3M, 1% for >3M",
            icon="🎯",
        ),
    }
)

# Standard VAT rates offered when a seller picks a country instead of typing a rate.
EU_COUNTRIES: tuple[CountryVat, ...] = (
    CountryVat("SE", "Sweden", 25),
    CountryVat("DE", "Germany", 19),
    CountryVat("FR", "France", 20),
    CountryVat("IT", "Italy", 22),
    CountryVat("ES", "Spain", 21),
    CountryVat("NL", "Netherlands", 21),
    CountryVat("BE", "Belgium", 21),
    CountryVat("AT", "Austria", 20),
    CountryVat("DK", "Denmark", 25),
    CountryVat("FI", "Finland", 24),
    CountryVat("NO", "Norway", 25),
    CountryVat("CH", "Switzerland", 7.7),
    CountryVat("PL", "Poland", 23),
    CountryVat("CZ", "Czech Republic", 21),
    CountryVat("HU", "Hungary", 27),
    CountryVat("RO", "Romania", 19),
    CountryVat("BG", "Bulgaria", 20),
    CountryVat("HR", "Croatia", 25),
    CountryVat("SI", "Slovenia", 22),
    CountryVat("SK", "Slovakia", 20),
    CountryVat("LT", "Lithuania", 21),
    CountryVat("LV", "Latvia", 21),
    CountryVat("EE", "Estonia", 20),
    CountryVat("IE", "Ireland", 23),
    CountryVat("PT", "Portugal", 23),
    CountryVat("GR", "Greece", 24),
    CountryVat("CY", "Cyprus", 19),
    CountryVat("MT", "Malta", 18),
    CountryVat("LU", "Luxembourg", 17),
)

LISTING_CURRENCIES: tuple[str, ...] = ("EUR", "USD", "GBP", "AED")

_COUNTRIES_BY_CODE = MappingProxyType({c.code: c for c in EU_COUNTRIES})


def get_country(code: str | None) -> CountryVat | None:
    if not code:
        return None
    return _COUNTRIES_BY_CODE.get(code.strip().upper())
