from app.models.enums import FeeModel, QuoteStatus  # noqa: F401
from app.models.catalog import (  # noqa: F401
    EU_COUNTRIES,
    FEE_MODELS,
    LISTING_CURRENCIES,
    CountryVat,
    FeeModelInfo,
    get_country,
)
