from __future__ import annotations

from enum import Enum


class FeeModel(str, Enum):
    VAT_ON_TOP = "vat_on_top"
    HIGHER_VAT_INCLUDED = "higher_vat_included"
    FLAT_MINIMUM = "flat_minimum"
    TIERED = "tiered"


class QuoteStatus(str, Enum):
    OK = "ok"
    INVALID = "invalid"
