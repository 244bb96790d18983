from __future__ import annotations

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.fee_service import FeeService


def get_fee_service(settings: Settings = Depends(get_settings)) -> FeeService:
    return FeeService(settings)
