"""
Dashboard API data models.
"""

from typing import Union
from pydantic import BaseModel, Field


class CurrencyInfo(BaseModel):
    """A currency and its vertex id"""
    id: int
    code: str


class RateCreate(BaseModel):
    """Enter (or update) the rate for a currency pair"""
    base: Union[int, str] = Field(..., description="Currency code or vertex id sold")
    quote: Union[int, str] = Field(..., description="Currency code or vertex id received")
    rate: float = Field(..., description="Units of quote per 1 unit of base")
