from __future__ import annotations

from typing import Dict, Optional
from pydantic import BaseModel, Field

from .rules import FuzzyLabel


class AgeResponse(BaseModel):
    age: str
    # NaN is not valid JSON, blank ages come back as null
    months: Optional[float] = Field(default=None, examples=[42.0])


class FuzzyResponse(BaseModel):
    fuzzy_value: FuzzyLabel
    config_key: str


class PercentileResponse(FuzzyResponse):
    value: int


class DeviationResponse(FuzzyResponse):
    value: float


class ConfigKeysResponse(BaseModel):
    config_keys: Dict[FuzzyLabel, str] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    ok: bool = True
