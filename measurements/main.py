import logging
import math

from fastapi import FastAPI, HTTPException, Query

from . import settings
from .age import InvalidAgeError, parse_age_to_months
from .fuzzy import classify_deviation, classify_percentile, config_key_for
from .models import (
    AgeResponse,
    ConfigKeysResponse,
    DeviationResponse,
    HealthResponse,
    PercentileResponse,
)
from .rules import FUZZY_VALUE_TO_CONFIG_KEY

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="measurement-utils",
    description="Age parsing and fuzzy classification of clinical measurements",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.get("/age/months", response_model=AgeResponse)
def age_months(age: str = Query("")):
    try:
        months = parse_age_to_months(age)
    except InvalidAgeError as exc:
        logger.warning("Rejected age %r", exc.age)
        raise HTTPException(status_code=422, detail=str(exc))

    logger.debug("Parsed age %r as %s months", age, months)
    return {"age": age, "months": None if math.isnan(months) else months}

@app.get("/fuzzy/percentile", response_model=PercentileResponse)
def fuzzy_percentile(value: int = Query(...)):
    label = classify_percentile(value)
    return {"value": value, "fuzzy_value": label, "config_key": config_key_for(label)}

@app.get("/fuzzy/deviation", response_model=DeviationResponse)
def fuzzy_deviation(value: float = Query(..., allow_inf_nan=False)):
    label = classify_deviation(value)
    return {"value": value, "fuzzy_value": label, "config_key": config_key_for(label)}

@app.get("/fuzzy/config-keys", response_model=ConfigKeysResponse)
def fuzzy_config_keys():
    return {"config_keys": dict(FUZZY_VALUE_TO_CONFIG_KEY)}
