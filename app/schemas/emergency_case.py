# Emergency case schemas
import re
from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from app.core.config import settings


# -------------------------
# Enums / Literals
# -------------------------
Severity = Literal["low", "medium", "high", "critical"]
CaseStatus = Literal["pending", "dispatched", "resolved"]

SEVERITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}
CASE_STATUSES = get_args(CaseStatus)
DEFAULT_STATUS = "pending"

# (max integer digits, max fractional digits) -> decimal(10, 8) / decimal(11, 8)
LATITUDE_SHAPE = (2, 8)
LONGITUDE_SHAPE = (3, 8)

# plain decimals only: no exponent, sign other than "-", underscores or padding
DECIMAL_STRING = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def check_decimal_string(value: str, shape: tuple) -> str:
    """
    Coordinates travel as exact decimal strings ("24.4539").
    Validates the shape without converting to float; returns the input verbatim.
    """
    int_digits, frac_digits = shape
    if not DECIMAL_STRING.fullmatch(value):
        raise ValueError("must be a plain decimal number string, e.g. \"24.4539\"")

    number = Decimal(value)

    _, digits, exponent = number.as_tuple()
    frac = max(0, -exponent)
    whole = max(0, len(digits) + exponent)
    if frac > frac_digits:
        raise ValueError(f"at most {frac_digits} decimal places allowed")
    if whole > int_digits:
        raise ValueError(f"at most {int_digits} integer digits allowed")

    return value


class CaseSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -------------------------
# Input (API)
# -------------------------
class EmergencyCaseCreate(CaseSchema):
    type: str
    description: str
    location: str
    latitude: str
    longitude: str
    reporter_name: str
    reporter_phone: str
    severity: Severity
    status: Optional[str] = None

    @field_validator("latitude")
    @classmethod
    def _latitude_shape(cls, v: str) -> str:
        return check_decimal_string(v, LATITUDE_SHAPE)

    @field_validator("longitude")
    @classmethod
    def _longitude_shape(cls, v: str) -> str:
        return check_decimal_string(v, LONGITUDE_SHAPE)

    @field_validator("status")
    @classmethod
    def _known_status(cls, v: Optional[str]) -> Optional[str]:
        # empty falls back to the default status
        if v and settings.strict_status and v not in CASE_STATUSES:
            raise ValueError(f"must be one of: {', '.join(CASE_STATUSES)}")
        return v


class StatusUpdate(CaseSchema):
    # missing / empty is answered with 400 by the router, not by schema validation
    status: Optional[str] = None


# -------------------------
# Stored record
# -------------------------
class EmergencyCase(CaseSchema):
    id: int
    type: str
    description: str
    location: str
    latitude: str
    longitude: str
    reporter_name: str
    reporter_phone: str
    severity: Severity
    status: str = DEFAULT_STATUS
    created_at: datetime


# -------------------------
# Read models (responder dashboard)
# -------------------------
class CaseStats(BaseModel):
    total: int
    pending: int
    dispatched: int
    resolved: int
    critical: int
    active: int
