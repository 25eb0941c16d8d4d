# src/rentadvisor/validation.py
import math
import re
from typing import Any, Dict, Mapping, Optional, Tuple

ENUM_FIELDS: Tuple[str, ...] = ("propertySubject", "unitType", "unitStatus")

NUMERIC_FIELDS: Tuple[str, ...] = (
    "occupiedUnits",
    "vacantUnits",
    "clientBaseRent",
    "clientRentOfCare",
    "marketBaseRent",
    "marketRentOfCare",
    "desiredOccupancy",
)

FORM_FIELDS: Tuple[str, ...] = ENUM_FIELDS + NUMERIC_FIELDS

OCCUPANCY_FIELD = "desiredOccupancy"

# digits with at most one decimal point; "" is a cleared field
NUMERIC_INPUT_PATTERN = re.compile(r"\d*\.?\d*")

REQUIRED = "Required"
NOT_A_NUMBER = "Must be a number"
NEGATIVE = "Must be ≥ 0"
OUT_OF_RANGE = "Must be between 0 and 100"


def accepts_keystroke(field: str, value: str) -> bool:
    """Whether a new raw value for `field` may replace the current one."""
    if field in NUMERIC_FIELDS:
        return NUMERIC_INPUT_PATTERN.fullmatch(value) is not None
    return True


def parse_number(raw: str) -> Optional[float]:
    # float() also takes "1_000", "inf" and "nan"; none of them count
    if "_" in raw:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def validate_form(form: Mapping[str, str]) -> Dict[str, str]:
    """Return field -> error message; empty means the form may be sent.

    The occupancy range check runs after the >= 0 check, so a negative
    occupancy ends up with the range message.
    """
    errors: Dict[str, str] = {}

    for field in ENUM_FIELDS:
        if not form.get(field, ""):
            errors[field] = REQUIRED

    for field in NUMERIC_FIELDS:
        raw = form.get(field, "")
        if raw == "":
            errors[field] = REQUIRED
            continue
        value = parse_number(raw)
        if value is None:
            errors[field] = NOT_A_NUMBER
        elif value < 0:
            errors[field] = NEGATIVE

    occupancy = parse_number(form.get(OCCUPANCY_FIELD, ""))
    if occupancy is not None and (occupancy < 0 or occupancy > 100):
        errors[OCCUPANCY_FIELD] = OUT_OF_RANGE

    return errors


def to_payload(form: Mapping[str, str]) -> Dict[str, Any]:
    """Serialize a validated form into the bridge's JSON body."""
    payload: Dict[str, Any] = {field: form[field] for field in ENUM_FIELDS}
    for field in NUMERIC_FIELDS:
        value = parse_number(form[field])
        if value is None:
            raise ValueError(f"{field} is not a number: {form[field]!r}")
        payload[field] = value
    return payload
