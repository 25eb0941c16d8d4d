# src/rentadvisor/schemas.py
from enum import Enum
from typing import Any, List, Sequence, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from rentadvisor.errors import MalformedModelResponse


# ------------------------------------------------------------
# Categorical choices offered by the form
# ------------------------------------------------------------
class PropertySubject(str, Enum):
    AL = "AL"
    ML = "ML"
    OTHER = "Other"


class UnitType(str, Enum):
    STUDIO = "Studio"
    ONE_BHK = "1BHK"
    TWO_BHK = "2BHK"


class UnitStatus(str, Enum):
    VACANT = "Vacant"
    OCCUPIED = "Occupied"


Number = Union[StrictInt, StrictFloat]


# ------------------------------------------------------------
# Bridge request (camelCase on the wire)
# ------------------------------------------------------------
class RentPredictionRequest(BaseModel):
    """Body of POST /api/predict.

    Range checks happen in the form (see rentadvisor.validation); the bridge
    only needs the ten fields present with the right JSON types. Numbers are
    strict so a JSON int reaches the model as an int and a numeric string is
    rejected.
    """
    property_subject: PropertySubject = Field(..., alias="propertySubject")
    unit_type: UnitType = Field(..., alias="unitType")
    unit_status: UnitStatus = Field(..., alias="unitStatus")
    occupied_units: Number = Field(..., alias="occupiedUnits")
    vacant_units: Number = Field(..., alias="vacantUnits")
    client_base_rent: Number = Field(..., alias="clientBaseRent")
    client_rent_of_care: Number = Field(..., alias="clientRentOfCare")
    market_base_rent: Number = Field(..., alias="marketBaseRent")
    market_rent_of_care: Number = Field(..., alias="marketRentOfCare")
    desired_occupancy: Number = Field(..., alias="desiredOccupancy")

    model_config = {
        "populate_by_name": True,
        "use_enum_values": True,
        "extra": "ignore",
    }


# ------------------------------------------------------------
# Model output
# ------------------------------------------------------------
class RentPredictionResult(BaseModel):
    """Four values shown verbatim; the model usually sends strings but nothing
    here depends on it."""
    info: Any
    suggested_base_rent: Any
    suggested_rent_of_care: Any
    recommendation: Any

    @classmethod
    def from_model_output(cls, output: Any) -> "RentPredictionResult":
        """Destructure the model's 4-tuple positionally.

        Raises MalformedModelResponse for anything that is not a sequence of
        exactly four elements. The elements themselves are kept unchanged.
        """
        if isinstance(output, (str, bytes)) or not isinstance(output, Sequence):
            raise MalformedModelResponse(f"expected a 4-element sequence, got {type(output).__name__}")
        if len(output) != 4:
            raise MalformedModelResponse(f"expected 4 elements, got {len(output)}")
        info, base_rent, rent_of_care, recommendation = output
        return cls(
            info=info,
            suggested_base_rent=base_rent,
            suggested_rent_of_care=rent_of_care,
            recommendation=recommendation,
        )

    def as_list(self) -> List[Any]:
        return [self.info, self.suggested_base_rent, self.suggested_rent_of_care, self.recommendation]


class PredictionResponse(BaseModel):
    """200 body: [info, suggestedBaseRent, suggestedRentOfCare, recommendation]"""
    data: List[Any]


class ErrorResponse(BaseModel):
    error: str
