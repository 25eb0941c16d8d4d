# src/rentadvisor/mapping.py
"""Form field name -> hosted model parameter name.

Kept as a literal table so the contract with the model can be read (and
tested) without a network call. Values pass through untouched.
"""
from typing import Any, Dict

from rentadvisor.schemas import RentPredictionRequest

PARAMETER_RENAMES: Dict[str, str] = {
    "propertySubject": "subject_prefix",
    "unitType": "unit_category",
    "unitStatus": "unit_status",
    "occupiedUnits": "occupied_units",
    "vacantUnits": "vacant_units",
    "clientBaseRent": "client_base_rent",
    "clientRentOfCare": "client_rent_of_care",
    "marketBaseRent": "market_base_rent",
    "marketRentOfCare": "market_rent_of_care",
    "desiredOccupancy": "desired_occupancy_rate",
}


def to_model_params(request: RentPredictionRequest) -> Dict[str, Any]:
    wire = request.model_dump(by_alias=True)
    return {PARAMETER_RENAMES[name]: wire[name] for name in PARAMETER_RENAMES}
