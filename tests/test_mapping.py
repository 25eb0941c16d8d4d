from rentadvisor.mapping import PARAMETER_RENAMES, to_model_params
from rentadvisor.schemas import RentPredictionRequest
from rentadvisor.validation import FORM_FIELDS

MODEL_PARAMS = {
    "subject_prefix",
    "unit_category",
    "unit_status",
    "occupied_units",
    "vacant_units",
    "client_base_rent",
    "client_rent_of_care",
    "market_base_rent",
    "market_rent_of_care",
    "desired_occupancy_rate",
}


def test_rename_table_is_one_to_one():
    assert set(PARAMETER_RENAMES) == set(FORM_FIELDS)
    assert set(PARAMETER_RENAMES.values()) == MODEL_PARAMS
    assert len(set(PARAMETER_RENAMES.values())) == len(PARAMETER_RENAMES)


def test_values_pass_through_unchanged():
    req = RentPredictionRequest.model_validate({
        "propertySubject": "ML",
        "unitType": "2BHK",
        "unitStatus": "Occupied",
        "occupiedUnits": 3,
        "vacantUnits": 1.5,
        "clientBaseRent": 1000,
        "clientRentOfCare": 50.25,
        "marketBaseRent": 1100,
        "marketRentOfCare": 60,
        "desiredOccupancy": 95,
    })
    params = to_model_params(req)

    assert params == {
        "subject_prefix": "ML",
        "unit_category": "2BHK",
        "unit_status": "Occupied",
        "occupied_units": 3,
        "vacant_units": 1.5,
        "client_base_rent": 1000,
        "client_rent_of_care": 50.25,
        "market_base_rent": 1100,
        "market_rent_of_care": 60,
        "desired_occupancy_rate": 95,
    }
    # enum members are sent as their plain string values
    assert type(params["subject_prefix"]) is str
    assert type(params["occupied_units"]) is int
    assert type(params["vacant_units"]) is float
