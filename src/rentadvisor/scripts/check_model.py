# run from project root: python -m rentadvisor.scripts.check_model
"""
Send one sample property straight to the hosted rent model (no API in between)
and print the four result fields. Handy for checking HF_TOKEN / MODEL_SPACE.
"""
import logging
import sys

from rentadvisor.config import get_settings
from rentadvisor.logging_setup import setup_logging
from rentadvisor.mapping import to_model_params
from rentadvisor.model_client import RentModelClient
from rentadvisor.schemas import RentPredictionRequest, RentPredictionResult

logger = logging.getLogger("rentadvisor.scripts.check_model")

SAMPLE = {
    "propertySubject": "AL",
    "unitType": "Studio",
    "unitStatus": "Vacant",
    "occupiedUnits": 0,
    "vacantUnits": 5,
    "clientBaseRent": 1000,
    "clientRentOfCare": 50,
    "marketBaseRent": 1100,
    "marketRentOfCare": 60,
    "desiredOccupancy": 95,
}


def main() -> int:
    settings = get_settings()
    setup_logging(level=settings.LOG_LEVEL)

    client = RentModelClient.from_settings(settings)
    params = to_model_params(RentPredictionRequest.model_validate(SAMPLE))
    print("Space:", settings.MODEL_SPACE, settings.MODEL_API_NAME)
    print("Params:", params)

    try:
        result = RentPredictionResult.from_model_output(client.predict(params))
    except Exception:
        logger.exception("Model check failed")
        return 1

    for name, value in result.model_dump().items():
        print(f"{name}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
