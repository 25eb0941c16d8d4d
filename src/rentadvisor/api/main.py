# src/rentadvisor/api/main.py
import logging
from typing import Any, Dict

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from rentadvisor.config import get_settings
from rentadvisor.logging_setup import setup_logging
from rentadvisor.mapping import to_model_params
from rentadvisor.model_client import RentModelClient
from rentadvisor.schemas import (
    ErrorResponse,
    PredictionResponse,
    RentPredictionRequest,
    RentPredictionResult,
)

# ------------------------------------------------------------
# Setup
# ------------------------------------------------------------
setup_logging(level=get_settings().LOG_LEVEL)
logger = logging.getLogger("rentadvisor.api")

PREDICTION_FAILED = "Failed to fetch prediction"

app = FastAPI(title="RentAdvisor API", version="1.0")


def _prediction_failed() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": PREDICTION_FAILED})


@app.exception_handler(RequestValidationError)
async def body_not_understood(request: Request, exc: RequestValidationError):
    # A body that is not a JSON object is just another failed prediction
    logger.error("Rejected body on %s: %s", request.url.path, exc.errors())
    return _prediction_failed()


# Dependency for the hosted model; settings are read per request
def get_model_client() -> RentModelClient:
    return RentModelClient.from_settings(get_settings())


# ------------------------------------------------------------
# Health check
# ------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


# ------------------------------------------------------------
# Prediction bridge
# ------------------------------------------------------------
@app.post(
    "/api/predict",
    response_model=PredictionResponse,
    responses={500: {"model": ErrorResponse}},
)
@app.post(
    "/predict",
    response_model=PredictionResponse,
    responses={500: {"model": ErrorResponse}},
    include_in_schema=False,
)
def predict_rent(
    payload: Dict[str, Any] = Body(...),
    model: RentModelClient = Depends(get_model_client),
):
    """
    Rename the form fields, call the hosted model and relay its 4-tuple as
    {"data": [info, suggestedBaseRent, suggestedRentOfCare, recommendation]}.
    Every failure collapses into one 500 {"error": "Failed to fetch prediction"};
    the cause is only logged.
    """
    try:
        req = RentPredictionRequest.model_validate(payload)
        output = model.predict(to_model_params(req))
        result = RentPredictionResult.from_model_output(output)
    except Exception:
        logger.exception("Prediction API error")
        return _prediction_failed()

    return {"data": result.as_list()}
