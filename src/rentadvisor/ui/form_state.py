# src/rentadvisor/ui/form_state.py
import logging
from typing import Any, Callable, Dict, List, Optional

from rentadvisor.errors import PredictionError
from rentadvisor.schemas import PropertySubject, RentPredictionResult, UnitStatus, UnitType
from rentadvisor.validation import FORM_FIELDS, accepts_keystroke, to_payload, validate_form

logger = logging.getLogger("rentadvisor.ui")

DEFAULT_VALUES: Dict[str, str] = {
    "propertySubject": PropertySubject.AL.value,
    "unitType": UnitType.STUDIO.value,
    "unitStatus": UnitStatus.VACANT.value,
    "occupiedUnits": "0",
    "vacantUnits": "0",
    "clientBaseRent": "0",
    "clientRentOfCare": "0",
    "marketBaseRent": "0",
    "marketRentOfCare": "0",
    "desiredOccupancy": "0",
}

Dispatch = Callable[[Dict[str, Any]], List[Any]]


class RentForm:
    """
    Per-session form state.
    - `values` holds raw strings exactly as typed.
    - `loading` is the one-slot guard: while it is set, submit is refused
      and the page shows the spinner with the button disabled.
    - After a submission exactly one of `result` / `failure` is set, until
      `dismiss()` closes the panel.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(DEFAULT_VALUES)
        if values:
            self.values.update(values)
        self.errors: Dict[str, str] = {}
        self.loading = False
        self.result: Optional[RentPredictionResult] = None
        self.failure: Optional[str] = None

    def update(self, field: str, value: str) -> bool:
        if field not in FORM_FIELDS:
            raise KeyError(field)
        if not accepts_keystroke(field, value):
            return False
        self.values[field] = value
        return True

    def submit(self, dispatch: Dispatch) -> bool:
        """Validate and, when clean, send the form through `dispatch`.

        Returns True when a request was dispatched (whatever its outcome).
        """
        if self.loading:
            return False

        self.errors = validate_form(self.values)
        if self.errors:
            return False

        self.result = None
        self.failure = None
        self.loading = True
        try:
            data = dispatch(to_payload(self.values))
            self.result = RentPredictionResult.from_model_output(data)
        except PredictionError as e:
            logger.warning("Prediction failed: %s", e)
            self.failure = str(e)
        finally:
            self.loading = False
        return True

    def dismiss(self) -> None:
        self.result = None
        self.failure = None
