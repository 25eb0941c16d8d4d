# src/rentadvisor/model_client.py
import logging
from typing import Any, Dict, Optional

from gradio_client import Client

from rentadvisor.config import Settings
from rentadvisor.errors import ModelConfigurationError

logger = logging.getLogger("rentadvisor.model_client")


class RentModelClient:
    """
    Thin wrapper around the hosted rent model (a Gradio Space).
    - Connects on every call; nothing is kept between predictions.
    - No timeout or retry: the call blocks until the Space answers or the
      transport fails, and any error propagates to the caller.
    """

    def __init__(self, space_id: str, token: Optional[str], api_name: str = "/predict"):
        self.space_id = space_id
        self.token = token
        self.api_name = api_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "RentModelClient":
        return cls(settings.MODEL_SPACE, settings.HF_TOKEN, settings.MODEL_API_NAME)

    def predict(self, params: Dict[str, Any]) -> Any:
        """Call the Space endpoint with the renamed parameters and return its raw output."""
        if not self.token:
            raise ModelConfigurationError("HF_TOKEN is not set")

        logger.info("Calling %s%s", self.space_id, self.api_name)
        client = Client(self.space_id, hf_token=self.token, verbose=False)
        return client.predict(api_name=self.api_name, **params)
