# src/rentadvisor/ui/api_client.py
import os
from typing import Any, Dict, List

import requests

from rentadvisor.errors import PredictionRequestError

DEFAULT_API_BASE = "http://127.0.0.1:8000"


def resolve_api_base() -> str:
    """Resolve API base URL with fallback chain"""
    # Try environment variable first
    api_base = os.getenv("API_BASE")
    if api_base:
        return api_base.rstrip("/")

    # Try secrets.toml (project or ~/.streamlit)
    try:
        import streamlit as st
        api_base = st.secrets.get("API_BASE")
    except Exception:
        # no secrets file, or one that does not parse
        api_base = None
    if api_base:
        return str(api_base).rstrip("/")

    # Default fallback
    return DEFAULT_API_BASE


def fetch_prediction(payload: Dict[str, Any], api_base: str) -> List[Any]:
    """POST the form to the bridge and return its `data` list.

    One call, no timeout and no retry; the caller stays blocked until the
    bridge answers.
    """
    try:
        response = requests.post(f"{api_base}/api/predict", json=payload, timeout=None)
    except requests.exceptions.RequestException as e:
        raise PredictionRequestError(str(e)) from e

    try:
        body = response.json()
    except ValueError:
        body = {}

    if not response.ok:
        message = body.get("error") if isinstance(body, dict) else None
        raise PredictionRequestError(message or f"HTTP {response.status_code}")
    if not isinstance(body, dict) or "data" not in body:
        raise PredictionRequestError("Malformed response from prediction service")
    return body["data"]
