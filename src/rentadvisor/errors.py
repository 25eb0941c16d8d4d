class PredictionError(Exception):
    """Base class for anything that stops a rent prediction."""
    pass


class ModelConfigurationError(PredictionError):
    """Raised when the hosted model cannot be called (e.g. no HF_TOKEN)."""
    pass


class MalformedModelResponse(PredictionError):
    """Raised when the model output is not the expected 4-tuple of strings."""
    pass


class PredictionRequestError(PredictionError):
    """Raised on the form side when the bridge call fails."""
    pass
