"""Optimizer exceptions, rendered by the API layer as ``{"error": message}``."""

PROFILE_REQUIRED_MESSAGE = "Profile data is required"
OPTIMIZE_FAILED_MESSAGE = "Failed to optimize LinkedIn profile"


class OptimizerError(Exception):
    """Base exception for errors reported to API callers."""

    status_code = 500
    default_message = OPTIMIZE_FAILED_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(OptimizerError):
    """The request did not carry the profile payload."""

    status_code = 400
    default_message = PROFILE_REQUIRED_MESSAGE


class ServiceError(OptimizerError):
    """The generative-text call failed (auth, quota or network)."""
