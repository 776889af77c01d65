"""Custom error types for clear error handling at the engine's boundary."""


class InvalidPayloadError(ValueError):
    """Raised when caller-supplied data (a request body, a category name) is invalid."""


class ConfigurationError(ValueError):
    """Raised when an environment setting cannot be parsed."""
