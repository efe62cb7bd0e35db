"""Custom exceptions for Smart Schedule."""


class SmartScheduleError(Exception):
    """Base exception for all Smart Schedule errors."""


class ExtractionError(SmartScheduleError):
    """Exception raised when event extraction fails as a whole."""


class OllamaConnectionError(SmartScheduleError):
    """Exception raised when unable to connect to Ollama."""


class OllamaInferenceError(SmartScheduleError):
    """Exception raised when Ollama inference fails."""


class ConfigurationError(SmartScheduleError):
    """Exception raised for configuration related errors."""


class ValidationError(SmartScheduleError):
    """Exception raised for data validation errors."""


class InvalidEventError(ValidationError):
    """Exception raised when a single extracted record cannot become an Event.

    Attributes:
        reason: Short machine-readable reason, used as a log field.
    """

    def __init__(self, reason: str, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or reason)


class InvalidDataUriError(ValidationError):
    """Exception raised when an image data URI is not data:<mime>;base64,<data>."""
