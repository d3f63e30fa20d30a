"""Custom exceptions for the geminisst library."""


class GeminiSSTError(Exception):
    """Base class for every error raised by this library."""


class MissingCredentialError(GeminiSSTError):
    """Raised when no API key is supplied."""

    def __init__(self):
        super().__init__("A Gemini API key is required")


class NotFoundError(GeminiSSTError):
    """Raised when a local audio path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found at: {path}")


class InvalidInputError(GeminiSSTError):
    """Raised when an audio path exists but cannot be used as input."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid audio input '{path}': {reason}")


class BackendError(GeminiSSTError):
    """Raised when the upload or generation call to the backend fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Gemini {operation} failed: {cause}")
