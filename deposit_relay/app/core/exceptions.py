from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "CONFIGURATION"
    VALIDATION = "VALIDATION"
    UPSTREAM = "UPSTREAM"
    TRANSPORT = "TRANSPORT"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    INTERNAL = "INTERNAL"


class AppException(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: int | None = None,
        details: dict | None = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    @property
    def http_status(self) -> int:
        return self.status_code or 500


class ConfigurationError(AppException):
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(ErrorKind.CONFIGURATION, message, details=details)


class EngineRequestError(AppException):
    """
    A failed call to the Engine.

    ``envelope`` is the parsed response body when there was one, and
    ``upstream_message`` is its ``error.message`` field.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: int | None = None,
        envelope: dict | None = None,
    ):
        super().__init__(kind, message, status_code=status_code, details=envelope)
        self.envelope = envelope

    @property
    def upstream_message(self) -> str | None:
        error = (self.envelope or {}).get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message
        return None
