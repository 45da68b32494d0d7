from fastapi import status
from deposit_relay.app.core.exceptions import AppException, ErrorKind


class ErrorMessage:
    INVALID_OFFCHAIN_ID = "Missing or invalid 'offchainId' in request body."
    INVALID_USER_ADDRESS = "Missing or invalid 'userAddress' in request body."
    INVALID_BODY = "Invalid JSON request body."

    DEPOSIT_FAILED = "Failed to process deposit."


# Checked in this order; the first failing field decides the message.
FIELD_MESSAGES = {
    "offchainId": ErrorMessage.INVALID_OFFCHAIN_ID,
    "userAddress": ErrorMessage.INVALID_USER_ADDRESS,
}


def bad_request(message: str, details: dict | None = None):
    return AppException(
        kind=ErrorKind.VALIDATION,
        status_code=status.HTTP_400_BAD_REQUEST,
        message=message,
        details=details
    )


def internal_error(message: str = ErrorMessage.DEPOSIT_FAILED):
    return AppException(
        kind=ErrorKind.INTERNAL,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=message
    )
