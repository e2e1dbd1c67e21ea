"""Boundary errors for verification requests."""

from fastapi import status


class VerificationRequestError(Exception):
    """Request rejected before classification."""

    code = "INVALID_REQUEST"
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class MalformedRequestError(VerificationRequestError):
    code = "INVALID_REQUEST"
    message = "Invalid request: publicData with address array is required"


class EmptyAddressListError(VerificationRequestError):
    code = "NO_ADDRESSES"
    message = "No addresses found in the provided data"


class InvalidJSONError(VerificationRequestError):
    code = "INVALID_JSON"
    message = "Invalid JSON in request body"


class ProofFormatError(VerificationRequestError):
    code = "INVALID_PROOF"
    message = "Invalid proof format received"


class VerificationFailedError(VerificationRequestError):
    code = "INTERNAL_SERVER_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Failed to process verification"
