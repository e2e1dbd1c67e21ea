"""Pydantic schemas for the Mallu Card API."""

from mallu_api.schemas.responses import (
    VerificationResponse,
    ShareResponse,
    HealthResponse,
    ErrorResponse
)

from mallu_api.schemas.requests import VerifyProofRequest

from mallu_api.schemas.models import (
    AddressPayload,
    PublicData,
    CardThemeInfo,
    ErrorDetail
)

__all__ = [
    "VerificationResponse",
    "ShareResponse",
    "HealthResponse",
    "ErrorResponse",
    "VerifyProofRequest",
    "AddressPayload",
    "PublicData",
    "CardThemeInfo",
    "ErrorDetail"
]
