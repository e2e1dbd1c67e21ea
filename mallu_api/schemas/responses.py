"""Response schemas for the Mallu Card API."""

from datetime import datetime
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from mallu_card.models.address import TierCode
from mallu_api.schemas.models import CardThemeInfo, ErrorDetail


class VerificationResponse(BaseModel):
    """Classification of one address history."""

    is_regional: bool = Field(..., alias="isRegional", description="Whether any regional tier was assigned")
    score: int = Field(..., ge=0, le=100, description="Tier score (0, 20, 70 or 100)")
    tier_code: TierCode = Field(..., alias="tierCode", description="Tier code")
    tier_label: str = Field(..., alias="tierLabel", description="Human-readable tier label")
    display_name: str = Field(..., min_length=1, alias="displayName", description="Name shown on the card")

    regional_address_count: int = Field(
        ...,
        ge=0,
        alias="regionalAddressCount",
        description="Addresses matching the region keyword list"
    )

    total_address_count: int = Field(
        ...,
        ge=1,
        alias="totalAddressCount",
        description="Addresses submitted"
    )

    model_config = ConfigDict(populate_by_name=True)


class ShareResponse(BaseModel):
    """Share text and card theme for a tier."""

    tier_code: TierCode = Field(..., alias="tierCode")
    tier_label: str = Field(..., alias="tierLabel")
    score: int = Field(..., ge=0, le=100)
    share_text: str = Field(..., alias="shareText")
    card: CardThemeInfo

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check endpoint response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    region: str = Field(..., description="Configured target region")
    timestamp: datetime = Field(..., description="Health check timestamp")
    uptime_seconds: int = Field(default=0, ge=0, description="Seconds since startup")
    checks: Dict[str, bool] = Field(default_factory=dict, description="Component checks")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorDetail
