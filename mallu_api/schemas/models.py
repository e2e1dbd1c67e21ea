"""Core data models for the Mallu Card API."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from mallu_card.models.address import Address


class AddressPayload(BaseModel):
    """One address as delivered in the proof's publicData."""

    id: str = Field(
        default="",
        description="Address identifier, unique within the proof"
    )

    address: Optional[str] = Field(
        default="",
        description="Street/area address line"
    )

    city: Optional[str] = Field(
        default=None,
        description="City name"
    )

    address_category: Optional[StrictInt] = Field(
        default=None,
        alias="addressCategory",
        description="Address category (1 = home, 2 = work, 3/4 = other)"
    )

    name: Optional[str] = Field(
        default=None,
        description="Name saved with the address"
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('id', mode='before')
    @classmethod
    def coerce_identifier(cls, v):
        """Accept numeric identifiers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_address(self) -> Address:
        return Address(
            identifier=self.id,
            address_text=self.address or "",
            city=self.city,
            address_category=self.address_category,
            display_name=self.name,
        )


class PublicData(BaseModel):
    """Public portion of an address proof."""

    address: List[AddressPayload] = Field(
        ...,
        description="Saved addresses, in the order returned by the provider"
    )


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(
        ...,
        description="Error code"
    )

    message: str = Field(
        ...,
        description="Human-readable error message"
    )

    details: Dict[str, Any] = Field(
        default_factory=dict,
        description="Additional error details"
    )

    timestamp: datetime = Field(
        ...,
        description="Error timestamp"
    )

    request_id: str = Field(
        ...,
        description="Request identifier for tracking"
    )


class CardThemeInfo(BaseModel):
    """Rendering parameters for a tier card."""

    background_image: str = Field(..., alias="backgroundImage")
    text_color: str = Field(..., alias="textColor")
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    name_x: int = Field(..., ge=0, alias="nameX")
    name_y: int = Field(..., ge=0, alias="nameY")
    font_size: int = Field(..., gt=0, alias="fontSize")

    model_config = ConfigDict(populate_by_name=True)
