"""Request schemas for the Mallu Card API."""

from pydantic import BaseModel, ConfigDict, Field

from mallu_api.schemas.models import PublicData


class VerifyProofRequest(BaseModel):
    """Body of POST /api/verify-proof."""

    public_data: PublicData = Field(
        ...,
        alias="publicData",
        description="Public data extracted from the address proof"
    )

    model_config = ConfigDict(populate_by_name=True)
