"""Share metadata router."""

from fastapi import APIRouter, HTTPException, status
import structlog

from mallu_card.core.share import get_card_theme, get_share_text
from mallu_card.models.address import TierCode
from mallu_card.models.config import KERALA
from mallu_api.schemas.models import CardThemeInfo
from mallu_api.schemas.responses import ErrorResponse, ShareResponse

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.get("/share/{tier_code}", response_model=ShareResponse, responses={404: {"model": ErrorResponse}})
async def get_share_metadata(tier_code: str):
    """Share text and card theme for a tier code."""

    try:
        tier = KERALA.tier(TierCode(tier_code))
    except ValueError:
        logger.info("Unknown tier code requested", tier_code=tier_code)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown tier code: {tier_code}"
        )

    return ShareResponse(
        tier_code=tier.code,
        tier_label=tier.label,
        score=tier.score,
        share_text=get_share_text(tier.code, KERALA),
        card=CardThemeInfo(**get_card_theme(tier.code).to_dict()),
    )
