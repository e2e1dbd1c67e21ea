"""Regional affinity classifier."""

from typing import Optional, Sequence

import structlog

from mallu_card.models.address import Address, ClassificationResult, TierCode
from mallu_card.models.config import KERALA, RegionProfile

logger = structlog.get_logger(__name__)


def is_regional_address(address: Address, region: RegionProfile = KERALA) -> bool:
    """Case-insensitive substring match of the region keywords against address text or city."""
    address_lower = (address.address_text or "").lower()
    city_lower = (address.city or "").lower()

    return any(
        keyword in address_lower or keyword in city_lower
        for keyword in region.keywords
    )


def classify(addresses: Sequence[Address], region: RegionProfile = KERALA) -> ClassificationResult:
    """
    Classify an address history into a regional affinity tier.

    Args:
        addresses: Non-empty address history in the order it was attested.
            Emptiness is checked by the caller.
        region: Region profile providing keywords and the tier table.

    Returns:
        ClassificationResult with tier, score, display name and counts
    """
    # First category-1 address only
    primary = next((addr for addr in addresses if addr.is_primary), None)
    has_primary_regional = primary is not None and is_regional_address(primary, region)

    regional_addresses = [addr for addr in addresses if is_regional_address(addr, region)]
    regional_address_count = len(regional_addresses)
    total_address_count = len(addresses)

    if has_primary_regional and regional_address_count == total_address_count:
        tier_code = TierCode.FULLY_REGIONAL
    elif has_primary_regional and regional_address_count < total_address_count:
        tier_code = TierCode.REGIONAL_WITH_EXCEPTIONS
    elif not has_primary_regional and regional_address_count > 0:
        tier_code = TierCode.OCCASIONAL_REGIONAL
    else:
        tier_code = TierCode.NON_REGIONAL

    tier = region.tier(tier_code)

    return ClassificationResult(
        is_regional=tier.is_regional,
        score=tier.score,
        tier_code=tier.code,
        tier_label=tier.label,
        display_name=_resolve_display_name(
            addresses, primary if has_primary_regional else None, regional_addresses, region
        ),
        regional_address_count=regional_address_count,
        total_address_count=total_address_count,
    )


def _resolve_display_name(addresses: Sequence[Address],
                          regional_primary: Optional[Address],
                          regional_addresses: Sequence[Address],
                          region: RegionProfile) -> str:
    if regional_primary is not None and regional_primary.display_name:
        return regional_primary.display_name

    # Only the first regional address is consulted, not the first one with a name
    if regional_addresses and regional_addresses[0].display_name:
        return regional_addresses[0].display_name

    if addresses and addresses[0].display_name:
        return addresses[0].display_name

    return region.placeholder_name


class RegionClassifier:
    """Classifier bound to one region profile."""

    def __init__(self, region: RegionProfile = KERALA):
        self.region = region
        self.logger = logger.bind(component="classifier", region=region.name)

    def classify(self, addresses: Sequence[Address]) -> ClassificationResult:
        result = classify(addresses, self.region)

        self.logger.info("Address history classified",
                         tier=result.tier_code.value,
                         score=result.score,
                         regional_addresses=result.regional_address_count,
                         total_addresses=result.total_address_count)

        return result
