"""Data models for the Mallu Card classification engine."""

from mallu_card.models.address import Address, ClassificationResult, TierCode
from mallu_card.models.config import KERALA, KERALA_KEYWORDS, RegionProfile, TierDefinition

__all__ = [
    "Address",
    "ClassificationResult",
    "TierCode",
    "KERALA",
    "KERALA_KEYWORDS",
    "RegionProfile",
    "TierDefinition",
]
