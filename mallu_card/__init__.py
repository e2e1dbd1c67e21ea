"""
Mallu Card Classification Engine

Classifies a user's delivery-address history into a regional affinity tier.
Addresses are matched against a fixed region keyword list and the result is
one of PURE_BRED_MALLU, MALLU_EXPLORER, WEEKEND_MALLU or NON_MALLU.
"""

__version__ = "1.0.0"
__author__ = "Mallu Card Team"
__description__ = "Regional affinity classification for attested address data"

from mallu_card.core.classifier import RegionClassifier, classify, is_regional_address
from mallu_card.core.share import CardTheme, get_card_theme, get_share_text
from mallu_card.models.address import Address, ClassificationResult, TierCode
from mallu_card.models.config import KERALA, RegionProfile, TierDefinition

__all__ = [
    "RegionClassifier",
    "classify",
    "is_regional_address",
    "CardTheme",
    "get_card_theme",
    "get_share_text",
    "Address",
    "ClassificationResult",
    "TierCode",
    "KERALA",
    "RegionProfile",
    "TierDefinition",
]
