"""Data models for address classification."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


PRIMARY_ADDRESS_CATEGORY = 1


class TierCode(str, Enum):
    """Regional affinity tier enumeration."""
    FULLY_REGIONAL = "PURE_BRED_MALLU"
    REGIONAL_WITH_EXCEPTIONS = "MALLU_EXPLORER"
    OCCASIONAL_REGIONAL = "WEEKEND_MALLU"
    NON_REGIONAL = "NON_MALLU"


@dataclass(frozen=True)
class Address:
    """One saved address record from the attested address history."""
    identifier: str
    address_text: str = ""
    city: Optional[str] = None
    address_category: Optional[int] = None  # 1 = home, 2 = work, 3/4 = other
    display_name: Optional[str] = None

    @property
    def is_primary(self) -> bool:
        return self.address_category == PRIMARY_ADDRESS_CATEGORY


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one address history."""
    is_regional: bool
    score: int
    tier_code: TierCode
    tier_label: str
    display_name: str
    regional_address_count: int
    total_address_count: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase dictionary used on the wire."""
        return {
            'isRegional': self.is_regional,
            'score': self.score,
            'tierCode': self.tier_code.value,
            'tierLabel': self.tier_label,
            'displayName': self.display_name,
            'regionalAddressCount': self.regional_address_count,
            'totalAddressCount': self.total_address_count,
        }
