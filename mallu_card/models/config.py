"""Region profiles for the classification engine.

A profile bundles everything region specific: the keyword list used for
address matching, the tier table and the display-name placeholder. Profiles
are frozen so the mapping stays auditable in one place.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from mallu_card.models.address import TierCode


@dataclass(frozen=True)
class TierDefinition:
    """Label, score and regional flag for one tier."""
    code: TierCode
    label: str
    score: int
    is_regional: bool


@dataclass(frozen=True)
class RegionProfile:
    """Immutable configuration for one target region."""
    name: str
    keywords: Tuple[str, ...]
    tiers: Mapping[TierCode, TierDefinition]
    placeholder_name: str
    hashtags: str = field(default="")

    def __post_init__(self):
        missing = [code for code in TierCode if code not in self.tiers]
        if missing:
            raise ValueError(f"Region profile {self.name!r} is missing tiers: {missing}")
        if any(keyword != keyword.lower() for keyword in self.keywords):
            raise ValueError("Region keywords must be lower case")

    def tier(self, code: TierCode) -> TierDefinition:
        return self.tiers[code]


KERALA_KEYWORDS: Tuple[str, ...] = (
    'kerala', 'kochi', 'ernakulam', 'kozhikode', 'thrissur',
    'trivandrum', 'thiruvananthapuram', 'kottayam', 'idukki',
    'pathanamthitta', 'palakkad', 'malappuram', 'kollam', 'alappuzha',
)

KERALA = RegionProfile(
    name="Kerala",
    keywords=KERALA_KEYWORDS,
    tiers=MappingProxyType({
        TierCode.FULLY_REGIONAL: TierDefinition(
            code=TierCode.FULLY_REGIONAL,
            label="Pure-Bred Malayali™",
            score=100,
            is_regional=True,
        ),
        TierCode.REGIONAL_WITH_EXCEPTIONS: TierDefinition(
            code=TierCode.REGIONAL_WITH_EXCEPTIONS,
            label="Mallu Explorer",
            score=70,
            is_regional=True,
        ),
        TierCode.OCCASIONAL_REGIONAL: TierDefinition(
            code=TierCode.OCCASIONAL_REGIONAL,
            label="Weekend Mallu",
            score=20,
            is_regional=True,
        ),
        TierCode.NON_REGIONAL: TierDefinition(
            code=TierCode.NON_REGIONAL,
            label="Non-Mallu Civilian",
            score=0,
            is_regional=False,
        ),
    }),
    placeholder_name="Unknown Mallu",
    hashtags="@proofofmallu #MalluCard",
)
