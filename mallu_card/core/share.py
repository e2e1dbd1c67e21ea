"""Card and share metadata for each tier.

The front end renders a 1920x1080 card from a tier background with the
display name overlaid near the top-left corner, and offers a share blurb.
Rasterization happens client side; this module only describes the card.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from mallu_card.models.address import TierCode
from mallu_card.models.config import KERALA, RegionProfile


CARD_WIDTH = 1920
CARD_HEIGHT = 1080
NAME_OFFSET = (64, 64)
NAME_FONT_SIZE = 64

GENERIC_SHARE_TEXT = "Check out my Mallu Card!"


@dataclass(frozen=True)
class CardTheme:
    """Visual parameters for rendering a tier card."""
    background_image: str
    text_color: str
    width: int = CARD_WIDTH
    height: int = CARD_HEIGHT
    name_x: int = NAME_OFFSET[0]
    name_y: int = NAME_OFFSET[1]
    font_size: int = NAME_FONT_SIZE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'backgroundImage': self.background_image,
            'textColor': self.text_color,
            'width': self.width,
            'height': self.height,
            'nameX': self.name_x,
            'nameY': self.name_y,
            'fontSize': self.font_size,
        }


# Dark text on the two lighter backgrounds
_CARD_THEMES = {
    TierCode.FULLY_REGIONAL: CardTheme("/memes/card-100.png", "#000000"),
    TierCode.REGIONAL_WITH_EXCEPTIONS: CardTheme("/memes/card-70.png", "#000000"),
    TierCode.OCCASIONAL_REGIONAL: CardTheme("/memes/card-40.png", "#FFFFFF"),
    TierCode.NON_REGIONAL: CardTheme("/memes/card-0.png", "#FFFFFF"),
}

_SHARE_BLURBS = {
    TierCode.FULLY_REGIONAL: (
        "{label} certified! 🥥",
        "All my addresses are in God's Own Country. "
        "Coconut oil runs through my veins. I eat beef fry for breakfast.",
    ),
    TierCode.REGIONAL_WITH_EXCEPTIONS: (
        "{label} unlocked! ✈️🌴",
        "I've left Kerala but Kerala hasn't left me. "
        "Still coming home for every Onam and Vishu.",
    ),
    TierCode.OCCASIONAL_REGIONAL: (
        "{label} detected! 🏖️",
        "I visit Kerala for weddings, funerals, and emotional resets. "
        "My Malayalam is broken but my love for porotta is not.",
    ),
    TierCode.NON_REGIONAL: (
        "Mallu - {label}! 😢",
        "No Kerala addresses found. "
        "Please consume kappa and meen curry immediately and try again.",
    ),
}


def _coerce_tier(tier_code: Union[TierCode, str]) -> TierCode:
    return tier_code if isinstance(tier_code, TierCode) else TierCode(tier_code)


def get_card_theme(tier_code: Union[TierCode, str]) -> CardTheme:
    """Card theme for a tier; unknown codes fall back to the non-regional card."""
    try:
        return _CARD_THEMES[_coerce_tier(tier_code)]
    except ValueError:
        return _CARD_THEMES[TierCode.NON_REGIONAL]


def get_share_text(tier_code: Union[TierCode, str], region: RegionProfile = KERALA) -> str:
    """Share blurb for a tier, led by its score and label."""
    try:
        tier = region.tier(_coerce_tier(tier_code))
    except ValueError:
        return f"{GENERIC_SHARE_TEXT} {region.hashtags}".strip()

    headline, body = _SHARE_BLURBS[tier.code]
    headline = headline.format(label=tier.label)
    return f"{tier.score}% {headline}\n\n{body}\n\n{region.hashtags}".rstrip()
