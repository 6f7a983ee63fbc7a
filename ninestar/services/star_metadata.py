"""Static descriptive records for the nine stars."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class StarMetadata:
    number: int
    element: str
    polarity: str
    trigram: str
    direction: str
    color: str
    description: str
    characteristics: Tuple[str, ...]
    keywords: Tuple[str, ...]

    def as_dict(self) -> Dict[str, object]:
        return {
            "number": self.number,
            "element": self.element,
            "polarity": self.polarity,
            "trigram": self.trigram,
            "direction": self.direction,
            "color": self.color,
            "description": self.description,
            "characteristics": list(self.characteristics),
            "keywords": list(self.keywords),
        }


STAR_METADATA: Dict[int, StarMetadata] = {
    1: StarMetadata(
        number=1,
        element="Water",
        polarity="Yang",
        trigram="Kan",
        direction="North",
        color="#1e40af",
        description="Water Star - Depth and Flow",
        characteristics=("Adaptable and flowing", "Deep thinker", "Intuitive nature"),
        keywords=("wisdom", "depth", "flexibility"),
    ),
    2: StarMetadata(
        number=2,
        element="Earth",
        polarity="Yin",
        trigram="Kun",
        direction="Southwest",
        color="#78716c",
        description="Soil/Earth Star - Nurturing Foundation",
        characteristics=("Nurturing and supportive", "Patient and steady", "Service-oriented"),
        keywords=("receptivity", "nurture", "devotion"),
    ),
    3: StarMetadata(
        number=3,
        element="Wood",
        polarity="Yang",
        trigram="Zhen",
        direction="East",
        color="#059669",
        description="Thunder/Wood Star - Growth and Action",
        characteristics=("Dynamic and energetic", "Pioneer spirit", "Quick to act"),
        keywords=("growth", "initiative", "vitality"),
    ),
    4: StarMetadata(
        number=4,
        element="Wood",
        polarity="Yin",
        trigram="Xun",
        direction="Southeast",
        color="#10b981",
        description="Wind/Wood Star - Gentle Influence",
        characteristics=("Gentle and persistent", "Communicative", "Adaptable"),
        keywords=("communication", "flexibility", "influence"),
    ),
    5: StarMetadata(
        number=5,
        element="Earth",
        polarity="Yang",
        trigram="None",
        direction="Center",
        color="#ca8a04",
        description="Central Earth Star - Power and Transformation",
        characteristics=("Powerful presence", "Transformative", "Central focus"),
        keywords=("power", "transformation", "control"),
    ),
    6: StarMetadata(
        number=6,
        element="Metal",
        polarity="Yang",
        trigram="Qian",
        direction="Northwest",
        color="#71717a",
        description="Heaven/Metal Star - Leadership and Authority",
        characteristics=("Natural leader", "Dignified", "Authoritative"),
        keywords=("leadership", "dignity", "heaven"),
    ),
    7: StarMetadata(
        number=7,
        element="Metal",
        polarity="Yin",
        trigram="Dui",
        direction="West",
        color="#a1a1aa",
        description="Lake/Metal Star - Joy and Expression",
        characteristics=("Joyful expression", "Social and charming", "Creative"),
        keywords=("joy", "pleasure", "expression"),
    ),
    8: StarMetadata(
        number=8,
        element="Earth",
        polarity="Yang",
        trigram="Gen",
        direction="Northeast",
        color="#57534e",
        description="Mountain/Earth Star - Stillness and Contemplation",
        characteristics=("Still and contemplative", "Self-disciplined", "Introspective"),
        keywords=("stillness", "introspection", "completion"),
    ),
    9: StarMetadata(
        number=9,
        element="Fire",
        polarity="Yin",
        trigram="Li",
        direction="South",
        color="#dc2626",
        description="Fire Star - Illumination and Clarity",
        characteristics=("Bright and illuminating", "Passionate", "Clear vision"),
        keywords=("illumination", "passion", "clarity"),
    ),
}


def get_star_metadata(number: int) -> StarMetadata:
    try:
        return STAR_METADATA[number]
    except KeyError as exc:
        raise KeyError(f"Unknown star number: {number}") from exc


def get_stars_by_element(element: str) -> List[StarMetadata]:
    wanted = element.strip().lower()
    return [meta for meta in STAR_METADATA.values() if meta.element.lower() == wanted]


def get_stars_by_polarity(polarity: str) -> List[StarMetadata]:
    wanted = polarity.strip().lower()
    return [meta for meta in STAR_METADATA.values() if meta.polarity.lower() == wanted]
