"""
Ordered keyword/regex rule tables used by the description extractor.

Each table is scanned top to bottom and the first matching rule wins, so
the order of entries is part of the behaviour. Patterns run against the
lower-cased description unless noted otherwise.
"""
from __future__ import annotations

import re
from typing import List, Optional, Pattern, Tuple

from ..selection.types import GemType, JewelryType, MetalType, Shape


def _words(*terms: str) -> Pattern[str]:
    """Match any term at the start of a word (plural/suffix forms still hit)."""
    return re.compile(r"\b(?:" + "|".join(re.escape(t) for t in terms) + r")")


# --- jewelry type -------------------------------------------------------

JEWELRY_TYPE_RULES: List[Tuple[JewelryType, Pattern[str]]] = [
    (JewelryType.RING, _words("ring")),
    (JewelryType.NECKLACE, re.compile(r"necklace|pendant")),
    (JewelryType.EARRINGS, re.compile(r"earring")),
    (JewelryType.BRACELET, re.compile(r"bracelet")),
]

# --- metal --------------------------------------------------------------
# All terms of a rule must be present. Compound golds precede plain gold.

METAL_RULES: List[Tuple[MetalType, Tuple[str, ...]]] = [
    (MetalType.ROSE_GOLD, ("gold", "rose")),
    (MetalType.WHITE_GOLD, ("gold", "white")),
    (MetalType.GOLD, ("gold",)),
    (MetalType.SILVER, ("silver",)),
    (MetalType.PLATINUM, ("platinum",)),
    (MetalType.TITANIUM, ("titanium",)),
]

# --- gemstone -----------------------------------------------------------

GEM_RULES: List[Tuple[GemType, Pattern[str]]] = [
    (GemType.DIAMOND, re.compile(r"diamond")),
    (GemType.RUBY, re.compile(r"ruby|rubies")),
    (GemType.SAPPHIRE, re.compile(r"sapphire")),
    (GemType.EMERALD, re.compile(r"emerald")),
    (GemType.AMETHYST, re.compile(r"amethyst")),
    (GemType.TOPAZ, re.compile(r"topaz")),
]

NO_GEM_PATTERN = re.compile(r"no gem|without gem|no stone|gemless")

# --- gem size -----------------------------------------------------------

CARAT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(?:-|\s)?(?:carat|ct)", re.IGNORECASE)

GEM_SIZE_WORD_RULES: List[Tuple[float, Pattern[str]]] = [
    (0.5, re.compile(r"small|tiny")),
    (1.5, re.compile(r"medium")),
    (2.5, re.compile(r"large|big")),
]

# --- gem count ----------------------------------------------------------

EXPLICIT_COUNT_PATTERN = re.compile(
    r"(\d+)\s+(?:gem|stone|diamond|rub(?:y|ies)|sapphire|emerald|amethyst|topaz)",
    re.IGNORECASE,
)

NUMBER_WORD_RULES: List[Tuple[int, Pattern[str]]] = [
    (value, re.compile(r"\b" + word + r"\b"))
    for word, value in [
        ("one", 1),
        ("two", 2),
        ("three", 3),
        ("four", 4),
        ("five", 5),
        ("six", 6),
        ("seven", 7),
        ("single", 1),
        ("couple", 2),
        ("pair", 2),
        ("few", 3),
        ("several", 4),
        ("many", 5),
    ]
]

PLURAL_GEM_PATTERN = re.compile(r"diamonds|rubies|sapphires|emeralds|gems|stones")
CLUSTER_PATTERN = re.compile(r"alternating|surrounding|cluster|multiple")

PLURAL_MIN_COUNT = 2
CLUSTER_MIN_COUNT = 3

# --- shape --------------------------------------------------------------

CUSTOM_SHAPE_SENTINEL = "custom-1"

SHAPE_RULES: List[Tuple[str, Pattern[str]]] = [
    (Shape.ROUND.value, _words("round")),
    (Shape.SQUARE.value, _words("square")),
    (Shape.TRIANGLE.value, _words("triangle", "triangular")),
    (Shape.HEART.value, _words("heart")),
    (Shape.HEXAGON.value, _words("hexagon")),
    (CUSTOM_SHAPE_SENTINEL, re.compile(r"custom shape|custom design|unique shape")),
]

# --- ring size ----------------------------------------------------------

RING_SIZE_PATTERN = re.compile(r"(?:ring\s+)?size\s+(\d+(?:\.\d+)?)", re.IGNORECASE)

# --- engraving (matched against the original-case text) ------------------

# double quotes may enclose apostrophes; single quotes must not touch a word
QUOTED_TEXT_PATTERN = re.compile(r"\"([^\"]+)\"|(?<!\w)'([^']+)'(?!\w)")

ENGRAVING_LEAD_INS: List[Pattern[str]] = [
    re.compile(r"\bengrav(?:e|ed|ing)(?:\s+with)?\s+([^,.]+)", re.IGNORECASE),
    re.compile(r"\bsaying\s+([^,.]+)", re.IGNORECASE),
    re.compile(r"\bthat\s+says\s+([^,.]+)", re.IGNORECASE),
    re.compile(r"\binscrib(?:e|ed|ing)(?:\s+with)?\s+([^,.]+)", re.IGNORECASE),
    re.compile(r"\btext(?:\s+(?:saying|reading))?\s+([^,.]+)", re.IGNORECASE),
]


def first_match(rules, text: str) -> Optional[object]:
    """Return the value of the first (value, pattern) rule matching text."""
    for value, pattern in rules:
        if pattern.search(text):
            return value
    return None


EXAMPLE_PROMPTS: List[str] = [
    "A gold engagement ring with a 1 carat round diamond",
    "Silver earrings with small sapphires in a triangle shape",
    "A rose gold necklace with a heart pendant and small diamonds",
    "Platinum wedding band with custom engraving 'Forever Yours'",
    "A white gold bracelet with alternating emeralds and diamonds",
    "A minimalist titanium ring with no gemstones",
]
