# =============================================================================
# core/reference_data.py  —  Static Reference Tables
# =============================================================================
#
# WHAT THIS MODULE HOLDS:
#   The fixed tables every derivation step reads from:
#     - the priority vocabulary and its human-readable labels
#     - budget category base weights and per-priority modifiers
#     - the venue archetype catalog
#     - the vibe (aesthetic profile) library
#     - the risk catalog, the timeline phases and the fixed checklists
#
#   Tables are built once at import time as tuples and MappingProxyType
#   views.  Nothing in the engine writes to them.
#
# ORDER MATTERS:
#   Declaration order is a tie-break in several places: venue ranking,
#   "largest category" selection in budget normalization, and risk sorting
#   all fall back to the order the entries appear here.
# =============================================================================

from dataclasses import dataclass
from types import MappingProxyType

PRIORITIES = ("food", "party", "elegance", "intimacy", "photos")
SEASONS = ("spring", "summer", "fall", "winter")

STRATEGIC_PRIORITY_LABELS = MappingProxyType({
    "food": "Food and beverage experience",
    "party": "Guest energy and celebration flow",
    "elegance": "Visual elegance and styling",
    "intimacy": "Intimate guest experience",
    "photos": "Photography and storytelling",
})


# -----------------------------------------------------------------------------
# Budget categories
# -----------------------------------------------------------------------------
# Seven scored categories share 90%; the Buffer holds the remaining 10%.
# -----------------------------------------------------------------------------
BUFFER_CATEGORY = "Buffer"
BUFFER_PERCENT = 10
MIN_CATEGORY_WEIGHT = 4

BASE_CATEGORY_WEIGHTS = MappingProxyType({
    "Venue": 23,
    "Catering": 25,
    "Photography": 10,
    "Attire": 8,
    "Decor": 10,
    "Entertainment": 8,
    "Planner": 6,
})

SPEND_CATEGORIES = tuple(BASE_CATEGORY_WEIGHTS)

PRIORITY_MODIFIERS = MappingProxyType({
    "food": MappingProxyType({
        "Catering": 4, "Decor": -1, "Entertainment": -1, "Attire": -2,
    }),
    "party": MappingProxyType({
        "Entertainment": 4, "Venue": 1, "Decor": -2, "Attire": -1, "Planner": -2,
    }),
    "elegance": MappingProxyType({
        "Decor": 4, "Attire": 2, "Entertainment": -2, "Planner": -2, "Venue": -2,
    }),
    "intimacy": MappingProxyType({
        "Venue": 2, "Decor": 1, "Entertainment": -1, "Catering": -1, "Planner": -1,
    }),
    "photos": MappingProxyType({
        "Photography": 5, "Decor": 1, "Entertainment": -2, "Venue": -2, "Attire": -2,
    }),
})


# -----------------------------------------------------------------------------
# Venue archetype catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class VenueProfile:
    venue_type: str
    vibes: tuple[str, ...]
    priorities: tuple[str, ...]
    budget_impact_tier: str
    budget_share_range_pct: tuple[int, int]
    capacity_range: tuple[int, int]
    reasons: tuple[str, ...]


VENUE_PROFILES = (
    VenueProfile(
        venue_type="Estate",
        vibes=("romantic", "elegance", "classic", "rustic"),
        priorities=("elegance", "photos", "intimacy"),
        budget_impact_tier="$$$",
        budget_share_range_pct=(45, 58),
        capacity_range=(70, 220),
        reasons=(
            "Built-in architecture reduces decor load while maintaining visual impact.",
            "Excellent natural backdrops for portraits and ceremony moments.",
        ),
    ),
    VenueProfile(
        venue_type="Boutique hotel",
        vibes=("modern", "elegance", "romantic", "minimalist"),
        priorities=("food", "party", "elegance"),
        budget_impact_tier="$$$",
        budget_share_range_pct=(42, 55),
        capacity_range=(60, 180),
        reasons=(
            "Integrated catering and logistics simplify coordination.",
            "Consistent service operations help preserve guest experience quality.",
        ),
    ),
    VenueProfile(
        venue_type="Industrial loft",
        vibes=("modern", "minimalist", "dramatic"),
        priorities=("party", "photos", "elegance"),
        budget_impact_tier="$$",
        budget_share_range_pct=(38, 48),
        capacity_range=(80, 260),
        reasons=(
            "Open layout supports flexible dance floor and guest flow design.",
            "Neutral shell allows strong creative direction without visual clutter.",
        ),
    ),
    VenueProfile(
        venue_type="Garden venue",
        vibes=("romantic", "rustic", "intimacy", "minimalist"),
        priorities=("intimacy", "photos", "food"),
        budget_impact_tier="$$",
        budget_share_range_pct=(40, 52),
        capacity_range=(40, 160),
        reasons=(
            "Outdoor atmosphere supports an intimate and naturally immersive mood.",
            "Natural light improves daytime photography quality.",
        ),
    ),
    VenueProfile(
        venue_type="Historic villa",
        vibes=("romantic", "dramatic", "elegance", "classic"),
        priorities=("elegance", "photos", "food"),
        budget_impact_tier="$$$",
        budget_share_range_pct=(44, 57),
        capacity_range=(50, 180),
        reasons=(
            "Character-rich interiors elevate storytelling and guest perception.",
            "Distinct ceremony and reception zones support cleaner timeline flow.",
        ),
    ),
    VenueProfile(
        venue_type="Private club",
        vibes=("classic", "modern", "elegance", "intimacy"),
        priorities=("food", "intimacy", "party"),
        budget_impact_tier="$$",
        budget_share_range_pct=(39, 50),
        capacity_range=(40, 140),
        reasons=(
            "Controlled guest count creates a high-touch hospitality experience.",
            "Predictable operations reduce execution risk on event day.",
        ),
    ),
)

DECISION_CHECKLIST = (
    "Capacity vs comfort",
    "Catering restrictions",
    "Weather contingency",
    "Vendor flexibility",
    "Hidden costs",
)

NEGOTIATION_TIPS = (
    "Ask for weekday or shoulder-season leverage before committing to premium dates.",
    "Negotiate package inclusions (furniture, lighting, staffing) before rate reductions.",
    "Confirm service charges and overtime triggers in writing before deposit transfer.",
)

DEPOSIT_EXPECTATION_PCT = (20, 40)


# -----------------------------------------------------------------------------
# Vibe library (Design Synthesizer)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class VibeProfile:
    color_palette: tuple[str, ...]
    textures: tuple[str, ...]
    lighting: str
    floral: str
    dress_code: str


VIBE_LIBRARY = MappingProxyType({
    "modern": VibeProfile(
        color_palette=("warm white", "graphite", "champagne gold"),
        textures=("polished stone", "brushed metal", "smooth linen"),
        lighting="architectural pin-spot lighting with soft perimeter wash",
        floral="sculptural blooms with minimal greenery",
        dress_code="Modern cocktail attire",
    ),
    "rustic": VibeProfile(
        color_palette=("sage", "terracotta", "soft ivory"),
        textures=("raw wood", "matte ceramics", "natural linen"),
        lighting="warm festoon lighting and layered candlelight",
        floral="garden florals with textural greenery",
        dress_code="Formal garden attire",
    ),
    "romantic": VibeProfile(
        color_palette=("blush", "ivory", "dusty rose"),
        textures=("silk", "velvet ribbon", "handmade paper"),
        lighting="candle-forward glow with soft uplighting",
        floral="soft ivory florals with trailing accents",
        dress_code="Romantic formal attire",
    ),
    "minimalist": VibeProfile(
        color_palette=("bone", "taupe", "charcoal"),
        textures=("smooth plaster", "fine cotton", "matte ceramics"),
        lighting="clean directional lighting with restrained contrast",
        floral="single-varietal florals with structured greenery",
        dress_code="Minimal formal attire",
    ),
    "dramatic": VibeProfile(
        color_palette=("black", "oxblood", "antique gold"),
        textures=("velvet", "smoked glass", "aged brass"),
        lighting="high-contrast pools of light with dark surround",
        floral="moody florals with deep tonal foliage",
        dress_code="Black-tie optional",
    ),
})

DEFAULT_VIBE_PROFILE = VibeProfile(
    color_palette=("ivory", "sand", "warm taupe"),
    textures=("linen", "stone", "matte ceramic"),
    lighting="warm layered candlelight with soft ambient wash",
    floral="ivory florals with structured greenery",
    dress_code="Formal attire",
)

DEFAULT_NARRATIVE_LINE = (
    "Soft ivory florals with structured greenery over warm stone textures "
    "create a calm, elegant atmosphere that feels timeless in photographs."
)


# -----------------------------------------------------------------------------
# Timeline phases and risk catalog (Budget Architect)
# -----------------------------------------------------------------------------
# Each phase: (label, start months out, end months out, tasks).
TIMELINE_PHASES = (
    ("12-9 months", 12, 9, ("Venue booking", "Planner selection", "Photographer booking")),
    ("9-6 months", 9, 6, ("Catering decisions", "Design concept", "Attire planning")),
    ("6-3 months", 6, 3, ("Invitations", "Guest logistics", "Vendor timeline alignment")),
    ("3 months to wedding", 3, 0, ("Vendor confirmations", "Final fittings", "Run-of-show finalization")),
)

SEVERITY_WEIGHTS = MappingProxyType({"high": 3, "medium": 2, "low": 1})

RISK_PEAK_SEASON = "Peak season availability"
RISK_BUDGET_CREEP = "Budget creep"
RISK_GUEST_LOGISTICS = "Guest logistics"

RISK_MITIGATIONS = MappingProxyType({
    RISK_PEAK_SEASON: (
        "Lock venue shortlist quickly and hold primary/backup dates before design commitments."
    ),
    RISK_BUDGET_CREEP: (
        "Freeze category caps after venue contract and preserve the 10% buffer as non-negotiable."
    ),
    RISK_GUEST_LOGISTICS: (
        "Publish transport/accommodation guidance early and assign ownership for RSVP follow-ups."
    ),
})

# Non-negotiables that add planning friction.
HIGH_FRICTION_PATTERNS = (
    r"destination",
    r"outdoor",
    r"specific vendor",
    r"custom tradition",
    r"religious tradition",
)
