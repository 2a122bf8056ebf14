# =============================================================================
# core/design.py  —  Design Synthesizer
# =============================================================================
#
# Maps the couple's vibe words onto the static vibe library and merges the
# matched profiles into one DesignDirection.  Unknown words are skipped; if
# nothing matches, the neutral default profile is returned.
# =============================================================================

from datetime import date
from typing import Any, Mapping, Optional, Union

from core.context import normalize_context, normalize_vibes
from core.models import CoupleContext, DesignDirection
from core.numeric import unique
from core.reference_data import (
    DEFAULT_NARRATIVE_LINE,
    DEFAULT_VIBE_PROFILE,
    VIBE_LIBRARY,
    VibeProfile,
)


MAX_PALETTE = 4
MAX_TEXTURES = 4

NARRATIVE_LINE = (
    "{primary} and {secondary} tones layered over {texture} textures, paired with "
    "{lighting}, create a tangible atmosphere that feels cohesive from ceremony "
    "through reception."
)


def matched_profiles(vibe_words) -> list[VibeProfile]:
    return [VIBE_LIBRARY[word] for word in normalize_vibes(vibe_words) if word in VIBE_LIBRARY]


def default_design_direction() -> DesignDirection:
    return DesignDirection(
        color_palette=list(DEFAULT_VIBE_PROFILE.color_palette),
        textures=list(DEFAULT_VIBE_PROFILE.textures),
        lighting_style=DEFAULT_VIBE_PROFILE.lighting,
        floral_direction=DEFAULT_VIBE_PROFILE.floral,
        dress_code_suggestion=DEFAULT_VIBE_PROFILE.dress_code,
        narrative_line=DEFAULT_NARRATIVE_LINE,
    )


def _dress_code(profiles: list[VibeProfile]) -> str:
    # The most formal code wins when any matched vibe asks for black tie.
    for profile in profiles:
        if "black-tie" in profile.dress_code.lower():
            return profile.dress_code
    return profiles[0].dress_code


def build_design_direction(
    raw: Union[Mapping[str, Any], CoupleContext],
    today: Optional[date] = None,
) -> DesignDirection:
    """Translate vibe words into palette, textures, lighting and dress code."""
    context = normalize_context(raw, today=today)
    profiles = matched_profiles(context.vibe_words)
    if not profiles:
        return default_design_direction()

    palette = unique(color for profile in profiles for color in profile.color_palette)
    textures = unique(texture for profile in profiles for texture in profile.textures)
    palette, textures = palette[:MAX_PALETTE], textures[:MAX_TEXTURES]
    first = profiles[0]

    return DesignDirection(
        color_palette=palette,
        textures=textures,
        lighting_style=first.lighting,
        floral_direction=first.floral,
        dress_code_suggestion=_dress_code(profiles),
        narrative_line=NARRATIVE_LINE.format(
            primary=palette[0],
            secondary=palette[1] if len(palette) > 1 else palette[0],
            texture=textures[0],
            lighting=first.lighting,
        ),
    )
