# =============================================================================
# core/context.py  —  Input Normalizer (the engine's single entry gate)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a raw couple-context record (a dict from the tool layer, or a
#   CoupleContextInput) into a frozen CoupleContext.  It is the only place
#   input is validated; every other core module trusts what it returns.
#
# TWO PASSES:
#   1. Field rules, declared on the pydantic model below (lengths, ranges,
#      vocabularies, ISO date syntax).
#   2. Cross-field rules, checked by hand once the fields are well-formed:
#        - a wedding_date or a wedding_season must be given
#        - budget_max must be >= budget_min
#        - the three priorities must be distinct
#
#   Either pass fails with ValidationError(field, message).  The first
#   failing field is reported; the full pydantic error list rides along on
#   .errors for hosts that want every issue at once.
#
# THE CLOCK SEAM:
#   normalize_context() stamps the context with `as_of` (today's date).  All
#   month arithmetic downstream is measured from that stamp, never from the
#   system clock.
# =============================================================================

import re
from datetime import date
from typing import Annotated, Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from core.dates import infer_season, resolve_today
from core.models import CoupleContext, Priority, Season

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Budgets stay finite and small enough for exact half-up rounding.
MIN_BUDGET = 1000
MAX_BUDGET = 1_000_000_000

VibeWord = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2)]


class ValidationError(ValueError):
    """A rejected couple context.

    Attributes:
        field: Dotted path of the offending field, e.g. "budget_max" or
            "vibe_words.2".
        message: Human-readable reason, safe to show verbatim.
        errors: Every issue found (pydantic error dicts), when available.
    """

    def __init__(self, field: str, message: str, errors: Optional[list[dict]] = None):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.errors = errors or [{"loc": tuple(field.split(".")), "msg": message}]


class CoupleContextInput(BaseModel):
    """The raw planning inputs, with their field-level bounds."""

    model_config = ConfigDict(str_strip_whitespace=True)

    location: str = Field(..., min_length=2, description="Primary wedding location.")
    wedding_date: Optional[date] = Field(
        default=None, description="Wedding date in ISO format (YYYY-MM-DD)."
    )
    wedding_season: Optional[Season] = Field(
        default=None, description="Season, if an exact date is not finalized."
    )
    guest_count: int = Field(..., ge=10, le=400, description="Estimated guest count.")
    budget_min: float = Field(
        ..., ge=MIN_BUDGET, le=MAX_BUDGET, allow_inf_nan=False,
        description="Lower bound of budget in USD.",
    )
    budget_max: float = Field(
        ..., ge=MIN_BUDGET, le=MAX_BUDGET, allow_inf_nan=False,
        description="Upper bound of budget in USD.",
    )
    priorities: list[Priority] = Field(
        ..., min_length=3, max_length=3, description="Top three wedding priorities."
    )
    vibe_words: list[VibeWord] = Field(
        ..., min_length=1, max_length=5, description="Descriptive vibe words."
    )
    non_negotiable: str = Field(
        ..., min_length=3, description="One non-negotiable wedding requirement."
    )

    @field_validator("wedding_date", mode="before")
    @classmethod
    def _parse_wedding_date(cls, value: Any) -> Any:
        if value is None or isinstance(value, date):
            return value
        if not isinstance(value, str) or not _ISO_DATE.match(value.strip()):
            raise PydanticCustomError(
                "iso_date", "wedding_date must use the YYYY-MM-DD format."
            )
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise PydanticCustomError(
                "calendar_date", "wedding_date must be a valid calendar date."
            ) from None


def normalize_vibes(vibe_words) -> list[str]:
    """Lowercase, trim, and drop empty vibe words for table lookups."""
    return [word.strip().lower() for word in vibe_words if word.strip()]


def _first_error(exc: PydanticValidationError) -> ValidationError:
    errors = exc.errors()
    first = errors[0]
    path = ".".join(str(part) for part in first["loc"]) or "context"
    return ValidationError(path, first["msg"], errors=errors)


def normalize_context(
    raw: Union[Mapping[str, Any], CoupleContextInput, CoupleContext],
    today: Optional[date] = None,
) -> CoupleContext:
    """Validate a raw couple context and return the normalized record.

    Args:
        raw: The raw fields as a mapping, a CoupleContextInput, or an
            already-normalized CoupleContext (returned unchanged).
        today: Reference date for months-to-event math.  Defaults to the
            current date.

    Raises:
        ValidationError: On the first field or cross-field rule violated.
    """
    if isinstance(raw, CoupleContext):
        return raw

    try:
        if isinstance(raw, CoupleContextInput):
            parsed = CoupleContextInput.model_validate(raw.model_dump())
        else:
            parsed = CoupleContextInput.model_validate(dict(raw))
    except PydanticValidationError as exc:
        raise _first_error(exc) from exc

    if parsed.wedding_date is None and parsed.wedding_season is None:
        raise ValidationError("wedding_date", "Provide either wedding_date or wedding_season.")

    if parsed.budget_max < parsed.budget_min:
        raise ValidationError(
            "budget_max", "budget_max must be greater than or equal to budget_min."
        )

    if len(set(parsed.priorities)) != len(parsed.priorities):
        raise ValidationError("priorities", "priorities must contain three distinct values.")

    # An explicit season wins over the one implied by the date.
    season = parsed.wedding_season or infer_season(parsed.wedding_date)

    return CoupleContext(
        location=parsed.location,
        wedding_date=parsed.wedding_date,
        wedding_season=season,
        guest_count=parsed.guest_count,
        budget_min=parsed.budget_min,
        budget_max=parsed.budget_max,
        priorities=tuple(parsed.priorities),
        vibe_words=tuple(parsed.vibe_words),
        non_negotiable=parsed.non_negotiable,
        as_of=resolve_today(today),
    )
