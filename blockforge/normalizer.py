"""Turn loosely-typed request payloads into validated weapon configurations.

Every field is repaired rather than rejected: missing or malformed values
fall back to a fixed default and numbers are clamped into range, so
``normalize`` accepts any input without raising.
"""

import math
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Tuple, Type, TypeVar

from loguru import logger

from blockforge.catalog import default_ability
from blockforge.models.schemas import (
    BaseItem,
    EffectId,
    ModConfig,
    NameColor,
    PrimaryEnchantment,
    SecondaryEnchantment,
)

DEFAULT_NAMESPACE = "custom_mod"
NAMESPACE_MAX_LENGTH = 32

DESCRIPTION_MAX_LENGTH = 200
MESSAGE_MAX_LENGTH = 160
CUSTOM_MODEL_DATA_MAX = 9_999_999

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_LINE_BREAKS = re.compile(r"[\x00-\x1f\x7f\x85\u2028\u2029]+")

E = TypeVar("E", bound=Enum)


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def slugify_namespace(text: str) -> str:
    """Derive a datapack namespace from free text.

    >>> slugify_namespace("Emerald Arsenal")
    'emerald_arsenal'
    """
    slug = _NON_ALNUM.sub("_", text.lower()).strip("_")[:NAMESPACE_MAX_LENGTH]
    return slug or DEFAULT_NAMESPACE


def _coerce_text(value: Any, default: str, limit: Optional[int] = None) -> str:
    if not isinstance(value, str):
        return default
    text = _LINE_BREAKS.sub(" ", value).strip()
    if not text:
        return default
    if limit is not None:
        text = text[:limit].rstrip()
    return text


def _coerce_choice(field: str, value: Any, choices: Type[E], default: Optional[E]) -> Optional[E]:
    if isinstance(value, str):
        try:
            return choices(value)
        except ValueError:
            logger.debug(f"Unsupported {field} {value!r}, using {default.value if default else None}")
    return default


def _coerce_number(value: Any, fallback: float) -> float:
    """Parse a number, substituting ``fallback`` for anything non-finite."""
    if value is None or isinstance(value, bool):
        return fallback

    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return fallback

    if not isinstance(value, (str, int, float)):
        return fallback

    try:
        parsed = float(value)
    except (ValueError, OverflowError):
        return fallback

    if not math.isfinite(parsed):
        return fallback
    return parsed


def _coerce_int(value: Any, fallback: int, low: int, high: int) -> int:
    return int(clamp(math.floor(_coerce_number(value, fallback)), low, high))


def _coerce_custom_model_data(value: Any) -> Optional[int]:
    number = math.floor(_coerce_number(value, 0))
    if number <= 0:
        return None
    return int(clamp(number, 1, CUSTOM_MODEL_DATA_MAX))


def normalize(raw: Any) -> ModConfig:
    """Build a ``ModConfig`` from an untrusted payload."""
    if not isinstance(raw, Mapping):
        raw = {}

    secondary_enchantment = _coerce_choice(
        "secondary enchantment", raw.get("secondaryEnchantment"), SecondaryEnchantment, None
    )
    secondary_level = None
    if secondary_enchantment is not None:
        secondary_level = _coerce_int(raw.get("secondaryLevel"), 3, 1, 10)

    attack_bonus = clamp(_coerce_number(raw.get("attackBonus"), 0), 0, 30)

    config = ModConfig(
        mod_name=_coerce_text(raw.get("modName"), "Custom Arsenal"),
        item_name=_coerce_text(raw.get("itemName"), "Arcane Blade"),
        ability_name=_coerce_text(raw.get("abilityName"), "Arcane Pulse"),
        ability_description=_coerce_text(
            raw.get("abilityDescription"),
            "A bespoke enchantment forged via BlockForge.",
            DESCRIPTION_MAX_LENGTH,
        ),
        base_item=_coerce_choice("base item", raw.get("baseItem"), BaseItem, BaseItem.DIAMOND_SWORD),
        name_color=_coerce_choice("name color", raw.get("nameColor"), NameColor, NameColor.AQUA),
        primary_enchantment=_coerce_choice(
            "primary enchantment",
            raw.get("primaryEnchantment"),
            PrimaryEnchantment,
            PrimaryEnchantment.SHARPNESS,
        ),
        primary_level=_coerce_int(raw.get("primaryLevel"), 5, 1, 10),
        secondary_enchantment=secondary_enchantment,
        secondary_level=secondary_level,
        attack_bonus=attack_bonus,
        ability_effect=_coerce_choice(
            "ability effect", raw.get("abilityEffect"), EffectId, default_ability().id
        ),
        ability_duration=_coerce_int(raw.get("abilityDuration"), 12, 1, 120),
        ability_amplifier=_coerce_int(raw.get("abilityAmplifier"), 0, 0, 10),
        custom_model_data=_coerce_custom_model_data(raw.get("customModelData")),
        ability_message=_coerce_text(
            raw.get("abilityMessage"), "Power courses through your veins.", MESSAGE_MAX_LENGTH
        ),
    )
    return config


def resolve_namespace(raw: Any, config: ModConfig) -> str:
    """Pick the namespace: an explicit override first, then the mod name."""
    override = raw.get("namespace") if isinstance(raw, Mapping) else None
    if isinstance(override, str) and override.strip():
        return slugify_namespace(override)
    return slugify_namespace(config.mod_name)


def normalize_payload(raw: Any) -> Tuple[ModConfig, str]:
    """Normalize a request payload and derive its namespace."""
    config = normalize(raw)
    namespace = resolve_namespace(raw, config)
    logger.debug(f"Normalized payload for namespace {namespace}")
    return config, namespace
