"""Static catalog of ability effects and option labels."""

from types import MappingProxyType
from typing import Any, Dict, List

from blockforge.models.schemas import (
    AbilityEffect,
    BaseItem,
    EffectId,
    NameColor,
    PrimaryEnchantment,
    SecondaryEnchantment,
)


ABILITY_EFFECTS = MappingProxyType({
    EffectId.STRENGTH: AbilityEffect(
        id=EffectId.STRENGTH,
        label="Berserker Surge (Strength)",
        status_lore="Trigger to unleash a Strength boost.",
        supports_amplifier=True,
        mob_effect="strength",
    ),
    EffectId.SPEED: AbilityEffect(
        id=EffectId.SPEED,
        label="Windstep (Speed)",
        status_lore="Trigger to dash forward with Speed.",
        supports_amplifier=True,
        mob_effect="speed",
    ),
    EffectId.REGENERATION: AbilityEffect(
        id=EffectId.REGENERATION,
        label="Emerald Renewal (Regeneration)",
        status_lore="Trigger instant Regeneration to recover health.",
        supports_amplifier=True,
        mob_effect="regeneration",
    ),
    EffectId.NIGHT_VISION: AbilityEffect(
        id=EffectId.NIGHT_VISION,
        label="Void Sight (Night Vision)",
        status_lore="Trigger to pierce the darkness with Night Vision.",
        supports_amplifier=False,
        mob_effect="night_vision",
    ),
})

BASE_ITEM_LABELS = {
    BaseItem.DIAMOND_SWORD: "Diamond Sword",
    BaseItem.NETHERITE_SWORD: "Netherite Sword",
    BaseItem.IRON_SWORD: "Iron Sword",
    BaseItem.TRIDENT: "Trident",
}

COLOR_LABELS = {
    NameColor.AQUA: "Aqua",
    NameColor.GOLD: "Gold",
    NameColor.LIGHT_PURPLE: "Magenta",
    NameColor.GREEN: "Emerald",
    NameColor.RED: "Crimson",
}

PRIMARY_ENCHANTMENT_LABELS = {
    PrimaryEnchantment.SHARPNESS: "Sharpness",
    PrimaryEnchantment.SMITE: "Smite",
    PrimaryEnchantment.BANE_OF_ARTHROPODS: "Bane of Arthropods",
    PrimaryEnchantment.LOOTING: "Looting",
    PrimaryEnchantment.FIRE_ASPECT: "Fire Aspect",
    PrimaryEnchantment.KNOCKBACK: "Knockback",
}

SECONDARY_ENCHANTMENT_LABELS = {
    SecondaryEnchantment.LOOTING: "Looting",
    SecondaryEnchantment.SWEEPING: "Sweeping Edge",
    SecondaryEnchantment.FIRE_ASPECT: "Fire Aspect",
    SecondaryEnchantment.UNBREAKING: "Unbreaking",
    SecondaryEnchantment.MENDING: "Mending",
}


def list_ability_effects() -> List[AbilityEffect]:
    """Return ability effects in display order."""
    return list(ABILITY_EFFECTS.values())


def default_ability() -> AbilityEffect:
    return next(iter(ABILITY_EFFECTS.values()))


def resolve_ability(effect_id: Any) -> AbilityEffect:
    """Look up an ability effect, falling back to the first catalog entry."""
    try:
        return ABILITY_EFFECTS[EffectId(effect_id)]
    except (ValueError, KeyError, TypeError):
        return default_ability()


def option_labels() -> Dict[str, List[Dict[str, str]]]:
    """Build value/label pairs for every selectable option."""

    def _options(labels) -> List[Dict[str, str]]:
        return [{"value": key.value, "label": label} for key, label in labels.items()]

    return {
        "baseItems": _options(BASE_ITEM_LABELS),
        "colors": _options(COLOR_LABELS),
        "primaryEnchantments": _options(PRIMARY_ENCHANTMENT_LABELS),
        "secondaryEnchantments": _options(SECONDARY_ENCHANTMENT_LABELS),
        "abilityEffects": [
            {
                "value": effect.id.value,
                "label": effect.label,
                "statusLore": effect.status_lore,
                "supportsAmplifier": effect.supports_amplifier,
            }
            for effect in list_ability_effects()
        ],
    }
