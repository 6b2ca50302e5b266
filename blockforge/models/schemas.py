"""Pydantic models for data structures."""

from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from enum import Enum


class BaseItem(str, Enum):
    """Items a weapon can be forged from."""
    DIAMOND_SWORD = "diamond_sword"
    NETHERITE_SWORD = "netherite_sword"
    IRON_SWORD = "iron_sword"
    TRIDENT = "trident"


class NameColor(str, Enum):
    """Text colors for the item name and ability lore."""
    AQUA = "aqua"
    GOLD = "gold"
    LIGHT_PURPLE = "light_purple"
    GREEN = "green"
    RED = "red"


class PrimaryEnchantment(str, Enum):
    """Enchantments allowed in the primary slot."""
    SHARPNESS = "sharpness"
    SMITE = "smite"
    BANE_OF_ARTHROPODS = "bane_of_arthropods"
    LOOTING = "looting"
    FIRE_ASPECT = "fire_aspect"
    KNOCKBACK = "knockback"


class SecondaryEnchantment(str, Enum):
    """Enchantments allowed in the optional secondary slot."""
    LOOTING = "looting"
    SWEEPING = "sweeping"
    FIRE_ASPECT = "fire_aspect"
    UNBREAKING = "unbreaking"
    MENDING = "mending"


class EffectId(str, Enum):
    """Status effects an ability can trigger."""
    STRENGTH = "strength"
    SPEED = "speed"
    REGENERATION = "regeneration"
    NIGHT_VISION = "night_vision"


class AbilityEffect(BaseModel):
    """A catalog entry describing one triggerable status effect."""

    model_config = ConfigDict(frozen=True)

    id: EffectId
    label: str
    status_lore: str
    supports_amplifier: bool
    mob_effect: str

    def activation_command(self, duration: int, amplifier: int) -> str:
        """Command that applies this effect to the executing player."""
        if not self.supports_amplifier:
            amplifier = 0
        return f"effect give @s minecraft:{self.mob_effect} {duration} {amplifier} true"


class ModConfig(BaseModel):
    """Validated weapon configuration.

    Instances are produced by ``blockforge.normalizer.normalize`` which
    repairs every field before construction, so the bounds declared here
    never reject a normalized record.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
        validate_default=True,
    )

    mod_name: str = "Custom Arsenal"
    item_name: str = "Arcane Blade"
    ability_name: str = "Arcane Pulse"
    ability_description: str = Field(
        default="A bespoke enchantment forged via BlockForge.", max_length=200
    )
    base_item: BaseItem = BaseItem.DIAMOND_SWORD
    name_color: NameColor = NameColor.AQUA
    primary_enchantment: PrimaryEnchantment = PrimaryEnchantment.SHARPNESS
    primary_level: int = Field(default=5, ge=1, le=10)
    secondary_enchantment: Optional[SecondaryEnchantment] = None
    secondary_level: Optional[int] = Field(default=None, ge=1, le=10)
    attack_bonus: float = Field(default=0, ge=0, le=30)
    ability_effect: EffectId = EffectId.STRENGTH
    ability_duration: int = Field(default=12, ge=1, le=120)
    ability_amplifier: int = Field(default=0, ge=0, le=10)
    custom_model_data: Optional[int] = Field(default=None, ge=1, le=9_999_999)
    ability_message: str = Field(default="Power courses through your veins.", max_length=160)


class DatapackArtifacts(BaseModel):
    """Generated text artifacts for one configuration."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    namespace: str
    give_command: str
    ability_function: str
    load_function: str
    pack_meta: Dict[str, Any]
