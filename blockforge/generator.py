"""Builders for the text artifacts of a datapack.

All builders are pure: the same configuration always yields the same
strings, which keeps the preview output identical to what gets packaged.
"""

import json
from decimal import Decimal
from typing import Any, Dict, List, Tuple

from blockforge.catalog import resolve_ability
from blockforge.models.schemas import DatapackArtifacts, ModConfig
from blockforge.normalizer import clamp

DEFAULT_PACK_FORMAT = 26
HIDE_FLAGS = 127

UUID_DEFAULTS: Tuple[int, int, int, int] = (14602819, 8319051, 4019287, 9912741)


def _text_component(text: str, color: str) -> str:
    """Serialize a JSON text component without extra whitespace."""
    return json.dumps(
        {"text": text, "color": color, "italic": False},
        separators=(",", ":"),
        ensure_ascii=False,
    )


def _snbt_text_component(text: str, color: str) -> str:
    """Wrap a text component in a single-quoted SNBT string."""
    escaped = _text_component(text, color).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def derive_uuid_ints(seed: str) -> Tuple[int, int, int, int]:
    """Derive the four UUID integers of the attack modifier from a namespace.

    Each of the first four characters contributes ``ord(char) * (index + 11)``;
    positions the seed does not reach keep their default. This is a cosmetic
    identifier, distinct namespaces may collide.
    """
    values = [ord(char) * (index + 11) for index, char in enumerate(seed[:4])]
    return tuple(values + list(UUID_DEFAULTS[len(values):]))


def _enchantment_entry(enchantment: str, level: int) -> str:
    return f'{{id:"minecraft:{enchantment}",lvl:{int(clamp(level, 1, 10))}s}}'


def build_give_command(config: ModConfig, namespace: str) -> str:
    """Build the ``/give`` command for the configured weapon."""
    ability = resolve_ability(config.ability_effect)

    lore = [
        _snbt_text_component(config.ability_name, config.name_color),
        _snbt_text_component(config.ability_description, "gray"),
        _snbt_text_component(ability.status_lore, "dark_green"),
    ]
    display = (
        f"{{Name:{_snbt_text_component(config.item_name, config.name_color)},"
        f"Lore:[{','.join(lore)}]}}"
    )

    enchantments: List[str] = [_enchantment_entry(config.primary_enchantment, config.primary_level)]
    if config.secondary_enchantment and config.secondary_level:
        enchantments.append(_enchantment_entry(config.secondary_enchantment, config.secondary_level))

    root_entries = [
        f"display:{display}",
        f"Enchantments:[{','.join(enchantments)}]",
        f"HideFlags:{HIDE_FLAGS}",
    ]

    attack_bonus = clamp(config.attack_bonus, 0, 30)
    if attack_bonus > 0:
        uuid = ",".join(str(part) for part in derive_uuid_ints(namespace))
        root_entries.append(
            'AttributeModifiers:[{AttributeName:"generic.attack_damage",'
            'Name:"custom.attack_bonus",'
            f"Amount:{_format_number(attack_bonus)},Operation:0,"
            f'UUID:[I,{uuid}],Slot:"mainhand"}}]'
        )

    if config.custom_model_data:
        root_entries.append(f"CustomModelData:{config.custom_model_data}")

    return f"give @s minecraft:{config.base_item}{{{','.join(root_entries)}}}"


def build_ability_function(config: ModConfig) -> str:
    """Build the three-line ability function."""
    ability = resolve_ability(config.ability_effect)
    duration = int(clamp(config.ability_duration, 1, 120))
    amplifier = int(clamp(config.ability_amplifier, 0, 10)) if ability.supports_amplifier else 0

    return "\n".join([
        f"say {config.ability_name} activated!",
        f"tellraw @s {_text_component(config.ability_message, config.name_color)}",
        ability.activation_command(duration, amplifier),
    ])


def build_load_function(namespace: str, config: ModConfig) -> str:
    """Build the function announced when the datapack is loaded."""
    message = (
        f"{config.mod_name} loaded. Use /function {namespace}:give_item "
        f"to claim the {config.item_name}."
    )
    return f"tellraw @a {_text_component(message, 'aqua')}"


def build_pack_meta(config: ModConfig, pack_format: int = DEFAULT_PACK_FORMAT) -> Dict[str, Any]:
    """Build the ``pack.mcmeta`` document."""
    return {
        "pack": {
            "pack_format": pack_format,
            "description": f"{config.mod_name} — {config.item_name}",
        }
    }


def build_artifacts(
    config: ModConfig, namespace: str, pack_format: int = DEFAULT_PACK_FORMAT
) -> DatapackArtifacts:
    """Generate every artifact of the datapack."""
    return DatapackArtifacts(
        namespace=namespace,
        give_command=build_give_command(config, namespace),
        ability_function=build_ability_function(config),
        load_function=build_load_function(namespace, config),
        pack_meta=build_pack_meta(config, pack_format),
    )
