"""Tests for payload normalization and namespace derivation."""

import re

import pytest

from blockforge.models.schemas import ModConfig
from blockforge.normalizer import (
    normalize,
    normalize_payload,
    resolve_namespace,
    slugify_namespace,
)


def assert_invariants(config: ModConfig):
    assert config.base_item in {"diamond_sword", "netherite_sword", "iron_sword", "trident"}
    assert config.name_color in {"aqua", "gold", "light_purple", "green", "red"}
    assert 1 <= config.primary_level <= 10
    assert 0 <= config.attack_bonus <= 30
    assert 1 <= config.ability_duration <= 120
    assert 0 <= config.ability_amplifier <= 10
    assert (config.secondary_enchantment is None) == (config.secondary_level is None)
    if config.secondary_level is not None:
        assert 1 <= config.secondary_level <= 10
    if config.custom_model_data is not None:
        assert 1 <= config.custom_model_data <= 9_999_999
    assert len(config.ability_description) <= 200
    assert len(config.ability_message) <= 160
    for text in (config.mod_name, config.item_name, config.ability_name,
                 config.ability_description, config.ability_message):
        assert text and text == text.strip()


class TestSlugifyNamespace:
    """Test namespace slug derivation."""

    @pytest.mark.parametrize("text, expected", [
        ("Emerald Arsenal", "emerald_arsenal"),
        ("", "custom_mod"),
        ("!!!", "custom_mod"),
        ("  Void--Sight  2 ", "void_sight_2"),
        ("__already_slugged__", "already_slugged"),
    ])
    def test_slugify(self, text, expected):
        assert slugify_namespace(text) == expected

    def test_slug_is_truncated(self):
        slug = slugify_namespace("The Extremely Long Name Of A Legendary Weapon Pack")
        assert len(slug) <= 32
        assert re.fullmatch(r"[a-z0-9_]*", slug)


class TestNormalize:
    """Test that normalize repairs every field instead of failing."""

    @pytest.mark.parametrize("raw", [
        {},
        None,
        "not a mapping",
        [1, 2, 3],
        {
            "modName": 42,
            "itemName": "   ",
            "baseItem": "wooden_sword",
            "nameColor": None,
            "primaryEnchantment": ["sharpness"],
            "primaryLevel": "lots",
            "secondaryEnchantment": "sweeping",
            "secondaryLevel": float("nan"),
            "attackBonus": float("inf"),
            "abilityEffect": "levitation",
            "abilityDuration": -5,
            "abilityAmplifier": 99,
            "customModelData": "abc",
            "abilityMessage": {"text": "hi"},
            "abilityDescription": "x" * 500,
        },
    ])
    def test_never_fails_and_satisfies_invariants(self, raw):
        assert_invariants(normalize(raw))

    def test_defaults_for_empty_payload(self):
        config = normalize({})
        assert config.mod_name == "Custom Arsenal"
        assert config.item_name == "Arcane Blade"
        assert config.ability_name == "Arcane Pulse"
        assert config.ability_description == "A bespoke enchantment forged via BlockForge."
        assert config.base_item == "diamond_sword"
        assert config.name_color == "aqua"
        assert config.primary_enchantment == "sharpness"
        assert config.primary_level == 5
        assert config.secondary_enchantment is None
        assert config.secondary_level is None
        assert config.attack_bonus == 0
        assert config.ability_effect == "strength"
        assert config.ability_duration == 12
        assert config.ability_amplifier == 0
        assert config.custom_model_data is None
        assert config.ability_message == "Power courses through your veins."

    def test_invalid_choices_use_fixed_defaults(self):
        config = normalize({"baseItem": "stick", "nameColor": "purple", "abilityEffect": "haste"})
        assert config.base_item == "diamond_sword"
        assert config.name_color == "aqua"
        assert config.ability_effect == "strength"

    def test_numbers_are_clamped(self):
        config = normalize({
            "primaryLevel": 25,
            "attackBonus": -3,
            "abilityDuration": 500,
            "abilityAmplifier": -1,
        })
        assert config.primary_level == 10
        assert config.attack_bonus == 0
        assert config.ability_duration == 120
        assert config.ability_amplifier == 0

    def test_numeric_strings_are_parsed(self):
        config = normalize({"primaryLevel": " 7 ", "attackBonus": "4.5", "abilityDuration": "30"})
        assert config.primary_level == 7
        assert config.attack_bonus == 4.5
        assert config.ability_duration == 30

    def test_non_finite_numbers_use_field_default_before_clamping(self):
        config = normalize({"primaryLevel": "NaN", "abilityDuration": "inf", "attackBonus": True})
        assert config.primary_level == 5
        assert config.ability_duration == 12
        assert config.attack_bonus == 0

    def test_underscore_digit_groups_are_rejected(self):
        config = normalize({"primaryLevel": "1_0", "abilityDuration": "1_00", "customModelData": "4_217"})
        assert config.primary_level == 5
        assert config.ability_duration == 12
        assert config.custom_model_data is None

    def test_text_is_trimmed_and_capped(self):
        config = normalize({
            "modName": "  Frost Reaver  ",
            "abilityDescription": "  " + "d" * 250,
            "abilityMessage": "m" * 200,
        })
        assert config.mod_name == "Frost Reaver"
        assert config.ability_description == "d" * 200
        assert config.ability_message == "m" * 160

    def test_line_breaks_in_text_become_spaces(self):
        config = normalize({
            "abilityName": "Zap\nop @a",
            "itemName": "Storm\r\nBrand",
            "abilityMessage": "\tCharged\x00up ",
            "modName": "\n\r\x00",
        })
        assert config.ability_name == "Zap op @a"
        assert config.item_name == "Storm Brand"
        assert config.ability_message == "Charged up"
        assert config.mod_name == "Custom Arsenal"
        assert normalize(config.model_dump(by_alias=True)) == config

    def test_secondary_level_requires_secondary_enchantment(self):
        config = normalize({"secondaryLevel": 7})
        assert config.secondary_enchantment is None
        assert config.secondary_level is None

        config = normalize({"secondaryEnchantment": "smite", "secondaryLevel": 7})
        assert config.secondary_enchantment is None
        assert config.secondary_level is None

    def test_secondary_level_defaults_and_clamps(self):
        assert normalize({"secondaryEnchantment": "mending"}).secondary_level == 3
        assert normalize({"secondaryEnchantment": "mending", "secondaryLevel": 40}).secondary_level == 10

    @pytest.mark.parametrize("value, expected", [
        (0, None),
        (-12, None),
        (None, None),
        ("abc", None),
        (10_000_000, 9_999_999),
        (4217, 4217),
        ("88", 88),
        (12.9, 12),
    ])
    def test_custom_model_data(self, value, expected):
        assert normalize({"customModelData": value}).custom_model_data == expected

    def test_valid_configuration_is_a_fixed_point(self, emerald_config):
        assert normalize(emerald_config.model_dump(by_alias=True)) == emerald_config

        full = normalize({
            "secondaryEnchantment": "unbreaking",
            "secondaryLevel": 2,
            "customModelData": 31,
            "attackBonus": 2.5,
            "abilityDescription": "word " * 60,
        })
        assert normalize(full.model_dump(by_alias=True)) == full


class TestResolveNamespace:
    """Test namespace override handling."""

    def test_derived_from_mod_name(self, emerald_payload, emerald_config):
        assert resolve_namespace(emerald_payload, emerald_config) == "emerald_arsenal"

    def test_override_wins(self, emerald_payload):
        config, namespace = normalize_payload({**emerald_payload, "namespace": "My Pack!"})
        assert namespace == "my_pack"
        assert config.mod_name == "Emerald Arsenal"

    def test_blank_override_is_ignored(self, emerald_payload):
        _, namespace = normalize_payload({**emerald_payload, "namespace": "   "})
        assert namespace == "emerald_arsenal"

    def test_default_mod_name_namespace(self):
        _, namespace = normalize_payload({})
        assert namespace == "custom_arsenal"
