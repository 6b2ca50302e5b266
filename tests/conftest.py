import pytest

from blockforge.normalizer import normalize


@pytest.fixture
def emerald_payload():
    return {
        "modName": "Emerald Arsenal",
        "itemName": "Emerald Saber",
        "baseItem": "netherite_sword",
        "nameColor": "green",
        "primaryEnchantment": "sharpness",
        "primaryLevel": 5,
        "attackBonus": 6,
        "abilityEffect": "strength",
        "abilityDuration": 18,
        "abilityAmplifier": 1,
        "abilityMessage": "Your Emerald Saber hums!",
    }


@pytest.fixture
def emerald_config(emerald_payload):
    return normalize(emerald_payload)
