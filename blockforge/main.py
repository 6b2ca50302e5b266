"""Command-line interface for BlockForge."""

import json
import click
from pathlib import Path
from loguru import logger

from blockforge.config.settings import AppConfig
from blockforge.catalog import list_ability_effects
from blockforge.datapack import DatapackForge
from blockforge.errors import PackagingError
from blockforge.models.schemas import BaseItem, NameColor, PrimaryEnchantment, SecondaryEnchantment, EffectId


SHOWCASE_PAYLOAD = {
    "modName": "Emerald Arsenal",
    "itemName": "Emerald Saber",
    "baseItem": "netherite_sword",
    "nameColor": "green",
    "abilityName": "Venom Strike",
    "abilityDescription": "On activation, inflicts poison and empowers the wielder.",
    "primaryEnchantment": "sharpness",
    "primaryLevel": 5,
    "secondaryEnchantment": "looting",
    "secondaryLevel": 3,
    "attackBonus": 6,
    "abilityEffect": "strength",
    "abilityDuration": 18,
    "abilityAmplifier": 1,
    "customModelData": 4217,
    "abilityMessage": "Your Emerald Saber hums with stored energy!",
}

_OVERRIDES = {
    "mod_name": "modName",
    "item_name": "itemName",
    "namespace": "namespace",
    "base_item": "baseItem",
    "name_color": "nameColor",
    "primary_enchantment": "primaryEnchantment",
    "secondary_enchantment": "secondaryEnchantment",
    "effect": "abilityEffect",
    "attack_bonus": "attackBonus",
}


def _choices(enum_cls):
    return click.Choice([member.value for member in enum_cls])


def config_options(func):
    """Options shared by commands that take a weapon configuration."""
    options = [
        click.option('--config-file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
                     help='JSON file with the weapon configuration'),
        click.option('--mod-name', help='Datapack name'),
        click.option('--item-name', help='Name of the forged item'),
        click.option('--namespace', help='Explicit namespace (derived from the mod name otherwise)'),
        click.option('--base-item', type=_choices(BaseItem), help='Base item'),
        click.option('--name-color', type=_choices(NameColor), help='Name color'),
        click.option('--primary-enchantment', type=_choices(PrimaryEnchantment), help='Primary enchantment'),
        click.option('--secondary-enchantment', type=_choices(SecondaryEnchantment), help='Secondary enchantment'),
        click.option('--effect', type=_choices(EffectId), help='Ability effect'),
        click.option('--attack-bonus', type=float, help='Extra attack damage (0-30)'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def load_payload(config_file, **overrides) -> dict:
    """Read a payload from a JSON file (or the showcase) and apply overrides."""
    if config_file:
        with open(config_file, 'r', encoding='utf-8') as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise click.BadParameter("configuration must be a JSON object", param_hint='--config-file')
    else:
        payload = dict(SHOWCASE_PAYLOAD)

    for option_name, field in _OVERRIDES.items():
        value = overrides.get(option_name)
        if value is not None:
            payload[field] = value
    return payload


@click.group()
@click.pass_context
def cli(ctx):
    """BlockForge: craft bespoke Minecraft weapon datapacks."""
    config = AppConfig()
    logger.remove()
    logger.add(lambda message: click.echo(message, err=True, nl=False), level=config.log_level)
    ctx.obj = config


@cli.command()
def effects():
    """List the available ability effects."""
    for effect in list_ability_effects():
        amplifier = "amplifier" if effect.supports_amplifier else "no amplifier"
        click.echo(f"{effect.id.value:<14} {effect.label} ({amplifier})")


@cli.command()
@config_options
@click.pass_obj
def preview(config: AppConfig, config_file, **overrides):
    """Print the generated commands without packaging them."""
    forge = DatapackForge(config.datapack_config)
    artifacts = forge.preview(load_payload(config_file, **overrides))

    click.echo(f"Namespace: {artifacts.namespace}")
    click.echo("=" * 50)
    click.echo("give_item.mcfunction:")
    click.echo(artifacts.give_command)
    click.echo("\nability.mcfunction:")
    click.echo(artifacts.ability_function)
    click.echo("\nload.mcfunction:")
    click.echo(artifacts.load_function)


@cli.command()
@config_options
@click.option('--output-dir', type=click.Path(file_okay=False, path_type=Path),
              help='Directory for the generated archive')
@click.pass_obj
def build(config: AppConfig, config_file, output_dir, **overrides):
    """Generate a datapack archive."""
    forge = DatapackForge(config.datapack_config)
    artifacts = forge.preview(load_payload(config_file, **overrides))

    try:
        output_path = forge.packager.write_to(artifacts, output_dir)
    except PackagingError as e:
        logger.error(f"Failed to package datapack: {e}")
        raise click.ClickException("Failed to generate datapack")

    click.echo(f"Datapack saved to: {output_path}")


@cli.command()
@click.pass_obj
def interactive(config: AppConfig):
    """Interactive datapack generation."""
    forge = DatapackForge(config.datapack_config)

    click.echo("Welcome to BlockForge!")
    click.echo("=" * 50)

    payload = {
        "modName": click.prompt("Mod / pack name", default=SHOWCASE_PAYLOAD["modName"]),
        "itemName": click.prompt("Signature item name", default=SHOWCASE_PAYLOAD["itemName"]),
        "baseItem": click.prompt("Base item", type=_choices(BaseItem), default=SHOWCASE_PAYLOAD["baseItem"]),
        "nameColor": click.prompt("Name color", type=_choices(NameColor), default=SHOWCASE_PAYLOAD["nameColor"]),
        "abilityName": click.prompt("Ability name", default=SHOWCASE_PAYLOAD["abilityName"]),
        "abilityDescription": click.prompt("Ability description", default=SHOWCASE_PAYLOAD["abilityDescription"]),
        "primaryEnchantment": click.prompt(
            "Primary enchantment", type=_choices(PrimaryEnchantment), default=SHOWCASE_PAYLOAD["primaryEnchantment"]
        ),
        "primaryLevel": click.prompt("Primary level", type=int, default=SHOWCASE_PAYLOAD["primaryLevel"]),
        "attackBonus": click.prompt("Attack bonus", type=float, default=SHOWCASE_PAYLOAD["attackBonus"]),
        "abilityEffect": click.prompt("Ability effect", type=_choices(EffectId), default=SHOWCASE_PAYLOAD["abilityEffect"]),
        "abilityDuration": click.prompt("Ability duration (seconds)", type=int, default=SHOWCASE_PAYLOAD["abilityDuration"]),
        "abilityAmplifier": click.prompt("Ability amplifier", type=int, default=SHOWCASE_PAYLOAD["abilityAmplifier"]),
        "abilityMessage": click.prompt("Activation message", default=SHOWCASE_PAYLOAD["abilityMessage"]),
    }

    if click.confirm("Add a secondary enchantment?", default=False):
        payload["secondaryEnchantment"] = click.prompt("Secondary enchantment", type=_choices(SecondaryEnchantment))
        payload["secondaryLevel"] = click.prompt("Secondary level", type=int, default=3)

    artifacts = forge.preview(payload)

    click.echo("\n" + "=" * 60)
    click.echo("GENERATED DATAPACK")
    click.echo("=" * 60)
    click.echo(f"Namespace: {artifacts.namespace}")
    click.echo(f"\n{artifacts.give_command}")
    click.echo(f"\n{artifacts.ability_function}")

    if click.confirm("\nSave the datapack archive?", default=True):
        try:
            output_path = forge.packager.write_to(artifacts)
        except PackagingError as e:
            logger.error(f"Failed to package datapack: {e}")
            raise click.ClickException("Failed to generate datapack")
        click.echo(f"\nDatapack saved to: {output_path}")


@cli.command()
@click.option('--host', help='Bind address')
@click.option('--port', type=int, help='Bind port')
@click.pass_obj
def serve(config: AppConfig, host: str, port: int):
    """Run the HTTP API."""
    import uvicorn

    from blockforge.api import create_app

    server_config = config.server_config
    uvicorn.run(
        create_app(config),
        host=host or server_config.host,
        port=port or server_config.port,
    )


if __name__ == "__main__":
    cli()
