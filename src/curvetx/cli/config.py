from pathlib import Path
from typing import Literal

import click
import tomlkit
from pydantic import TypeAdapter

from curvetx.cli import cli
from curvetx.config import CONFIG_FILE, save_config_to_file, settings


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: Literal["json", "toml"]) -> None:
    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(mode="json"),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(mode="json", exclude_none=True),
                ),
            )


@config.command("init")
@click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE,
    show_default=True,
    help="Location of the configuration file",
)
@click.option(
    "--pools",
    "pools_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Pool catalog used by default for `classify`",
)
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def config_init(config_path: Path, pools_path: Path | None, *, force: bool) -> None:
    """
    Write the current settings to a configuration file.
    """

    if config_path.exists() and not force:
        raise click.ClickException(f"{config_path} already exists. Use --force to overwrite it.")

    new_settings = settings.model_copy()
    if pools_path is not None:
        new_settings.pools = pools_path.expanduser().absolute()

    save_config_to_file(new_settings, config_path)
    click.echo(f"Created a configuration file at {config_path}.")
