"""
tomlenv command line - inspect an env.toml without writing any code.

    tomlenv check   -e ./deploy
    tomlenv current -e ./deploy --var APP_ENV --format json
    tomlenv show    -e ./deploy
"""

import json
import logging
from functools import wraps
from typing import Any, Callable, Optional

import click
import tomli_w

from tomlenv.config.settings import settings
from tomlenv.environments import EnvironmentMap, HIERARCHY
from tomlenv.errors import TomlenvError

logger = logging.getLogger(__name__)


def env_path_option(f: Callable) -> Callable:
    """The -e/--envpath ENV_PATH flag: directory holding env.toml."""
    return click.option(
        "--envpath",
        "-e",
        "env_path",
        default=None,
        metavar="ENV_PATH",
        help=f"Directory containing {settings.env_file_name} (default: {settings.env_dir})",
    )(f)


def _reports_errors(f: Callable) -> Callable:
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except TomlenvError as exc:
            if kwargs.get("fmt") == "json":
                click.echo(json.dumps(exc.to_dict()), err=True)
                click.get_current_context().exit(1)
            raise click.ClickException(str(exc)) from exc
    return wrapper


def _load(env_path: Optional[str]) -> EnvironmentMap:
    return EnvironmentMap.from_env_path(env_path, value_type=dict)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log library debug output")
def cli(verbose: bool) -> None:
    """Drive environment configuration from TOML."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@env_path_option
@_reports_errors
def check(env_path: Optional[str]) -> None:
    """Validate env.toml and list the environments it defines."""
    envs = _load(env_path)
    for env in envs:
        click.echo(env.render())
    missing = [env.render() for env in HIERARCHY if env not in envs]
    if missing:
        logger.info(f"No tables for {missing}")


@cli.command()
@env_path_option
@click.option("--var", default=None, help="Variable naming the current environment (default: env)")
@click.option("--format", "fmt", type=click.Choice(["toml", "json"]), default="toml",
              show_default=True)
@_reports_errors
def current(env_path: Optional[str], var: Optional[str], fmt: str) -> None:
    """Print the configuration of the current environment."""
    envs = _load(env_path)
    value = envs.current_from(var or settings.env_var)
    if fmt == "json":
        click.echo(json.dumps(value, indent=2, default=str))
    else:
        click.echo(tomli_w.dumps(value), nl=False)


@cli.command()
@env_path_option
@_reports_errors
def show(env_path: Optional[str]) -> None:
    """Print env.toml re-serialized in canonical order."""
    click.echo(_load(env_path).save_to_string(), nl=False)
