import click
import os
from .. import config as config_module
from .. import inputs
from ..cli_logger import logger

MISSING_CONFIG = f"Error: No {config_module.CONFIG_FILE} found. Create one with 'releasebuilder config set <input> <value>'."


def _input_name(key):
    """Accept 'build_command' or 'inputs.build_command'; reject unknown inputs."""
    name = key[len("inputs."):] if key.startswith("inputs.") else key
    name = name.lower()
    if name not in inputs.INPUT_DEFAULTS:
        known = ", ".join(sorted(inputs.INPUT_DEFAULTS))
        raise click.BadParameter(f"Unknown input '{key}'. Known inputs: {known}", param_hint="NAME")
    return name


def _mask(name, value):
    return "***" if value and name in inputs.SECRET_INPUTS else value


@click.group()
@click.pass_context
def config(ctx):
    """Manage input fallbacks stored in releasebuilder.toml.

    Values set here are used when the matching INPUT_<NAME> environment
    variable is empty.
    """
    pass

@config.command()
@click.pass_context
def view(ctx):
    """Print the raw releasebuilder.toml file."""
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if not os.path.exists(config_file_path):
        logger.error(MISSING_CONFIG)
        return
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading {config_module.CONFIG_FILE} at {config_file_path}: {e}")
        logger.info("Please check file permissions.")

@config.command("list")
@click.pass_context
def list_inputs(ctx):
    """Show every input with its effective value and where it comes from."""
    conf = config_module.load_config(path=ctx.obj["path"])
    for name in inputs.INPUT_DEFAULTS:
        value, source = inputs.describe_input(name, conf)
        click.echo(f"{name}={_mask(name, value)} ({source})")

@config.command()
@click.argument('name')
@click.pass_context
def get(ctx, name):
    """Print the effective value of input NAME (env, then config, then default)."""
    name = _input_name(name)
    conf = config_module.load_config(path=ctx.obj["path"])
    value, source = inputs.describe_input(name, conf)
    logger.info(f"'{name}' comes from {source}")
    click.echo(_mask(name, value))

@config.command("set")
@click.argument('name')
@click.argument('value')
@click.pass_context
def set_value(ctx, name, value):
    """Store VALUE as the fallback for input NAME, e.g. build_command."""
    name = _input_name(name)
    if name in inputs.SECRET_INPUTS:
        logger.warning(f"'{name}' is a secret; prefer the INPUT_{name.upper()} environment variable over a file in the repository.")

    conf = config_module.load_config(path=ctx.obj["path"])
    table = conf.setdefault("inputs", {})
    if not isinstance(table, dict):
        logger.error(f"Error: 'inputs' in {config_module.CONFIG_FILE} is not a table.")
        ctx.exit(1)
    table[name] = value

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{name}' to '{_mask(name, value)}'")

@config.command()
@click.argument('name')
@click.pass_context
def unset(ctx, name):
    """Remove the stored fallback for input NAME."""
    name = _input_name(name)
    conf = config_module.load_config(path=ctx.obj["path"])
    table = conf.get("inputs")
    if not isinstance(table, dict) or name not in table:
        logger.error(f"Error: Input '{name}' is not set in {config_module.CONFIG_FILE}")
        return
    del table[name]
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Unset '{name}'")
