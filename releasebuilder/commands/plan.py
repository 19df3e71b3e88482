import click
from .. import config as config_module
from .. import inputs
from ..decorators import handle_exceptions
from ..resolver import resolve_build_commands

@click.command()
@click.option("--build-command", default=None,
              help="Commands to run before the detected build, joined with '&&'. Defaults to the BUILD_COMMAND input.")
@click.pass_context
@handle_exceptions
def plan(ctx, build_command):
    """Print the build pipeline, one command per line, without running it."""
    path = ctx.obj["path"]
    if build_command is None:
        build_command = inputs.get_build_command(config_module.load_config(path=path))
    for command in resolve_build_commands(path, build_command):
        click.echo(command)
