import click
from .. import config as config_module
from .. import inputs
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..resolver import resolve_build_commands
from ..utils.command_executor import run_commands

@click.command()
@click.option("--build-command", default=None,
              help="Commands to run before the detected build, joined with '&&'. Defaults to the BUILD_COMMAND input.")
@click.pass_context
@handle_exceptions
def run(ctx, build_command):
    """Install, build and prune the project for release."""
    path = ctx.obj["path"]
    if build_command is None:
        build_command = inputs.get_build_command(config_module.load_config(path=path))

    commands = resolve_build_commands(path, build_command)
    logger.info(f"Running {len(commands)} command(s) in {path}")
    if not run_commands(commands, cwd=path):
        logger.error("Build failed. Please check the output above for details.")
        ctx.exit(1)
    logger.success("Project is ready for release.")
