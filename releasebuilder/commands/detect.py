import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..constants import MANIFEST_FILE
from ..manifest import get_scripts, load_manifest
from ..resolver import detect_build_command

@click.command()
@click.pass_context
@handle_exceptions
def detect(ctx):
    """Show which package.json script is used as the build step."""
    manifest = load_manifest(ctx.obj["path"])
    if manifest is None:
        logger.warning(f"No usable {MANIFEST_FILE} in {ctx.obj['path']}; no build step will be run.")
        return

    name = detect_build_command(manifest)
    if not name:
        logger.warning(f"No build script found in {MANIFEST_FILE}.")
        return

    logger.info(f"Detected build script '{name}': {get_scripts(manifest)[name]}")
    click.echo(name)
