import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of releasebuilder."""
    try:
        ver = importlib.metadata.version("releasebuilder")
        logger.info(f"releasebuilder version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of releasebuilder. Is it installed correctly?")
