import click
import json
from .. import config as config_module
from .. import github
from .. import inputs
from ..constants import REPOSITORY_CONFIG_FILE
from ..context import Context
from ..decorators import handle_exceptions

@click.command("remote-config")
@click.option("--file", "file_path", default=REPOSITORY_CONFIG_FILE, show_default=True,
              help="Path of the YAML config file inside the repository.")
@click.pass_context
@handle_exceptions
def remote_config(ctx, file_path):
    """Fetch the repository's YAML config at the event commit and print it as JSON."""
    conf = config_module.load_config(path=ctx.obj["path"])
    data = github.get_repository_config(
        Context.from_env(), path=file_path, token=inputs.get_access_token(conf) or None
    )
    click.echo(json.dumps(data, indent=4))
