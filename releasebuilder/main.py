import click
from .commands.check_event import check_event
from .commands.config import config
from .commands.context_info import context_info
from .commands.detect import detect
from .commands.log import log
from .commands.plan import plan
from .commands.remote_config import remote_config
from .commands.run import run
from .commands.version import version
from .inputs import get_workspace


@click.group()
@click.option("--path", "-p", default=None,
              help="Path to the project directory. Defaults to $GITHUB_WORKSPACE, then the current directory.")
@click.pass_context
def cli(ctx, path):
    """releasebuilder: build and prune a JavaScript project for a release."""
    ctx.obj = {"path": path or get_workspace() or "."}

cli.add_command(detect)
cli.add_command(plan)
cli.add_command(run)
cli.add_command(check_event)
cli.add_command(context_info)
cli.add_command(remote_config)
cli.add_command(config)
cli.add_command(version)
cli.add_command(log)


def main():
    try:
        cli()
    except Exception as e:
        click.echo(f"An unexpected error occurred: {e}", err=True)
        click.echo("Please report this issue to the releasebuilder developers.", err=True)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
