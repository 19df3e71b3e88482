import click
from .. import config as config_module
from .. import inputs
from ..context import Context, get_git_url, get_repository
from ..decorators import handle_exceptions

@click.command("context")
@click.pass_context
@handle_exceptions
def context_info(ctx):
    """Show the repository, push URL and commit identity for this run."""
    conf = config_module.load_config(path=ctx.obj["path"])
    context = Context.from_env()
    token = inputs.get_access_token(conf)

    click.echo(f"Event:       {context.event_name or '-'}")
    click.echo(f"Repository:  {get_repository(context)}")
    click.echo(f"Git URL:     {get_git_url(context, '***' if token else '')}")
    click.echo(f"Workspace:   {inputs.get_workspace() or '-'}")
    click.echo(f"Commit name: {inputs.get_commit_name(conf)}")
    click.echo(f"Commit mail: {inputs.get_commit_email(conf)}")
    click.echo(f"Message:     {inputs.get_commit_message(conf)}")
