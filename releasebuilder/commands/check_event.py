import click
from ..cli_logger import logger
from ..context import Context, is_target_event
from ..decorators import handle_exceptions

@click.command("check-event")
@click.pass_context
@handle_exceptions
def check_event(ctx):
    """Exit with 0 if the triggering event should produce a release build."""
    context = Context.from_env()
    action = context.payload.get("action", "")
    if is_target_event(context):
        logger.success(f"Event '{context.event_name}' ({action}) triggers a release build.")
        return
    logger.info(f"Event '{context.event_name}' ({action}) is not a release target. Skipping.")
    ctx.exit(1)
