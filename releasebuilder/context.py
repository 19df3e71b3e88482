import json
import os
from dataclasses import dataclass, field
from .cli_logger import logger
from .constants import TARGET_EVENTS
from . import inputs


@dataclass
class Context:
    """The workflow event that started this run."""
    event_name: str = ""
    payload: dict = field(default_factory=dict)
    sha: str = ""
    ref: str = ""
    workflow: str = ""
    action: str = ""
    actor: str = ""
    repo: dict = field(default_factory=lambda: {"owner": "", "repo": ""})

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        owner, _, repo = environ.get("GITHUB_REPOSITORY", "").partition("/")
        return cls(
            event_name=environ.get("GITHUB_EVENT_NAME", ""),
            payload=_load_payload(environ.get("GITHUB_EVENT_PATH")),
            sha=environ.get("GITHUB_SHA", ""),
            ref=environ.get("GITHUB_REF", ""),
            workflow=environ.get("GITHUB_WORKFLOW", ""),
            action=environ.get("GITHUB_ACTION", ""),
            actor=environ.get("GITHUB_ACTOR", ""),
            repo={"owner": owner, "repo": repo},
        )


def _load_payload(event_path):
    if not event_path:
        return {}
    if not os.path.exists(event_path):
        logger.warning(f"Event payload file {event_path} does not exist.")
        return {}
    try:
        with open(event_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading event payload at {event_path}: {e}")
        return {}
    return payload if isinstance(payload, dict) else {}


def is_target_event(context):
    """True when the event should trigger a release build."""
    actions = TARGET_EVENTS.get(context.event_name)
    if not actions:
        return False
    return context.payload.get("action") in actions


def get_repository(context):
    return f"{context.repo['owner']}/{context.repo['repo']}"


def get_git_url(context, token=None):
    if token is None:
        token = inputs.get_access_token()
    return f"https://{token}@github.com/{get_repository(context)}.git"
