"""Accessors for CI inputs.

Actions pass `with:` inputs as INPUT_<NAME> environment variables. These
helpers are the only place the process environment is read for them; a
`[inputs]` table in releasebuilder.toml supplies fallbacks.
"""
import os
from .constants import DEFAULT_COMMIT_EMAIL, DEFAULT_COMMIT_MESSAGE, DEFAULT_COMMIT_NAME


def _env_name(name):
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name, conf=None, environ=None):
    """Return an input value, checking the environment then the config's [inputs] table."""
    environ = os.environ if environ is None else environ
    value = environ.get(_env_name(name), "").strip()
    if value:
        return value
    table = conf.get("inputs") if conf else None
    if isinstance(table, dict) and table.get(name.lower()) is not None:
        return str(table[name.lower()]).strip()
    return ""


def get_build_command(conf=None):
    return get_input("BUILD_COMMAND", conf)


def get_commit_message(conf=None):
    return get_input("COMMIT_MESSAGE", conf) or DEFAULT_COMMIT_MESSAGE


def get_commit_name(conf=None):
    return get_input("COMMIT_NAME", conf) or DEFAULT_COMMIT_NAME


def get_commit_email(conf=None):
    return get_input("COMMIT_EMAIL", conf) or DEFAULT_COMMIT_EMAIL


def get_access_token(conf=None):
    return get_input("ACCESS_TOKEN", conf)


def get_workspace():
    return os.environ.get("GITHUB_WORKSPACE") or ""


# input name -> built-in default; these are the keys `[inputs]` understands
INPUT_DEFAULTS = {
    "build_command": "",
    "commit_message": DEFAULT_COMMIT_MESSAGE,
    "commit_name": DEFAULT_COMMIT_NAME,
    "commit_email": DEFAULT_COMMIT_EMAIL,
    "access_token": "",
}

SECRET_INPUTS = {"access_token"}


def describe_input(name, conf=None, environ=None):
    """Return (value, source) for an input, source being 'env', 'config' or 'default'."""
    environ = os.environ if environ is None else environ
    if environ.get(_env_name(name), "").strip():
        return get_input(name, conf, environ), "env"
    value = get_input(name, conf, {})
    if value:
        return value, "config"
    return INPUT_DEFAULTS.get(name.lower(), ""), "default"
