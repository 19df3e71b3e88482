import sys
import requests
from .cli_logger import logger
from .config import ConfigError, parse_config
from .constants import GITHUB_API_URL, REPOSITORY_CONFIG_FILE
from .context import get_repository


def get_repository_config(context, path=REPOSITORY_CONFIG_FILE, token=None, timeout=30):
    """Fetch a YAML config file from the repository at the event's commit.

    Returns an empty dict when the file does not exist or cannot be fetched.
    """
    url = f"{GITHUB_API_URL}/repos/{get_repository(context)}/contents/{path}"
    headers = {"Accept": "application/vnd.github+json"}
    if token:
        headers["Authorization"] = f"token {token}"
    params = {"ref": context.sha} if context.sha else None

    try:
        response = requests.get(url, headers=headers, params=params, timeout=timeout)
        if response.status_code == 404:
            logger.info(f"No {path} found in {get_repository(context)}.")
            return {}
        response.raise_for_status()
        return parse_config(response.json().get("content", ""))
    except requests.exceptions.RequestException as e:
        logger.error(f"Error fetching {path} from {get_repository(context)}: {e}")
        return {}
    except ConfigError as e:
        logger.error(f"Error parsing {path}: {e}")
        return {}
    except Exception as e:
        logger.error(f"An unexpected error occurred while fetching {path}: {e}")
        logger.exception(*sys.exc_info())
        return {}
