import json
import os
from .cli_logger import logger
from .constants import MANIFEST_FILE

def get_manifest_path(path="."):
    return os.path.join(path, MANIFEST_FILE)

def load_manifest(path="."):
    """Load package.json from a project directory.

    Returns the decoded object, or None when the file is missing or is not
    a JSON object. Read and decode problems are logged, never raised.
    """
    manifest_path = get_manifest_path(path)
    if not os.path.isfile(manifest_path):
        logger.debug(f"No {MANIFEST_FILE} found at {manifest_path}")
        return None
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning(f"Error decoding {MANIFEST_FILE} at {manifest_path}: {e}")
        return None
    except OSError as e:
        logger.warning(f"Error reading {MANIFEST_FILE} at {manifest_path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {manifest_path}: expected a JSON object, got {type(data).__name__}.")
        return None
    return data

def get_scripts(manifest):
    """Return the scripts table of a manifest, or an empty dict if it has none."""
    if not isinstance(manifest, dict):
        return {}
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        return {}
    return scripts
