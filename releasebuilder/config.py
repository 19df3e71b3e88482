import base64
import binascii
import os
import toml
import yaml
from .cli_logger import logger

CONFIG_FILE = "releasebuilder.toml"


class ConfigError(ValueError):
    """Raised when repository config content cannot be decoded."""


def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def parse_config(content):
    """Decode base64 encoded YAML (as served by the contents API) into a dict."""
    try:
        text = base64.b64decode(content).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, TypeError) as e:
        raise ConfigError(f"Config content is not valid base64 encoded text: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Config content is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        return {}
    return data
