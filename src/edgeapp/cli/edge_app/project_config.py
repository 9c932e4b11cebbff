"""Loader for the project config file (app.yaml) kept in an app's directory."""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from edgeapp.cli.core.constants import APP_CONFIG_APP_ID_KEY, APP_CONFIG_FILENAME

logger = logging.getLogger(__name__)


class ProjectConfigError(Exception):
    """Raised when the project config file exists but cannot be used."""

    pass


def get_app_config_path(app_dir: Union[str, Path]) -> Path:
    return Path(app_dir) / APP_CONFIG_FILENAME


def load_app_id_from_config(app_dir: Union[str, Path]) -> Optional[str]:
    """Read the cached app ID from the project config file in app_dir.

    Args:
        app_dir: Directory that may contain an app.yaml file

    Returns:
        The app ID stored in the config, or None if there is no config file
        or it does not record an app ID

    Raises:
        ProjectConfigError: If the config file cannot be read or parsed
    """
    config_path = get_app_config_path(app_dir)
    if not config_path.is_file():
        return None

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProjectConfigError(f"Failed to parse {config_path}: {e}") from e
    except OSError as e:
        raise ProjectConfigError(f"Failed to read {config_path}: {e}") from e

    if config is None:
        return None
    if not isinstance(config, dict):
        raise ProjectConfigError(f"{config_path} must contain a YAML mapping")

    app_id = config.get(APP_CONFIG_APP_ID_KEY)
    if app_id is None:
        return None
    app_id = str(app_id).strip()
    if not app_id:
        return None

    logger.debug(f"Found app id {app_id} in {config_path}")
    return app_id
