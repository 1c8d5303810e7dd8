from pathlib import Path

import yaml
from pydantic import ValidationError

from mailcore.config.models import MailSettings


def load_settings(path: Path) -> MailSettings:
    """
    Load and validate a mail configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    # An empty file means defaults
    if data is None:
        data = {}

    try:
        return MailSettings.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Config validation failed:\n{e}") from e
