import os
import json
import logging

logger = logging.getLogger(__name__)

# ---------------------- Settings ----------------------
DEFAULT_SETTINGS = {
    "pre_analysis": "smart",
    "sample_size": 64,
}

ENV_OVERRIDES = {
    "STRMATCH_PRE_ANALYSIS": "pre_analysis",
}


class SettingsError(ValueError):
    pass


def load_settings(path=None, environ=None):
    """Defaults, then the JSON file at ``path``, then environment overrides."""
    settings = dict(DEFAULT_SETTINGS)
    environ = os.environ if environ is None else environ

    if path:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SettingsError(f"Malformed settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must hold a JSON object")

        for key, value in data.items():
            if key not in DEFAULT_SETTINGS:
                logger.warning("Ignoring unknown setting %r in %s", key, path)
                continue
            settings[key] = value

    for env_name, key in ENV_OVERRIDES.items():
        if environ.get(env_name):
            settings[key] = environ[env_name]

    if not isinstance(settings["sample_size"], int) or settings["sample_size"] < 1:
        raise SettingsError(f"sample_size must be a positive integer, got {settings['sample_size']!r}")

    return settings
