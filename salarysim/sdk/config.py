"""Configuration management for Salary Sim.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - data_dir: where history.json and exports live (optional)

2. profile.yaml - User's personal defaults
   - defaults: values pre-filled into a simulation
     (tax_regime, dependents, social_security_rate, meal_allowance_daily,
     meal_allowance_mode, other_deductions)

Config directory resolution:
1. SALARY_SIM_CONFIG_PATH environment variable (if set)
2. ~/.config/salary-sim/ (XDG_CONFIG_HOME fallback)

Data path resolution:
1. settings.json "data_dir" key
2. XDG_DATA_HOME/salary-sim/ or ~/.local/share/salary-sim/
"""

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .schemas import ProfileDefaults


APP_NAME = "salary-sim"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"


class ProfileError(Exception):
    """Raised when profile.yaml exists but cannot be used."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. SALARY_SIM_CONFIG_PATH environment variable
    2. ~/.config/salary-sim/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("SALARY_SIM_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def get_profile_path() -> Path:
    """Get the path to profile.yaml in the config directory (may not exist yet)."""
    return get_config_dir() / PROFILE_FILENAME


def load_profile() -> dict:
    """Load user profile from profile.yaml.

    Returns:
        Profile dictionary (empty dict if the file doesn't exist)

    Raises:
        ProfileError: If the file is not valid YAML or not a mapping
    """
    profile_path = get_profile_path()

    if not profile_path.exists():
        return {}

    try:
        with open(profile_path, "r") as f:
            profile = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in {profile_path}: {e}")

    if not isinstance(profile, dict):
        raise ProfileError(
            f"Profile must be a YAML dictionary, got {type(profile).__name__}: {profile_path}"
        )
    return profile


def save_profile(profile: dict) -> Path:
    """Save user profile to profile.yaml.

    Returns:
        Path to the saved profile file
    """
    path = get_profile_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def get_profile_value(key: str, default: Any = None) -> Any:
    """Get a profile value by dot-notation key.

    Args:
        key: Dot-notation key (e.g., "defaults.social_security_rate")
        default: Default value if key not found
    """
    value = load_profile()

    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default

    return value


def set_profile_value(key: str, value: Any) -> Path:
    """Set a profile value by dot-notation key.

    The resulting profile is validated before it is written, so a typo in
    a defaults key never reaches disk.

    Raises:
        ProfileError: If the updated profile would be invalid
    """
    profile = load_profile()

    parts = key.split(".")
    current = profile

    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]

    current[parts[-1]] = value

    load_defaults(profile)
    return save_profile(profile)


def load_defaults(profile: dict = None) -> ProfileDefaults:
    """Load the simulation defaults section of the profile.

    Args:
        profile: Already-loaded profile dict (loads profile.yaml if None)

    Raises:
        ProfileError: If 'defaults' has unknown keys or invalid values
    """
    if profile is None:
        profile = load_profile()

    try:
        return ProfileDefaults.model_validate(profile.get("defaults") or {})
    except PydanticValidationError as e:
        messages = [
            f"defaults.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ProfileError("Invalid profile: " + "; ".join(messages))


def get_data_path() -> Path:
    """Get the data directory path.

    Uses settings.json "data_dir" when set, else XDG_DATA_HOME/salary-sim/.

    Returns:
        Path to the data directory (created if doesn't exist)
    """
    custom_data_dir = get_setting("data_dir")
    if custom_data_dir:
        data_path = Path(custom_data_dir).expanduser()
    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
        data_path = Path(xdg_data_home) / APP_NAME
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


def get_exports_path() -> Path:
    """Get the default directory for exported PDF reports (created if missing)."""
    path = get_data_path() / "exports"
    path.mkdir(parents=True, exist_ok=True)
    return path
