"""
Configuration utilities for loading and reading Hashculate config files.

Config files are INI files; the [hashing] section supplies defaults for the CLI options:

    [hashing]
    algorithm = sha256
    chunk_size_mb = 8
    progress = true
"""
import configparser
import logging
from pathlib import Path
from typing import Any, Dict, Union
from services.hashing_errors import ConfigError
from utils.config.config_normalizer import ConfigNormalizer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./config/hashculate_config.ini"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "hashing": {
        "algorithm": "md5",
        "chunk_size_mb": "4",
        "progress": "true",
    },
}

ConfigType = Union[configparser.ConfigParser, Dict[str, Dict[str, Any]]]


def load_configuration(path: Union[str, Path, None] = DEFAULT_CONFIG_PATH, normalize: bool = True) -> ConfigType:
    """
    Load the configuration file with optional normalization.

    A missing file is not an error: the built-in defaults are used, and environment
    overrides still apply.

    Args:
        path: Path to the configuration file.
        normalize (bool): Whether to apply normalization and environment overrides.

    Returns:
        Union[configparser.ConfigParser, Dict]: Loaded configuration parser or normalized dict.

    Raises:
        ConfigError: If the file exists but cannot be parsed.
    """
    parser = configparser.ConfigParser()

    if path and Path(path).is_file():
        try:
            parser.read(path, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigError(f"Failed to parse configuration file {path}: {e}", str(path)) from e
        logger.debug(f"Loaded configuration file: {path}")
    else:
        logger.debug(f"No configuration file at {path}, using defaults")

    if not normalize:
        return parser

    normalizer = ConfigNormalizer()
    normalized = normalizer.normalize_config(parser)
    for section, values in DEFAULTS.items():
        section_data = normalized.setdefault(section, {})
        for key, value in values.items():
            section_data.setdefault(key, value)
    return normalizer.apply_env_overrides(normalized)


def get_config_value(
    config: ConfigType,
    section: str,
    key: str,
    fallback: Any = None,
    value_type: type = str
) -> Any:
    """
    Get a configuration value with case-insensitive lookup and type conversion.

    Args:
        config: Configuration object (ConfigParser or normalized dict)
        section: Configuration section name
        key: Configuration key name
        fallback: Default value if not found
        value_type: Type to convert the value to (str, int, float, bool)

    Returns:
        Configuration value converted to specified type or fallback

    Raises:
        ConfigError: If the value cannot be converted to value_type
    """
    if config is None:
        return fallback

    if isinstance(config, configparser.ConfigParser):
        config = ConfigNormalizer().normalize_config(config)

    section_data = config.get(ConfigNormalizer().canonical_section(section.strip()), {})
    value = section_data.get(key.strip().lower(), fallback)

    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    if value_type is bool:
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in ('true', '1', 'yes', 'on', 'enabled'):
            return True
        if text in ('false', '0', 'no', 'off', 'disabled'):
            return False
        raise ConfigError(f"Invalid boolean for [{section}].{key}: {value!r}", value)

    try:
        return value_type(value)
    except (ValueError, TypeError) as e:
        raise ConfigError(
            f"Failed to convert config value [{section}].{key}='{value}' to {value_type.__name__}: {e}",
            value,
        ) from e


def write_temp_config(config_dict: dict, tmp_path: Union[str, Path]) -> Path:
    """
    Write a temporary config.ini file from a dictionary of config sections.

    Args:
        config_dict (dict): Dictionary of config sections and values.
        tmp_path: Directory to write into.

    Returns:
        Path: Path to the written config file.
    """
    config = configparser.ConfigParser()
    for section, values in config_dict.items():
        config[section] = values

    config_path = Path(tmp_path) / "test_hashculate_config.ini"
    with open(config_path, "w") as f:
        config.write(f)

    return config_path
