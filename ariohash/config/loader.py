# ariohash/config/loader.py
import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError
from loguru import logger

from .schema import HashSettings
from .paths import get_user_config_file

_cached_config: Optional[HashSettings] = None

# Environment variable -> HashSettings field
ENV_OVERRIDES: Dict[str, str] = {
    "ARIOHASH_SALT": "salt",
    "ARIOHASH_OUTPUT_LENGTH": "output_length",
    "ARIOHASH_CHARACTER_SET": "character_set",
    "ARIOHASH_PROOF_OF_WORK_KEY": "proof_of_work_key",
    "ARIOHASH_MAX_ITERATIONS": "max_iterations",
    "ARIOHASH_LOG_LEVEL": "log_level",
}

def _env_overrides() -> Dict[str, str]:
    overrides = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            logger.debug(f"Applying environment override {env_name}.")
            overrides[field_name] = value
    return overrides

def load_config() -> HashSettings:
    """Loads settings from the user config file and environment overrides."""
    global _cached_config
    if _cached_config:
        return _cached_config

    config_path = get_user_config_file()
    loaded_data = {}

    if config_path.exists():
        logger.info(f"Loading user configuration from: {config_path}")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                loaded_data = json.load(f)
            if not isinstance(loaded_data, dict):
                raise ValueError("top-level value must be a JSON object")
        except (ValueError, OSError) as e: # JSONDecodeError is a ValueError
            logger.error(f"Failed to load user config file {config_path}: {e}")
            try:
                 backup_path = config_path.with_suffix(".json.corrupted")
                 backup_path.unlink(missing_ok=True)
                 config_path.rename(backup_path)
                 logger.info(f"Backed up corrupted config to: {backup_path}")
            except OSError as backup_err:
                 logger.error(f"Failed to backup corrupted config: {backup_err}")
            loaded_data = {}
    else:
        logger.info("User config file not found. Using default settings.")

    loaded_data.update(_env_overrides())

    try:
        config = HashSettings(**loaded_data)
        _cached_config = config
        logger.info("Configuration loaded successfully.")
        return config
    except ValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        logger.warning("Falling back to default configuration.")
        _cached_config = HashSettings()
        return _cached_config

def save_config(config: HashSettings) -> Path:
    """Saves settings using an atomic write via NamedTemporaryFile. Returns the written path."""
    config_path = get_user_config_file()
    logger.info(f"Saving configuration to: {config_path}")
    temp_file_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding='utf-8',
            dir=config_path.parent,
            prefix=f".{config_path.name}_tmp",
            suffix=".json",
            delete=False # Keep the file after closing for os.replace
        ) as temp_f:
            temp_file_path = Path(temp_f.name)
            logger.debug(f"Writing config to temporary file: {temp_file_path}")
            temp_f.write(config.model_dump_json(indent=4))
            temp_f.flush()
            os.fsync(temp_f.fileno())

        os.replace(temp_file_path, config_path)
        logger.info("Configuration saved successfully.")
        temp_file_path = None
        return config_path
    finally:
        if temp_file_path and temp_file_path.exists():
             logger.warning(f"Cleaning up leftover temporary config file: {temp_file_path}")
             try: temp_file_path.unlink()
             except OSError as unlink_err: logger.error(f"Failed to remove temporary config file {temp_file_path}: {unlink_err}")

def get_config() -> HashSettings:
    """Returns the cached settings object, loading if necessary."""
    if _cached_config is None:
        return load_config()
    return _cached_config

def reset_config_cache() -> None:
    """Drops the cached settings so the next get_config() reloads them."""
    global _cached_config
    _cached_config = None
