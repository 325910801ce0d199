"""
Logger configuration from a YAML file and environment variables.

Example config.yml:

    logging:
      level: debug
      context: billing-worker
      format: timestamped

Environment overrides: CLIENT_LOGGER_LEVEL, CLIENT_LOGGER_CONTEXT,
CLIENT_LOGGER_FORMAT.
"""
import os
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from logcore import (
    ConsoleTransport,
    Logger,
    LogLevel,
    create_json_formatter,
    create_logger,
    create_simple_formatter,
    create_timestamped_formatter,
    parse_log_level,
)
from client_logger.handle import DEFAULT_CONTEXT

ENV_OVERRIDES = {
    'level': 'CLIENT_LOGGER_LEVEL',
    'context': 'CLIENT_LOGGER_CONTEXT',
    'format': 'CLIENT_LOGGER_FORMAT',
}

FORMATTERS = {
    'simple': create_simple_formatter,
    'timestamped': create_timestamped_formatter,
    'json': create_json_formatter,
}


class ConfigError(Exception):
    """Configuration validation error"""
    pass


class LoggerConfig(BaseModel):
    level: LogLevel = LogLevel.INFO
    context: str = DEFAULT_CONTEXT
    format: Literal['simple', 'timestamped', 'json'] = 'json'

    @field_validator('level', mode='before')
    @classmethod
    def _parse_level(cls, value: Any) -> Any:
        if isinstance(value, (str, int)):
            return parse_log_level(value)
        return value


def _read_yaml(config_path: str) -> Dict[str, Any]:
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config must be a mapping, got {type(config).__name__}")

    section = config.get('logging', {}) or {}
    if not isinstance(section, dict):
        raise ConfigError("'logging' section must be a mapping")
    return section


def load_config(config_path: Optional[str] = None) -> LoggerConfig:
    """
    Load logger configuration.

    Args:
        config_path: Optional YAML file with a `logging:` section

    Returns:
        LoggerConfig with environment overrides applied

    Raises:
        ConfigError: If the file is missing, unparsable or holds invalid values
    """
    values = _read_yaml(config_path) if config_path else {}

    for field, env_var in ENV_OVERRIDES.items():
        env_value = os.getenv(env_var)
        if env_value:
            values[field] = env_value

    try:
        return LoggerConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid logging config: {e}")


def build_logger(config: LoggerConfig) -> Logger:
    """Create a console logger from configuration"""
    formatter = FORMATTERS[config.format]()
    return create_logger(
        level=config.level,
        context=config.context,
        transports=[ConsoleTransport(formatter=formatter)],
    )
