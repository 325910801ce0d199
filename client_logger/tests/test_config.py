"""
Tests for logger configuration.
"""

import json
import os
import tempfile

import pytest

from client_logger.config import ConfigError, LoggerConfig, build_logger, load_config
from logcore import ConsoleTransport, LogLevel, SimpleFormatter


def write_config(content):
    f = tempfile.NamedTemporaryFile(mode='w', suffix='.yml', delete=False)
    f.write(content)
    f.close()
    return f.name


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ('CLIENT_LOGGER_LEVEL', 'CLIENT_LOGGER_CONTEXT', 'CLIENT_LOGGER_FORMAT'):
        monkeypatch.delenv(var, raising=False)


def test_defaults_without_file():
    """Test defaults match the shared logger's initial state"""
    config = load_config()

    assert config == LoggerConfig(level=LogLevel.INFO, context='client', format='json')


def test_load_logging_section():
    """Test parsing the logging section of config.yml"""
    path = write_config("""
port: 8000
logging:
  level: debug
  context: billing-worker
  format: timestamped
""")
    try:
        config = load_config(path)
    finally:
        os.unlink(path)

    assert config.level is LogLevel.DEBUG
    assert config.context == 'billing-worker'
    assert config.format == 'timestamped'


def test_env_overrides_file(monkeypatch):
    """Test environment variables win over file values"""
    path = write_config("logging:\n  level: debug\n")
    monkeypatch.setenv('CLIENT_LOGGER_LEVEL', 'WARNING')
    monkeypatch.setenv('CLIENT_LOGGER_FORMAT', 'simple')
    try:
        config = load_config(path)
    finally:
        os.unlink(path)

    assert config.level is LogLevel.WARN
    assert config.format == 'simple'


def test_missing_file():
    with pytest.raises(ConfigError, match='not found'):
        load_config('/nonexistent/config.yml')


def test_invalid_yaml():
    path = write_config("logging: [unclosed\n")
    try:
        with pytest.raises(ConfigError, match='Invalid YAML'):
            load_config(path)
    finally:
        os.unlink(path)


@pytest.mark.parametrize('content', [
    "logging:\n  level: loud\n",
    "logging:\n  format: xml\n",
    "logging: verbose\n",
    "- just\n- a list\n",
])
def test_invalid_values(content):
    path = write_config(content)
    try:
        with pytest.raises(ConfigError):
            load_config(path)
    finally:
        os.unlink(path)


def test_build_logger():
    """Test building a console logger with the chosen format"""
    logger = build_logger(LoggerConfig(level='error', context='svc', format='simple'))

    assert logger.get_level() is LogLevel.ERROR
    assert logger.context == 'svc'
    (transport,) = logger.transports
    assert isinstance(transport, ConsoleTransport)
    assert isinstance(transport.formatter, SimpleFormatter)


def test_built_logger_writes_json(capsys):
    logger = build_logger(LoggerConfig())

    logger.info('configured')

    data = json.loads(capsys.readouterr().err)
    assert data['context'] == 'client'
    assert data['message'] == 'configured'
