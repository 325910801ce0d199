"""
client_logger: logging exposed as procbus procedures

Importing this package registers log.trace, log.debug, log.info, log.warn,
log.error, log.setLevel and log.getLevel with procbus.default_registry.

Usage - through the registry:
    from procbus import call
    call(["log", "info"], {"message": "Hello", "context": "my-app"})
    call("log.error", {"message": "Oops", "error": {"name": "Error", "message": "..."}})

Usage - typed helpers:
    from client_logger import log_info, log_error
    log_info("Hello", context="my-app")
    log_error("Oops", error=exc)
"""

from logcore import (
    LOG_LEVEL_NAMES,
    CallbackTransport,
    ConsoleTransport,
    JsonFormatter,
    LogEntry,
    Logger,
    LogLevel,
    MemoryTransport,
    SimpleFormatter,
    TimestampedFormatter,
    create_callback_transport,
    create_console_transport,
    create_json_formatter,
    create_logger,
    create_memory_transport,
    create_simple_formatter,
    create_timestamped_formatter,
    parse_log_level,
)
from client_logger.handle import LoggerHandle, get_logger, set_logger
from client_logger.helpers import (
    get_level,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
    set_level,
)
from client_logger.normalize import RemoteError, build_log_options, rebuild_error, serialize_error
from client_logger.procedures import build_procedures
from client_logger.register import register_all, register_log_procedures
from client_logger.schemas import (
    GetLevelOutput,
    LogInput,
    LogOutput,
    SerializedError,
    SetLevelInput,
)

__all__ = [
    # Contracts
    'LogInput', 'LogOutput', 'SetLevelInput', 'GetLevelOutput', 'SerializedError',
    # Registration
    'LoggerHandle', 'get_logger', 'set_logger',
    'build_procedures', 'register_log_procedures', 'register_all',
    # Normalization
    'RemoteError', 'build_log_options', 'rebuild_error', 'serialize_error',
    # Helpers
    'log_trace', 'log_debug', 'log_info', 'log_warn', 'log_error', 'set_level', 'get_level',
    # Logger re-exports
    'LogLevel', 'LOG_LEVEL_NAMES', 'parse_log_level', 'Logger', 'create_logger', 'LogEntry',
    'SimpleFormatter', 'TimestampedFormatter', 'JsonFormatter',
    'create_simple_formatter', 'create_timestamped_formatter', 'create_json_formatter',
    'ConsoleTransport', 'MemoryTransport', 'CallbackTransport',
    'create_console_transport', 'create_memory_transport', 'create_callback_transport',
]
__version__ = '1.0.0'
