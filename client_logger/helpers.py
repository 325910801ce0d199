"""
Typed shortcuts that log through the procedure registry.

    from client_logger import log_info, log_error

    log_info("Hello", context="my-app")
    log_error("Oops", error=exc)
"""

from typing import Any, Dict, Mapping, Optional, Union

from logcore import LogLevel
from procbus import ProcedureRegistry, default_registry
from client_logger.normalize import serialize_error

ErrorLike = Union[BaseException, Mapping[str, Any]]


def _payload(message: str, context: Optional[str], data: Optional[Dict[str, Any]],
             error: Optional[ErrorLike]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {'message': message}
    if context is not None:
        payload['context'] = context
    if data is not None:
        payload['data'] = data
    if error is not None:
        payload['error'] = serialize_error(error) if isinstance(error, BaseException) else dict(error)
    return payload


def _call(severity: str, message: str, context: Optional[str], data: Optional[Dict[str, Any]],
          error: Optional[ErrorLike], registry: Optional[ProcedureRegistry]) -> Dict[str, Any]:
    registry = registry if registry is not None else default_registry
    return registry.call(['log', severity], _payload(message, context, data, error))


def log_trace(message: str, context: Optional[str] = None, data: Optional[Dict[str, Any]] = None,
              error: Optional[ErrorLike] = None, registry: Optional[ProcedureRegistry] = None) -> Dict[str, Any]:
    return _call('trace', message, context, data, error, registry)


def log_debug(message: str, context: Optional[str] = None, data: Optional[Dict[str, Any]] = None,
              error: Optional[ErrorLike] = None, registry: Optional[ProcedureRegistry] = None) -> Dict[str, Any]:
    return _call('debug', message, context, data, error, registry)


def log_info(message: str, context: Optional[str] = None, data: Optional[Dict[str, Any]] = None,
             error: Optional[ErrorLike] = None, registry: Optional[ProcedureRegistry] = None) -> Dict[str, Any]:
    return _call('info', message, context, data, error, registry)


def log_warn(message: str, context: Optional[str] = None, data: Optional[Dict[str, Any]] = None,
             error: Optional[ErrorLike] = None, registry: Optional[ProcedureRegistry] = None) -> Dict[str, Any]:
    return _call('warn', message, context, data, error, registry)


def log_error(message: str, context: Optional[str] = None, data: Optional[Dict[str, Any]] = None,
              error: Optional[ErrorLike] = None, registry: Optional[ProcedureRegistry] = None) -> Dict[str, Any]:
    return _call('error', message, context, data, error, registry)


def set_level(level: Union[LogLevel, int, str], registry: Optional[ProcedureRegistry] = None) -> Dict[str, Any]:
    registry = registry if registry is not None else default_registry
    return registry.call(['log', 'setLevel'], {'level': level})


def get_level(registry: Optional[ProcedureRegistry] = None) -> Dict[str, Any]:
    registry = registry if registry is not None else default_registry
    return registry.call(['log', 'getLevel'])
