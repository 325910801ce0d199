"""
Registers the log.* procedures with a procedure registry.

Importing this module registers them with procbus.default_registry, so
depending on client_logger is enough to make the paths callable.
"""

from typing import List, Optional

from logcore import get_logger as get_internal_logger
from procbus import Procedure, ProcedureRegistry, default_registry
from client_logger.handle import LoggerHandle, default_handle
from client_logger.procedures import build_procedures

logger = get_internal_logger(__name__)

_default_procedures: Optional[List[Procedure]] = None


def _procedures_for(handle: LoggerHandle) -> List[Procedure]:
    global _default_procedures
    if handle is not default_handle:
        return build_procedures(handle)
    if _default_procedures is None:
        _default_procedures = build_procedures(default_handle)
    return _default_procedures


def register_log_procedures(
    registry: Optional[ProcedureRegistry] = None,
    handle: Optional[LoggerHandle] = None
) -> List[Procedure]:
    """
    Register all log procedures in one bulk call.

    Safe to call repeatedly: each path is re-bound, never duplicated.

    Args:
        registry: Target registry (default: procbus.default_registry)
        handle: Logger slot the handlers read (default: the shared handle)

    Returns:
        The registered procedures
    """
    registry = registry if registry is not None else default_registry
    procedures = _procedures_for(handle if handle is not None else default_handle)
    registry.register(procedures)
    logger.debug(
        "Log procedures registered",
        extra={'context': {'paths': [p.key for p in procedures]}}
    )
    return procedures


register_all = register_log_procedures

register_log_procedures()
