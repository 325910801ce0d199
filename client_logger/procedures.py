"""
Declarations of the log.* procedures.
"""
from typing import Callable, Dict, List

from logcore import level_name
from procbus import Procedure, define_procedure
from client_logger.handle import LoggerHandle
from client_logger.normalize import build_log_options
from client_logger.schemas import (
    GetLevelOutput,
    LogInput,
    LogOutput,
    SetLevelInput,
)

SEVERITIES = ('trace', 'debug', 'info', 'warn', 'error')


def _severity_handler(handle: LoggerHandle, severity: str) -> Callable[[LogInput], Dict[str, bool]]:
    def handler(payload: LogInput) -> Dict[str, bool]:
        options = build_log_options(payload)
        getattr(handle.get(), severity)(payload.message, options)
        return {'logged': True}

    handler.__name__ = f'log_{severity}'
    return handler


def build_procedures(handle: LoggerHandle) -> List[Procedure]:
    """
    Build the seven log procedures bound to a logger handle.

    The handle is read on every call, so swapping its logger reroutes
    procedures that are already registered.
    """
    procedures = [
        define_procedure(
            ['log', severity],
            _severity_handler(handle, severity),
            input_model=LogInput,
            output_model=LogOutput,
            meta={'description': f'Log at {severity.upper()} level'},
        )
        for severity in SEVERITIES
    ]

    def set_level(payload: SetLevelInput) -> Dict[str, bool]:
        handle.get().set_level(payload.level)
        return {'logged': True}

    def get_level() -> Dict[str, object]:
        level = handle.get().get_level()
        return {'level': level, 'levelName': level_name(level)}

    procedures.append(define_procedure(
        ['log', 'setLevel'],
        set_level,
        input_model=SetLevelInput,
        output_model=LogOutput,
        meta={'description': 'Set the log level'},
    ))
    procedures.append(define_procedure(
        ['log', 'getLevel'],
        get_level,
        output_model=GetLevelOutput,
        meta={'description': 'Get the current log level'},
    ))
    return procedures
