"""
procbus: In-process procedure dispatch

Procedures are declared with a path (["log", "info"]), pydantic input and
output contracts and a handler, registered in bulk, and invoked by path.
procbus.http serves a registry over HTTP; procbus.client calls it.
"""

from procbus.procedure import (
    Procedure,
    ProcedureDefinitionError,
    define_procedure,
    normalize_path,
)
from procbus.registry import (
    ProcedureNotFoundError,
    ProcedureRegistry,
    call,
    default_registry,
    get_registry,
    register_procedures,
)

__all__ = [
    'Procedure', 'ProcedureDefinitionError', 'define_procedure', 'normalize_path',
    'ProcedureRegistry', 'ProcedureNotFoundError', 'default_registry',
    'get_registry', 'register_procedures', 'call',
]
__version__ = '1.0.0'
