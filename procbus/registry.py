"""
Procedure registry: resolves a path to a handler and runs it.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from logcore import get_logger
from procbus.procedure import PathLike, Procedure, ProcedureDefinitionError, normalize_path

logger = get_logger(__name__)


class ProcedureNotFoundError(KeyError):
    """No procedure is registered at the requested path"""

    def __init__(self, path: PathLike):
        self.key = path if isinstance(path, str) else '.'.join(str(s) for s in path)
        super().__init__(self.key)
        self.path = path

    def __str__(self) -> str:
        return f"No procedure registered at {self.key}"


class ProcedureRegistry:
    """
    Path-keyed table of procedures.

    Registering a path that is already bound replaces the previous
    procedure, so re-registering the same declarations is harmless.
    """

    def __init__(self):
        self._procedures: Dict[Tuple[str, ...], Procedure] = {}

    def register(self, procedures: Iterable[Procedure]) -> None:
        """Bulk-register procedures, replacing any bound at the same paths"""
        procedures = list(procedures)
        replaced = 0
        for procedure in procedures:
            if procedure.path in self._procedures:
                replaced += 1
            self._procedures[procedure.path] = procedure

        logger.debug(
            "Registered procedures",
            extra={'context': {'count': len(procedures), 'replaced': replaced}}
        )

    def unregister(self, path: PathLike) -> bool:
        """Remove the procedure at path; returns False if nothing was bound"""
        try:
            key = normalize_path(path)
        except ProcedureDefinitionError:
            return False
        return self._procedures.pop(key, None) is not None

    def get(self, path: PathLike) -> Procedure:
        """
        Resolve a path to its procedure.

        Raises:
            ProcedureNotFoundError: If nothing is bound at path, including
                malformed paths such as "log..info" that can never be bound
        """
        try:
            key = normalize_path(path)
        except ProcedureDefinitionError:
            raise ProcedureNotFoundError(path) from None
        try:
            return self._procedures[key]
        except KeyError:
            raise ProcedureNotFoundError(key) from None

    def procedures(self) -> List[Procedure]:
        return sorted(self._procedures.values(), key=lambda p: p.key)

    def __contains__(self, path: PathLike) -> bool:
        try:
            return normalize_path(path) in self._procedures
        except ProcedureDefinitionError:
            return False

    def __len__(self) -> int:
        return len(self._procedures)

    def call(self, path: PathLike, payload: Any = None) -> Any:
        """
        Invoke the procedure bound at path.

        Args:
            path: Dotted string or sequence of segments
            payload: Input data, validated against the procedure's input model.
                Procedures without an input model take no input; their
                handler is called with no arguments and payload is ignored

        Returns:
            Handler result, validated against the output model and dumped
            to a plain dict when the procedure declares one

        Raises:
            ProcedureNotFoundError: If nothing is registered at path
            pydantic.ValidationError: If payload or result break the contract
        """
        procedure = self.get(path)

        if procedure.input_model is not None:
            model = procedure.input_model
            validated = payload if isinstance(payload, model) else model.model_validate(
                payload if payload is not None else {}
            )
            result = procedure.handler(validated)
        else:
            result = procedure.handler()

        if procedure.output_model is not None:
            return procedure.output_model.model_validate(result).model_dump()
        return result


default_registry = ProcedureRegistry()


def get_registry() -> ProcedureRegistry:
    return default_registry


def register_procedures(procedures: Iterable[Procedure]) -> None:
    """Bulk-register procedures with the process-wide registry"""
    default_registry.register(procedures)


def call(path: PathLike, payload: Any = None) -> Any:
    """Invoke a procedure on the process-wide registry"""
    return default_registry.call(path, payload)
