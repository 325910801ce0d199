"""
Procedure declarations: a path, its input/output contracts and a handler.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel

PathLike = Union[str, Sequence[str]]


class ProcedureDefinitionError(ValueError):
    """Procedure declaration is malformed"""
    pass


def normalize_path(path: PathLike) -> Tuple[str, ...]:
    """
    Turn "log.info" or ["log", "info"] into ("log", "info").

    Raises:
        ProcedureDefinitionError: If the path or any segment is empty
    """
    segments = tuple(path.split('.')) if isinstance(path, str) else tuple(path)

    if not segments:
        raise ProcedureDefinitionError("Procedure path must have at least one segment")
    for segment in segments:
        if not isinstance(segment, str) or not segment:
            raise ProcedureDefinitionError(f"Invalid path segment {segment!r} in {path!r}")

    return segments


@dataclass(frozen=True)
class Procedure:
    """A single invokable operation"""
    path: Tuple[str, ...]
    handler: Callable[..., Any]
    input_model: Optional[Type[BaseModel]] = None
    output_model: Optional[Type[BaseModel]] = None
    meta: Mapping[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return '.'.join(self.path)

    @property
    def description(self) -> str:
        return self.meta.get('description', '')


def define_procedure(
    path: PathLike,
    handler: Callable[..., Any],
    input_model: Optional[Type[BaseModel]] = None,
    output_model: Optional[Type[BaseModel]] = None,
    meta: Optional[Mapping[str, Any]] = None
) -> Procedure:
    """
    Build a procedure declaration.

    Args:
        path: Dotted string or sequence of segments, e.g. ["log", "info"]
        handler: Called with the validated input model (or nothing when
            there is no input model); returns data matching output_model
        input_model: pydantic model validating the call payload
        output_model: pydantic model validating the handler result
        meta: Descriptive metadata, e.g. {"description": "..."}

    Returns:
        Immutable Procedure
    """
    if not callable(handler):
        raise ProcedureDefinitionError(f"Handler for {path!r} is not callable")

    return Procedure(
        path=normalize_path(path),
        handler=handler,
        input_model=input_model,
        output_model=output_model,
        meta=MappingProxyType(dict(meta or {})),
    )
