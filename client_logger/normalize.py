"""
Turn a log procedure payload into the options a Logger accepts.

The one rule that matters: an optional field that was not supplied must
not appear in the options at all. The logger fills in its own defaults
(e.g. its default context) only for keys that are missing, so passing
{'context': None} is not the same as passing nothing.
"""

from typing import Any, Dict, Mapping, Union

from logcore import describe_error
from client_logger.schemas import LogInput, SerializedError


class RemoteError(Exception):
    """Live error rebuilt from a SerializedError received over a procedure call"""

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message
        self.name = 'Error'
        self.stack = None
        # Descriptor properties that would clash with BaseException slots
        self.extra: Dict[str, Any] = {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f'{type(self).__name__}(name={self.name!r}, message={self.message!r})'


def rebuild_error(descriptor: Union[SerializedError, Mapping[str, Any]]) -> RemoteError:
    """
    Construct a RemoteError from its message, then copy every descriptor
    field (name, stack and any extra properties) onto it as attributes.

    Keys naming a BaseException attribute (args, with_traceback, ...),
    a dunder, or 'extra' itself are not set on the error; they are kept
    in `error.extra`.
    """
    if isinstance(descriptor, SerializedError):
        fields = descriptor.model_dump()
    else:
        fields = dict(descriptor)

    error = RemoteError(fields.get('message', ''))
    for key, value in fields.items():
        if key.startswith('__') or key == 'extra' or hasattr(BaseException, key):
            error.extra[key] = value
            continue
        setattr(error, key, value)
    return error


def build_log_options(payload: Union[LogInput, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Map a LogInput to Logger options, keeping only the supplied fields.

    Returns:
        Dict with any of 'context', 'data', 'error'; 'error' holds a
        RemoteError, never the serialized descriptor
    """
    if not isinstance(payload, LogInput):
        payload = LogInput.model_validate(payload)

    options: Dict[str, Any] = {}
    if payload.context is not None:
        options['context'] = payload.context
    if payload.data is not None:
        options['data'] = payload.data
    if payload.error is not None:
        options['error'] = rebuild_error(payload.error)
    return options


def serialize_error(error: BaseException) -> Dict[str, Any]:
    """Project a live exception to the {name, message, stack?} wire shape"""
    return describe_error(error)
