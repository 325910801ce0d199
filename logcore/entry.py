"""
Log entry record handed to formatters and transports.
"""

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from logcore.levels import LogLevel, level_name


@dataclass
class LogEntry:
    """One emitted log event"""
    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    context: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    error: Optional[BaseException] = None

    @property
    def level_name(self) -> str:
        return level_name(self.level)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view; optional fields are left out when unset"""
        result: Dict[str, Any] = {
            'timestamp': self.timestamp.isoformat().replace('+00:00', 'Z'),
            'level': self.level_name,
            'message': self.message,
        }
        if self.context is not None:
            result['context'] = self.context
        if self.data is not None:
            result['data'] = self.data
        if self.error is not None:
            result['error'] = describe_error(self.error)
        return result


def describe_error(error: BaseException) -> Dict[str, Any]:
    """
    Render an error as {name, message, stack?}.

    Errors rebuilt from a serialized descriptor carry their own name/stack
    attributes; those win over the class name and the live traceback.
    """
    name = getattr(error, 'name', None)
    if not isinstance(name, str):
        name = type(error).__name__

    message = getattr(error, 'message', None)
    if not isinstance(message, str):
        message = str(error)

    result: Dict[str, Any] = {'name': name, 'message': message}

    stack = getattr(error, 'stack', None)
    if not isinstance(stack, str) and error.__traceback__ is not None:
        stack = ''.join(traceback.format_exception(type(error), error, error.__traceback__))
    if isinstance(stack, str):
        result['stack'] = stack

    return result
