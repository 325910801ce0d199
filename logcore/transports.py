"""
Transports: where logcore entries end up.

Transports are logging.Handler subclasses. Unlike the stdlib handlers,
a failing emit is not routed through handleError: the exception reaches
whoever made the log call.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

from logcore.entry import LogEntry
from logcore.formatters import JsonFormatter, entry_from_record


class ConsoleTransport(logging.Handler):
    """Writes formatted entries to a stream (stderr by default)"""

    terminator = '\n'

    def __init__(self, stream: Optional[TextIO] = None, formatter: Optional[logging.Formatter] = None):
        super().__init__()
        self._stream = stream
        self.setFormatter(formatter or JsonFormatter())

    @property
    def stream(self) -> TextIO:
        # Looked up per write; sys.stderr may be swapped after construction
        return self._stream if self._stream is not None else sys.stderr

    def emit(self, record: logging.LogRecord) -> None:
        stream = self.stream
        stream.write(self.format(record) + self.terminator)
        if hasattr(stream, 'flush'):
            stream.flush()


class MemoryTransport(logging.Handler):
    """Keeps entries in a list; handy for tests and in-process inspection"""

    def __init__(self, max_entries: Optional[int] = None):
        super().__init__()
        self.max_entries = max_entries
        self.entries: List[LogEntry] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.entries.append(entry_from_record(record))
        if self.max_entries is not None and len(self.entries) > self.max_entries:
            del self.entries[:len(self.entries) - self.max_entries]

    def clear(self) -> None:
        self.entries.clear()


class CallbackTransport(logging.Handler):
    """Hands every entry to a callable"""

    def __init__(self, callback: Callable[[LogEntry], None]):
        super().__init__()
        self.callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        self.callback(entry_from_record(record))


def create_console_transport(stream: Optional[TextIO] = None,
                             formatter: Optional[logging.Formatter] = None) -> ConsoleTransport:
    return ConsoleTransport(stream=stream, formatter=formatter)


def create_memory_transport(max_entries: Optional[int] = None) -> MemoryTransport:
    return MemoryTransport(max_entries=max_entries)


def create_callback_transport(callback: Callable[[LogEntry], None]) -> CallbackTransport:
    return CallbackTransport(callback)
