"""
Formatters for logcore entries.

Each formatter is a regular logging.Formatter. Records emitted by
logcore.Logger carry the originating LogEntry as `record.log_entry`;
records from plain stdlib loggers are converted on the fly.
"""

import json
import logging
from datetime import datetime, timezone

from logcore.entry import LogEntry
from logcore.levels import LogLevel, parse_log_level


def entry_from_record(record: logging.LogRecord) -> LogEntry:
    """Get the LogEntry behind a record, building one for stdlib records"""
    entry = getattr(record, 'log_entry', None)
    if isinstance(entry, LogEntry):
        return entry

    # logger.info(..., extra={'context': {...}}) puts structured fields here
    extra_context = getattr(record, 'context', None)
    error = record.exc_info[1] if record.exc_info else None

    return LogEntry(
        level=parse_log_level(record.levelno, default=LogLevel.ERROR),
        message=record.getMessage(),
        timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
        context=record.name,
        data=extra_context if isinstance(extra_context, dict) and extra_context else None,
        error=error,
    )


class SimpleFormatter(logging.Formatter):
    """
    Human-readable single line:

        [INFO] [my-app] User logged in {"user_id": 123}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = entry_from_record(record)
        parts = [f'[{entry.level_name}]']
        if entry.context:
            parts.append(f'[{entry.context}]')
        parts.append(entry.message)
        if entry.data:
            parts.append(json.dumps(entry.data, default=str))

        line = ' '.join(parts)
        if entry.error is not None:
            error = entry.to_dict()['error']
            line += f"\n  {error['name']}: {error['message']}"
            if 'stack' in error:
                line += '\n' + '\n'.join(f'    {l}' for l in error['stack'].strip().splitlines())
        return line


class TimestampedFormatter(SimpleFormatter):
    """SimpleFormatter output prefixed with an ISO-8601 UTC timestamp"""

    def format(self, record: logging.LogRecord) -> str:
        entry = entry_from_record(record)
        timestamp = entry.timestamp.isoformat().replace('+00:00', 'Z')
        return f'{timestamp} {super().format(record)}'


class JsonFormatter(logging.Formatter):
    """
    Structured JSON, one object per line.

    Output format:
    {
        "timestamp": "2026-02-08T20:30:00.123456Z",
        "level": "INFO",
        "message": "User logged in",
        "context": "my-app",          # Optional
        "data": {...},                # Optional
        "error": {"name": ..., "message": ..., "stack": ...}  # Optional
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(entry_from_record(record).to_dict(), default=str)


def create_simple_formatter() -> SimpleFormatter:
    return SimpleFormatter()


def create_timestamped_formatter() -> TimestampedFormatter:
    return TimestampedFormatter()


def create_json_formatter() -> JsonFormatter:
    return JsonFormatter()
