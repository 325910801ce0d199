"""
LogCore: structured logger with pluggable formatters and transports.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from logcore.entry import LogEntry
from logcore.formatters import JsonFormatter
from logcore.levels import LogLevel, parse_log_level
from logcore.transports import ConsoleTransport

LOG_OPTION_KEYS = ('context', 'data', 'error')


class Logger:
    """
    Structured logger.

    Every instance owns a private stdlib logging.Logger (not registered in
    the logging manager), so level and transports are never shared between
    two Logger objects by accident.

    Example:
        logger = create_logger(level=LogLevel.DEBUG, context='billing')
        logger.info('Invoice sent', {'data': {'invoice_id': 42}})
        logger.error('Charge failed', error=exc)
    """

    def __init__(
        self,
        level: Union[LogLevel, int, str] = LogLevel.INFO,
        context: Optional[str] = None,
        transports: Optional[Iterable[logging.Handler]] = None,
        formatter: Optional[logging.Formatter] = None,
        name: str = 'logcore'
    ):
        self.context = context
        self._formatter = formatter
        self._logger = logging.Logger(name)
        self._logger.propagate = False
        self._level = LogLevel.INFO
        self.set_level(level)

        if transports is None:
            transports = [ConsoleTransport(formatter=formatter)]
        for transport in transports:
            self.add_transport(transport)

    # Levels

    def set_level(self, level: Union[LogLevel, int, str]) -> None:
        self._level = parse_log_level(level)
        self._logger.setLevel(int(self._level))

    def get_level(self) -> LogLevel:
        return self._level

    def is_level_enabled(self, level: Union[LogLevel, int]) -> bool:
        return int(level) >= int(self._level)

    # Transports

    @property
    def transports(self) -> List[logging.Handler]:
        return list(self._logger.handlers)

    def add_transport(self, transport: logging.Handler) -> None:
        if self._formatter is not None and transport.formatter is None:
            transport.setFormatter(self._formatter)
        self._logger.addHandler(transport)

    def remove_transport(self, transport: logging.Handler) -> None:
        self._logger.removeHandler(transport)

    def child(self, context: str) -> 'Logger':
        """New logger with its own default context, writing to the same transports"""
        return Logger(
            level=self._level,
            context=context,
            transports=self.transports,
            formatter=self._formatter,
            name=f'{self._logger.name}.{context}'
        )

    # Writing

    def _log(self, level: LogLevel, message: str,
             options: Optional[Mapping[str, Any]], extra: Dict[str, Any]) -> None:
        opts = dict(options or {})
        opts.update(extra)

        unknown = set(opts) - set(LOG_OPTION_KEYS)
        if unknown:
            raise TypeError(f"Unknown log option(s): {', '.join(sorted(unknown))}")

        if not self.is_level_enabled(level) or not self._logger.handlers:
            return

        # An absent context falls back to the logger's own; an explicit one wins
        entry = LogEntry(
            level=level,
            message=message,
            context=opts['context'] if 'context' in opts else self.context,
            data=opts.get('data'),
            error=opts.get('error'),
        )
        record = self._logger.makeRecord(
            self._logger.name, int(level), fn='', lno=0,
            msg=message, args=(), exc_info=None,
            extra={'log_entry': entry}
        )
        self._logger.handle(record)

    def trace(self, message: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._log(LogLevel.TRACE, message, options, kwargs)

    def debug(self, message: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, options, kwargs)

    def info(self, message: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, options, kwargs)

    def warn(self, message: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._log(LogLevel.WARN, message, options, kwargs)

    def warning(self, message: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self.warn(message, options, **kwargs)

    def error(self, message: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, options, kwargs)


def create_logger(
    level: Union[LogLevel, int, str] = LogLevel.INFO,
    context: Optional[str] = None,
    transports: Optional[Iterable[logging.Handler]] = None,
    formatter: Optional[logging.Formatter] = None
) -> Logger:
    """
    Create a structured logger.

    Args:
        level: Minimum level to emit (default: INFO)
        context: Default context label for entries that do not carry one
        transports: Destinations (default: one ConsoleTransport)
        formatter: Formatter applied to transports that have none

    Returns:
        Configured Logger
    """
    name = f'logcore.{context}' if context else 'logcore'
    return Logger(level=level, context=context, transports=transports, formatter=formatter, name=name)


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a pre-configured stdlib logger emitting JSON to stderr.

    Used for the package's own diagnostics.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Registered", extra={'context': {'count': 7}})
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Check if we already have handlers to avoid duplicates
    has_console_handler = any(isinstance(h, ConsoleTransport) for h in logger.handlers)
    if not has_console_handler:
        logger.addHandler(ConsoleTransport(formatter=JsonFormatter()))

    return logger
