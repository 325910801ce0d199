"""
The shared logger slot used by the log procedures.
"""

from logcore import Logger, LogLevel, create_logger

DEFAULT_CONTEXT = 'client'


class LoggerHandle:
    """
    Single-slot holder for "the current logger".

    Replacing the logger does not touch the previous one; callers that
    need it later must keep their own reference. There is no lock: a log
    call already holding the old logger finishes with it.
    """

    def __init__(self, logger: Logger):
        self._logger = logger

    def get(self) -> Logger:
        return self._logger

    def set(self, logger: Logger) -> None:
        self._logger = logger


default_handle = LoggerHandle(create_logger(level=LogLevel.INFO, context=DEFAULT_CONTEXT))


def get_logger() -> Logger:
    """Current logger behind the log.* procedures"""
    return default_handle.get()


def set_logger(new_logger: Logger) -> None:
    """Route all subsequent log.* calls to new_logger"""
    default_handle.set(new_logger)
