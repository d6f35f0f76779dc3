from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import sys
from typing import Any

from loguru import logger as loguru_logger

from event_ticketing.platform.config.core_setting import settings
from event_ticketing.platform.constant.path import LOG_DIR
from event_ticketing.platform.logging.service_context import get_service_context


# Tests write their log files next to the test suite
TEST_LOG_DIR = os.environ.get('TEST_LOG_DIR')
ACTIVE_LOG_DIR = TEST_LOG_DIR or str(LOG_DIR)

# Argument names whose values never reach the log
SENSITIVE_KEYWORDS = {'password', 'token', 'secret', 'authorization'}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def default_extra() -> dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


# Driver chatter that only matters when debugging the driver itself
_QUIET_LOGGERS = ('aiosqlite', 'asyncio', 'asyncpg')


def _access_log_level(record: logging.LogRecord) -> str | None:
    """
    Level for a uvicorn access record, picked from its status code.

    uvicorn passes (client, method, path, http_version, status_code) as args.
    """
    if record.name != 'uvicorn.access' or not isinstance(record.args, tuple):
        return None
    if len(record.args) < 5 or not isinstance(record.args[4], int):
        return None

    status_code = record.args[4]
    if status_code >= 500:
        return 'ERROR'
    if status_code >= 400:
        return 'WARNING'
    return 'SUCCESS'


class InterceptHandler(logging.Handler):
    """Routes stdlib logging (uvicorn, sqlalchemy) into loguru."""

    def __init__(self) -> None:
        super().__init__()
        self._bound = loguru_logger.bind(**default_extra())

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(_QUIET_LOGGERS):
            return

        level: str | int | None = _access_log_level(record)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Skip logging's own frames so the record points at the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._bound.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'


def _log_file_path() -> str:
    hour = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    prefix = 'test_' if TEST_LOG_DIR else ''
    return f'{ACTIVE_LOG_DIR}/{prefix}{hour}.log'


loguru_logger.remove()
custom_logger = loguru_logger.bind(**default_extra())
custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

# Production ships stdout to the collector; files are for local debugging
if settings.DEBUG:
    custom_logger.add(
        _log_file_path(),
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
