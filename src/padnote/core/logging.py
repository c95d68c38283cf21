"""
Logging configuration for the pad service.
"""
import logging
import logging.config
import sys
import json
import time
from datetime import datetime
from typing import Any, Dict, Optional
from pathlib import Path

from ..config import Settings, get_settings

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, extras nested under ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            'timestamp': datetime.utcnow().isoformat() + 'Z',
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}.{record.funcName}:{record.lineno}",
        }

        if record.exc_info and record.exc_info[0]:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }

        extra = {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRS}
        if extra:
            log_entry['extra'] = extra

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def get_log_level(level_str: Optional[str] = None) -> int:
    """Get log level from string or settings."""
    level = logging.getLevelName((level_str or get_settings().log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """dictConfig for the given settings.

    Console output is JSON, or ``log_format`` text when debugging. Setting
    ``log_dir`` adds a rotating text log and a JSON error log.
    """
    handlers: Dict[str, Dict[str, Any]] = {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'text' if settings.debug else 'json',
            'stream': sys.stdout,
            'level': get_log_level(settings.log_level),
        },
    }

    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        for name, filename, formatter, level in (
            ('file', 'padnote.log', 'text', 'DEBUG'),
            ('error_file', 'error.log', 'json', 'ERROR'),
        ):
            handlers[name] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(log_dir / filename),
                'maxBytes': 10_000_000,  # 10MB
                'backupCount': 5,
                'formatter': formatter,
                'level': level,
            }

    app_handlers = list(handlers)

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'json': {'()': JSONFormatter},
            'text': {'format': settings.log_format, 'datefmt': '%Y-%m-%d %H:%M:%S'},
        },
        'handlers': handlers,
        'loggers': {
            '': {'handlers': ['console'], 'level': 'WARNING'},
            'padnote': {'handlers': app_handlers, 'level': 'DEBUG', 'propagate': False},
            'uvicorn': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
            # LoggingMiddleware already logs every request
            'uvicorn.access': {'handlers': ['console'], 'level': 'WARNING', 'propagate': False},
        },
    }


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Setup logging configuration."""
    settings = settings or get_settings()

    logging.config.dictConfig(build_logging_config(settings))

    get_logger('logging').info("Logging system initialized", extra={
        'log_level': settings.log_level,
        'debug': settings.debug,
        'environment': settings.environment,
    })


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(f"padnote.{name}")


def _header(scope, name: bytes) -> Optional[str]:
    # header values may carry obs-text, so never assume utf-8
    for key, value in scope.get('headers', []):
        if key == name:
            return value.decode('latin-1')
    return None


def get_client_ip(scope) -> str:
    """Client address, preferring X-Real-IP and X-Forwarded-For from a proxy."""
    real_ip = _header(scope, b'x-real-ip')
    if real_ip:
        return real_ip.strip()

    forwarded_for = _header(scope, b'x-forwarded-for')
    if forwarded_for:
        return forwarded_for.split(',')[0].strip()

    client = scope.get('client')
    return client[0] if client else 'unknown'


def request_info(scope) -> Dict[str, Any]:
    """Loggable summary of an HTTP scope."""
    return {
        'request_id': id(scope),
        'method': scope['method'],
        'path': scope['path'],
        'query_string': scope.get('query_string', b'').decode('latin-1'),
        'client_ip': get_client_ip(scope),
        'user_agent': _header(scope, b'user-agent') or 'unknown',
    }


class LoggingMiddleware:
    """ASGI middleware logging each request, its response status and timing."""

    def __init__(self, app, logger_name: str = "http"):
        self.app = app
        self.logger = get_logger(logger_name)

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        info = request_info(scope)
        started = time.perf_counter()

        def elapsed_ms() -> float:
            return round((time.perf_counter() - started) * 1000, 2)

        self.logger.info("HTTP Request", extra=info)

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                self.logger.info("HTTP Response", extra={
                    'request_id': info['request_id'],
                    'method': info['method'],
                    'path': info['path'],
                    'status_code': message.get('status', 0),
                    'duration_ms': elapsed_ms(),
                })
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            self.logger.error("HTTP Request Failed", extra={
                'request_id': info['request_id'],
                'method': info['method'],
                'path': info['path'],
                'duration_ms': elapsed_ms(),
                'exception_type': type(exc).__name__,
            })
            raise
