import logging
import sys
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Literal, Union

from pythonjsonlogger.json import JsonFormatter


def uncaught_exception_handler(exc_type, exc_value, exc_traceback):
    """Send uncaught exceptions to the log instead of a bare traceback."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.critical(
        f"Uncaught exception: {exc_value}",
        exc_info=(exc_type, exc_value, exc_traceback),
    )


class AppJsonFormatter(JsonFormatter):
    """JSON formatter that stamps every record with app and process metadata."""

    def __init__(self, app: str, process: str, *args, **kwargs):
        self.app = app
        self.process = process
        super().__init__(*args, **kwargs)

    def add_fields(self, log_record, record, message_dict):
        log_record['@timestamp'] = datetime.fromtimestamp(record.created).isoformat()
        log_record['level'] = record.levelname
        log_record['app'] = self.app
        log_record['logger'] = record.name
        log_record['process'] = self.process
        super().add_fields(log_record, record, message_dict)


class ConsoleFormatter(logging.Formatter):
    """Console formatter that appends `extra=` fields as key=value pairs."""

    RESERVED_ATTRS = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
        'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
        'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
        'exc_text', 'stack_info', 'asctime', 'taskName',
    }

    def format(self, record):
        base_message = super().format(record)

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.RESERVED_ATTRS
        }
        if not extras:
            return base_message

        extras_str = ' '.join(f'{k}={v}' for k, v in extras.items())
        return f'{base_message} | {extras_str}'


def setup_logging(
    env: Literal['local', 'production'],
    app: str,
    log_path: Union[Path, str],
    process: str = 'main',
    log_level: Union[int, str] = logging.WARNING,
) -> None:
    """Configure logging for the CLI.

    All handlers write to stderr or to the log file; stdout is reserved for
    query results.

    Args:
        env: 'local' for a plain stderr format, 'production' adds a JSON file log
        app: Application name for log metadata
        log_path: Path to the JSON log file (production only)
        process: Process identifier for log metadata
        log_level: Root logging level
    """
    if env == 'local':
        logging.basicConfig(
            format='%(asctime)s [%(levelname)s] %(message)s',
            level=log_level,
            datefmt='%d/%m/%Y %X',
            stream=sys.stderr,
            force=True,
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ConsoleFormatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_path,
            when='H',
            interval=1,
            backupCount=2,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(AppJsonFormatter(
            app=app,
            process=process,
            fmt='%(levelname)s %(name)s %(message)s'
        ))

        logging.basicConfig(
            level=log_level,
            handlers=[console_handler, file_handler],
            force=True,
        )

    sys.excepthook = uncaught_exception_handler
