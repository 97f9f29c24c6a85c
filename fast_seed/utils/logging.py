import logging
import os
import sys
from pathlib import Path

from fast_seed.exceptions import EnvInvalidException

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]

_logging_configured = False
_log_file_path: Path | None = None


def resolve_log_level() -> str:
    """Read LOG_LEVEL (default DEBUG) and make sure it names a logging level."""
    level = os.getenv('LOG_LEVEL', 'DEBUG').strip().upper()
    if level not in LOG_LEVELS:
        raise EnvInvalidException('LOG_LEVEL', level, LOG_LEVELS)
    return level


def setup_logging(log_file_name: str | None = None, *, log_dir: Path | str | None = None, console: bool = False):
    """
    Route seeding logs to `<log_dir>/<log_file_name>`.

    The directory comes from `log_dir`, LOG_DIR or `./log`; the file from
    `log_file_name`, LOG_FILE_NAME or `app.log`. Records are echoed to stderr
    when `console` is set or ENV is `debug`.
    """
    global _logging_configured, _log_file_path

    directory = Path(log_dir or os.getenv('LOG_DIR') or Path.cwd() / "log")
    log_file = directory / (log_file_name or os.getenv('LOG_FILE_NAME', 'app.log'))
    if _logging_configured and _log_file_path == log_file:
        return

    level = resolve_log_level()
    directory.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = [logging.FileHandler(str(log_file), mode='a')]
    handlers[0].setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    if console or os.getenv('ENV') == 'debug':
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
        handlers.append(stream)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    sys.excepthook = _log_uncaught_exception

    _log_file_path = log_file
    _logging_configured = True
    logging.info(f"Seed logging configured ({level}) at {log_file}")


def _log_uncaught_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.critical("Seeding aborted by an uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))


def get_log_file_path() -> Path | None:
    return _log_file_path
