import logging
from logging import Formatter, Handler, Logger
import os
from typing import Any

from design_patterns.main.config import AppConfig, config

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s]|[%(process)d]| %(name)s: %(message)s"
PLAIN_FORMAT = "%(asctime)s [%(process)d]| %(message)s"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str, default: int) -> int:
    return getattr(logging, name, default)  # type: ignore[no-any-return]


def log_file_path(app_config: AppConfig) -> str:
    """Resolve the log file; relative LOG_DIR values are taken from the project root."""
    log_dir = app_config.LOG_DIR
    if not os.path.isabs(log_dir):
        log_dir = os.path.join(os.path.dirname(__file__), "..", log_dir)
    return os.path.join(log_dir, app_config.LOG_FILE_NAME)


def _configure(handler: Handler, level: int, fmt: str) -> Handler:
    handler.setLevel(level)
    handler.setFormatter(Formatter(fmt, TIME_FORMAT))
    return handler


def build_handlers(
    app_config: AppConfig, *, plain_format: bool = False
) -> list[Handler]:
    stream_level = _level(app_config.LOG_LEVEL, logging.INFO)
    if plain_format:
        return [_configure(logging.StreamHandler(), stream_level, PLAIN_FORMAT)]

    handlers: list[Handler] = []
    if app_config.LOG_TO_FILE:
        path = log_file_path(app_config)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handlers.append(
            _configure(
                logging.FileHandler(path, "a", "utf-8"),
                _level(app_config.LOG_LEVEL_FILE, logging.WARNING),
                DEFAULT_FORMAT,
            )
        )
    handlers.append(_configure(logging.StreamHandler(), stream_level, DEFAULT_FORMAT))
    return handlers


def get_logger(name: Any, *, plain_format: bool = False) -> Logger:
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(_level(config.app.LOG_LEVEL, logging.INFO))
    for handler in build_handlers(config.app, plain_format=plain_format):
        logger.addHandler(handler)

    logger.propagate = False
    return logger
