"""Logging setup for the colorcue command line."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from colorcue.core.config import ENV_LOG_DIR

__all__ = ['configure_logging', 'LOG_NAME']

LOG_NAME = 'colorcue'

_MANAGED_HANDLER_FLAG = '_colorcue_managed_handler'


def _log_directory(log_dir: str | Path | None) -> Path | None:
    if log_dir:
        return Path(log_dir).expanduser()
    env_override = os.environ.get(ENV_LOG_DIR)
    if env_override:
        return Path(env_override).expanduser()
    return None


def _remove_managed_handlers(logger: logging.Logger) -> None:
    """Detach any handlers previously installed by configure_logging()."""
    for handler in list(logger.handlers):
        if getattr(handler, _MANAGED_HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()


def _add_handler(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _MANAGED_HANDLER_FLAG, True)
    logger.addHandler(handler)


def configure_logging(
    level: int = logging.WARNING,
    *,
    log_dir: str | Path | None = None,
    include_console: bool = True,
) -> Path | None:
    """Configure root logging for a colorcue run.

    Console output goes to stderr. A log file `colorcue.log` is written only
    when log_dir is given or COLORCUE_LOG_DIR is set; its path is returned.
    Calling this again replaces the handlers of the previous call.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    _remove_managed_handlers(root_logger)

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    log_path = None
    target_directory = _log_directory(log_dir)
    if target_directory is not None:
        target_directory.mkdir(parents=True, exist_ok=True)
        log_path = target_directory / f'{LOG_NAME}.log'
        _add_handler(root_logger, logging.FileHandler(log_path, encoding='utf-8'), level, formatter)

    if include_console:
        _add_handler(root_logger, logging.StreamHandler(), level, formatter)

    logging.captureWarnings(True)
    return log_path
