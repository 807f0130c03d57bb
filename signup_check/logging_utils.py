"""Logging helpers."""

from __future__ import annotations

import logging

from .io_utils import RunPaths

PACKAGE_LOGGER = "signup_check"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_logger(run_paths: RunPaths, verbose: bool = False) -> logging.Logger:
    """Route every ``signup_check.*`` logger into this run's console and log file.

    Handlers from a previous run in the same process are replaced, so module
    loggers (driver, autocomplete, network capture) always write to the
    current run's ``signup_check.log``. Returns the run's own logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    for handler in list(package_logger.handlers):
        if getattr(handler, "signup_check_run", None) is not None:
            package_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S")
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler = logging.FileHandler(run_paths.log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    for handler in (console_handler, file_handler):
        handler.setFormatter(formatter)
        handler.signup_check_run = run_paths.run_id
        package_logger.addHandler(handler)

    return logging.getLogger(f"{PACKAGE_LOGGER}.run.{run_paths.run_id}")
