"""Logging configuration for the photo album library."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import colorlog


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    enable_color: bool = True,
    enable_file_logging: bool = True,
) -> logging.Logger:
    """Set up logging configuration."""
    logger = logging.getLogger("photo_album")
    logger.setLevel(getattr(logging, log_level.upper()))

    logger.handlers.clear()

    # Console output goes to stderr so command output on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))

    if enable_color:
        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        )
    else:
        console_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if enable_file_logging and log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "photo_album.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        # Errors and critical only
        error_handler = logging.handlers.RotatingFileHandler(
            log_dir / "errors.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_formatter)
        logger.addHandler(error_handler)

    # Account changes and logins
    if log_dir:
        audit_handler = logging.handlers.RotatingFileHandler(
            log_dir / "audit.log",
            maxBytes=50 * 1024 * 1024,  # 50MB
            backupCount=10,
            encoding="utf-8"
        )
        audit_handler.setLevel(logging.INFO)

        audit_formatter = logging.Formatter(
            "%(asctime)s - AUDIT - %(levelname)s - %(name)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        audit_handler.setFormatter(audit_formatter)

        audit_logger = logging.getLogger("photo_album.audit")
        audit_logger.handlers.clear()
        audit_logger.addHandler(audit_handler)
        audit_logger.setLevel(logging.INFO)
        audit_logger.propagate = False

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger instance."""
    if name is None:
        name = "photo_album"
    elif not name.startswith("photo_album"):
        name = f"photo_album.{name}"

    logger = logging.getLogger(name)

    # If this is the first time getting the root logger, set it up
    if name == "photo_album" and not logger.handlers:
        from photo_album.core.config import get_config
        config = get_config()
        setup_logging(
            log_level=config.log_level,
            log_dir=config.log_dir,
            enable_color=not config.debug,
            enable_file_logging=True
        )

    return logger


def get_audit_logger() -> logging.Logger:
    """Get the audit logger for account and session events."""
    return logging.getLogger("photo_album.audit")


def audit_log(operation: str, **details):
    """Log an audit event with optional details."""
    audit_logger = get_audit_logger()

    detail_str = " ".join([f"{k}={v}" for k, v in details.items()])

    if detail_str:
        audit_logger.info(f"{operation} - {detail_str}")
    else:
        audit_logger.info(operation)
