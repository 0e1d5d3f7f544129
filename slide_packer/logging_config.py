"""Logging Setup

Minimal logging initialisation shared by the app and the packer modules.
"""
import logging
import os


def setup_logging(level: str = None) -> None:
    """Attach a single stream handler to the root logger and set its level.

    Args:
        level: Level name (e.g. "DEBUG"). Defaults to SLIDE_PACKER_LOG_LEVEL or INFO.
    """
    level = level or os.getenv("SLIDE_PACKER_LOG_LEVEL", "INFO")
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a module logger after ensuring logging is initialized."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
