"""Simple logging abstraction for recipebook."""

import sys
import uuid
from contextvars import ContextVar
from typing import Optional
from loguru import logger as _logger

from .profile import Profile

session_id_context: ContextVar[Optional[str]] = ContextVar('session_id_context', default=None)
_logger_configured: bool = False


def get_logger(component: Optional[str] = None):
    """Get a logger instance bound to an optional component name."""
    global _logger_configured

    # Configure logger on first use
    if not _logger_configured:
        _logger.remove()

        profile = Profile.current()

        # Stderr handler - only ERROR and above
        _logger.add(
            sys.stderr,
            level="ERROR",
            format="<red>{time:HH:mm:ss}</red> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | <level>{message}</level>",
            colorize=True,
        )

        # File handler
        _logger.add(
            profile.log_file,
            level=profile.log_level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component]} | {extra[session]} | {message}",
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        )

        _logger.configure(patcher=_add_context)
        _logger_configured = True

    if component:
        return _logger.bind(component=component)
    return _logger


def _add_context(record):
    """Add context variables to log record."""
    session_id = session_id_context.get()

    record["extra"].setdefault("component", "recipebook")
    record["extra"]["session"] = session_id or ""


def set_session_id(session_id: Optional[str] = None) -> str:
    """Set the session ID for the current context. Generates one if not provided."""
    if session_id is None:
        session_id = str(uuid.uuid4())[:8]
    session_id_context.set(session_id)
    return session_id


def clear_session_id() -> None:
    """Clear the session ID from the current context."""
    session_id_context.set(None)


logger = get_logger()

__all__ = [
    "logger",
    "get_logger",
    "set_session_id",
    "clear_session_id",
]
