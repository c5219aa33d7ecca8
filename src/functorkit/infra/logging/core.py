from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
pushed onto a queue by a single QueueHandler on the root logger and
drained by a QueueListener thread that owns the console and file handlers.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from functorkit.infra.logging.config import _LEVEL_MAP, LoggingConfig
from functorkit.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_functorkit_configured"
_QUEUE_LISTENER_ATTR: str = "_functorkit_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using queue-based dispatch.

    Repeated calls are no-ops unless `force` is set, in which case our
    previously installed handlers and listener are torn down first.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    try:
        return _install_handlers(root, cfg)
    except Exception:
        # Infrastructure failure (bad format string, unwritable stream): keep a bare console
        return _emergency_console(root)


def reset_logging() -> None:
    """
    Undo `configure_logging`: stop the listener and detach our handlers.

    Handlers installed by anyone else are left in place.
    """
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _install_handlers(root: logging.Logger, cfg: LoggingConfig) -> logging.Logger:
    """Build the console/file handlers and attach the queue front-end to `root`."""
    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    _remove_our_handlers(root)
    _stop_existing_listener(root)

    console_formatter = logging.Formatter(cfg.console_fmt)
    file_formatter = logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(console_formatter)
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            file_formatter,
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def _emergency_console(root: logging.Logger) -> logging.Logger:
    """Fall back to a plain stderr handler when regular setup fails."""
    root.setLevel(logging.INFO)
    _remove_our_handlers(root)
    _stop_existing_listener(root)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
    _tag_handler(sh)
    root.addHandler(sh)

    root.warning("Logging setup failed. Switched to emergency console.")
    return root


def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every handler we installed on the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    """Stop the active QueueListener, if any, and clear the reference."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        for h in listener.handlers:
            h.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    `QueueListener.stop` fails on a second call in some Python versions,
    which happens when both a test reset and atexit stop the same listener.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
