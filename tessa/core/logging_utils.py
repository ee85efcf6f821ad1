"""Logging utilities for tessa.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. Library code obtains its loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'tessa'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_tessa_root() -> logging.Logger:
    """Ensure the 'tessa' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'tessa' logger.
    """
    root = logging.getLogger(_ROOT_NAME)
    # NullHandlers (added by the package __init__) would swallow records once we own the output
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Configure the level of the 'tessa' logger family.

    This does NOT modify the process root logger.
    """
    root = _ensure_tessa_root()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'tessa' namespace.

    Names outside the namespace are prefixed, so ``get_logger('intersection')``
    and ``get_logger('tessa.intersection')`` are the same logger. Without an
    explicit level the logger is NOTSET and inherits from 'tessa'.

    Unlike configure_logging() this does not attach a handler; a library that
    is never configured stays silent behind the package NullHandler.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
