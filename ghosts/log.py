"""
Logging setup for the ghosts package.

- One root configuration for the whole process (no per-module handlers).
- GHOSTS_DEBUG=1 switches the level to DEBUG.
- Modules fetch their logger with get_logger(__name__).
"""

import logging
import os
import sys
import threading

DEBUG = os.environ.get('GHOSTS_DEBUG', '').strip().lower() in ('1', 'true', 'yes')

LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'

_configured = False
_config_lock = threading.Lock()


def configure_logging(level=None):
    """Attach a stderr handler to the package logger once. Later calls only adjust the level."""
    global _configured
    if level is None:
        level = logging.DEBUG if DEBUG else logging.INFO
    root = logging.getLogger('ghosts')
    with _config_lock:
        if not _configured:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
            root.addHandler(handler)
            root.propagate = False
            _configured = True
        root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    if not name.startswith('ghosts'):
        name = f'ghosts.{name}'
    return logging.getLogger(name)
