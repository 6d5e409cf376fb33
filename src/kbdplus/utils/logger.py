"""Logging for kbdplus.

Every logger lives under the ``kbdplus`` namespace so applications can tune
the whole library with one ``logging.getLogger("kbdplus")`` call. The
library installs no handlers.

Example:
    >>> import logging
    >>> logging.getLogger("kbdplus").setLevel(logging.DEBUG)
    >>> apply_kbd(root)   # logs "Replaced 2 text leaves with key spans"
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the ``kbdplus`` namespace.

    Module names already under ``kbdplus`` are used as-is; anything else
    is prefixed, e.g. ``get_logger("host").name == "kbdplus.host"``.
    """
    if name != "kbdplus" and not name.startswith("kbdplus."):
        name = f"kbdplus.{name}"
    return logging.getLogger(name)
