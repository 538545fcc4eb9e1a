# ABOUTME: Process-wide accessible-mode flag, written once at startup
# ABOUTME: Read by the renderer to drop decorations that confuse screen readers
"""Accessible output mode flag"""

import logging

logger = logging.getLogger(__name__)

_accessible: bool | None = None


def set_accessible(enabled: bool) -> bool:
    """
    Set the accessible-mode flag for the rest of the process.

    Only the first call has an effect.

    Returns:
        True if the flag was set by this call, False if it was already set
    """
    global _accessible

    if _accessible is not None:
        logger.debug(f"Accessible mode already set to {_accessible}, ignoring {enabled}")
        return False

    _accessible = bool(enabled)
    logger.debug(f"Accessible mode set to {_accessible}")
    return True


def is_accessible() -> bool:
    """Return the accessible-mode flag, off when never set."""
    return bool(_accessible)
