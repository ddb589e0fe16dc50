"""
Logging setup.

Services log through module-level loggers; this only configures the root
handler once for scripts and embedding applications.
"""

import logging
from typing import Optional

from app.core.config import settings

_configured = False


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure root logging from settings (idempotent)."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=fmt or settings.log_format,
    )
    _configured = True
