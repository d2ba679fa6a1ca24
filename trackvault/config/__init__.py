"""Configuration module for trackvault.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

log_startup_info() -> None
    Log system configuration at startup

Usage:
------
```python
from trackvault.config import settings, get_logger

logger = get_logger(__name__)
logger.info("Using database {}", settings.database.url)
```
"""

from .logging import get_logger, log_startup_info, setup_loguru_logger
from .settings import settings

__all__ = [
    "get_logger",
    "log_startup_info",
    "settings",
    "setup_loguru_logger",
]
