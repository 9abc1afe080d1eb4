"""shelltimers logging: hexagonal logging port and structlog adapter."""

from shelltimers.logging.port import LoggingPort
from shelltimers.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
