"""
novalog: a five-level logging facade.

Logs through loguru when it is installed, otherwise through the standard
library's logging module. The backend is chosen once per process.

    from novalog import get_logger
    log = get_logger(__name__)
    log.info("ready")
"""

from novalog.levels import Level, level_name
from novalog.core import Logger
from novalog.adapters import BackendAdapter, StdlibAdapter, LoguruAdapter
from novalog.backends import Backend, StdlibBackend, LoguruBackend, select_backend
from novalog.config import FacadeConfig, BackendChoice
from novalog.registry import LoggerRegistry, get_logger

__all__ = [
    "Level",
    "level_name",
    "Logger",
    "BackendAdapter",
    "StdlibAdapter",
    "LoguruAdapter",
    "Backend",
    "StdlibBackend",
    "LoguruBackend",
    "select_backend",
    "FacadeConfig",
    "BackendChoice",
    "LoggerRegistry",
    "get_logger",
]
