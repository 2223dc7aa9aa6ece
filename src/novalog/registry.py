"""
LoggerRegistry: process-wide name → Logger cache.

The registry decides the backend family once (lazily, on first lookup) and
creates at most one Logger per name. Lookups of an existing name take no
lock; creation uses double-checked locking so racing callers all receive
the same instance.

Usage:
    log = get_logger(__name__)
    log = get_logger(MyClass)          # "package.module.MyClass"
    LoggerRegistry.instance().status()
"""

from __future__ import annotations

import threading
from typing import Optional

from novalog.backends import Backend, select_backend
from novalog.config import FacadeConfig
from novalog.core import Logger


class LoggerRegistry:
    """Singleton registry. One backend and one Logger per name per process."""

    _instance: Optional["LoggerRegistry"] = None
    _lock = threading.Lock()

    def __init__(
        self,
        config: FacadeConfig | None = None,
        backend: Backend | None = None,
    ) -> None:
        self._config = config if config is not None else FacadeConfig.from_env()
        # Injected backend skips selection; otherwise decided on first use
        self._backend: Backend | None = backend
        self._loggers: dict[str, Logger] = {}
        self._create_lock = threading.Lock()

    @classmethod
    def instance(cls) -> "LoggerRegistry":
        """Get or create the singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def configure(cls, config: FacadeConfig) -> "LoggerRegistry":
        """
        Replace the singleton with one built from `config`.

        Only valid at startup: once the current registry has decided its
        backend or handed out a logger, the backend family is fixed for the
        process.

        Raises:
            RuntimeError: If the current registry is already in use.
        """
        with cls._lock:
            current = cls._instance
            if current is not None and current.in_use:
                raise RuntimeError(
                    "Logging backend already decided; configure() must run "
                    "before the first get_logger()"
                )
            cls._instance = cls(config)
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton. For testing only."""
        with cls._lock:
            cls._instance = None

    # ── Backend ───────────────────────────────────────────────────

    @property
    def config(self) -> FacadeConfig:
        return self._config

    @property
    def in_use(self) -> bool:
        """True once the backend is decided or any logger exists."""
        return self._backend is not None or bool(self._loggers)

    @property
    def backend(self) -> Backend:
        """The backend for this process, decided on first access or lookup."""
        if self._backend is None:
            with self._create_lock:
                announce = self._decide_backend()
            if announce:
                self._announce()
        return self._backend

    def _decide_backend(self) -> bool:
        """Select the backend if not yet decided. Caller holds _create_lock."""
        if self._backend is not None:
            return False
        self._backend = select_backend(self._config.backend.value)
        return True

    def _announce(self) -> None:
        self.get_logger(__name__).debug(f"Using {self._backend.name} logging backend")

    # ── Lookup ────────────────────────────────────────────────────

    def get_logger(self, name_or_type: str | type) -> Logger:
        """
        Get or create the Logger for a name or a class.

        Raises:
            ValueError: If name_or_type is None.
            TypeError: If it is neither a str nor a class.
        """
        name = _logger_name(name_or_type)

        logger = self._loggers.get(name)
        if logger is not None:
            return logger

        with self._create_lock:
            announce = self._decide_backend()
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(name, self._backend.create_adapter(name))
                self._loggers[name] = logger

        if announce:
            self._announce()
        return logger

    def loggers(self) -> list[str]:
        """Names of all loggers created so far."""
        return sorted(self._loggers)

    def status(self) -> dict:
        """Current registry state for display."""
        return {
            "backend": self._backend.name if self._backend is not None else None,
            "configured_backend": self._config.backend.value,
            "loggers": self.loggers(),
        }


def get_logger(name_or_type: str | type) -> Logger:
    """Get the process-wide Logger for a name or a class."""
    return LoggerRegistry.instance().get_logger(name_or_type)


def _logger_name(name_or_type: str | type) -> str:
    if name_or_type is None:
        raise ValueError("Logger name or type must not be None")
    if isinstance(name_or_type, str):
        return name_or_type
    if isinstance(name_or_type, type):
        return f"{name_or_type.__module__}.{name_or_type.__qualname__}"
    raise TypeError(
        f"Expected logger name (str) or class, got {type(name_or_type).__name__}"
    )
