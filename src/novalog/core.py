"""
Logger: the public facade.

A Logger is a name bound to exactly one backend adapter. It validates
arguments, resolves levels and forwards to the adapter; nothing else.
Instances come from the registry (novalog.get_logger), which guarantees one
Logger per name per process.

Pickling or copying a Logger carries only its name. Restoring it goes back
through get_logger(), so the restored object *is* the live, cached logger.
"""

from __future__ import annotations

from typing import Any

from novalog.adapters import BackendAdapter
from novalog.levels import Level

# Frames between the user's call and adapter.log(): the public method and _dispatch()
_DISPATCH_DEPTH = 2


class Logger:
    """
    Five-level logger bound to one backend adapter.

    Usage:
        log = get_logger(__name__)
        log.info("Connected")
        if log.is_debug_enabled():
            log.debug(f"Payload: {payload!r}")
        log.error("Request failed", exc)
    """

    # Re-export levels for convenience: Logger.DEBUG, etc.
    TRACE = Level.TRACE
    DEBUG = Level.DEBUG
    INFO = Level.INFO
    WARN = Level.WARN
    ERROR = Level.ERROR

    __slots__ = ("_name", "_adapter")

    def __init__(self, name: str, adapter: BackendAdapter) -> None:
        if name is None:
            raise ValueError("Logger name must not be None")
        if not isinstance(name, str):
            raise TypeError(f"Logger name must be str, got {type(name).__name__}")
        if not isinstance(adapter, BackendAdapter):
            raise TypeError(
                f"Logger requires a BackendAdapter, got {type(adapter).__name__}"
            )
        self._name = name
        self._adapter = adapter

    @staticmethod
    def get_instance(name_or_type: str | type) -> "Logger":
        """Same as novalog.get_logger()."""
        from novalog.registry import get_logger
        return get_logger(name_or_type)

    # ── Identity ──────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    @property
    def backend_name(self) -> str:
        return self._adapter.backend_name

    # ── Level checks ──────────────────────────────────────────────

    def is_enabled(self, level: Level | int | str) -> bool:
        """
        Would a message at `level` actually be logged?

        Raises:
            ValueError: If level is None or not a known level.
        """
        return self._adapter.is_enabled(_resolve_level(level))

    def is_trace_enabled(self) -> bool:
        return self._adapter.is_enabled(Level.TRACE)

    def is_debug_enabled(self) -> bool:
        return self._adapter.is_enabled(Level.DEBUG)

    def is_info_enabled(self) -> bool:
        return self._adapter.is_enabled(Level.INFO)

    def is_warn_enabled(self) -> bool:
        return self._adapter.is_enabled(Level.WARN)

    def is_error_enabled(self) -> bool:
        return self._adapter.is_enabled(Level.ERROR)

    # ── Emission ──────────────────────────────────────────────────

    def log(
        self,
        level: Level | int | str,
        message: Any,
        error: BaseException | None = None,
    ) -> None:
        """
        Log `message` at `level`, with optional exception information.

        Raises:
            ValueError: If level is None or not a known level.
        """
        self._dispatch(_resolve_level(level), message, error)

    def trace(self, message: Any, error: BaseException | None = None) -> None:
        self._dispatch(Level.TRACE, message, error)

    def debug(self, message: Any, error: BaseException | None = None) -> None:
        self._dispatch(Level.DEBUG, message, error)

    def info(self, message: Any, error: BaseException | None = None) -> None:
        self._dispatch(Level.INFO, message, error)

    def warn(self, message: Any, error: BaseException | None = None) -> None:
        self._dispatch(Level.WARN, message, error)

    def error(self, message: Any, error: BaseException | None = None) -> None:
        self._dispatch(Level.ERROR, message, error)

    # stdlib spelling
    warning = warn

    def _dispatch(self, level: Level, message: Any, error: BaseException | None) -> None:
        self._adapter.log(level, message, error, depth=_DISPATCH_DEPTH)

    # ── Serialization ─────────────────────────────────────────────

    def __reduce__(self):
        from novalog.registry import get_logger
        return (get_logger, (self._name,))

    def __repr__(self) -> str:
        return f"Logger({self._name!r}, backend={self.backend_name!r})"


def _resolve_level(level: Level | int | str) -> Level:
    """Validate and coerce a caller-supplied level."""
    if level is None:
        raise ValueError("Log level must not be None")
    return Level.from_value(level)
