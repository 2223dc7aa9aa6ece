"""
Backend adapters.

One adapter per logger name. Each adapter owns a backend-native logger and
answers the two calls the facade makes: is_enabled() and log(). Levels are
translated through a fixed table per backend; a value outside the table is
an invariant violation and raises RuntimeError.

All output is produced by the backend. Adapters do no I/O of their own.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from novalog.levels import Level

# Optional dependency - imported at module level for mockability
try:
    from loguru import logger as loguru_logger
except ImportError:
    loguru_logger = None


# stdlib has no TRACE; register one below DEBUG
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class BackendAdapter(ABC):
    """Base adapter. Binds one logger name to one backend-native logger."""

    backend_name: str = "abstract"

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def native_level(self, level: Level) -> Any:
        """Translate a facade level to the backend's level."""
        ...

    @abstractmethod
    def is_enabled(self, level: Level) -> bool:
        """Would a record at `level` currently be emitted?"""
        ...

    @abstractmethod
    def log(
        self,
        level: Level,
        message: object,
        error: BaseException | None = None,
        depth: int = 0,
    ) -> None:
        """
        Emit `message` at `level`.

        `depth` counts the wrapper frames between the real caller and this
        call, so the backend attributes the record to the real call site.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def _translate(table: dict[Level, Any], level: Level) -> Any:
    if not isinstance(level, Level) or level not in table:
        raise RuntimeError(f"Unmapped log level {level!r}")
    return table[level]


# ═══════════════════════════════════════════════════════════════════
#  Standard library logging
# ═══════════════════════════════════════════════════════════════════

STDLIB_LEVELS: dict[Level, int] = {
    Level.TRACE: TRACE,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


class StdlibAdapter(BackendAdapter):
    """Baseline adapter over `logging.getLogger(name)`."""

    backend_name = "stdlib"

    def __init__(self, name: str):
        super().__init__(name)
        self._delegate = logging.getLogger(name)

    def native_level(self, level: Level) -> int:
        return _translate(STDLIB_LEVELS, level)

    def is_enabled(self, level: Level) -> bool:
        return self._delegate.isEnabledFor(self.native_level(level))

    def log(
        self,
        level: Level,
        message: object,
        error: BaseException | None = None,
        depth: int = 0,
    ) -> None:
        native = self.native_level(level)
        if error is None:
            self._delegate.log(native, str(message), stacklevel=2 + depth)
        else:
            self._delegate.log(native, str(message), exc_info=error, stacklevel=2 + depth)


# ═══════════════════════════════════════════════════════════════════
#  loguru
# ═══════════════════════════════════════════════════════════════════

LOGURU_LEVELS: dict[Level, str] = {
    Level.TRACE: "TRACE",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARN: "WARNING",
    Level.ERROR: "ERROR",
}


def _name_patcher(name: str) -> Callable[[dict], None]:
    """Stamp the facade name on each record so loguru filters see it."""
    def patch(record: dict) -> None:
        record["name"] = name
    return patch


class LoguruAdapter(BackendAdapter):
    """
    Full-featured adapter over loguru's global logger.

    loguru has a single logger object; per-name identity comes from patching
    record["name"], which is what handler filters like
    `filter={"app.db": "WARNING"}` match against. is_enabled() honours those
    filters too, so enablement agrees with emission per name.
    """

    backend_name = "loguru"

    def __init__(self, name: str):
        super().__init__(name)
        if loguru_logger is None:
            raise RuntimeError("loguru is not installed")
        self._delegate = loguru_logger.patch(_name_patcher(name))

    def native_level(self, level: Level) -> str:
        return _translate(LOGURU_LEVELS, level)

    def is_enabled(self, level: Level) -> bool:
        """
        True if some handler would accept a record at `level` from this name.

        loguru has no public enablement check, so this applies the same two
        gates its handlers apply on emit: the handler's level and its filter.
        """
        native = self._delegate.level(self.native_level(level))
        core = self._delegate._core
        if native.no < core.min_level:
            return False

        record = {
            "name": self.name,
            "level": native,
            "message": "",
            "extra": {},
            "exception": None,
        }
        # loguru replaces the handlers dict on add/remove, so iterating is safe
        for handler in core.handlers.values():
            if native.no < handler._levelno:
                continue
            if handler._filter is None:
                return True
            try:
                if handler._filter(record):
                    return True
            except KeyError:
                # Filter reads call-site fields; only a real emit can decide
                return True
        return False

    def log(
        self,
        level: Level,
        message: object,
        error: BaseException | None = None,
        depth: int = 0,
    ) -> None:
        native = self.native_level(level)
        if error is None:
            self._delegate.opt(depth=1 + depth).log(native, str(message))
        else:
            self._delegate.opt(exception=error, depth=1 + depth).log(native, str(message))
