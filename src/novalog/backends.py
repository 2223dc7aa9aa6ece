"""
Backend strategies.

A Backend knows whether its library is usable and how to build an adapter
for a logger name. The registry asks select_backend() once per process and
keeps the result, so every logger in the process shares one backend family.

Preference order for "auto": loguru, then the standard library.
"""

from abc import ABC, abstractmethod

from novalog import adapters
from novalog.adapters import BackendAdapter, LoguruAdapter, StdlibAdapter


class Backend(ABC):
    """Strategy for one backend family."""

    name: str = "abstract"

    @abstractmethod
    def is_available(self) -> bool:
        ...

    @abstractmethod
    def create_adapter(self, logger_name: str) -> BackendAdapter:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LoguruBackend(Backend):
    name = "loguru"

    def is_available(self) -> bool:
        return adapters.loguru_logger is not None

    def create_adapter(self, logger_name: str) -> BackendAdapter:
        return LoguruAdapter(logger_name)


class StdlibBackend(Backend):
    """Always available."""

    name = "stdlib"

    def is_available(self) -> bool:
        return True

    def create_adapter(self, logger_name: str) -> BackendAdapter:
        return StdlibAdapter(logger_name)


# Probe order for "auto"
BACKENDS: dict[str, type[Backend]] = {
    "loguru": LoguruBackend,
    "stdlib": StdlibBackend,
}


def select_backend(preference: str = "auto") -> Backend:
    """
    Pick a backend.

    Args:
        preference: "auto", "loguru" or "stdlib".

    Raises:
        ValueError: Unknown preference.
        RuntimeError: A specific backend was requested but is unavailable.
    """
    if preference == "auto":
        for backend_cls in BACKENDS.values():
            backend = backend_cls()
            if backend.is_available():
                return backend
        raise RuntimeError("No logging backend available")

    backend_cls = BACKENDS.get(preference)
    if backend_cls is None:
        raise ValueError(
            f"Unknown backend '{preference}'. "
            f"Valid backends: auto, {', '.join(BACKENDS)}"
        )
    backend = backend_cls()
    if not backend.is_available():
        raise RuntimeError(f"Backend '{preference}' requested but not installed")
    return backend
