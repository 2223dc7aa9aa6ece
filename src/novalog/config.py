"""
Pydantic configuration for the facade.

Only one knob: which backend family to use. Default is "auto" (loguru if
importable, else stdlib). Sources, in the order callers usually reach for
them:

    FacadeConfig.from_env()            # NOVALOG_BACKEND=stdlib
    FacadeConfig.from_yaml("app.yaml") # novalog: {backend: loguru}
    FacadeConfig.from_dict({"backend": "auto"})
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

ENV_BACKEND = "NOVALOG_BACKEND"
SECTION = "novalog"


class BackendChoice(str, Enum):
    AUTO = "auto"
    LOGURU = "loguru"
    STDLIB = "stdlib"


class FacadeConfig(BaseModel):
    backend: BackendChoice = BackendChoice.AUTO

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "FacadeConfig":
        """Read NOVALOG_BACKEND. Unset or blank means defaults."""
        environ = os.environ if environ is None else environ
        value = environ.get(ENV_BACKEND, "").strip().lower()
        if not value:
            return cls()
        return cls.model_validate({"backend": value})

    @classmethod
    def from_yaml(cls, path: str | Path) -> "FacadeConfig":
        """Load and validate from a YAML file."""
        return cls.from_yaml_string(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def from_yaml_string(cls, yaml_string: str) -> "FacadeConfig":
        """
        Load and validate from a YAML string.

        Accepts either a bare mapping or one nested under a `novalog:` key,
        so the section can live inside a larger application config.
        """
        data = yaml.safe_load(yaml_string) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FacadeConfig":
        """Load and validate from a dict."""
        # Non-mappings go straight to pydantic, which rejects them
        if isinstance(data, dict) and SECTION in data:
            data = data[SECTION] or {}
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
