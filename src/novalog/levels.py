"""
Level definitions.

Five severities, ordered TRACE < DEBUG < INFO < WARN < ERROR.
Numeric values line up with the standard library so they sort and compare
the same way stdlib levels do.
"""

from enum import IntEnum


class Level(IntEnum):
    """Closed set of facade levels, stdlib-compatible numeric values."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def from_name(cls, name: str) -> "Level":
        """Resolve level from string name, case-insensitive."""
        name_upper = name.upper()
        if name_upper == "WARNING":
            return cls.WARN
        try:
            return cls[name_upper]
        except KeyError:
            raise ValueError(
                f"Unknown log level '{name}'. "
                f"Valid levels: {', '.join(m.name for m in cls)}"
            )

    @classmethod
    def from_value(cls, value: "Level | int | str") -> "Level":
        """Resolve level from a Level, int or string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, int) and not isinstance(value, bool):
            for member in cls:
                if member.value == value:
                    return member
            raise ValueError(
                f"No level with value {value}. "
                f"Valid values: {', '.join(f'{m.name}={m.value}' for m in cls)}"
            )
        raise TypeError(f"Expected Level, int or str, got {type(value).__name__}")


# Map for display: level int → name string
LEVEL_NAMES: dict[int, str] = {member.value: member.name for member in Level}


def level_name(level: int) -> str:
    """Get display name for a level value. Falls back to numeric string."""
    return LEVEL_NAMES.get(level, str(level))
