"""
Error codes - coarse categories attached to every tomlenv error.
Callers switch on the code when they only care about the kind of failure,
not the concrete exception class.
"""

from enum import Enum


class ErrCode(str, Enum):
    """Category of a tomlenv failure."""
    ENV = "env"          # unrecognized or unavailable environment
    IO = "io"            # backing file could not be opened or read
    PARSE = "parse"      # malformed TOML or value that does not fit its type
    VAR = "var"          # lookup variable not set
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, text: str) -> "ErrCode":
        """Map a code spelling back to its member, UNKNOWN for anything else."""
        for code in cls:
            if code.value == text:
                return code
        return cls.UNKNOWN
