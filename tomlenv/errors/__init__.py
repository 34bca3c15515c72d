"""Errors - one exception hierarchy, tagged with an ErrCode category."""
from .codes import ErrCode
from .exceptions import (
    TomlenvError, EnvironmentKeyError, InvalidEnvironmentError,
    InvalidCurrentEnvironmentError, ParseError, UnknownEnvironmentTableError,
    SerializeError, IoError, VariableUnsetError,
)

__all__ = [
    "ErrCode", "TomlenvError", "EnvironmentKeyError", "InvalidEnvironmentError",
    "InvalidCurrentEnvironmentError", "ParseError", "UnknownEnvironmentTableError",
    "SerializeError", "IoError", "VariableUnsetError",
]
