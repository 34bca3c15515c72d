"""
tomlenv - drive environment-specific configuration from TOML.

    envs = EnvironmentMap.load_from_path("env.toml", value_type=MyAppEnv)
    config = envs.current()   # entry named by the `env` variable
"""
from .environments import Environment, EnvironmentKey, EnvironmentMap, HIERARCHY
from .errors import (
    ErrCode, TomlenvError, EnvironmentKeyError, InvalidEnvironmentError,
    InvalidCurrentEnvironmentError, ParseError, UnknownEnvironmentTableError,
    SerializeError, IoError, VariableUnsetError,
)

__version__ = "0.1.0"

__all__ = [
    "Environment", "EnvironmentKey", "EnvironmentMap", "HIERARCHY",
    "ErrCode", "TomlenvError", "EnvironmentKeyError", "InvalidEnvironmentError",
    "InvalidCurrentEnvironmentError", "ParseError", "UnknownEnvironmentTableError",
    "SerializeError", "IoError", "VariableUnsetError",
]
