"""
Exception hierarchy for tomlenv.

Every failure is a TomlenvError carrying:
- code:   an ErrCode category (env, parse, io, var)
- reason: a human readable summary
- source: the lower-level exception that caused it, if any

Catch TomlenvError to handle every library failure, or one of the
kind classes below to react to a specific cause.
"""

from typing import Any, Optional

from tomlenv.errors.codes import ErrCode


class TomlenvError(Exception):
    """Base type for all tomlenv errors."""
    code: ErrCode = ErrCode.UNKNOWN

    def __init__(self, reason: str, source: Optional[BaseException] = None):
        super().__init__(reason)
        self.reason = reason
        self.source = source

    def __str__(self) -> str:
        if self.source is not None:
            return f"[{self.code}] {self.reason}: {self.source}"
        return f"[{self.code}] {self.reason}"

    def to_dict(self) -> dict:
        """Structured form, printed by `tomlenv current --format json` on failure."""
        data: dict[str, Any] = {"code": self.code.value, "reason": self.reason}
        if self.source is not None:
            data["source"] = str(self.source)
        return data


# ── Environment kind ──────────────────────────────────────────────

class EnvironmentKeyError(TomlenvError):
    """An environment string could not be resolved to a known environment."""
    code = ErrCode.ENV


class InvalidEnvironmentError(EnvironmentKeyError, ValueError):
    """The given string is not a canonical environment spelling."""

    def __init__(self, given: Any):
        super().__init__(f"the given runtime environment '{given}' is invalid!")
        self.given = given


class InvalidCurrentEnvironmentError(EnvironmentKeyError):
    """The variable naming the current environment does not select a loaded entry."""

    def __init__(self, var_name: str, given: Optional[str] = None,
                 source: Optional[BaseException] = None):
        super().__init__(
            f"could not retrieve current environment from '{var_name}'"
            + (f" (value '{given}')" if given is not None else ""),
            source,
        )
        self.var_name = var_name
        self.given = given


# ── Parse kind ────────────────────────────────────────────────────

class ParseError(TomlenvError):
    """The TOML document is malformed or does not fit the expected shape."""
    code = ErrCode.PARSE


class UnknownEnvironmentTableError(ParseError, EnvironmentKeyError):
    """A table under [envs] is named after an unrecognized environment."""
    code = ErrCode.PARSE

    def __init__(self, given: str, source: Optional[BaseException] = None):
        super().__init__(f"unknown environment table 'envs.{given}'", source)
        self.given = given


class SerializeError(TomlenvError):
    """The loaded environments could not be rendered back to TOML."""
    code = ErrCode.PARSE


# ── Io kind ───────────────────────────────────────────────────────

class IoError(TomlenvError):
    """The backing file could not be opened or read."""
    code = ErrCode.IO

    def __init__(self, path: Any, source: Optional[BaseException] = None):
        super().__init__(f"unable to read environments from '{path}'", source)
        self.path = path


# ── VariableUnset kind ────────────────────────────────────────────

class VariableUnsetError(TomlenvError):
    """The variable naming the current environment is not set."""
    code = ErrCode.VAR

    def __init__(self, var_name: str):
        super().__init__(f"environment variable '{var_name}' is not set")
        self.var_name = var_name
