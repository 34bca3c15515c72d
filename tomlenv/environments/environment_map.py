"""
EnvironmentMap - environment key → environment-specific configuration.

Loaded once from a TOML document shaped like:

    [envs.prod]
    name = "Production"
    key = "abcd-123-efg-45"

    [envs.dev]
    name = "Development"

Each [envs.<key>] table is validated into the caller's value type with
pydantic, so fields that only exist in some environments should be Optional
on that type. The map is read-only after loading; reload by loading again.

current() picks the entry named by the `env` variable (see Settings.env_var).
"""

import os
import logging
import tomllib
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, TypeVar, Union

import tomli_w
from pydantic import TypeAdapter, ValidationError

from tomlenv.config.settings import settings
from tomlenv.environments.environment import Environment, EnvironmentKey, check_key_type
from tomlenv.errors import (
    TomlenvError, InvalidCurrentEnvironmentError, ParseError,
    UnknownEnvironmentTableError, SerializeError, IoError, VariableUnsetError,
)

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=EnvironmentKey)
V = TypeVar("V")

ENVS_TABLE = "envs"


@lru_cache(maxsize=None)
def _adapter(value_type: Any) -> TypeAdapter:
    return TypeAdapter(value_type)


class EnvironmentMap(Mapping[K, V]):
    """
    Read-only mapping from an environment hierarchy to configuration records.
    Iterates in the key type's order, which is also the order entries are
    written back out by save_to_string().
    """

    def __init__(self, envs: Mapping[K, V], value_type: Any = dict,
                 key_type: type = Environment):
        check_key_type(key_type)
        for key in envs:
            if not isinstance(key, key_type):
                raise TypeError(f"Key {key!r} is not a {key_type.__name__}")
        self._key_type = key_type
        self._value_type = value_type
        self._envs: Mapping[K, V] = MappingProxyType({k: envs[k] for k in sorted(envs)})

    # ── Loading ───────────────────────────────────────────────────

    @classmethod
    def load_from_path(cls, path: Union[str, Path], value_type: Any = dict,
                       key_type: type = Environment) -> "EnvironmentMap":
        """Read the TOML file at `path` and load it."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise IoError(path, exc) from exc
        logger.debug(f"Read {len(data)} bytes from {path}")
        return cls.load_from_bytes(data, value_type, key_type)

    @classmethod
    def load_from_reader(cls, reader: Any, value_type: Any = dict,
                         key_type: type = Environment) -> "EnvironmentMap":
        """Read a text or binary file-like object to completion and load it."""
        try:
            data = reader.read()
        except OSError as exc:
            raise IoError(getattr(reader, "name", "<reader>"), exc) from exc
        return cls.load_from_bytes(data, value_type, key_type)

    @classmethod
    def load_from_bytes(cls, data: Union[bytes, bytearray, str], value_type: Any = dict,
                        key_type: type = Environment) -> "EnvironmentMap":
        """Load from UTF-8 encoded TOML (already-decoded text is accepted too)."""
        if isinstance(data, (bytes, bytearray, memoryview)):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseError("environments document is not valid UTF-8", exc) from exc
        return cls.load_from_str(data, value_type, key_type)

    @classmethod
    def load_from_str(cls, text: str, value_type: Any = dict,
                      key_type: type = Environment) -> "EnvironmentMap":
        """Load from TOML text."""
        # Checked again in __init__; here so a bad key type fails before parsing
        check_key_type(key_type)
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ParseError("invalid TOML document", exc) from exc
        return cls._from_document(document, value_type, key_type)

    @classmethod
    def _from_document(cls, document: Dict[str, Any], value_type: Any,
                       key_type: type) -> "EnvironmentMap":
        if ENVS_TABLE not in document:
            raise ParseError(f"missing required top-level table '{ENVS_TABLE}'")
        tables = document[ENVS_TABLE]
        if not isinstance(tables, dict):
            raise ParseError(f"'{ENVS_TABLE}' must be a table, got {type(tables).__name__}")

        adapter = _adapter(value_type)
        envs: Dict[Any, Any] = {}
        for name, table in tables.items():
            try:
                key = key_type.parse(name)
            except (TomlenvError, ValueError) as exc:
                raise UnknownEnvironmentTableError(name, exc) from exc
            if key in envs:
                raise ParseError(f"environment '{name}' is defined more than once")
            try:
                envs[key] = adapter.validate_python(table)
            except ValidationError as exc:
                raise ParseError(f"invalid configuration for environment '{name}'", exc) from exc

        ignored = sorted(set(document) - {ENVS_TABLE})
        if ignored:
            logger.debug(f"Ignoring top-level keys {ignored}")
        loaded = cls(envs, value_type, key_type)
        logger.debug(f"Loaded environments {[k.render() for k in loaded]}")
        return loaded

    @classmethod
    def from_env_path(cls, env_path: Optional[Union[str, Path]] = None,
                      value_type: Any = dict,
                      key_type: type = Environment) -> "EnvironmentMap":
        """
        Load `<env_path>/env.toml`, the contract behind the -e/--envpath flag.
        Falls back to settings.env_dir when no path is given.
        """
        base = Path(env_path) if env_path else Path(settings.env_dir)
        return cls.load_from_path(base / settings.env_file_name, value_type, key_type)

    # ── Saving ────────────────────────────────────────────────────

    def to_document(self) -> Dict[str, Any]:
        """
        Plain-data form of the map, keyed by canonical spelling. Values keep
        their native types (datetimes, dates, inf) so TOML round-trips them.
        """
        adapter = _adapter(self._value_type)
        return {
            ENVS_TABLE: {
                key.render(): adapter.dump_python(value, mode="python", exclude_none=True)
                for key, value in self._envs.items()
            }
        }

    def save_to_string(self) -> str:
        """Serialize back to TOML, entries in hierarchy order."""
        try:
            return tomli_w.dumps(self.to_document())
        except (TypeError, ValueError) as exc:
            raise SerializeError("unable to serialize environments to TOML", exc) from exc

    # ── Current environment ───────────────────────────────────────

    def current(self, source: Optional[Mapping[str, str]] = None) -> V:
        """Configuration for the environment named by settings.env_var ('env')."""
        return self.current_from(settings.env_var, source)

    def current_from(self, var_name: str, source: Optional[Mapping[str, str]] = None) -> V:
        """
        Configuration for the environment named by the variable `var_name`.
        `source` is anything with a mapping-style get(); defaults to os.environ.
        """
        if source is None:
            source = os.environ
        given = source.get(var_name)
        if given is None:
            raise VariableUnsetError(var_name)
        try:
            key = self._key_type.parse(given)
        except (TomlenvError, ValueError) as exc:
            raise InvalidCurrentEnvironmentError(var_name, given, exc) from exc
        try:
            value = self._envs[key]
        except KeyError:
            # Valid key, but the document has no table for it
            raise InvalidCurrentEnvironmentError(var_name, given) from None
        logger.debug(f"Current environment is '{key.render()}' (from {var_name})")
        return value

    # ── Mapping interface ─────────────────────────────────────────

    @property
    def envs(self) -> Mapping[K, V]:
        """Read-only view of the loaded entries."""
        return self._envs

    @property
    def key_type(self) -> type:
        return self._key_type

    @property
    def value_type(self) -> Any:
        return self._value_type

    def __getitem__(self, key: K) -> V:
        return self._envs[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._envs)

    def __len__(self) -> int:
        return len(self._envs)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, EnvironmentMap):
            return NotImplemented
        return self._key_type is other._key_type and dict(self._envs) == dict(other._envs)

    __hash__ = None

    def __repr__(self) -> str:
        keys = ", ".join(k.render() for k in self._envs)
        name = getattr(self._value_type, "__name__", repr(self._value_type))
        return f"EnvironmentMap([{keys}], value_type={name})"
