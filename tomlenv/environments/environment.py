"""
Environment hierarchy - the keys of an EnvironmentMap.

The built-in hierarchy runs prod → stage → test → dev → local. Each member
has exactly one canonical spelling, which is what appears as a table name in
env.toml and as the value of the lookup variable.

Custom hierarchies can replace Environment as long as they provide the same
capabilities (see EnvironmentKey): parse from a string, render to a string,
a total order, and hashing.
"""

from typing import Any, Dict, List, Protocol, runtime_checkable
from enum import Enum

from tomlenv.errors import InvalidEnvironmentError


@runtime_checkable
class EnvironmentKey(Protocol):
    """Capabilities an EnvironmentMap key type must provide."""

    @classmethod
    def parse(cls, text: str) -> Any:
        ...

    def render(self) -> str:
        ...

    def __lt__(self, other: Any) -> bool:
        ...

    def __hash__(self) -> int:
        ...


def check_key_type(key_type: Any) -> None:
    """Reject key types that cannot round-trip through text or be ordered."""
    if not isinstance(key_type, type):
        raise TypeError(f"Environment key type must be a class, got {key_type!r}")
    missing = [
        name for name in ("parse", "render")
        if not callable(getattr(key_type, name, None))
    ]
    if missing:
        raise TypeError(f"{key_type.__name__} is missing {', '.join(missing)}()")
    if key_type.__lt__ is object.__lt__:
        raise TypeError(f"{key_type.__name__} does not define an ordering")
    if key_type.__hash__ is None:
        raise TypeError(f"{key_type.__name__} is not hashable")


class Environment(str, Enum):
    """Built-in deployment hierarchy, highest priority first."""
    PROD = "prod"
    STAGE = "stage"
    TEST = "test"
    DEV = "dev"
    LOCAL = "local"

    def __str__(self) -> str:
        return self.value

    def render(self) -> str:
        """Canonical spelling, e.g. 'prod'."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Environment":
        """Exact, case-sensitive match against the canonical spellings."""
        if isinstance(text, str):
            for env in cls:
                if env.value == text:
                    return env
        raise InvalidEnvironmentError(text)

    # Order by position in HIERARCHY, not by spelling.

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return _RANK[self] < _RANK[other]

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return _RANK[self] <= _RANK[other]

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return _RANK[self] > _RANK[other]

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return _RANK[self] >= _RANK[other]


HIERARCHY: List[Environment] = [
    Environment.PROD, Environment.STAGE, Environment.TEST, Environment.DEV, Environment.LOCAL,
]

_RANK: Dict[Environment, int] = {env: i for i, env in enumerate(HIERARCHY)}
