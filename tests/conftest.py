"""
Shared fixtures for the tomlenv test suite.
"""
import sys
import os
from typing import Optional

import pytest
from pydantic import BaseModel

# Ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Clear overrides before tomlenv.config.settings is imported so the defaults apply
for _var in ("TOMLENV_VAR", "TOMLENV_FILE_NAME", "TOMLENV_DIR", "TOMLENV_LOG_LEVEL"):
    os.environ.pop(_var, None)


EXPECTED_TOML_STR = """[envs.prod]
name = "Production"
key = "abcd-123-efg-45"

[envs.stage]
name = "Stage"

[envs.test]
name = "Test"

[envs.dev]
name = "Development"

[envs.local]
name = "Local"
"""

EXPECTED_NAMES = {
    "prod": "Production",
    "stage": "Stage",
    "test": "Test",
    "dev": "Development",
    "local": "Local",
}


class RuntimeEnv(BaseModel):
    """Per-environment config used throughout the tests."""
    name: str
    key: Optional[str] = None


@pytest.fixture
def runtime_env():
    """The RuntimeEnv value type."""
    return RuntimeEnv


@pytest.fixture
def expected_toml():
    """Canonical five-environment document; only prod carries a key."""
    return EXPECTED_TOML_STR


@pytest.fixture
def expected_names():
    return dict(EXPECTED_NAMES)


@pytest.fixture
def envs():
    """EnvironmentMap loaded from the canonical document."""
    from tomlenv.environments import EnvironmentMap
    return EnvironmentMap.load_from_str(EXPECTED_TOML_STR, value_type=RuntimeEnv)


@pytest.fixture
def env_dir(tmp_path):
    """Directory containing an env.toml with the canonical document."""
    (tmp_path / "env.toml").write_text(EXPECTED_TOML_STR, encoding="utf-8")
    return tmp_path
