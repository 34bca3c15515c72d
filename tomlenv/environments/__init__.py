"""Environments - the prod/stage/test/dev/local hierarchy and the per-environment config map."""
from .environment import Environment, EnvironmentKey, HIERARCHY, check_key_type
from .environment_map import EnvironmentMap

__all__ = ["Environment", "EnvironmentKey", "HIERARCHY", "check_key_type", "EnvironmentMap"]
