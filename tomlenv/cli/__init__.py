"""Command line - click entry point and the reusable -e/--envpath option."""
from .main import cli, env_path_option

__all__ = ["cli", "env_path_option"]
