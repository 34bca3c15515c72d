"""Allow `python -m tomlenv`."""
from tomlenv.cli import cli

if __name__ == "__main__":
    cli()
