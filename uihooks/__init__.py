"""uihooks distribution metadata and the ``python -m uihooks`` entry.

The hooks themselves live in the top-level packages (core/, services/, ui/).
"""

from importlib import metadata


def get_version() -> str:
    """Installed distribution version; pyproject.toml is the only source."""
    try:
        return metadata.version("uihooks")
    except metadata.PackageNotFoundError:
        # source checkout that was never pip-installed
        return "0.0.0+local"


__version__ = get_version()

__all__ = ["__version__", "get_version"]
