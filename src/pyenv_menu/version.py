"""Package version reporting."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_VERSION = "0.3.0"
DISTRIBUTION_NAME = "pyenv-menu"


def get_version() -> str:
    """Return the installed distribution's version, or PACKAGE_VERSION from a bare source tree."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return PACKAGE_VERSION
