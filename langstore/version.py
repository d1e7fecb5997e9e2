"""Version of the installed ``langstore`` distribution."""
from importlib import metadata

DIST_NAME = "langstore"
# matches [project].version in pyproject.toml for source checkouts
SOURCE_VERSION = "0.1.0"


def installed_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return SOURCE_VERSION


__version__ = installed_version()
