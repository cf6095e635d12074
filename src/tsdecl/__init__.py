"""tsdecl: declaration trees from TypeScript syntax trees."""

from importlib.metadata import PackageNotFoundError, version

from tsdecl.core.logging import install_quiet_default

try:
    __version__ = version("tsdecl")
except PackageNotFoundError:
    __version__ = "dev"

install_quiet_default()
