"""
The `compose` sub-package describes deployable application bundles and the
drivers that install, build and start them.

This includes:
- The user-authored `AppBundle` format and its loader.
- The normalized `AppSpec` handed to a driver.
- The `Driver` base class and the registry of concrete backends.
"""

from .bundle import DEFAULT_BUNDLE_FILE, load_app_bundle
from .driver import (
    Driver,
    available_drivers,
    get_driver,
    register_driver,
    run_lifecycle,
)
from .models import (
    BUNDLE_VERSION,
    DEFAULT_SERVER_DIR,
    AppBundle,
    AppSpec,
    MemorySize,
    ServerConfig,
    StartConfig,
)

__all__ = [
    "BUNDLE_VERSION",
    "DEFAULT_BUNDLE_FILE",
    "DEFAULT_SERVER_DIR",
    "AppBundle",
    "AppSpec",
    "Driver",
    "MemorySize",
    "ServerConfig",
    "StartConfig",
    "available_drivers",
    "get_driver",
    "load_app_bundle",
    "register_driver",
    "run_lifecycle",
]
