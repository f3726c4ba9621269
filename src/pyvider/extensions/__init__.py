# pyvider/src/pyvider/extensions/__init__.py
"""
This package resolves Pyvider extensions from local directories and
describes the application bundles and drivers used to build them.
"""

from .exceptions import (
    BundleValidationError,
    DriverNotFoundError,
    DriverNotImplementedError,
    ErrorKind,
    ExtensionsError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestValidationError,
)
from .local import (
    EXTENSION_MANIFEST_FILE,
    PREINSTALL_FILE,
    get_local_extension_spec,
    is_local_extension,
)
from .models import ExtensionSpec

# NOTE: The compose sub-package is NOT re-exported here; import drivers and
# bundle models from `pyvider.extensions.compose` directly.

__all__ = [
    "EXTENSION_MANIFEST_FILE",
    "PREINSTALL_FILE",
    "BundleValidationError",
    "DriverNotFoundError",
    "DriverNotImplementedError",
    "ErrorKind",
    "ExtensionSpec",
    "ExtensionsError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ManifestValidationError",
    "get_local_extension_spec",
    "is_local_extension",
]
