import enum
from pathlib import Path


class ErrorKind(enum.Enum):
    MANIFEST_NOT_FOUND = "ManifestNotFound"
    MANIFEST_PARSE_ERROR = "ManifestParseError"
    NOT_IMPLEMENTED = "NotImplemented"
    BUNDLE_INVALID = "BundleInvalid"
    DRIVER_NOT_FOUND = "DriverNotFound"


class ExtensionsError(Exception):
    """Base error. `kind` is the stable discriminator callers branch on."""

    kind: ErrorKind

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    @property
    def original(self) -> BaseException | None:
        return self.__cause__


class ManifestNotFoundError(ExtensionsError):
    kind = ErrorKind.MANIFEST_NOT_FOUND


class ManifestParseError(ExtensionsError):
    kind = ErrorKind.MANIFEST_PARSE_ERROR


class ManifestValidationError(ManifestParseError):
    pass


class DriverNotImplementedError(ExtensionsError, NotImplementedError):
    kind = ErrorKind.NOT_IMPLEMENTED


class BundleValidationError(ExtensionsError):
    kind = ErrorKind.BUNDLE_INVALID


class DriverNotFoundError(ExtensionsError):
    kind = ErrorKind.DRIVER_NOT_FOUND
