"""
This file contains the exceptions raised by homebruh.
"""

from typing import Optional


class BruhException(Exception):
    """
    Base class for all errors surfaced by homebruh.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(BruhException):
    """Transport failure or non-2xx HTTP response."""


class HashMismatchError(BruhException):
    """
    Raised when downloaded bytes do not match the digest declared in the catalog entry.
    """

    def __init__(self, expected: str, found: str):
        super().__init__(f"Invalid sha256 hash.\nExpected: {expected}\nFound: {found}")
        self.expected = expected
        self.found = found


class PackageNotFound(BruhException):
    """No catalog entry is cached for the requested package."""


class InvalidCatalogEntry(BruhException):
    """The cached catalog entry lacks `link` or `sha256`."""


class InvalidPackageName(BruhException):
    pass


class PackageNotInstalled(BruhException):
    pass


class PackageAlreadyInstalled(BruhException):
    pass


class ManifestError(BruhException):
    """Base class for package manifest problems."""


class MalformedManifest(ManifestError):
    pass


class MissingRequiredField(ManifestError):
    def __init__(self, field: str):
        super().__init__(f"Required key `{field}` is missing from manifest.")
        self.field = field


class InvalidFieldType(ManifestError):
    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid value for manifest key `{field}`: {reason}")
        self.field = field
        self.reason = reason


class ManifestNotFound(ManifestError):
    def __init__(self, path: str):
        super().__init__(f"Cannot find `{path}` in the package.")
        self.path = path


class ExtractionError(BruhException):
    pass


class ScriptError(BruhException):
    """Base class for lifecycle script problems."""


class ScriptNotFound(ScriptError):
    def __init__(self, path: str):
        super().__init__(f"Cannot find `{path}` in the package.")
        self.path = path


class ScriptFailed(ScriptError):
    """
    Raised when a lifecycle script exits with a non-zero status or cannot be launched.
    `exit_code` is None when the process never started.
    """

    def __init__(self, path: str, exit_code: Optional[int], detail: str = ""):
        if exit_code is None:
            message = f"Script `{path}` could not be executed: {detail}"
        else:
            message = f"Script `{path}` exited with an error code: {exit_code}."
        super().__init__(message)
        self.path = path
        self.exit_code = exit_code


class FileNotFound(BruhException):
    def __init__(self, path: str):
        super().__init__(f"Cannot find file `{path}`.")
        self.path = path


class FilesystemError(BruhException):
    pass
