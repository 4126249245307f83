"""
Pydantic data model for the package manifest (`bruh.toml`).

The manifest is decoded into a typed record up front so that type mismatches
are rejected at parse time rather than at first use.
"""

import pathlib
import tomllib
from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictStr, ValidationError, field_validator

from homebruh.bruh_exceptions import (
    InvalidFieldType,
    MalformedManifest,
    MissingRequiredField,
)

MANIFEST_FILE_NAME = "bruh.toml"


def check_relative_path(value: str) -> str:
    """Reject paths that could point outside the package tree."""
    path = pathlib.PurePosixPath(value)
    if not value or path.is_absolute() or pathlib.PureWindowsPath(value).anchor:
        raise ValueError(f"`{value}` must be a relative path")
    if ".." in path.parts:
        raise ValueError(f"`{value}` must not contain `..`")
    return value


class PackageManifest(BaseModel):
    """
    The manifest shipped at the root of every package archive.

    Optional fields stay None when absent: no script is run and nothing is
    exported for them. Every path is relative to the package root, exports
    relative to `files`.
    """

    name: StrictStr = Field(..., description="Package name")
    version: StrictStr = Field(..., description="Package version")
    files: StrictStr = Field(
        ..., description="Directory, relative to the package root, holding exported files"
    )
    startup_script: Optional[StrictStr] = Field(
        None, description="Script run after extraction, before exports are created"
    )
    cleanup_script: Optional[StrictStr] = Field(
        None, description="Script run after exports are created"
    )
    to_export: Optional[List[StrictStr]] = Field(
        None, description="Files, relative to `files`, linked into the shared bin directory"
    )

    class Config:
        extra = "ignore"

    @field_validator("files", "startup_script", "cleanup_script")
    @classmethod
    def _relative_path(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return check_relative_path(value)

    @field_validator("to_export")
    @classmethod
    def _relative_exports(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        return [check_relative_path(export) for export in value]

    def exports(self) -> List[str]:
        """Exports in manifest order, empty when `to_export` is absent."""
        return list(self.to_export or [])


def parse_manifest(document: Union[str, bytes]) -> PackageManifest:
    """
    Parse a `bruh.toml`, given as text or as the raw UTF-8 bytes of the file.

    Raises:
        MalformedManifest: the document is not UTF-8 or not valid TOML
        MissingRequiredField: `name`, `version` or `files` is absent
        InvalidFieldType: a present key has the wrong type or an unsafe path
    """
    try:
        text = document.decode("utf-8") if isinstance(document, bytes) else document
        data = tomllib.loads(text)
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise MalformedManifest(f"Cannot decode manifest: {e}") from e

    try:
        return PackageManifest.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        # Missing keys take precedence over type errors
        for error in errors:
            if error["type"] == "missing":
                raise MissingRequiredField(str(error["loc"][0])) from e
        first = errors[0]
        raise InvalidFieldType(str(first["loc"][0]), first["msg"]) from e
