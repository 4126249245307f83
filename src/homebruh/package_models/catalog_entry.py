"""
Pydantic data model for a catalog entry (`packages/<name>.toml`).
"""

import tomllib
from typing import Union

from pydantic import BaseModel, Field, StrictStr, ValidationError

from homebruh.bruh_exceptions import InvalidCatalogEntry


class CatalogEntry(BaseModel):
    """
    Where to download a package from and the digest its archive must have.
    """

    link: StrictStr = Field(..., description="Absolute URL of the package archive")
    sha256: StrictStr = Field(..., description="Hex sha256 digest of the archive")

    class Config:
        extra = "ignore"


def parse_catalog_entry(document: Union[str, bytes]) -> CatalogEntry:
    """
    Parse a cached catalog entry, given as text or raw UTF-8 bytes.

    Raises:
        InvalidCatalogEntry: the document cannot be decoded or lacks `link`/`sha256`
    """
    try:
        text = document.decode("utf-8") if isinstance(document, bytes) else document
        return CatalogEntry.model_validate(tomllib.loads(text))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError) as e:
        raise InvalidCatalogEntry("Invalid package manifest.") from e
