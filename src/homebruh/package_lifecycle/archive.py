"""
Archive extraction for gzip-compressed tar streams.
"""

import io
import pathlib
import tarfile

from homebruh.bruh_exceptions import ExtractionError


def extract(data: bytes, destination_dir: pathlib.Path) -> None:
    """
    Unpack a .tar.gz held in memory under `destination_dir`.

    Existing files are overwritten. Partial output is left for the caller to
    clean up.

    Raises:
        ExtractionError: the stream is not a valid archive or writing failed
    """
    try:
        destination_dir.mkdir(parents=True, exist_ok=True)
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as archive:
            archive.extractall(destination_dir, filter="data")
    except (tarfile.TarError, OSError, EOFError) as e:
        raise ExtractionError(f"Cannot decompress archive into {destination_dir}: {e}") from e
