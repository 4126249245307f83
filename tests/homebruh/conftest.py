"""
Shared fixtures for homebruh tests.
"""

import io
import tarfile
import textwrap
from typing import Dict, Union

import pytest

from homebruh.bruh_config import BruhConfig
from homebruh.bruh_logger import BruhLogger
from homebruh.package_store import ContentStore

DEMO_MANIFEST = textwrap.dedent(
    """
    name = "demo"
    version = "1.0"
    files = "bin"
    to_export = ["demo"]
    """
)


def make_archive(files: Dict[str, Union[str, bytes]]) -> bytes:
    """
    Build a .tar.gz in memory. Paths ending in `.sh` or living under a `bin/`
    directory are marked executable.
    """
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for path, content in files.items():
            data = content.encode() if isinstance(content, str) else content
            info = tarfile.TarInfo(path)
            info.size = len(data)
            executable = path.endswith(".sh") or "bin/" in path
            info.mode = 0o755 if executable else 0o644
            archive.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


def shell_script(body: str) -> str:
    return "#!/bin/sh\n" + textwrap.dedent(body).lstrip()


@pytest.fixture
def config(tmp_path):
    return BruhConfig(
        data_dir=str(tmp_path / "data"),
        sources_url="https://example.test/community/packages.list",
        community_url="https://example.test/community",
    )


@pytest.fixture
def logger():
    return BruhLogger()


@pytest.fixture
def store(config):
    return ContentStore(config)


@pytest.fixture
def demo_archive():
    return make_archive(
        {
            "bruh.toml": DEMO_MANIFEST,
            "bin/demo": shell_script("echo demo\n"),
        }
    )
