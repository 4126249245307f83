"""
Configuration parameters for homebruh.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from homebruh.bruh_settings import BruhSettings


@dataclass
class BruhConfig:
    """
    Configuration parameters shared by every homebruh component.
    """

    data_dir: str = field(default_factory=BruhSettings.get_data_directory)
    sources_url: str = BruhSettings.SOURCES_URL
    community_url: str = BruhSettings.COMMUNITY_URL
    request_timeout: Optional[float] = None

    @classmethod
    def from_dict(cls, env: dict):
        """
        Create a BruhConfig instance from a dictionary, ignoring unknown keys.
        """
        import inspect
        return cls(**{
            k: v for k, v in env.items()
            if k in inspect.signature(cls).parameters
        })

    @classmethod
    def from_env(cls, environ: Optional[dict] = None):
        """
        Create a BruhConfig instance from BRUH_* environment variables.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for key in ("data_dir", "sources_url", "community_url"):
            value = environ.get(f"BRUH_{key.upper()}")
            if value:
                values[key] = value
        return cls.from_dict(values)
