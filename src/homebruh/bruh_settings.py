"""
Provides the default locations used by homebruh.
"""

import os
from pathlib import PurePath


class BruhSettings:
    """
    Provides the default values for BruhConfig
    """

    APPLICATION_DIRECTORY_NAME = "home_bruh"
    COMMUNITY_URL = "https://raw.githubusercontent.com/Wafelack/homebruh/dev/community"
    SOURCES_URL = COMMUNITY_URL + "/packages.list"

    @staticmethod
    def get_data_directory() -> str:
        """
        Returns the application data root, honouring XDG_DATA_HOME when it is set.
        """
        xdg_data_home = os.environ.get("XDG_DATA_HOME")
        if xdg_data_home:
            base = xdg_data_home
        else:
            base = str(PurePath(os.path.expanduser("~"), ".local", "share"))
        return str(PurePath(base, BruhSettings.APPLICATION_DIRECTORY_NAME))
