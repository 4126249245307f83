"""
Lifecycle script execution.
"""

import pathlib
import subprocess

from homebruh.bruh_exceptions import ScriptFailed, ScriptNotFound


def run_script(script_path: pathlib.Path, cwd: pathlib.Path) -> None:
    """
    Run `script_path` with `cwd` as working directory and block until it exits.
    Standard output and error are inherited.

    Raises:
        ScriptNotFound: the script does not exist
        ScriptFailed: the script exited non-zero or could not be launched
    """
    if not script_path.is_file():
        raise ScriptNotFound(str(script_path))

    try:
        completed = subprocess.run([str(script_path)], cwd=str(cwd))
    except OSError as e:
        raise ScriptFailed(str(script_path), None, str(e)) from e

    if completed.returncode != 0:
        raise ScriptFailed(str(script_path), completed.returncode)
