"""Asset discovery for bundled static files.

Locates the favicon and stylesheet shipped inside the wrkrdocs package.
"""

from importlib.resources import files
from pathlib import Path


def get_static_dir() -> Path:
    """Return path to bundled static assets.

    Returns:
        Path to the static directory containing favicon and stylesheet.

    Raises:
        FileNotFoundError: If static assets are not bundled.
    """
    static = files("wrkrdocs").joinpath("static")
    if not static.is_dir():
        msg = "Bundled static assets not found. Reinstall wrkrdocs with package data."
        raise FileNotFoundError(msg)
    return Path(str(static))
