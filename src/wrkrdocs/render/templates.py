"""Jinja2 environment for bundled templates."""

from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared template environment.

    Templates are loaded from the wrkrdocs package and autoescaped.
    """
    return Environment(
        loader=PackageLoader("wrkrdocs", "templates"),
        autoescape=select_autoescape(),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
