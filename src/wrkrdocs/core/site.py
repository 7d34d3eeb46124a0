"""Site deployment settings and canonical URL building.

The site is exported as static files and served under a sub-path of the
origin (e.g., https://clyra-ai.github.io/wrkr). Route paths used by the
navigation never include that sub-path; it is added exactly once here.
"""

from dataclasses import dataclass

from wrkrdocs.core.types import RoutePath

DEFAULT_ORIGIN = "https://clyra-ai.github.io"
DEFAULT_BASE_PATH = "/wrkr"


@dataclass(frozen=True)
class SiteConfig:
    """Origin and deployment base path of the site.

    Attributes:
        origin: Scheme and host, without trailing slash
        base_path: Sub-path prefix without trailing slash, "" for root deployments
    """

    origin: str = DEFAULT_ORIGIN
    base_path: str = DEFAULT_BASE_PATH

    @property
    def root_url(self) -> str:
        """Absolute URL of the site root, used as metadata base."""
        return f"{self.origin}{self.base_path}"

    def canonical_url(self, path: str) -> str:
        """Build the absolute canonical URL for a route path.

        The base path is always prepended, even when the given path already
        appears to start with it.

        Args:
            path: Route path (e.g., "/docs/" or "docs/")

        Returns:
            Absolute URL (e.g., "https://clyra-ai.github.io/wrkr/docs/")
        """
        return f"{self.origin}{self.link(path)}"

    def link(self, path: str) -> str:
        """Build the base-path-prefixed href for a route path."""
        return f"{self.base_path}{normalize_path(path)}"


DEFAULT_SITE = SiteConfig()


def normalize_path(path: str) -> RoutePath:
    """Normalize path to have leading slash."""
    return RoutePath(path if path.startswith("/") else f"/{path}")


def canonical_url(path: str, site: SiteConfig = DEFAULT_SITE) -> str:
    """Build the absolute canonical URL for a route path on the given site."""
    return site.canonical_url(path)
