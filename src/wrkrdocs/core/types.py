"""Core type definitions."""

from typing import NewType

# Site-root-relative route path (e.g., "/docs", "/docs/faq/")
# Never carries the deployment base path
RoutePath = NewType("RoutePath", str)
