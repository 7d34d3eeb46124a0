"""Wrkr documentation site: navigation, canonical URLs and structured data."""
