"""Structured data (schema.org JSON-LD) descriptors.

Descriptors are plain dictionaries built from static content, ready to be
embedded in pages as ``application/ld+json`` scripts.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

SCHEMA_CONTEXT = "https://schema.org"


@dataclass(frozen=True)
class ApplicationInfo:
    """Static description of the documented application."""

    name: str
    category: str
    operating_system: str
    description: str
    url: str
    help_url: str
    repository_url: str
    price: str = "0"
    price_currency: str = "USD"


@dataclass(frozen=True)
class FaqEntry:
    """Question and answer pair."""

    question: str
    answer: str


WRKR_APPLICATION = ApplicationInfo(
    name="Wrkr",
    category="DeveloperApplication",
    operating_system="Linux, macOS, Windows",
    description=(
        "Wrkr evaluates AI dev tool configurations across GitHub repo/org against "
        "policy with deterministic posture scoring and compliance-ready evidence."
    ),
    url="https://clyra-ai.github.io/wrkr/",
    help_url="https://clyra-ai.github.io/wrkr/docs/",
    repository_url="https://github.com/Clyra-AI/wrkr",
)

HOME_FAQ: tuple[FaqEntry, ...] = (
    FaqEntry(
        question="What is Wrkr in one sentence?",
        answer=(
            "Wrkr evaluates your AI dev tool configurations across your GitHub "
            "repo/org against policy. Posture-scored, compliance-ready."
        ),
    ),
    FaqEntry(
        question="Does Wrkr require a hosted control plane?",
        answer=(
            "No. Wrkr is deterministic and file-based by default, with local scan "
            "state and local evidence generation."
        ),
    ),
    FaqEntry(
        question="What makes Wrkr outputs audit-friendly?",
        answer=(
            "Wrkr emits deterministic JSON contracts, stable exit codes, and "
            "proof-chain verifiable evidence paths."
        ),
    ),
    FaqEntry(
        question="Can Wrkr enforce runtime side effects?",
        answer=(
            "Wrkr is a discovery and posture layer. Runtime side-effect enforcement "
            "belongs to control-plane runtimes like Gait."
        ),
    ),
    FaqEntry(
        question="How do I fail CI on posture drift?",
        answer=(
            "Use `wrkr regress init` to create a baseline and `wrkr regress run` in "
            "CI. Exit code `5` indicates drift."
        ),
    ),
    FaqEntry(
        question="How do I generate compliance evidence?",
        answer=(
            "Run `wrkr evidence --frameworks ... --json` and validate integrity with "
            "`wrkr verify --chain --json`."
        ),
    ),
)


def software_application(app: ApplicationInfo) -> dict[str, Any]:
    """Build a SoftwareApplication descriptor.

    Args:
        app: Static application description

    Returns:
        JSON-LD descriptor dictionary
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "SoftwareApplication",
        "name": app.name,
        "applicationCategory": app.category,
        "operatingSystem": app.operating_system,
        "description": app.description,
        "url": app.url,
        "softwareHelp": app.help_url,
        "codeRepository": app.repository_url,
        "offers": {
            "@type": "Offer",
            "price": app.price,
            "priceCurrency": app.price_currency,
        },
    }


def faq_page(entries: Sequence[FaqEntry]) -> dict[str, Any]:
    """Build an FAQPage descriptor.

    Entries map 1:1 to Question items in input order, duplicates included.

    Args:
        entries: Ordered question and answer pairs

    Returns:
        JSON-LD descriptor dictionary
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": entry.question,
                "acceptedAnswer": {"@type": "Answer", "text": entry.answer},
            }
            for entry in entries
        ],
    }


def dumps(descriptor: dict[str, Any]) -> str:
    """Serialize a descriptor to compact JSON, keys in insertion order."""
    return json.dumps(descriptor, ensure_ascii=False, separators=(",", ":"))
