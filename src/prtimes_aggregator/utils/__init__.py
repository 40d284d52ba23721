"""Utility helpers for the PR TIMES aggregator."""

from .date_normalizer import (
    DateFormat,
    DateNormalizer,
    ParsedDate,
    normalize_release_date,
)

__all__ = [
    "DateFormat",
    "DateNormalizer",
    "ParsedDate",
    "normalize_release_date",
]
