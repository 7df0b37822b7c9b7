from __future__ import annotations

from enum import StrEnum


class AssetBucket(StrEnum):
    """Asset class used for diversification scoring.

    Declaration order is significant: it is the display order and the
    tie-break order when two buckets deviate equally from their targets.
    """

    US_STOCKS = "US Stocks"
    INTL_STOCKS = "Intl Stocks"
    US_BONDS = "US Bonds"
    INTL_BONDS = "Intl Bonds"


BUCKETS: tuple[AssetBucket, ...] = tuple(AssetBucket)

DEFAULT_BUCKET = AssetBucket.US_STOCKS

# Exact (case-insensitive) sector labels, checked in this order.
INTL_STOCK_LABELS = frozenset(
    {
        "international",
        "intl",
        "intl stock",
        "intl stocks",
        "international stock",
        "international stocks",
    }
)
INTL_BOND_LABELS = frozenset(
    {
        "intl bond",
        "intl bonds",
        "international bond",
        "international bonds",
    }
)
US_BOND_LABELS = frozenset({"us bond", "us bonds", "bond", "bonds"})

_CLASSIFICATION_RULES: tuple[tuple[frozenset[str], AssetBucket], ...] = (
    (INTL_STOCK_LABELS, AssetBucket.INTL_STOCKS),
    (INTL_BOND_LABELS, AssetBucket.INTL_BONDS),
    (US_BOND_LABELS, AssetBucket.US_BONDS),
)

# Stock sectors that land in the default bucket on purpose.
US_STOCK_SECTORS = frozenset(
    {
        "us stock",
        "us stocks",
        "tech",
        "technology",
        "healthcare",
        "energy",
        "financials",
        "consumer",
        "index",
        "etf",
        "index/etf",
        "index_etf",
        "real estate",
        "crypto",
        "industrials",
    }
)


def _normalize(sector: str | None) -> str:
    return (sector or "").strip().lower()


def classify_sector(sector: str | None) -> AssetBucket:
    """
    Map a free-text sector label to its asset bucket.

    Matching is exact after lower-casing and trimming, so "Bond" is a US
    bond but "bond fund" is not. Labels that match no rule fall into
    ``DEFAULT_BUCKET``.

    Example:
        >>> classify_sector("Intl Bond")
        <AssetBucket.INTL_BONDS: 'Intl Bonds'>
        >>> classify_sector("Healthcare")
        <AssetBucket.US_STOCKS: 'US Stocks'>
    """
    label = _normalize(sector)
    for labels, bucket in _CLASSIFICATION_RULES:
        if label in labels:
            return bucket
    return DEFAULT_BUCKET


def is_known_sector(sector: str | None) -> bool:
    """Whether the label belongs to the recognised sector taxonomy."""
    label = _normalize(sector)
    if label in US_STOCK_SECTORS:
        return True
    return any(label in labels for labels, _ in _CLASSIFICATION_RULES)
