"""Conversions and queries over Leitner bucket containers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from leitner_cards.core.flashcard import BucketMap, BucketSets, Flashcard


@dataclass(frozen=True)
class BucketRange:
    """Lowest and highest bucket numbers holding at least one card.

    Attributes:
        min_bucket: Lowest occupied bucket
        max_bucket: Highest occupied bucket
    """

    min_bucket: int
    max_bucket: int


def _iter_buckets(
    buckets: Mapping[int, set[Flashcard]] | BucketSets,
) -> Iterator[tuple[int, set[Flashcard]]]:
    if isinstance(buckets, Mapping):
        yield from buckets.items()
    else:
        yield from enumerate(buckets)


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """Convert the sparse bucket map into the dense list form.

    Position ``i`` of the result holds bucket ``i``. Buckets missing from
    the map become empty sets; present buckets keep their set objects.

    Args:
        buckets: Bucket number to the cards in that bucket

    Returns:
        List of ``max(bucket) + 1`` sets, or an empty list for an empty map
    """
    if not buckets:
        return []

    max_bucket = max(buckets.keys(), default=0)
    bucket_sets: BucketSets = [set() for _ in range(max_bucket + 1)]
    for bucket, cards in buckets.items():
        bucket_sets[bucket] = cards

    return bucket_sets


def get_bucket_range(
    buckets: Mapping[int, set[Flashcard]] | BucketSets,
) -> BucketRange | None:
    """Find the range of buckets that contain cards, as a rough measure of progress.

    Accepts either the sparse map or the dense list form.

    Returns:
        BucketRange over the non-empty buckets, or None if every bucket is empty
    """
    min_bucket: int | None = None
    max_bucket: int | None = None

    for bucket, cards in _iter_buckets(buckets):
        if not cards:
            continue
        if min_bucket is None or bucket < min_bucket:
            min_bucket = bucket
        if max_bucket is None or bucket > max_bucket:
            max_bucket = bucket

    if min_bucket is None or max_bucket is None:
        return None
    return BucketRange(min_bucket=min_bucket, max_bucket=max_bucket)


def count_cards(buckets: Mapping[int, set[Flashcard]] | BucketSets) -> int:
    """Total number of cards across all buckets."""
    return sum(len(cards) for _, cards in _iter_buckets(buckets))
