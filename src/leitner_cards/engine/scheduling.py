"""Modified-Leitner practice selection and bucket updates.

Bucket ``i`` is reviewed every ``i + 1`` days: bucket 0 daily, bucket 1
every other day, and so on. Easy answers promote a card one bucket
(never past the highest existing bucket), hard answers demote it one
bucket (never below bucket 0), and neutral answers leave it in place.
"""

from __future__ import annotations

import logging

from leitner_cards.core.errors import CardNotFoundError
from leitner_cards.core.flashcard import AnswerDifficulty, BucketMap, BucketSets, Flashcard
from leitner_cards.engine.config import SchedulerConfig

logger = logging.getLogger(__name__)


def practice(buckets: BucketSets, day: int) -> set[Flashcard]:
    """Select the cards to practice on a given day.

    Args:
        buckets: Dense bucket list
        day: Day number, starting from 0

    Returns:
        New set holding every card in a bucket ``i`` with ``day % (i + 1) == 0``
    """
    due: set[Flashcard] = set()
    for i, cards in enumerate(buckets):
        if day % (i + 1) == 0:
            due.update(cards)
    return due


def _next_bucket(current: int, difficulty: AnswerDifficulty, top_bucket: int) -> int:
    match difficulty:
        case AnswerDifficulty.EASY:
            return min(current + 1, top_bucket)
        case AnswerDifficulty.HARD:
            return max(current - 1, 0)
        case AnswerDifficulty.NEUTRAL:
            return current
        case _:
            raise ValueError(f"Unknown answer difficulty: {difficulty!r}")


def update(
    buckets: BucketMap,
    card: Flashcard,
    difficulty: AnswerDifficulty,
    config: SchedulerConfig | None = None,
) -> BucketMap:
    """Move a card after a practice trial.

    The input map and its sets are left untouched. The returned map holds
    new sets for the source and destination buckets; other buckets share
    the input's sets unless ``config.copy_mode`` is "deep".

    Args:
        buckets: Sparse bucket map holding ``card``
        card: The card that was practiced
        difficulty: How well the card was recalled
        config: Scheduler configuration (uses defaults if None)

    Returns:
        New bucket map with the card relocated

    Raises:
        CardNotFoundError: If no bucket holds the card.
    """
    if config is None:
        config = SchedulerConfig()

    current_bucket: int | None = None
    for bucket, cards in buckets.items():
        if card in cards:
            current_bucket = bucket
            break

    if current_bucket is None:
        logger.debug("Card %r not found in %d buckets", card.front, len(buckets))
        raise CardNotFoundError(card)

    # Promotion saturates at the top of the existing map, it never grows it
    new_bucket = _next_bucket(current_bucket, difficulty, len(buckets) - 1)

    if config.deep_copy:
        new_buckets: BucketMap = {bucket: set(cards) for bucket, cards in buckets.items()}
    else:
        new_buckets = dict(buckets)

    new_buckets[current_bucket] = new_buckets[current_bucket] - {card}
    destination = new_buckets.get(new_bucket, set())
    new_buckets[new_bucket] = destination | {card}

    logger.debug(
        "Moved card %r from bucket %d to %d (%s)",
        card.front,
        current_bucket,
        new_bucket,
        difficulty,
    )
    return new_buckets
