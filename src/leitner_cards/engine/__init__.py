"""Scheduling engine: bucket conversion, practice selection, updates and hints."""

from leitner_cards.engine.buckets import (
    BucketRange,
    count_cards,
    get_bucket_range,
    to_bucket_sets,
)
from leitner_cards.engine.config import SchedulerConfig
from leitner_cards.engine.hints import get_hint
from leitner_cards.engine.scheduling import practice, update

__all__ = [
    "BucketRange",
    "SchedulerConfig",
    "count_cards",
    "get_bucket_range",
    "get_hint",
    "practice",
    "to_bucket_sets",
    "update",
]
