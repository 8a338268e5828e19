"""leitner_cards - Leitner-system flashcard scheduling."""

from leitner_cards.core import (
    AnswerDifficulty,
    BucketMap,
    BucketSets,
    CardNotFoundError,
    EmptyFrontError,
    Flashcard,
    LeitnerError,
)
from leitner_cards.engine import (
    BucketRange,
    SchedulerConfig,
    count_cards,
    get_bucket_range,
    get_hint,
    practice,
    to_bucket_sets,
    update,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Models
    "AnswerDifficulty",
    "BucketMap",
    "BucketSets",
    "Flashcard",
    # Errors
    "CardNotFoundError",
    "EmptyFrontError",
    "LeitnerError",
    # Engine
    "BucketRange",
    "SchedulerConfig",
    "count_cards",
    "get_bucket_range",
    "get_hint",
    "practice",
    "to_bucket_sets",
    "update",
]
