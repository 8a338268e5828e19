"""Core data models for leitner_cards."""

from leitner_cards.core.errors import CardNotFoundError, EmptyFrontError, LeitnerError
from leitner_cards.core.flashcard import AnswerDifficulty, BucketMap, BucketSets, Flashcard

__all__ = [
    # Cards
    "Flashcard",
    "AnswerDifficulty",
    # Bucket containers
    "BucketMap",
    "BucketSets",
    # Errors
    "LeitnerError",
    "CardNotFoundError",
    "EmptyFrontError",
]
