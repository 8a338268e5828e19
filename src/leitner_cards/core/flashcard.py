"""Flashcard data structures and Leitner bucket containers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum


class AnswerDifficulty(StrEnum):
    """How well a card was recalled during a practice trial."""

    EASY = "easy"  # Promote one bucket
    HARD = "hard"  # Demote one bucket
    NEUTRAL = "neutral"  # Stay put

    @classmethod
    def from_label(cls, label: str) -> AnswerDifficulty:
        """Parse a difficulty label, accepting the legacy "wrong" alias for NEUTRAL.

        Raises:
            ValueError: If the label names no known difficulty.
        """
        normalized = label.strip().lower()
        if normalized == "wrong":
            return cls.NEUTRAL
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown answer difficulty '{label}', expected one of: {valid}, wrong"
            ) from None


@dataclass(frozen=True)
class Flashcard:
    """
    A single flashcard.

    Flashcards are immutable values: two cards with equal fields are the
    same card as far as bucket membership is concerned.

    Attributes:
        front: Prompt shown to the learner
        back: Expected answer
        hint: Optional stored hint for the prompt
        tags: Ordered labels attached to the card
    """

    front: str
    back: str
    hint: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        front: str,
        back: str,
        hint: str | None = None,
        tags: Iterable[str] | None = None,
    ) -> Flashcard:
        """
        Factory method to create a new Flashcard.

        Args:
            front: The prompt text
            back: The answer text
            hint: Optional stored hint
            tags: Any iterable of tags, kept in order

        Returns:
            A new Flashcard instance
        """
        return cls(
            front=front,
            back=back,
            hint=hint or "",
            tags=tuple(tags or ()),
        )


# Sparse form: bucket number -> cards in that bucket.
BucketMap = dict[int, set[Flashcard]]

# Dense form: position i holds bucket i, empty sets fill the gaps.
BucketSets = list[set[Flashcard]]
