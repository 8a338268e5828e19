"""Masked-letter hints for flashcard prompts."""

from __future__ import annotations

from leitner_cards.core.errors import EmptyFrontError
from leitner_cards.core.flashcard import Flashcard
from leitner_cards.engine.config import SchedulerConfig


def get_hint(card: Flashcard, config: SchedulerConfig | None = None) -> str:
    """Reveal the first and last characters of the front, masking the rest.

    "elephant" becomes "e______t"; one- and two-character fronts are
    returned as they are.

    Raises:
        EmptyFrontError: If the card's front is empty.
    """
    if config is None:
        config = SchedulerConfig()

    front = card.front
    if not front:
        raise EmptyFrontError(card)
    if len(front) == 1:
        return front

    return front[0] + config.mask_char * (len(front) - 2) + front[-1]
