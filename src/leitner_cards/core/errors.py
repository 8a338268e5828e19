"""Exceptions raised by Leitner scheduling operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leitner_cards.core.flashcard import Flashcard


class LeitnerError(Exception):
    """Base class for flashcard scheduling errors."""


class CardNotFoundError(LeitnerError, LookupError):
    """The card is not present in any bucket of the supplied map."""

    def __init__(self, card: Flashcard) -> None:
        super().__init__(f"Card not found in any bucket: {card.front!r}")
        self.card = card


class EmptyFrontError(LeitnerError, ValueError):
    """A hint was requested for a card whose front is empty."""

    def __init__(self, card: Flashcard) -> None:
        super().__init__("Cannot generate a hint for an empty flashcard front")
        self.card = card
