"""Shared flashcard fixtures."""

from __future__ import annotations

import pytest

from leitner_cards.core.flashcard import Flashcard


@pytest.fixture
def cat_card() -> Flashcard:
    return Flashcard.create("cat", "gato", tags=["animals"])


@pytest.fixture
def dog_card() -> Flashcard:
    return Flashcard.create("dog", "perro", tags=["animals"])


@pytest.fixture
def bird_card() -> Flashcard:
    return Flashcard.create("bird", "pajaro", hint="flies", tags=["animals"])


@pytest.fixture
def fish_card() -> Flashcard:
    return Flashcard.create("fish", "pez", tags=["animals", "water"])
