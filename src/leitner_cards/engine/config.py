"""Configuration for bucket updates and hint generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class SchedulerConfig:
    """Configuration for the Leitner scheduler.

    Attributes:
        mask_char: Character that replaces the hidden letters of a hint.
        copy_mode: How ``update`` copies buckets it does not touch
            ("shared" keeps the input's set objects, "deep" copies every set).
    """

    mask_char: str = "_"
    copy_mode: str = "shared"

    _VALID_COPY_MODES: ClassVar[tuple[str, ...]] = ("shared", "deep")

    def __post_init__(self) -> None:
        if len(self.mask_char) != 1:
            raise ValueError(f"mask_char must be a single character, got {self.mask_char!r}")
        if self.copy_mode not in self._VALID_COPY_MODES:
            raise ValueError(
                f"copy_mode must be one of {self._VALID_COPY_MODES}, got '{self.copy_mode}'"
            )

    @property
    def deep_copy(self) -> bool:
        return self.copy_mode == "deep"

    def to_dict(self) -> dict[str, Any]:
        return {
            "mask_char": self.mask_char,
            "copy_mode": self.copy_mode,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchedulerConfig:
        try:
            return cls(
                mask_char=str(data.get("mask_char", "_")),
                copy_mode=str(data.get("copy_mode", "shared")),
            )
        except (ValueError, TypeError):
            return cls()  # Fall back to safe defaults
