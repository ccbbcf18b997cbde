"""Settings read from the environment (and a .env file, if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from unotable.engine.deck import max_hand_size
from unotable.engine.table import MAX_SEATS, MIN_SEATS


@dataclass(frozen=True)
class Settings:
    seats: int = 2
    presentation_delay: float = 0.8
    seed: Optional[int] = None
    hand_size: int = 7
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not MIN_SEATS <= self.seats <= MAX_SEATS:
            raise ValueError(f"UNOTABLE_SEATS must be {MIN_SEATS}-{MAX_SEATS}, got {self.seats}")
        if self.presentation_delay < 0:
            raise ValueError("UNOTABLE_DELAY cannot be negative")
        if not 1 <= self.hand_size <= max_hand_size(self.seats):
            raise ValueError(
                f"UNOTABLE_HAND_SIZE must be 1-{max_hand_size(self.seats)} with {self.seats} seats, got {self.hand_size}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from UNOTABLE_* variables.

        With no mapping given, a .env file is loaded into os.environ first.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        seed = environ.get("UNOTABLE_SEED")
        return cls(
            seats=int(environ.get("UNOTABLE_SEATS", "2")),
            presentation_delay=float(environ.get("UNOTABLE_DELAY", "0.8")),
            seed=int(seed) if seed else None,
            hand_size=int(environ.get("UNOTABLE_HAND_SIZE", "7")),
            log_level=environ.get("UNOTABLE_LOG_LEVEL", "WARNING").upper(),
        )
